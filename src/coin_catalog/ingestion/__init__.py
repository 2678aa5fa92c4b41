"""Remote catalog ingestion: HTTP transport and the catalog API client."""
