"""Cross-cutting infrastructure: logging and the sync state store."""
