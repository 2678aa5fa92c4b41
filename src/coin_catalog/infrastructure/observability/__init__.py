"""
Observability for the catalog sync: structured logging with per-layer context
so that bootstrap, fetch and persist failures (which are logged rather than
raised) can be traced and filtered.
"""

from .logging import (
    get_ingestion_logger,
    get_logger,
    get_orchestration_logger,
    get_processing_logger,
    get_storage_logger,
    setup_logging,
)

__all__ = [
    # Setup
    "setup_logging",
    # Base
    "get_logger",
    # Layer-specific
    "get_ingestion_logger",
    "get_orchestration_logger",
    "get_processing_logger",
    "get_storage_logger",
]
