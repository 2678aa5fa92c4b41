"""
Structured logging for coin-catalog.
Every component logs snake_case events with key-value context.

Log Structure:
    {
        "app": "coin-catalog",          # Application identifier
        "layer": "orchestration",       # Architectural layer
        "component": "coin-syncer",     # Specific component
        "module": "...",                # Python module (optional)
        "event": "sync_completed",      # What happened
        ...
    }

Architectural Layers:
    - ingestion: Remote catalog client and HTTP transport
    - orchestration: Bootstrap loader, sync orchestrator, notifications
    - processing: Override merging, token transformation
    - storage: Dataset store, bundled snapshots
"""

import logging
import sys
from typing import Any, Literal

import structlog
from structlog.types import EventDict

Layer = Literal["ingestion", "orchestration", "processing", "storage"]


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the application identifier to every log entry."""
    event_dict["app"] = "coin-catalog"
    return event_dict


def add_severity_level(
    logger: Any, method_name: str, event_dict: EventDict
) -> EventDict:
    """Map the structlog level to a cloud-logging style severity."""
    level = event_dict.get("level")
    if level:
        severity_map = {
            "debug": "DEBUG",
            "info": "INFO",
            "warning": "WARNING",
            "error": "ERROR",
            "critical": "CRITICAL",
        }
        event_dict["severity"] = severity_map.get(level, "INFO")
    return event_dict


def setup_logging(
    level: str = "INFO",
    json_logs: bool = True,
    include_timestamp: bool = True,
) -> None:
    """
    Configure structured logging for the application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: If True, output JSON. If False, use human-readable console output.
            Logs go to stderr; stdout is left to command output.
        include_timestamp: Whether to include ISO timestamps in logs

    Usage:
        >>> from coin_catalog.infrastructure.observability import setup_logging
        >>> setup_logging(level="DEBUG", json_logs=False)
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )

    processors = [
        structlog.contextvars.merge_contextvars,
        add_app_context,
        structlog.stdlib.add_log_level,
        add_severity_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.insert(0, structlog.processors.TimeStamper(fmt="iso"))

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(
            structlog.dev.ConsoleRenderer(
                colors=True,
                exception_formatter=structlog.dev.plain_traceback,
            )
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(
    name: str | None = None,
    layer: Layer | None = None,
    component: str | None = None,
    **initial_context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Get a logger instance with architectural context bound.

    Args:
        name: Logger name (typically __name__ of the calling module)
        layer: Architectural layer
        component: Specific component within the layer
        **initial_context: Additional context key-value pairs to bind

    Usage:
        >>> log = get_logger(__name__, layer="ingestion", component="catalog-client")
        >>> log.info("request_sent", endpoint="coins/list")
    """
    context: dict[str, Any] = {}
    if layer:
        context["layer"] = layer
    if component:
        context["component"] = component
    if name:
        context["module"] = name
    context.update(initial_context)

    # Lazy proxy: import-time loggers must follow a later setup_logging().
    if name:
        return structlog.get_logger(name, **context)
    return structlog.get_logger(**context)


# ============================================================================
# Layer-Specific Logger Factories
# ============================================================================


def get_ingestion_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Logger for the ingestion layer (catalog client, HTTP transport)."""
    return get_logger(
        "ingestion",
        layer="ingestion",
        component=component,
        **context,
    )


def get_orchestration_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """
    Logger for the orchestration layer (bootstrap, sync, notifications).

    Usage:
        >>> log = get_orchestration_logger("coin-syncer")
        >>> log.info("sync_started", stale=["coins"])
    """
    return get_logger(
        "orchestration",
        layer="orchestration",
        component=component,
        **context,
    )


def get_processing_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Logger for the processing layer (overrides, token transformer)."""
    return get_logger(
        "processing",
        layer="processing",
        component=component,
        **context,
    )


def get_storage_logger(
    component: str,
    **context: Any,
) -> structlog.stdlib.BoundLogger:
    """Logger for the storage layer (dataset store, snapshots)."""
    return get_logger(
        "storage",
        layer="storage",
        component=component,
        **context,
    )
