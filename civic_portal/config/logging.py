"""Structured Logging Configuration.

Logging with:
- JSON format for production (easy parsing by log aggregators)
- Human-readable format for development
- Request correlation IDs
- Sensitive data filtering (contact details included)

Usage:
    from civic_portal.config.logging import setup_logging, get_logger

    setup_logging()  # Call once at startup
    logger = get_logger(__name__)
    logger.info("message", extra={"project_id": "..."})
"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any

import structlog
from structlog.typing import EventDict

from civic_portal import __version__

from .settings import get_settings


# ============================================================================
# SENSITIVE DATA FILTER
# ============================================================================


SENSITIVE_KEYS = frozenset({
    "password",
    "secret",
    "api_key",
    "token",
    "authorization",
    "email",
    "phone",
})


def filter_sensitive_data(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Filter sensitive data from log output.

    Replaces values of sensitive keys with '[REDACTED]'.

    Args:
        logger: The logger instance.
        method_name: The logging method name.
        event_dict: The event dictionary to filter.

    Returns:
        Filtered event dictionary.
    """
    for key in list(event_dict.keys()):
        if key.lower() in SENSITIVE_KEYS:
            event_dict[key] = "[REDACTED]"
        elif isinstance(event_dict[key], dict):
            event_dict[key] = _filter_dict(event_dict[key])
    return event_dict


def _filter_dict(d: dict[str, Any]) -> dict[str, Any]:
    """Recursively filter sensitive data from nested dicts."""
    result = {}
    for key, value in d.items():
        if key.lower() in SENSITIVE_KEYS:
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = _filter_dict(value)
        else:
            result[key] = value
    return result


# ============================================================================
# CUSTOM PROCESSORS
# ============================================================================


def add_timestamp(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add ISO format timestamp to log events."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def add_service_context(
    logger: logging.Logger,
    method_name: str,
    event_dict: EventDict,
) -> EventDict:
    """Add service context to log events."""
    event_dict["service"] = "civic-portal"
    event_dict["environment"] = get_settings().environment
    event_dict["version"] = __version__
    return event_dict


# ============================================================================
# LOGGING SETUP
# ============================================================================


def setup_logging() -> None:
    """Configure structured logging for the application.

    Call this once at application startup.

    Configuration based on settings.log_format:
    - console: Console output with colors
    - json: JSON output for log aggregation
    """
    settings = get_settings()

    shared_processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.stdlib.ExtraAdder(),
        add_timestamp,
        add_service_context,
        filter_sensitive_data,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    render_chain: list[structlog.types.Processor] = [
        structlog.stdlib.ProcessorFormatter.remove_processors_meta,
    ]
    if settings.log_format == "json":
        render_chain += [
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        render_chain.append(structlog.dev.ConsoleRenderer(colors=True))

    # Both structlog and stdlib records are rendered once, by the handler
    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=shared_processors,
        processors=render_chain,
    )

    structlog.configure(
        processors=shared_processors + [
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    # Standard library loggers (application handlers use logging.getLogger)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(getattr(logging, settings.log_level))
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Configured structlog logger.

    Usage:
        logger = get_logger(__name__)
        logger.info("project.updated", project_id="...", status="active")
    """
    return structlog.get_logger(name)


# ============================================================================
# REQUEST CONTEXT (for correlation IDs)
# ============================================================================


def bind_request_context(
    request_id: str,
    locale: str | None = None,
    **extra: Any,
) -> None:
    """Bind request context to all subsequent log calls.

    Call this at the start of page/request handling.

    Args:
        request_id: Unique request/correlation ID.
        locale: Optional locale the page is rendered in.
        **extra: Additional context to bind.
    """
    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        request_id=request_id,
        locale=locale,
        **extra,
    )


def clear_request_context() -> None:
    """Clear request context (call at end of request)."""
    structlog.contextvars.clear_contextvars()
