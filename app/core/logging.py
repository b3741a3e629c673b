"""
Structured logging with structlog.

Call :func:`configure_logging` once at application start-up; modules
obtain their logger with ``get_logger(__name__)``.
"""

import logging
import sys
from typing import Any

import structlog

from app.core.config import settings


def _resolve_level() -> int:
    if settings.DEBUG:
        return logging.DEBUG
    level = getattr(logging, settings.LOG_LEVEL.upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure structured logging with structlog."""
    level = _resolve_level()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )

    renderer = (
        structlog.processors.JSONRenderer()
        if settings.LOG_JSON
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a configured logger instance."""
    return structlog.get_logger(name)


def add_log_context(**kwargs: Any) -> None:
    """Add context to all future log entries."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_log_context() -> None:
    """Clear all log context."""
    structlog.contextvars.clear_contextvars()
