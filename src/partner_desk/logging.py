"""
Structured logging configuration for the partner desk.

Uses structlog for structured, context-aware logging with:
- JSON output for production
- Pretty console output for development
- Request and partner ID propagation through context variables
"""

import logging
import sys
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Any, Generator

import structlog
from structlog.types import Processor

from .config import config

# Context variables for request-scoped data
_request_id: ContextVar[str | None] = ContextVar('request_id', default=None)
_partner_id: ContextVar[str | None] = ContextVar('partner_id', default=None)


def get_request_id() -> str | None:
    """Get the current request ID from context."""
    return _request_id.get()


def get_partner_id() -> str | None:
    """Get the current partner ID from context."""
    return _partner_id.get()


def add_context_info(
    logger: structlog.types.WrappedLogger,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Processor that adds context variables to log entries."""
    request_id = get_request_id()
    partner_id = get_partner_id()

    if request_id:
        event_dict['request_id'] = request_id
    if partner_id and 'partner_id' not in event_dict:
        event_dict['partner_id'] = partner_id

    return event_dict


def configure_logging(
    json_output: bool = False,
    log_level: str | None = None,
) -> None:
    """
    Configure structlog for the application.

    Args:
        json_output: If True, output JSON logs (for production).
                    If False, output pretty console logs (for development).
        log_level: Override log level (defaults to config.LOG_LEVEL)
    """
    level = log_level or config.LOG_LEVEL
    level_num = getattr(logging, level.upper(), logging.INFO)

    logging.basicConfig(
        format='%(message)s',
        stream=sys.stdout,
        level=level_num,
    )

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        add_context_info,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        processors: list[Processor] = [
            *shared_processors,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        processors = [
            *shared_processors,
            structlog.dev.ConsoleRenderer(colors=True),
        ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level_num),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


@contextmanager
def logging_context(
    request_id: str | None = None,
    partner_id: str | None = None,
) -> Generator[None, None, None]:
    """
    Context manager for setting logging context variables.

    Usage:
        with logging_context(request_id="req_1", partner_id="partner_abc"):
            logger.info("store.partner_added")  # Includes both IDs
    """
    old_request = _request_id.get()
    old_partner = _partner_id.get()

    try:
        if request_id is not None:
            _request_id.set(request_id)
        if partner_id is not None:
            _partner_id.set(partner_id)
        yield
    finally:
        _request_id.set(old_request)
        _partner_id.set(old_partner)


# Development mode by default; the HTTP service switches to JSON at startup
configure_logging(json_output=False)
