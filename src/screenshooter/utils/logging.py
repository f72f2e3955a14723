"""Structured logging configuration using structlog.

Provides correlation IDs for tracing captures across browser sessions and
configurable output formats (JSON for CI, colored console for dev).
"""

import logging
import sys
from collections.abc import MutableMapping
from contextvars import ContextVar
from typing import Any, cast

import structlog
from structlog.types import Processor

from screenshooter.config import settings

# Context variables for correlation IDs
_session_id: ContextVar[str | None] = ContextVar("session_id", default=None)
_test_id: ContextVar[str | None] = ContextVar("test_id", default=None)
_capture_id: ContextVar[str | None] = ContextVar("capture_id", default=None)


def set_correlation_context(
    session_id: str | None = None,
    test_id: str | None = None,
    capture_id: str | None = None,
) -> None:
    """Set correlation IDs for the current context.

    Args:
        session_id: Identifier of the browser session performing the capture
        test_id: Full title of the visual test being run
        capture_id: Name of the screenshot state within the test
    """
    if session_id is not None:
        _session_id.set(session_id)
    if test_id is not None:
        _test_id.set(test_id)
    if capture_id is not None:
        _capture_id.set(capture_id)


def clear_correlation_context() -> None:
    """Clear all correlation context variables."""
    _session_id.set(None)
    _test_id.set(None)
    _capture_id.set(None)


def _add_correlation_ids(
    logger: logging.Logger,
    method_name: str,
    event_dict: MutableMapping[str, Any],
) -> MutableMapping[str, Any]:
    """Structlog processor to add correlation IDs to log events."""
    _ = logger, method_name  # Required by structlog processor signature
    session_id = _session_id.get()
    test_id = _test_id.get()
    capture_id = _capture_id.get()

    if session_id is not None:
        event_dict["session_id"] = session_id
    if test_id is not None:
        event_dict["test_id"] = test_id
    if capture_id is not None:
        event_dict["capture_id"] = capture_id

    return event_dict


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
) -> None:
    """Configure structlog with the specified settings.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Defaults to settings.LOG_LEVEL.
        log_format: Output format ("console" or "json").
                    Defaults to settings.LOG_FORMAT.
    """
    level = level or settings.LOG_LEVEL
    log_format = log_format or settings.LOG_FORMAT

    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
        _add_correlation_ids,
    ]

    if log_format == "json":
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
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Configure stdlib logging to match
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper()),
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name. If None, uses the calling module's name.

    Returns:
        A bound structlog logger instance.
    """
    return cast(structlog.stdlib.BoundLogger, structlog.get_logger(name))


def silence_debug_until_configured() -> None:
    """Drop debug events while structlog has not been configured.

    Validators trace every call at debug level. Until the host application
    (or configure_logging) sets up structlog, those events are discarded
    instead of going through structlog's default stdout printer.
    """
    if not structlog.is_configured():
        structlog.configure(
            wrapper_class=structlog.make_filtering_bound_logger(logging.INFO),
        )


silence_debug_until_configured()
