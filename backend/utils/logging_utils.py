"""
Structured Logging Utilities

Provides utilities for configuring logging and adding structured context to log
messages, improving observability and debugging.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, Optional
from contextvars import ContextVar

from config.app_config import AppConfig


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = "backend.log"


def configure_logging(config: AppConfig) -> Optional[str]:
    """
    Configure the root logger with console and rotating file handlers.

    Safe to call more than once; handlers installed by a previous call are
    replaced.

    Args:
        config: Application configuration (log dir and level)

    Returns:
        Path of the log file, or None if the log directory is not writable
    """
    level = getattr(logging, config.log_level)
    log_formatter = logging.Formatter(LOG_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_staysphere", False):
            root_logger.removeHandler(handler)
            handler.close()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.setLevel(level)
    console_handler._staysphere = True
    root_logger.addHandler(console_handler)

    log_file = config.log_dir / LOG_FILE_NAME
    try:
        config.log_dir.mkdir(parents=True, exist_ok=True)
        # File handler with rotation (10MB per file, keep 5 backups)
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
    except OSError as e:
        root_logger.warning(f"File logging disabled, cannot write to {config.log_dir}: {e}")
        return None

    file_handler.setFormatter(log_formatter)
    file_handler.setLevel(level)
    file_handler._staysphere = True
    root_logger.addHandler(file_handler)

    logging.getLogger(__name__).info(f"Logging initialized: {log_file}")
    return str(log_file)


class StructuredLogger:
    """
    Logger whose records carry the request context plus any ``extra`` fields.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Booking created", extra={
            "booking_id": booking.id,
            "operation": "create_booking",
        })
    """

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def _log(self, level: int, message: str, extra: Optional[Dict[str, Any]], **kwargs):
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        # stacklevel points the record at the caller, not this helper
        self.logger.log(level, message, extra=context, stacklevel=3, **kwargs)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.DEBUG, message, extra)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.INFO, message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log(logging.WARNING, message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        self._log(logging.ERROR, message, extra, exc_info=exc_info)


def get_logging_context() -> Dict[str, Any]:
    """Return a copy of the current logging context."""
    return _logging_context.get().copy()


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(request_id="abc-123", path="/api/bookings")
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})
