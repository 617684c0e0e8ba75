"""
Cross-cutting helpers: HTTP error translation and structured logging.
"""

from .error_handlers import handle_api_errors, to_http_exception
from .logging_utils import StructuredLogger, configure_logging

__all__ = ["handle_api_errors", "to_http_exception", "StructuredLogger", "configure_logging"]
