"""
Observability module.

Provides logging configuration and structured-logging helpers.
"""

from content_lint.observability.log_utils import (
    context_extra,
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from content_lint.observability.logger import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "get_logger",
    "log_with_context",
    "log_exception_with_context",
    "safe_log_value",
    "context_extra",
]
