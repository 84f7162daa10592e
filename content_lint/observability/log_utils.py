"""
Structured-logging helpers.

Context values are attached to log records as ``extra`` attributes after
being reduced to bounded strings: judged payloads and document text can be
arbitrarily large, and collections or models are summarised rather than
dumped. Context keys that collide with LogRecord attributes (``filename``,
``module``, ``message``...) are prefixed with ``ctx_``.

Dependencies: logging (stdlib), pydantic
System role: Logging helper functions for evaluators and the orchestrator
"""

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel

MAX_LOG_VALUE_LENGTH = 200
CONTEXT_PREFIX = "ctx_"

_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = MAX_LOG_VALUE_LENGTH) -> str:
    """
    Bounded string form of a context value.

    Args:
        value: Any value
        max_length: Length beyond which the text is truncated

    Returns:
        str: Enum value, model class name, collection size or ``str(value)``
    """
    if value is None:
        return "None"
    if isinstance(value, Enum):
        text = str(value.value)
    elif isinstance(value, BaseModel):
        text = f"<{type(value).__name__}>"
    elif isinstance(value, (list, tuple, set, frozenset)):
        text = f"{type(value).__name__}({len(value)} items)"
    elif isinstance(value, dict):
        text = f"dict({len(value)} keys)"
    else:
        try:
            text = str(value)
        except Exception as e:
            return f"<unable to log: {type(e).__name__}>"

    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def context_extra(context: dict[str, Any]) -> dict[str, str]:
    """Logging ``extra`` mapping for a context dict."""
    extra: dict[str, str] = {}
    for key, value in context.items():
        name = f"{CONTEXT_PREFIX}{key}" if key in _RESERVED_ATTRS else key
        extra[name] = safe_log_value(value)
    return extra


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context: Any,
) -> None:
    """
    Log a message with structured context.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Key-value pairs attached to the record
    """
    logger.log(level, message, extra=context_extra(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception at ERROR with its traceback and structured context.

    Works outside an ``except`` block since the exception is passed explicitly.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception to report
        **context: Key-value pairs attached to the record
    """
    extra = context_extra(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
