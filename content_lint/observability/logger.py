"""
Logger configuration.

Installs a single stdout handler on the root logger. The level comes from
the argument or, when omitted, from the configured settings
(``LOG_LEVEL`` / ``DEBUG``).

Dependencies: logging (stdlib), content_lint.configs
System role: Centralized logging configuration
"""

import logging
import sys

from content_lint.configs.settings import get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Chat-model clients log every HTTP request at INFO
NOISY_LOGGERS = ("httpx", "httpcore", "openai", "anthropic", "urllib3")


def configure_logging(level: str | int | None = None) -> None:
    """
    Configure root logging for the linter.

    Calling it again replaces the handler instead of adding a second one.

    Args:
        level: Level name or number; None uses the configured settings.
            Unknown names fall back to INFO.
    """
    if level is None:
        level = get_settings().effective_log_level
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        level = resolved if isinstance(resolved, int) else logging.INFO

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Module logger (pass ``__name__``)."""
    return logging.getLogger(name)
