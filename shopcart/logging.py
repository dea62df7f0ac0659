"""
Logging for the shopcart package.

Usage:
    from shopcart.logging import get_logger
    logger = get_logger(__name__)

A stdout handler is attached to the "shopcart" logger only when the host
application has not configured logging itself. LOG_LEVEL sets its level.
"""

import logging
import os
import sys
from functools import cache

PACKAGE_LOGGER = "shopcart"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Control characters that would let a product name forge extra log lines (CWE-117)
_LOG_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": None})


def _configure_package_logger() -> None:
    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if package_logger.handlers or logging.getLogger().handlers:
        return

    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    package_logger.setLevel(getattr(logging, level_name, logging.INFO))

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)


_configure_package_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Logger for a shopcart module (pass __name__)."""
    return logging.getLogger(name)


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Make a caller-supplied string (e.g. a product name) safe to log.

    Control characters are escaped and the result is cut to max_length
    with a trailing "...". Empty values log as "N/A".
    """
    if not value:
        return "N/A"
    safe_value = str(value).translate(_LOG_ESCAPES)
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "get_logger",
    "sanitize_string_for_logging",
]
