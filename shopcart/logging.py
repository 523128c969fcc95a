"""
Centralized logging configuration for shopcart.

Usage:
    from shopcart.logging import get_logger
    logger = get_logger(__name__)

    logger.debug("Item added")
    logger.warning("Rejected item", exc_info=True)
"""

import logging
import sys
from functools import cache

from shopcart.config import IS_PRODUCTION, LOG_LEVEL

# Default format for logs
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"


def _get_log_level() -> int:
    """Get log level from configuration or default to INFO."""
    return getattr(logging, LOG_LEVEL, logging.INFO)


def _configure_root_logger() -> None:
    """Configure root logger with a stdout handler unless the host already has one."""
    root = logging.getLogger()

    # Only configure if no handlers exist
    if root.handlers:
        return

    root.setLevel(_get_log_level())

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(_get_log_level())

    # Compact format in production, detailed locally
    formatter = logging.Formatter(LOG_FORMAT_SIMPLE if IS_PRODUCTION else LOG_FORMAT)
    handler.setFormatter(formatter)

    root.addHandler(handler)


# Configure once on module import
_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """
    Get or create a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)


def _escape_log_injection(value: str) -> str:
    """Escape control characters that could forge log entries (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Sanitize a caller-supplied string before it is logged.

    Args:
        value: String value to sanitize (can be None)
        max_length: Maximum length to keep (default: 50)

    Returns:
        Escaped, truncated string or "N/A" if empty
    """
    if not value:
        return "N/A"
    safe_value = _escape_log_injection(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_string_for_logging",
]
