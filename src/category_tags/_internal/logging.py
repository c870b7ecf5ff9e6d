"""Logging configuration for category_tags package."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import get_config

DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOGGER_NAME = "category_tags"

_configured = False


def configure_logging(
    log_level: Optional[str] = None,
    force: bool = False,
) -> None:
    """Configure logging for the category_tags package.

    Attaches a single stderr handler to the 'category_tags' logger. Library
    users who never call this keep the default (silent) logging behavior.

    Args:
        log_level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL).
                   Defaults to CATEGORY_TAGS_LOG_LEVEL env var or WARNING.
        force: If True, reconfigure even if already configured.
    """
    global _configured

    if _configured and not force:
        return

    if log_level is None:
        log_level = get_config().log_level or DEFAULT_LOG_LEVEL

    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, log_level.upper(), logging.WARNING)
    logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(console_handler)

    # Prevent propagation to root logger to avoid duplicate logs
    logger.propagate = False

    _configured = True


def get_logger() -> logging.Logger:
    """Get the package logger.

    Returns:
        Logger instance.
    """
    return logging.getLogger(LOGGER_NAME)
