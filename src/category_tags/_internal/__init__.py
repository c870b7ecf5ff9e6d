"""Internal utilities for category_tags package."""

from __future__ import annotations

from .config import Config, get_config
from .logging import configure_logging, get_logger

__all__ = ["Config", "configure_logging", "get_config", "get_logger"]
