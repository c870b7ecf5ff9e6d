"""Configuration management for category_tags package."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Config:
    """Process-level overrides read from the environment."""

    category_dir: Optional[str] = None
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Config":
        """Read configuration from environment variables.

        Empty values are treated as unset.
        """
        return cls(
            category_dir=os.environ.get("CATEGORY_TAGS_CATEGORY_DIR") or None,
            log_level=os.environ.get("CATEGORY_TAGS_LOG_LEVEL") or None,
        )


def get_config() -> Config:
    """Read configuration from environment variables."""
    return Config.from_env()
