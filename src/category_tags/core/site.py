"""Helpers for reading render inputs from the host site."""

from __future__ import annotations

import logging
from typing import Any, Optional

from category_tags.types import Site

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CATEGORY_DIR_KEY = "category_dir"


def load_site(raw: Any) -> Site:
    """Validate a host site object or mapping into a ``Site``.

    Raises:
        ConfigurationError: If *raw* is None.
        pydantic.ValidationError: If *raw* does not look like a site.
    """
    if raw is None:
        logger.error("No site available in template context")
        raise ConfigurationError("No 'site' available to render categories from")
    if isinstance(raw, Site):
        return raw
    return Site.model_validate(raw)


def resolve_category_dir(site: Site, override: Optional[str] = None) -> str:
    """Return the category directory prefix for *site*.

    An explicit *override* wins over the site configuration. A missing or
    empty value is an error, never defaulted.

    Raises:
        ConfigurationError: If no category directory is configured.
    """
    category_dir = override if override else site.config.get(CATEGORY_DIR_KEY)
    if not category_dir:
        logger.error("Site configuration is missing '%s'", CATEGORY_DIR_KEY)
        raise ConfigurationError(f"Site configuration is missing '{CATEGORY_DIR_KEY}'")
    if not isinstance(category_dir, str):
        raise ConfigurationError(f"'{CATEGORY_DIR_KEY}' must be a string, got {type(category_dir).__name__}")
    return category_dir


__all__ = ["CATEGORY_DIR_KEY", "load_site", "resolve_category_dir"]
