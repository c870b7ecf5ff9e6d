"""Exceptions raised by category_tags."""

from __future__ import annotations


class CategoryTagsError(Exception):
    """Base error for category tag rendering."""


class ConfigurationError(CategoryTagsError, ValueError):
    """Raised when the host site is missing configuration needed to render."""
