"""Type definitions for category_tags."""

from .category import Category, RenderMode, Site

__all__ = [
    "Category",
    "RenderMode",
    "Site",
]
