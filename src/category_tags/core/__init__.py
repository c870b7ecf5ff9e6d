"""Core rendering modules for category_tags."""

from .errors import CategoryTagsError, ConfigurationError
from .number_words import NUMBER_WORDS, humanize_count
from .renderer import CategoryRenderer, category_url, cloud_font_size, render_categories
from .site import load_site, resolve_category_dir
from .slug import slugify

__all__ = [
    "NUMBER_WORDS",
    "CategoryRenderer",
    "CategoryTagsError",
    "ConfigurationError",
    "category_url",
    "cloud_font_size",
    "humanize_count",
    "load_site",
    "render_categories",
    "resolve_category_dir",
    "slugify",
]
