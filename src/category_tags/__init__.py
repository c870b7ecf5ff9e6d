"""Category list and tag cloud template tags for static sites.

Example usage:
    # Jinja2
    from category_tags import create_environment
    env = create_environment()
    env.from_string("{% category_list %}").render(site=site)

    # Python API
    from category_tags import CategoryRenderer, RenderMode
    html = CategoryRenderer(RenderMode.CLOUD).render({"python": 12}, "blog/categories")

    # CLI
    category-tags render --mode category_tag_cloud --site site.json
"""

from __future__ import annotations

from .core import (
    NUMBER_WORDS,
    CategoryRenderer,
    CategoryTagsError,
    ConfigurationError,
    humanize_count,
    render_categories,
    slugify,
)
from .jinja_ext import CategoryListExtension, create_environment, register
from .types import Category, RenderMode, Site

__version__ = "0.1.0"

__all__ = [
    "NUMBER_WORDS",
    "Category",
    "CategoryListExtension",
    "CategoryRenderer",
    "CategoryTagsError",
    "ConfigurationError",
    "RenderMode",
    "Site",
    "create_environment",
    "humanize_count",
    "register",
    "render_categories",
    "slugify",
]
