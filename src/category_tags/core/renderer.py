"""Rendering of category lists and tag clouds.

A ``CategoryRenderer`` turns a mapping of category name to post count into an
HTML fragment. Output is a pure function of the inputs: names are sorted on
every call and nothing is cached between calls, so one renderer instance can
be shared by concurrent template renders.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from decimal import Decimal

from markupsafe import Markup

from category_tags.types import Category, RenderMode

from .errors import ConfigurationError
from .number_words import humanize_count
from .slug import slugify

logger = logging.getLogger(__name__)

CLOUD_BASE_EM = Decimal("0.6")
CLOUD_STEP_EM = Decimal("0.1")

_CLOUD_ITEM = Markup(
    "<li style='list-style-type:none;display:inline;' class='category'>"
    "<a style='font-size:{size}em' href='{url}'>{name}</a></li> "
)
_LIST_ITEM = Markup(
    "<article><h1><a href='{url}'>{name}</a></h1>"
    "<span class='post-count' data-count='{count}'>{count_text}</span></article>"
)


def category_url(category_dir: str, name: str) -> str:
    """Build the absolute URL of a category page.

    Example:
        ``category_url("blog/categories", "Sci-Fi & Fantasy")``
        returns ``/blog/categories/sci-fi-fantasy/``.
    """
    segments = [segment for segment in (category_dir.strip("/"), slugify(name)) if segment]
    return "/" + "/".join(segments) + "/"


def cloud_font_size(post_count: int) -> Decimal:
    """Font size in em for a tag-cloud entry: 0.6 plus 0.1 per post, unbounded."""
    return CLOUD_BASE_EM + post_count * CLOUD_STEP_EM


class CategoryRenderer:
    """Render categories in a fixed ``RenderMode``."""

    def __init__(self, mode: RenderMode) -> None:
        self._mode = RenderMode(mode)

    @property
    def mode(self) -> RenderMode:
        return self._mode

    def render(self, categories: Mapping[str, int], category_dir: str) -> Markup:
        """Render *categories* as a single HTML fragment.

        Args:
            categories: Category name to post count. Not modified.
            category_dir: URL path segment the category pages live under.

        Returns:
            Concatenated fragments in ascending name order, without a wrapper
            element. An empty mapping yields an empty string.

        Raises:
            ConfigurationError: If *category_dir* is empty.
            pydantic.ValidationError: If a post count is negative.
        """
        if not category_dir:
            logger.error("Missing category directory for %s render", self._mode.value)
            raise ConfigurationError("category_dir must be configured to render categories")

        logger.debug("Rendering %d categories as %s", len(categories), self._mode.value)

        items = [Category(name=name, post_count=categories[name]) for name in sorted(categories)]
        if self._mode is RenderMode.CLOUD:
            fragments = [self._render_cloud_item(category, category_dir) for category in items]
        else:
            fragments = [self._render_list_item(category, category_dir) for category in items]
        return Markup("").join(fragments)

    def _render_cloud_item(self, category: Category, category_dir: str) -> Markup:
        return _CLOUD_ITEM.format(
            size=cloud_font_size(category.post_count),
            url=category_url(category_dir, category.name),
            name=category.name,
        )

    def _render_list_item(self, category: Category, category_dir: str) -> Markup:
        return _LIST_ITEM.format(
            url=category_url(category_dir, category.name),
            name=category.name,
            count=category.post_count,
            count_text=humanize_count(category.post_count),
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self._mode!s})"


def render_categories(categories: Mapping[str, int], category_dir: str, mode: RenderMode) -> Markup:
    """Render *categories* once in *mode*. See ``CategoryRenderer.render``."""
    return CategoryRenderer(mode).render(categories, category_dir)


__all__ = [
    "CLOUD_BASE_EM",
    "CLOUD_STEP_EM",
    "CategoryRenderer",
    "category_url",
    "cloud_font_size",
    "render_categories",
]
