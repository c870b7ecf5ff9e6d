"""Category-related type definitions."""

from __future__ import annotations

from collections.abc import Mapping, Sized
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderMode(StrEnum):
    """How a category collection is rendered.

    The value is the template-tag name the mode is registered under.
    """

    LIST = "category_list"
    CLOUD = "category_tag_cloud"


class Category(BaseModel):
    """A named group of posts, read from the host site for one render.

    Attributes:
        name: Display name of the category.
        post_count: Number of posts filed under the category.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name of the category")
    post_count: int = Field(ge=0, description="Number of posts filed under the category")


class Site(BaseModel):
    """Read-only view of the host site-generation context.

    Accepts either a mapping or any object exposing ``categories`` and
    ``config`` attributes (e.g. a generator's site object).

    Attributes:
        categories: Category name to its post count. Validated from a mapping
            of name to the collection of posts in it; an integer is accepted
            in place of the collection and used as the count.
        config: Site-wide configuration; ``category_dir`` is read from here.
    """

    model_config = ConfigDict(frozen=True, from_attributes=True)

    categories: dict[str, int] = Field(default_factory=dict, description="Category name to its post count")
    config: dict[str, Any] = Field(default_factory=dict, description="Site-wide configuration")

    @field_validator("categories", mode="before")
    @classmethod
    def count_posts(cls, value: Any) -> Any:
        """Reduce each category's post collection to its size."""
        if not isinstance(value, Mapping):
            return value
        return {name: _count_posts(name, posts) for name, posts in value.items()}

    def post_counts(self) -> dict[str, int]:
        """Return the number of posts in each category."""
        return dict(self.categories)


def _count_posts(name: Any, posts: Any) -> int:
    if isinstance(posts, bool):
        raise ValueError(f"posts for category {name!r} must be a collection or an integer, got bool")
    if isinstance(posts, int):
        return posts
    if isinstance(posts, Sized) and not isinstance(posts, (str, bytes)):
        return len(posts)
    raise ValueError(f"posts for category {name!r} must be a collection or an integer, got {type(posts).__name__}")


__all__ = [
    "Category",
    "RenderMode",
    "Site",
]
