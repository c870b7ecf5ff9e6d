"""Pytest configuration for all tests."""

from types import SimpleNamespace

import pytest

CATEGORY_DIR = "blog/categories"


@pytest.fixture
def category_dir() -> str:
    return CATEGORY_DIR


@pytest.fixture
def post_counts() -> dict[str, int]:
    """Category name to post count, deliberately out of order."""
    return {"Travel": 1, "Python": 12, "Cooking": 0}


@pytest.fixture
def site_dict() -> dict:
    """A site shaped like a generator's context, with posts as lists."""
    return {
        "categories": {
            "Travel": ["post-a"],
            "Python": [f"post-{i}" for i in range(12)],
            "Cooking": [],
        },
        "config": {"category_dir": CATEGORY_DIR},
    }


@pytest.fixture
def site_object(site_dict: dict) -> SimpleNamespace:
    """The same site exposed through attributes instead of keys."""
    return SimpleNamespace(categories=site_dict["categories"], config=site_dict["config"])
