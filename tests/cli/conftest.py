"""Fixtures for CLI tests."""

import json
import logging
from pathlib import Path

import pytest

from category_tags._internal import logging as logging_module


@pytest.fixture(autouse=True)
def reset_package_logging(monkeypatch):
    """Give every test a fresh handler bound to its own captured stderr."""
    monkeypatch.setattr(logging_module, "_configured", False)
    monkeypatch.delenv("CATEGORY_TAGS_CATEGORY_DIR", raising=False)
    monkeypatch.delenv("CATEGORY_TAGS_LOG_LEVEL", raising=False)
    yield
    logging.getLogger(logging_module.LOGGER_NAME).handlers.clear()


@pytest.fixture
def site_file(tmp_path: Path, site_dict: dict) -> Path:
    path = tmp_path / "site.json"
    path.write_text(json.dumps(site_dict), encoding="utf-8")
    return path
