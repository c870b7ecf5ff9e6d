"""Tests for the category-tags command-line interface."""

import json
from pathlib import Path

import pytest

from category_tags.cli import create_parser, main
from category_tags.core.renderer import CategoryRenderer
from category_tags.types import RenderMode


def test_render_list_is_default_mode(site_file, post_counts, category_dir, capsys):
    exit_code = main(["render", "--site", str(site_file)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out == CategoryRenderer(RenderMode.LIST).render(post_counts, category_dir) + "\n"


def test_render_cloud(site_file, capsys):
    exit_code = main(["render", "--mode", "category_tag_cloud", "--site", str(site_file)])

    assert exit_code == 0
    assert "font-size:1.8em" in capsys.readouterr().out


def test_render_category_dir_flag_overrides_site(site_file, capsys):
    exit_code = main(["--category-dir", "topics", "render", "--site", str(site_file)])

    assert exit_code == 0
    assert "href='/topics/travel/'" in capsys.readouterr().out


def test_render_category_dir_from_env(site_file, capsys, monkeypatch):
    monkeypatch.setenv("CATEGORY_TAGS_CATEGORY_DIR", "from-env")

    exit_code = main(["render", "--site", str(site_file)])

    assert exit_code == 0
    assert "href='/from-env/python/'" in capsys.readouterr().out


def test_render_missing_category_dir_fails(tmp_path: Path, capsys):
    site_file = tmp_path / "site.json"
    site_file.write_text(json.dumps({"categories": {"Python": 3}, "config": {}}), encoding="utf-8")

    exit_code = main(["render", "--site", str(site_file)])

    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Error: Site configuration is missing 'category_dir'" in captured.err


def test_render_negative_count_fails(tmp_path: Path, capsys):
    site_file = tmp_path / "site.json"
    site_file.write_text(
        json.dumps({"categories": {"Python": -3}, "config": {"category_dir": "tags"}}),
        encoding="utf-8",
    )

    assert main(["render", "--site", str(site_file)]) == 1
    assert "post_count" in capsys.readouterr().err


def test_render_invalid_json_fails(tmp_path: Path, capsys):
    site_file = tmp_path / "site.json"
    site_file.write_text("{not json", encoding="utf-8")

    assert main(["render", "--site", str(site_file)]) == 1
    assert "Invalid JSON" in capsys.readouterr().err


def test_render_missing_file_fails(tmp_path: Path, capsys):
    assert main(["render", "--site", str(tmp_path / "missing.json")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_template_command(tmp_path: Path, site_file, capsys):
    template = tmp_path / "categories.html"
    template.write_text("<section>{% category_list %}</section>\n<ul>{% category_tag_cloud %}</ul>", encoding="utf-8")

    exit_code = main(["template", str(template), "--site", str(site_file)])

    assert exit_code == 0
    out = capsys.readouterr().out
    assert out.startswith("<section><article><h1><a href='/blog/categories/cooking/'>Cooking</a></h1>")
    assert "<ul><li style='list-style-type:none;display:inline;' class='category'>" in out


def test_template_syntax_error_fails(tmp_path: Path, site_file, capsys):
    template = tmp_path / "broken.html"
    template.write_text("{% category_list now %}", encoding="utf-8")

    assert main(["template", str(template), "--site", str(site_file)]) == 1
    assert "does not accept arguments" in capsys.readouterr().err


def test_parser_rejects_unknown_mode():
    parser = create_parser()

    with pytest.raises(SystemExit):
        parser.parse_args(["render", "--mode", "category_grid", "--site", "site.json"])


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        create_parser().parse_args([])


def test_render_null_post_collection_fails(tmp_path: Path, capsys):
    site_file = tmp_path / "site.json"
    site_file.write_text(
        json.dumps({"categories": {"Python": None}, "config": {"category_dir": "tags"}}),
        encoding="utf-8",
    )

    assert main(["render", "--site", str(site_file)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "posts for category 'Python' must be a collection or an integer" in captured.err
