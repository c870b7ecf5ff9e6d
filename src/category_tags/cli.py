"""Command-line interface for previewing category tags."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional

from jinja2 import FileSystemLoader, TemplateError

from ._internal.config import get_config
from ._internal.logging import configure_logging
from .core.errors import CategoryTagsError
from .core.renderer import CategoryRenderer
from .core.site import load_site, resolve_category_dir
from .jinja_ext import SITE_CONTEXT_KEY, create_environment
from .types import RenderMode

logger = logging.getLogger(__name__)


def _read_site_document(path: str) -> dict[str, Any]:
    """Read a JSON site document.

    Expected shape: ``{"categories": {name: [posts...] | count}, "config": {...}}``.
    """
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in site file {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Site file {path} must contain a JSON object")
    return data


def cmd_render(args: argparse.Namespace) -> int:
    """Handle the render command."""
    site = load_site(_read_site_document(args.site))
    category_dir = resolve_category_dir(site, override=args.category_dir)
    renderer = CategoryRenderer(RenderMode(args.mode))
    print(renderer.render(site.post_counts(), category_dir))
    return 0


def cmd_template(args: argparse.Namespace) -> int:
    """Handle the template command."""
    template_path = Path(args.template)
    site_document = _read_site_document(args.site)

    env = create_environment(loader=FileSystemLoader(str(template_path.parent)), autoescape=True)
    env.category_tags_category_dir = args.category_dir  # type: ignore[attr-defined]
    template = env.get_template(template_path.name)
    print(template.render({SITE_CONTEXT_KEY: site_document}))
    return 0


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Returns:
        Configured ArgumentParser instance.
    """
    config = get_config()

    parser = argparse.ArgumentParser(
        prog="category-tags",
        description="Render category lists and tag clouds for a static site",
    )

    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=config.log_level,
        help="Log level (default: CATEGORY_TAGS_LOG_LEVEL env var or WARNING)",
    )

    parser.add_argument(
        "-d",
        "--category-dir",
        dest="category_dir",
        default=config.category_dir,
        help="Category directory prefix (default: CATEGORY_TAGS_CATEGORY_DIR env var or the site's config)",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    # render command
    render_parser = subparsers.add_parser(
        "render",
        help="Render the site's categories as an HTML fragment",
    )
    render_parser.add_argument(
        "-m",
        "--mode",
        choices=[mode.value for mode in RenderMode],
        default=RenderMode.LIST.value,
        help="Tag to render (default: category_list)",
    )
    render_parser.add_argument(
        "-s",
        "--site",
        required=True,
        help="Path to a JSON site document",
    )
    render_parser.set_defaults(func=cmd_render)

    # template command
    template_parser = subparsers.add_parser(
        "template",
        help="Render a Jinja2 template with the category tags available",
    )
    template_parser.add_argument(
        "template",
        help="Path to the template file",
    )
    template_parser.add_argument(
        "-s",
        "--site",
        required=True,
        help="Path to a JSON site document",
    )
    template_parser.set_defaults(func=cmd_template)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI.

    Args:
        argv: Command-line arguments. Defaults to sys.argv[1:].

    Returns:
        Exit code (0 for success, non-zero for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    configure_logging(log_level=args.log_level)

    try:
        logger.debug("Executing command: %s", args.command)
        return args.func(args)
    except (CategoryTagsError, ValueError, TemplateError, OSError) as e:
        logger.error("Error: %s", e)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted", file=sys.stderr)
        return 130


if __name__ == "__main__":
    sys.exit(main())
