"""Jinja2 extension exposing the category template tags.

Usage:
    from jinja2 import Environment
    from category_tags import CategoryListExtension

    env = Environment(extensions=[CategoryListExtension])
    template = env.from_string("<ul>{% category_tag_cloud %}</ul>")
    template.render(site={"categories": {...}, "config": {"category_dir": "blog/categories"}})

The tags take no arguments. At render time they read the ``site`` variable
from the template context. The category directory comes from
``site.config["category_dir"]`` unless ``env.category_tags_category_dir`` is
set on the environment.
"""

from __future__ import annotations

import logging
from typing import Any

from jinja2 import Environment, nodes
from jinja2.ext import Extension
from jinja2.parser import Parser
from jinja2.runtime import Context
from markupsafe import Markup

from .core.renderer import CategoryRenderer
from .core.site import load_site, resolve_category_dir
from .types import RenderMode

logger = logging.getLogger(__name__)

SITE_CONTEXT_KEY = "site"


class CategoryListExtension(Extension):
    """Registers ``{% category_list %}`` and ``{% category_tag_cloud %}``."""

    tags = {mode.value for mode in RenderMode}

    def __init__(self, environment: Environment) -> None:
        super().__init__(environment)
        # One renderer per tag name, each with its mode fixed up front
        self.renderers: dict[str, CategoryRenderer] = {mode.value: CategoryRenderer(mode) for mode in RenderMode}
        environment.extend(category_tags_category_dir=None)

    def parse(self, parser: Parser) -> nodes.Node:
        token = next(parser.stream)
        lineno = token.lineno
        if parser.stream.current.type != "block_end":
            parser.fail(f"'{token.value}' does not accept arguments", parser.stream.current.lineno)

        call = self.call_method("_render_tag", [nodes.Const(token.value), nodes.ContextReference()], lineno=lineno)
        return nodes.Output([call], lineno=lineno)

    def _render_tag(self, tag_name: str, context: Context) -> Markup:
        site = load_site(context.get(SITE_CONTEXT_KEY))
        category_dir = resolve_category_dir(site, override=self.environment.category_tags_category_dir)  # type: ignore[attr-defined]
        logger.debug("Expanding {%% %s %%}", tag_name)
        return self.renderers[tag_name].render(site.post_counts(), category_dir)


def register(environment: Environment) -> Environment:
    """Add ``CategoryListExtension`` to an existing environment."""
    environment.add_extension(CategoryListExtension)
    return environment


def create_environment(**kwargs: Any) -> Environment:
    """Create a ``jinja2.Environment`` with ``CategoryListExtension`` loaded.

    Keyword arguments are passed to ``Environment``; any ``extensions`` given
    are kept alongside this one.
    """
    extensions = list(kwargs.pop("extensions", ()))
    if CategoryListExtension not in extensions:
        extensions.append(CategoryListExtension)
    return Environment(extensions=extensions, **kwargs)


__all__ = ["SITE_CONTEXT_KEY", "CategoryListExtension", "create_environment", "register"]
