"""python-liquid implementation of the ``TemplateEngine`` port."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TextIO

from liquid import Environment
from liquid.ast import Node
from liquid.context import Context
from liquid.exceptions import Error as LiquidError
from liquid.loaders import BaseLoader
from liquid.loaders import TemplateSource as LoadedTemplate
from liquid.parse import expect
from liquid.stream import TokenStream
from liquid.tag import Tag
from liquid.token import TOKEN_EXPRESSION, TOKEN_TAG, Token

from theme_preview.core.errors import TemplateRenderError
from theme_preview.core.ports.engine import SectionRenderer, TemplateSource
from theme_preview.engine.filters import STOREFRONT_FILTERS

TAG_SECTION = "section"


class VfsLoader(BaseLoader):
    """Adapts a ``TemplateSource`` to python-liquid's loader interface for ``include`` and ``render``."""

    def __init__(self, includes: TemplateSource) -> None:
        self._includes = includes

    def get_source(self, env: Environment, template_name: str) -> LoadedTemplate:
        return LoadedTemplate(self._includes.read(template_name), template_name, None)


def _section_name(expression: str) -> str:
    name = expression.strip()
    if len(name) >= 2 and name[0] == name[-1] and name[0] in "'\"":
        return name[1:-1]
    return name


class SectionNode(Node):
    def __init__(self, tok: Token, name: str) -> None:
        self.tok = tok
        self.name = name

    def __str__(self) -> str:
        return f"section({self.name!r})"

    def render_to_output(self, context: Context, buffer: TextIO) -> bool | None:
        env = context.env
        assert isinstance(env, ThemeEnvironment)
        buffer.write(env.section_renderer(self.name, dict(context.globals)))
        return True

    def children(self) -> list[Any]:
        return []


class SectionTag(Tag):
    """``{% section 'name' %}``: render ``sections/<name>.liquid`` in place."""

    name = TAG_SECTION
    block = False

    def parse(self, stream: TokenStream) -> SectionNode:
        expect(stream, TOKEN_TAG, value=TAG_SECTION)
        tok = stream.current
        stream.next_token()
        expect(stream, TOKEN_EXPRESSION)
        return SectionNode(tok, _section_name(stream.current.value))


class ThemeEnvironment(Environment):
    def __init__(self, includes: TemplateSource, sections: SectionRenderer) -> None:
        # Theme files change with every upload, so parsed templates are never cached.
        super().__init__(loader=VfsLoader(includes), cache_size=0)
        self.section_renderer = sections
        self.add_tag(SectionTag)
        for name, func in STOREFRONT_FILTERS.items():
            self.add_filter(name, func)


class LiquidEngine:
    """Render Liquid source with python-liquid.

    Implements the ``TemplateEngine`` protocol. Syntax and render errors
    surface as ``TemplateRenderError``.
    """

    def render(
        self,
        source: str,
        context: Mapping[str, Any],
        includes: TemplateSource,
        sections: SectionRenderer,
    ) -> str:
        env = ThemeEnvironment(includes, sections)
        try:
            template = env.from_string(source)
            return template.render(**context)
        except LiquidError as exc:
            raise TemplateRenderError(str(exc)) from exc
