from collections.abc import Callable, Mapping
from typing import Any, Protocol


class TemplateSource(Protocol):
    """The only view of the theme files a template engine gets."""

    def exists(self, name: str) -> bool: ...

    def read(self, name: str) -> str: ...


SectionRenderer = Callable[[str, Mapping[str, Any]], str]


class TemplateEngine(Protocol):
    def render(
        self,
        source: str,
        context: Mapping[str, Any],
        includes: TemplateSource,
        sections: SectionRenderer,
    ) -> str: ...
