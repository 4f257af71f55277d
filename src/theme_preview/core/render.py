import html
import logging
from collections.abc import Mapping
from typing import Any

from theme_preview.core.errors import TemplateRenderError
from theme_preview.core.ports.engine import TemplateEngine
from theme_preview.core.ports.filesystem import FileStore
from theme_preview.core.resolve import (
    DEFAULT_LAYOUT_NAME,
    LAYOUT_PREFIX,
    include_candidates,
    normalize_template_path,
    section_path,
    template_candidates,
)
from theme_preview.core.storefront import default_storefront_data
from theme_preview.models import RenderRequest
from theme_preview.vfs.memory import FileRecord

logger = logging.getLogger(__name__)

CONTENT_FOR_LAYOUT = "content_for_layout"


def error_fragment(message: str) -> str:
    return f'<div class="error">{html.escape(message)}</div>'


def html_comment(message: str) -> str:
    return f"<!-- {html.escape(message).replace('--', '- -')} -->"


def _first_text_record(vfs: FileStore, candidates: list[str]) -> FileRecord | None:
    for candidate in candidates:
        record = vfs.get_file(candidate)
        if record is not None and record.is_text:
            return record
    return None


class VfsTemplateSource:
    """Include-resolution hook over the VFS.

    Implements the ``TemplateSource`` protocol. A reference that cannot be
    resolved reads as an HTML comment, so a missing snippet never aborts the
    page that includes it.
    """

    def __init__(self, vfs: FileStore) -> None:
        self._vfs = vfs

    def exists(self, name: str) -> bool:
        return _first_text_record(self._vfs, include_candidates(name)) is not None

    def read(self, name: str) -> str:
        record = _first_text_record(self._vfs, include_candidates(name))
        if record is None:
            logger.warning("File not found in VFS: %s", name)
            return html_comment(f"File not found: {name}")
        assert isinstance(record.content, str)
        return record.content


class ThemeRenderer:
    """Resolve a ``RenderRequest`` to a template and layout and render both.

    ``render`` never raises: unknown templates and engine failures come back
    as ``<div class="error">`` fragments. Each render works on one snapshot
    of the VFS, so an upload landing mid-render cannot mix two themes.
    """

    def __init__(
        self,
        vfs: FileStore,
        engine: TemplateEngine,
        defaults: Mapping[str, Any] | None = None,
    ) -> None:
        self._vfs = vfs
        self._engine = engine
        self._defaults: dict[str, Any] = dict(defaults) if defaults is not None else default_storefront_data()

    def update_defaults(self, data: Mapping[str, Any]) -> None:
        self._defaults = {**self._defaults, **data}

    def find_template(self, template: str, files: FileStore | None = None) -> FileRecord | None:
        files = files if files is not None else self._vfs
        for candidate in template_candidates(template):
            record = files.get_file(candidate)
            if record is not None:
                logger.debug("Resolved template %r to %s", template, candidate)
                return record
        return None

    def find_layout(self, files: FileStore | None = None) -> FileRecord | None:
        files = files if files is not None else self._vfs
        layouts = sorted(
            (record for record in files.get_files_by_prefix(LAYOUT_PREFIX) if record.is_text),
            key=lambda record: record.path,
        )
        if not layouts:
            return None
        for record in layouts:
            if record.name == DEFAULT_LAYOUT_NAME:
                return record
        return layouts[0]

    def render(self, request: RenderRequest) -> str:
        files = self._vfs.snapshot()
        record = self.find_template(request.template, files)
        if record is None:
            path = normalize_template_path(request.template)
            logger.warning("Template not found: %s", path)
            return error_fragment(f"Template not found: {path}")
        if not isinstance(record.content, str):
            return error_fragment(f"Template is not text: {record.path}")

        includes = VfsTemplateSource(files)
        data = {**self._defaults, **request.context}
        try:
            content = self._render_source(record.content, data, includes)
            layout = self.find_layout(files)
            if layout is None:
                return content
            assert isinstance(layout.content, str)
            return self._render_source(layout.content, {**data, CONTENT_FOR_LAYOUT: content}, includes)
        except TemplateRenderError as exc:
            logger.exception("Error rendering template %s", record.path)
            return error_fragment(f"Error rendering template: {exc}")
        except Exception as exc:
            logger.exception("Unexpected failure rendering template %s", record.path)
            return error_fragment(f"Error rendering template: {exc}")

    def render_section(
        self,
        name: str,
        context: Mapping[str, Any],
        includes: VfsTemplateSource | None = None,
    ) -> str:
        includes = includes if includes is not None else VfsTemplateSource(self._vfs.snapshot())
        path = section_path(name)
        if not includes.exists(path):
            logger.warning("Section not found: %s", name)
            return html_comment(f"Section not found: {name}")
        return self._render_source(includes.read(path), context, includes)

    def _render_source(self, source: str, context: Mapping[str, Any], includes: VfsTemplateSource) -> str:
        def sections(name: str, section_context: Mapping[str, Any]) -> str:
            return self.render_section(name, section_context, includes)

        return self._engine.render(source, context, includes, sections)
