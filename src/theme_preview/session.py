from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from os import PathLike
from typing import Any

from theme_preview.bridge.client import AssetClient
from theme_preview.core.ingest import file_counts, ingest_archive
from theme_preview.core.ports.engine import TemplateEngine
from theme_preview.core.render import ThemeRenderer
from theme_preview.engine.liquid_adapter import LiquidEngine
from theme_preview.models import IngestSummary, RenderRequest
from theme_preview.vfs.memory import VirtualFileSystem

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderOutcome:
    generation: int
    template: str
    html: str


class PreviewSession:
    """Root composition for one preview: the VFS, the renderer and the asset client.

    Every render and every archive load bumps the session generation. A
    render result only becomes ``latest`` when nothing newer was requested
    while it was running, so a slow render can never replace a newer one.
    """

    def __init__(self, engine: TemplateEngine | None = None, vfs: VirtualFileSystem | None = None) -> None:
        self.vfs = vfs if vfs is not None else VirtualFileSystem()
        self.renderer = ThemeRenderer(self.vfs, engine if engine is not None else LiquidEngine())
        self.asset_client = AssetClient(self.vfs)
        self._generation = 0
        self._latest: RenderOutcome | None = None
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def latest(self) -> RenderOutcome | None:
        return self._latest

    def summary(self) -> IngestSummary:
        return file_counts(self.vfs)

    async def load_archive(self, source: bytes | str | PathLike[str]) -> IngestSummary:
        """Rebuild the VFS from ``source``; raises ``ArchiveError`` and leaves the session empty on failure."""
        self._generation += 1
        self._loaded = False
        self._latest = None
        summary = await ingest_archive(self.vfs, source)
        self._loaded = True
        return summary

    async def render(self, request: RenderRequest) -> RenderOutcome:
        self._generation += 1
        generation = self._generation
        html = await asyncio.to_thread(self.renderer.render, request)
        outcome = RenderOutcome(generation=generation, template=request.template, html=html)
        if self.is_current(outcome):
            self._latest = outcome
        else:
            logger.debug("Discarding superseded render of %s (generation %d)", request.template, generation)
        return outcome

    def is_current(self, outcome: RenderOutcome) -> bool:
        return outcome.generation == self._generation

    def update_mock_data(self, data: Mapping[str, Any]) -> None:
        self.renderer.update_defaults(data)
