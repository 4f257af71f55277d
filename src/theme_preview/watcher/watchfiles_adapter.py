from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Callable, Coroutine
from pathlib import Path
from typing import Any

from watchfiles import awatch

logger = logging.getLogger(__name__)


class ArchiveWatcher:
    """Watch a theme archive on disk and trigger a callback when it changes.

    The parent directory is watched rather than the file itself so archives
    replaced by rename (as most editors and downloads do) are still seen.
    """

    def __init__(
        self,
        archive: str | Path,
        on_change: Callable[[Path], Coroutine[Any, Any, None]],
    ) -> None:
        self._archive = Path(archive).resolve()
        self._on_change = on_change
        self._task: asyncio.Task[None] | None = None

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._watch())
        logger.info("Watching theme archive %s", self._archive)

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Stopped watching theme archive %s", self._archive)

    def _is_archive(self, path: str) -> bool:
        return Path(path).resolve() == self._archive

    async def _watch(self) -> None:
        async for changes in awatch(self._archive.parent):
            if any(self._is_archive(p) for _, p in changes):
                logger.info("Theme archive changed, reloading")
                try:
                    await self._on_change(self._archive)
                except Exception:
                    logger.exception("Error reloading theme archive")
