"""Tests for the watchfiles-based archive watcher."""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, patch

import pytest

from theme_preview.watcher.watchfiles_adapter import ArchiveWatcher


class TestArchiveWatcher:
    @pytest.mark.asyncio
    async def test_start_creates_task(self, tmp_path: Path) -> None:
        watcher = ArchiveWatcher(tmp_path / "theme.zip", AsyncMock())

        with patch("theme_preview.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _empty_async_iter()
            await watcher.start()
            assert watcher._task is not None
            await asyncio.sleep(0)
            await watcher.stop()
            assert watcher._task is None

        mock_awatch.assert_called_once_with(tmp_path.resolve())

    @pytest.mark.asyncio
    async def test_stop_without_start_is_noop(self, tmp_path: Path) -> None:
        watcher = ArchiveWatcher(tmp_path / "theme.zip", AsyncMock())
        await watcher.stop()

    @pytest.mark.asyncio
    async def test_double_start_is_noop(self, tmp_path: Path) -> None:
        watcher = ArchiveWatcher(tmp_path / "theme.zip", AsyncMock())

        with patch("theme_preview.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _empty_async_iter()
            await watcher.start()
            task1 = watcher._task
            await watcher.start()
            assert watcher._task is task1
            await watcher.stop()

    @pytest.mark.asyncio
    async def test_callback_fires_for_archive_change(self, tmp_path: Path) -> None:
        archive = tmp_path / "theme.zip"
        callback = AsyncMock()
        watcher = ArchiveWatcher(archive, callback)
        changes = {(2, str(archive)), (1, str(tmp_path / "notes.txt"))}

        with patch("theme_preview.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _single_change_iter(changes)
            await watcher.start()
            await asyncio.sleep(0.05)
            await watcher.stop()

        callback.assert_called_once_with(archive.resolve())

    @pytest.mark.asyncio
    async def test_callback_not_called_for_other_files(self, tmp_path: Path) -> None:
        callback = AsyncMock()
        watcher = ArchiveWatcher(tmp_path / "theme.zip", callback)
        changes = {(1, str(tmp_path / "other.zip")), (2, str(tmp_path / "theme.zip.part"))}

        with patch("theme_preview.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _single_change_iter(changes)
            await watcher.start()
            await asyncio.sleep(0.05)
            await watcher.stop()

        callback.assert_not_called()

    @pytest.mark.asyncio
    async def test_failing_callback_keeps_watching(self, tmp_path: Path) -> None:
        archive = tmp_path / "theme.zip"
        callback = AsyncMock(side_effect=RuntimeError("boom"))
        watcher = ArchiveWatcher(archive, callback)

        with patch("theme_preview.watcher.watchfiles_adapter.awatch") as mock_awatch:
            mock_awatch.return_value = _single_change_iter({(2, str(archive))})
            await watcher.start()
            await asyncio.sleep(0.05)
            assert watcher._task is not None
            assert not watcher._task.done()
            await watcher.stop()

        callback.assert_called_once()


async def _empty_async_iter() -> AsyncIterator[Any]:
    """Async iterator that never yields, just blocks until cancelled."""
    try:
        await asyncio.sleep(3600)
    except asyncio.CancelledError:
        return
    yield  # pragma: no cover


async def _single_change_iter(changes: set[tuple[int, str]]) -> AsyncIterator[set[tuple[int, str]]]:
    """Async iterator that yields one set of changes then blocks."""
    yield changes
    try:
        await asyncio.sleep(3600)
    except asyncio.CancelledError:
        return
