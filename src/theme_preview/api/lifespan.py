from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI

from theme_preview.bridge.worker import AssetWorker
from theme_preview.core.errors import ArchiveError
from theme_preview.core.ports.fetcher import NetworkFetcher
from theme_preview.session import PreviewSession
from theme_preview.watcher.watchfiles_adapter import ArchiveWatcher

logger = logging.getLogger(__name__)


async def _load(session: PreviewSession, archive: Path) -> None:
    try:
        await session.load_archive(archive)
    except ArchiveError:
        logger.exception("Could not load theme archive %s", archive)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    session: PreviewSession = app.state.session
    worker: AssetWorker = app.state.asset_worker
    fetcher: NetworkFetcher | None = app.state.fetcher
    archive = Path(app.state.archive) if app.state.archive else None

    if archive is not None:
        await _load(session, archive)

    watcher: ArchiveWatcher | None = None
    if archive is not None and app.state.watch:

        async def _reload(path: Path) -> None:
            await _load(session, path)

        watcher = ArchiveWatcher(archive, _reload)
        await watcher.start()

    await session.asset_client.start()
    worker.register(session.asset_client)
    try:
        yield
    finally:
        worker.unregister(session.asset_client)
        await session.asset_client.stop()
        if watcher is not None:
            await watcher.stop()
        if fetcher is not None:
            await fetcher.aclose()
