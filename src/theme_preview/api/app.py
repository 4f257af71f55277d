from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from theme_preview.api.lifespan import lifespan
from theme_preview.api.middleware import AssetInterceptMiddleware
from theme_preview.api.routes.health import router as health_router
from theme_preview.api.routes.preview import router as preview_router
from theme_preview.api.routes.root import router as root_router
from theme_preview.api.routes.statistics import router as statistics_router
from theme_preview.api.routes.theme import router as theme_router
from theme_preview.bridge.httpx_fetcher import HttpxFetcher
from theme_preview.bridge.worker import AssetWorker
from theme_preview.config import get_asset_timeout, get_startup_archive, get_upstream_url
from theme_preview.core.ports.fetcher import NetworkFetcher
from theme_preview.session import PreviewSession


def create_app(
    session: PreviewSession | None = None,
    archive: str | Path | None = None,
    watch: bool = False,
    fetcher: NetworkFetcher | None = None,
) -> FastAPI:
    app = FastAPI(
        title="Theme Preview API",
        description="Upload a Liquid theme archive and preview it from memory.",
        version="0.1.0",
        lifespan=lifespan,
    )

    if fetcher is None:
        upstream = get_upstream_url()
        fetcher = HttpxFetcher(upstream) if upstream else None

    app.state.session = session if session is not None else PreviewSession()
    app.state.asset_worker = AssetWorker(timeout=get_asset_timeout())
    app.state.fetcher = fetcher
    app.state.archive = archive if archive is not None else get_startup_archive()
    app.state.watch = watch

    # Stands in for the intercepting worker: /assets/* never reaches the routers
    app.add_middleware(AssetInterceptMiddleware)

    app.include_router(root_router, include_in_schema=False)
    app.include_router(health_router, include_in_schema=False)
    app.include_router(theme_router)
    app.include_router(statistics_router)
    app.include_router(preview_router)

    return app
