"""ASGI middleware that answers ``/assets/`` requests through the asset bridge."""

from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from theme_preview.bridge.worker import AssetWorker, intercepts
from theme_preview.core.ports.fetcher import NetworkFetcher


class AssetInterceptMiddleware(BaseHTTPMiddleware):
    """Routes asset requests to the ``AssetWorker``; every other path passes through untouched.

    When the worker has nobody to ask, the request falls back to the
    configured upstream fetcher, or to the rest of the application when no
    upstream is configured.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        if not intercepts(request.url.path):
            return await call_next(request)

        worker: AssetWorker = request.app.state.asset_worker
        fetcher: NetworkFetcher | None = request.app.state.fetcher
        fetch = fetcher.fetch if fetcher is not None else call_next
        return await worker.handle(request, fetch)
