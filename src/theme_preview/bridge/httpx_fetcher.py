from __future__ import annotations

import logging

import httpx
from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

logger = logging.getLogger(__name__)

_DROPPED_REQUEST_HEADERS = frozenset({"host", "content-length", "connection", "accept-encoding"})
_KEPT_RESPONSE_HEADERS = frozenset({"content-type", "cache-control", "etag", "last-modified"})


class HttpxFetcher:
    """Network fallback for intercepted requests, proxied to an upstream origin.

    Implements the ``NetworkFetcher`` protocol.
    """

    def __init__(self, base_url: str, client: httpx.AsyncClient | None = None) -> None:
        self._client = client or httpx.AsyncClient(base_url=base_url, follow_redirects=True)

    async def fetch(self, request: Request) -> Response:
        url = request.url.path
        if request.url.query:
            url = f"{url}?{request.url.query}"
        headers = {k: v for k, v in request.headers.items() if k.lower() not in _DROPPED_REQUEST_HEADERS}
        try:
            upstream = await self._client.request(request.method, url, headers=headers, content=await request.body())
        except httpx.HTTPError as exc:
            logger.warning("Upstream fetch of %s failed: %s", url, exc)
            return PlainTextResponse("Upstream fetch failed", status_code=502)
        kept = {k: v for k, v in upstream.headers.items() if k.lower() in _KEPT_RESPONSE_HEADERS}
        return Response(content=upstream.content, status_code=upstream.status_code, headers=kept)

    async def aclose(self) -> None:
        await self._client.aclose()
