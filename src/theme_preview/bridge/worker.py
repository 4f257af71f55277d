from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable

from starlette.requests import Request
from starlette.responses import PlainTextResponse, Response

from theme_preview.bridge.channel import MessageChannel, MessagePort
from theme_preview.bridge.client import AssetClient
from theme_preview.models import AssetRequest, AssetResponse

logger = logging.getLogger(__name__)

ASSETS_PATH_PREFIX = "/assets/"
ASSET_NOT_FOUND_BODY = "Asset not found"

Fetch = Callable[[Request], Awaitable[Response]]


def intercepts(path: str) -> bool:
    return path.startswith(ASSETS_PATH_PREFIX)


def to_http_response(reply: AssetResponse) -> Response:
    if not reply.found:
        return PlainTextResponse(ASSET_NOT_FOUND_BODY, status_code=404)
    return Response(
        content=reply.content or b"",
        status_code=200,
        headers={"content-type": reply.content_type or "text/plain"},
    )


async def _await_reply(port: MessagePort) -> AssetResponse:
    while True:
        message = await port.receive()
        if isinstance(message, AssetResponse):
            return message


class AssetWorker:
    """Intercepting side of the asset bridge.

    The worker cannot see the VFS. For every ``/assets/`` request it opens a
    fresh ``MessageChannel``, posts an ``AssetRequest`` to the first
    registered client and turns the single reply into an HTTP response. With
    no client registered, or no reply within ``timeout`` seconds, the request
    falls through to ``fetch``.
    """

    def __init__(self, timeout: float | None = None) -> None:
        self._clients: list[AssetClient] = []
        self._timeout = timeout

    @property
    def clients(self) -> list[AssetClient]:
        return list(self._clients)

    def register(self, client: AssetClient) -> None:
        if client not in self._clients:
            self._clients.append(client)

    def unregister(self, client: AssetClient) -> None:
        if client in self._clients:
            self._clients.remove(client)

    async def request_asset(self, path: str) -> AssetResponse | None:
        """Ask a client for ``path``; ``None`` when nobody answered."""
        if not self._clients:
            logger.debug("No asset client registered for %s", path)
            return None

        channel = MessageChannel()
        self._clients[0].post_message(AssetRequest(path=path.lstrip("/")), transfer=[channel.port2])
        try:
            return await asyncio.wait_for(_await_reply(channel.port1), self._timeout)
        except asyncio.TimeoutError:
            logger.warning("Asset client did not answer for %s within %.1fs", path, self._timeout)
            return None
        finally:
            channel.port1.close()

    async def handle(self, request: Request, fetch: Fetch) -> Response:
        reply = await self.request_asset(request.url.path)
        if reply is None:
            return await fetch(request)
        return to_http_response(reply)
