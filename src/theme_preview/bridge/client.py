from __future__ import annotations

import asyncio
import contextlib
import logging
from collections.abc import Sequence
from pathlib import PurePosixPath
from typing import Any

from theme_preview.bridge.channel import ChannelClosedError, MessagePort
from theme_preview.core.ports.filesystem import FileStore
from theme_preview.models import AssetRequest, AssetResponse

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "text/plain"

_CONTENT_TYPES: dict[str, str] = {
    ".css": "text/css",
    ".js": "application/javascript",
    ".json": "application/json",
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}


def content_type_for(path: str) -> str:
    return _CONTENT_TYPES.get(PurePosixPath(path).suffix.lower(), DEFAULT_CONTENT_TYPE)


def build_asset_response(vfs: FileStore, request: AssetRequest) -> AssetResponse:
    path = request.path[1:] if request.path.startswith("/") else request.path
    record = vfs.get_file(path)
    if record is None:
        logger.debug("Asset not found in VFS: %s", path)
        return AssetResponse(found=False)
    content = record.content if isinstance(record.content, bytes) else record.content.encode("utf-8")
    return AssetResponse(found=True, content=content, content_type=content_type_for(path))


class AssetClient:
    """Session-side end of the asset bridge.

    Receives ``AssetRequest`` messages posted by the worker, answers each one
    from the VFS on the port transferred with it, and runs as a background
    task between ``start`` and ``stop``.
    """

    def __init__(self, vfs: FileStore) -> None:
        self._vfs = vfs
        self._inbox: asyncio.Queue[tuple[Any, tuple[MessagePort, ...]]] = asyncio.Queue()
        self._task: asyncio.Task[None] | None = None

    @property
    def running(self) -> bool:
        return self._task is not None

    def post_message(self, message: Any, transfer: Sequence[MessagePort] = ()) -> None:
        self._inbox.put_nowait((message, tuple(transfer)))

    async def start(self) -> None:
        if self._task is not None:
            return
        self._task = asyncio.create_task(self._listen())
        logger.info("Asset client started")

    async def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await self._task
        self._task = None
        logger.info("Asset client stopped")

    async def _listen(self) -> None:
        while True:
            message, ports = await self._inbox.get()
            try:
                self.handle_message(message, ports)
            except Exception:
                logger.exception("Error answering asset request")

    def handle_message(self, message: Any, ports: Sequence[MessagePort]) -> None:
        if not isinstance(message, AssetRequest) or not ports:
            logger.debug("Ignoring message without reply port or of unknown type: %r", message)
            return
        reply = build_asset_response(self._vfs, message)
        try:
            ports[0].post_message(reply)
        except ChannelClosedError:
            logger.debug("Reply port closed before asset %s was answered", message.path)
