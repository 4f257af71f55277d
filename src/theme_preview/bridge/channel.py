"""Point-to-point message channels between the asset worker and the session.

A ``MessageChannel`` owns two entangled ``MessagePort`` objects: whatever is
posted on one port is received on the other. The worker keeps one end and
hands the other to the client together with the request, so every reply has
exactly one possible destination.
"""

from __future__ import annotations

import asyncio
from typing import Any


class ChannelClosedError(RuntimeError):
    pass


class MessagePort:
    def __init__(self) -> None:
        self._inbox: asyncio.Queue[Any] = asyncio.Queue()
        self._peer: MessagePort | None = None
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def post_message(self, message: Any) -> None:
        if self._closed or self._peer is None:
            raise ChannelClosedError("Cannot post on a closed message port")
        if not self._peer._closed:
            self._peer._inbox.put_nowait(message)

    async def receive(self) -> Any:
        if self._closed:
            raise ChannelClosedError("Cannot receive on a closed message port")
        return await self._inbox.get()

    def close(self) -> None:
        self._closed = True


class MessageChannel:
    def __init__(self) -> None:
        self.port1 = MessagePort()
        self.port2 = MessagePort()
        self.port1._peer = self.port2
        self.port2._peer = self.port1
