from typing import Protocol

from starlette.requests import Request
from starlette.responses import Response


class NetworkFetcher(Protocol):
    async def fetch(self, request: Request) -> Response: ...

    async def aclose(self) -> None: ...
