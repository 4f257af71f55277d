from __future__ import annotations

from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str = "ok"


class ReadinessResponse(BaseModel):
    status: str = "ok"
    theme: str = "loaded"


class FileInfo(BaseModel):
    path: str
    name: str
    kind: str
    size: int
    binary: bool
