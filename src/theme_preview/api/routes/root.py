from __future__ import annotations

from typing import Any

from fastapi import APIRouter

router = APIRouter()


@router.get("/")
async def root() -> dict[str, Any]:
    """Root discovery endpoint."""
    return {
        "meta": {
            "title": "Theme Preview API",
            "description": "Upload a Liquid theme archive and preview it from memory.",
            "version": "0.1.0",
        },
        "links": {
            "self": "/",
            "theme": "/theme",
            "files": "/files",
            "statistics": "/statistics",
            "render": "/render",
            "preview": "/preview",
            "assets": "/assets/{path}",
            "openapi": "/openapi.json",
            "docs": "/docs",
        },
    }
