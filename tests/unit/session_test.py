"""Tests for PreviewSession: archive loading and render generations."""

from __future__ import annotations

import asyncio
import threading
from collections.abc import Mapping
from typing import Any

import pytest

from theme_preview.core.errors import ArchiveError
from theme_preview.models import RenderRequest
from theme_preview.session import PreviewSession


class _GatedEngine:
    """Echoes the source; blocks on ``gate`` while rendering the source ``slow``."""

    def __init__(self) -> None:
        self.gate = threading.Event()

    def render(self, source: str, context: Mapping[str, Any], includes: Any, sections: Any) -> str:
        if source == "slow":
            self.gate.wait(timeout=5)
        return source


@pytest.mark.asyncio
async def test_load_and_render_theme(theme_zip: bytes) -> None:
    session = PreviewSession()

    summary = await session.load_archive(theme_zip)
    outcome = await session.render(RenderRequest(template="index"))

    assert session.loaded is True
    assert summary.total == 10
    assert outcome.html == (
        '<html><head><link href="assets/app.css" rel="stylesheet" type="text/css" media="all" /></head>'
        '<body><h1>Demo Store</h1><header><img src="assets/logo.png"></header></body></html>'
    )
    assert session.latest == outcome


@pytest.mark.asyncio
async def test_failed_load_leaves_session_empty(theme_zip: bytes) -> None:
    session = PreviewSession()
    await session.load_archive(theme_zip)

    with pytest.raises(ArchiveError):
        await session.load_archive(b"garbage")

    assert session.loaded is False
    assert len(session.vfs) == 0
    assert session.summary().total == 0


@pytest.mark.asyncio
async def test_superseded_render_does_not_replace_newer_result() -> None:
    engine = _GatedEngine()
    session = PreviewSession(engine=engine)
    session.vfs.add_file("templates/slow.liquid", "slow", "template")
    session.vfs.add_file("templates/fast.liquid", "fast", "template")

    slow_task = asyncio.create_task(session.render(RenderRequest(template="slow")))
    await asyncio.sleep(0.05)
    fast = await session.render(RenderRequest(template="fast"))
    engine.gate.set()
    slow = await slow_task

    assert slow.html == "slow"
    assert session.is_current(fast) is True
    assert session.is_current(slow) is False
    assert session.latest == fast


@pytest.mark.asyncio
async def test_mock_data_override() -> None:
    session = PreviewSession()
    session.vfs.add_file("templates/index.liquid", "{{ shop.name }}", "template")
    session.update_mock_data({"shop": {"name": "Custom Shop"}})

    outcome = await session.render(RenderRequest(template="index"))

    assert outcome.html == "Custom Shop"
