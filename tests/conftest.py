"""Shared fixtures and helpers for tests."""

import io
import zipfile
from collections.abc import Mapping, Sequence
from pathlib import Path

import pytest

from theme_preview.engine.liquid_adapter import LiquidEngine
from theme_preview.vfs import VirtualFileSystem

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Archive helpers
# ---------------------------------------------------------------------------


def build_zip(files: Mapping[str, str | bytes], directories: Sequence[str] = ()) -> bytes:
    """Build an in-memory zip archive (stored, uncompressed) from a path -> content mapping."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w") as archive:
        for directory in directories:
            archive.writestr(directory if directory.endswith("/") else f"{directory}/", "")
        for path, content in files.items():
            archive.writestr(path, content)
    return buffer.getvalue()


THEME_FILES: dict[str, str | bytes] = {
    "layout/theme.liquid": "<html><head>{{ 'app.css' | asset_url | stylesheet_tag }}</head>"
    "<body>{{ content_for_layout }}</body></html>",
    "layout/password.liquid": "<html><body>locked</body></html>",
    "templates/index.liquid": "<h1>{{ shop.name }}</h1>{% section 'header' %}",
    "templates/product.liquid": "<h2>{{ product.title }}</h2><p>{{ product.price | money }}</p>",
    "sections/header.liquid": "<header>{% include 'logo' %}</header>",
    "snippets/logo.liquid": '<img src="{{ \'logo.png\' | asset_url }}">',
    "config/settings_data.json": '{"current": "Default"}',
    "assets/app.css": "body { color: red; }",
    "assets/logo.png": b"\x89PNG\r\n\x1a\nfake-image-bytes",
    "assets/theme.js": "console.log('theme');",
}


@pytest.fixture
def theme_zip() -> bytes:
    return build_zip(THEME_FILES, directories=["layout", "templates", "sections", "snippets", "assets", "config"])


@pytest.fixture
def vfs() -> VirtualFileSystem:
    return VirtualFileSystem()


@pytest.fixture
def liquid_engine() -> LiquidEngine:
    return LiquidEngine()


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "THEME_PREVIEW_ARCHIVE",
        "THEME_PREVIEW_UPSTREAM_URL",
        "THEME_PREVIEW_ASSET_TIMEOUT",
        "THEME_PREVIEW_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def make_zip() -> object:
    return build_zip
