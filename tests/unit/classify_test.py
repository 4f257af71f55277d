"""Tests for path classification and binary detection."""

from __future__ import annotations

import pytest

from theme_preview.core.classify import BINARY_EXTENSIONS, classify, extension_of, is_binary_path


class TestClassify:
    @pytest.mark.parametrize(
        ("path", "kind"),
        [
            ("sections/foo.liquid", "section"),
            ("snippets/bar.liquid", "snippet"),
            ("layout/theme.liquid", "layout"),
            ("templates/index.liquid", "template"),
            ("assets/app.css", "css"),
            ("assets/logo.PNG", "png"),
            ("my-theme/sections/foo.liquid", "section"),
            ("templates/customers/account.liquid", "template"),
            ("misc/other.liquid", "liquid"),
            ("other.liquid", "liquid"),
            ("LICENSE", "unknown"),
            ("config/settings_schema.json", "json"),
        ],
    )
    def test_classification(self, path: str, kind: str) -> None:
        assert classify(path) == kind

    def test_directory_only_matches_whole_segments(self) -> None:
        assert classify("my-sections/foo.liquid") == "liquid"

    def test_is_deterministic(self) -> None:
        assert classify("sections/foo.liquid") == classify("sections/foo.liquid")


class TestBinaryDetection:
    @pytest.mark.parametrize("path", ["assets/a.png", "assets/font.woff2", "docs/manual.PDF", "assets/clip.mp4"])
    def test_binary_extensions(self, path: str) -> None:
        assert is_binary_path(path) is True

    @pytest.mark.parametrize("path", ["assets/app.css", "assets/icon.svg", "layout/theme.liquid", "Makefile"])
    def test_text_extensions(self, path: str) -> None:
        assert is_binary_path(path) is False

    def test_table_is_exactly_the_documented_set(self) -> None:
        assert BINARY_EXTENSIONS == {
            "png", "jpg", "jpeg", "gif", "webp", "ico",
            "woff", "woff2", "ttf", "eot", "otf",
            "mp4", "webm", "ogg", "mp3", "wav",
            "pdf", "zip", "gz", "tar",
        }  # fmt: skip

    def test_extension_of_without_suffix(self) -> None:
        assert extension_of("assets/README") == ""
