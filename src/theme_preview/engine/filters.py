"""Storefront filters that themes expect from the hosting platform."""

from typing import Any


def asset_url(value: Any) -> str:
    return f"assets/{value}"


def img_url(value: Any, size: str = "medium") -> str:
    return str(value) if value else ""


def money(value: Any) -> str:
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return ""
    return f"${amount:.2f}"


def stylesheet_tag(url: Any) -> str:
    return f'<link href="{url}" rel="stylesheet" type="text/css" media="all" />'


def script_tag(url: Any) -> str:
    return f'<script src="{url}" type="text/javascript"></script>'


STOREFRONT_FILTERS = {
    "asset_url": asset_url,
    "img_url": img_url,
    "money": money,
    "stylesheet_tag": stylesheet_tag,
    "script_tag": script_tag,
}
