import os

_DEFAULT_ASSET_TIMEOUT = 5.0


def get_asset_timeout() -> float | None:
    """Seconds the asset worker waits for a client reply; ``0`` or less waits forever."""
    raw = os.getenv("THEME_PREVIEW_ASSET_TIMEOUT")
    if not raw:
        return _DEFAULT_ASSET_TIMEOUT
    try:
        value = float(raw)
    except ValueError:
        return _DEFAULT_ASSET_TIMEOUT
    return value if value > 0 else None


def get_upstream_url() -> str | None:
    return os.getenv("THEME_PREVIEW_UPSTREAM_URL") or None


def get_startup_archive() -> str | None:
    return os.getenv("THEME_PREVIEW_ARCHIVE") or None


def get_log_level() -> str:
    return os.getenv("THEME_PREVIEW_LOG_LEVEL", "INFO").upper()
