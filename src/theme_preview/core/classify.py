"""Path classification rules applied once, when an archive entry is ingested."""

from pathlib import PurePosixPath

KIND_LAYOUT = "layout"
KIND_TEMPLATE = "template"
KIND_SECTION = "section"
KIND_SNIPPET = "snippet"
KIND_LIQUID = "liquid"
KIND_UNKNOWN = "unknown"

# Entries with these extensions are stored as raw bytes; asset serving relies on it.
BINARY_EXTENSIONS: frozenset[str] = frozenset(
    {
        "png",
        "jpg",
        "jpeg",
        "gif",
        "webp",
        "ico",
        "woff",
        "woff2",
        "ttf",
        "eot",
        "otf",
        "mp4",
        "webm",
        "ogg",
        "mp3",
        "wav",
        "pdf",
        "zip",
        "gz",
        "tar",
    }
)

_DIRECTORY_KINDS: tuple[tuple[str, str], ...] = (
    ("layout", KIND_LAYOUT),
    ("templates", KIND_TEMPLATE),
    ("sections", KIND_SECTION),
    ("snippets", KIND_SNIPPET),
)


def extension_of(path: str) -> str:
    """Return the bare lowercase extension of the last path segment, or ``""``."""
    suffix = PurePosixPath(path).suffix
    return suffix[1:].lower() if suffix else ""


def is_binary_path(path: str) -> bool:
    return extension_of(path) in BINARY_EXTENSIONS


def classify(path: str) -> str:
    """Derive the classification tag for an archive path.

    ``.liquid`` files are tagged by the theme directory they live in, at any
    depth; everything else is tagged with its bare extension.
    """
    extension = extension_of(path)
    if extension != "liquid":
        return extension or KIND_UNKNOWN

    directories = path.split("/")[:-1]
    for directory, kind in _DIRECTORY_KINDS:
        if directory in directories:
            return kind
    return KIND_LIQUID
