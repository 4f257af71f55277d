from typing import Protocol

from theme_preview.vfs.memory import FileRecord


class FileStore(Protocol):
    """Read-only view of the virtual file system used by renderers and the asset client."""

    def get_file(self, path: str) -> FileRecord | None: ...

    def get_files_by_kind(self, kind: str) -> list[FileRecord]: ...

    def get_files_by_prefix(self, prefix: str) -> list[FileRecord]: ...

    def all_files(self) -> list[FileRecord]: ...

    def snapshot(self) -> "FileStore":
        """A view that no later write to the store can change."""
        ...
