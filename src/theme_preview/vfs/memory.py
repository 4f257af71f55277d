import threading
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class FileRecord:
    path: str
    content: str | bytes
    kind: str
    name: str = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "name", self.path.rsplit("/", 1)[-1])

    @property
    def is_text(self) -> bool:
        return isinstance(self.content, str)

    @property
    def size(self) -> int:
        if isinstance(self.content, bytes):
            return len(self.content)
        return len(self.content.encode("utf-8"))


class FileSnapshot:
    """Read-only view of the file set as it was when the snapshot was taken."""

    def __init__(self, files: Mapping[str, FileRecord]) -> None:
        self._files = files

    def get_file(self, path: str) -> FileRecord | None:
        return self._files.get(path)

    def get_files_by_kind(self, kind: str) -> list[FileRecord]:
        return [record for record in self._files.values() if record.kind == kind]

    def get_files_by_prefix(self, prefix: str) -> list[FileRecord]:
        return [record for record in self._files.values() if record.path.startswith(prefix)]

    def all_files(self) -> list[FileRecord]:
        return list(self._files.values())

    def snapshot(self) -> "FileSnapshot":
        return self

    def __len__(self) -> int:
        return len(self._files)


class VirtualFileSystem:
    """Flat path -> ``FileRecord`` store standing in for a theme directory.

    There are no directory objects; hierarchy only exists in the ``/``
    separated paths. The file dict is never mutated in place: every write
    swaps in a new dict under the lock, so a ``snapshot`` keeps seeing one
    complete file set however the store changes afterwards.
    """

    def __init__(self) -> None:
        self._files: dict[str, FileRecord] = {}
        self._lock = threading.RLock()

    def add_file(self, path: str, content: str | bytes, kind: str) -> FileRecord:
        record = FileRecord(path=path, content=content, kind=kind)
        with self._lock:
            self._files = {**self._files, path: record}
        return record

    def get_file(self, path: str) -> FileRecord | None:
        return self._files.get(path)

    def get_files_by_kind(self, kind: str) -> list[FileRecord]:
        return self.snapshot().get_files_by_kind(kind)

    def get_files_by_prefix(self, prefix: str) -> list[FileRecord]:
        return self.snapshot().get_files_by_prefix(prefix)

    def all_files(self) -> list[FileRecord]:
        return self.snapshot().all_files()

    def snapshot(self) -> FileSnapshot:
        with self._lock:
            return FileSnapshot(self._files)

    def replace(self, records: Iterable[FileRecord]) -> None:
        files = {record.path: record for record in records}
        with self._lock:
            self._files = files

    def clear(self) -> None:
        with self._lock:
            self._files = {}

    def __len__(self) -> int:
        return len(self._files)

    def __contains__(self, path: object) -> bool:
        return path in self._files
