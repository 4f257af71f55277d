from collections.abc import Callable, Iterator
from dataclasses import dataclass
from os import PathLike
from typing import Protocol


@dataclass(frozen=True)
class ArchiveEntry:
    path: str
    is_dir: bool


class ArchiveReader(Protocol):
    """A compressed container opened for reading."""

    def entries(self) -> Iterator[ArchiveEntry]: ...

    def read(self, entry: ArchiveEntry) -> bytes: ...

    def close(self) -> None: ...


ArchiveOpener = Callable[[bytes | str | PathLike[str]], ArchiveReader]
