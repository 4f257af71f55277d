from __future__ import annotations

import io
import zipfile
from collections.abc import Iterator
from os import PathLike

from theme_preview.core.errors import ArchiveError
from theme_preview.core.ports.archive import ArchiveEntry


class ZipArchiveReader:
    """``ArchiveReader`` over a zip container held in memory or on disk.

    Member reads may run from several threads at once; ``zipfile`` serializes
    access to the underlying file object.
    """

    def __init__(self, archive: zipfile.ZipFile) -> None:
        self._zip = archive

    def entries(self) -> Iterator[ArchiveEntry]:
        for info in self._zip.infolist():
            yield ArchiveEntry(path=info.filename, is_dir=info.is_dir())

    def read(self, entry: ArchiveEntry) -> bytes:
        try:
            return self._zip.read(entry.path)
        except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError, EOFError, NotImplementedError) as exc:
            raise ArchiveError(f"Could not read {entry.path!r} from archive: {exc}") from exc

    def close(self) -> None:
        self._zip.close()


def open_zip_archive(source: bytes | str | PathLike[str]) -> ZipArchiveReader:
    """Open ``source`` (raw bytes or a filesystem path) as a zip archive."""
    fileobj = io.BytesIO(source) if isinstance(source, bytes) else source
    try:
        archive = zipfile.ZipFile(fileobj)
    except (zipfile.BadZipFile, OSError, EOFError) as exc:
        raise ArchiveError(f"Could not open theme archive: {exc}") from exc
    return ZipArchiveReader(archive)
