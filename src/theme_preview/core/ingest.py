import asyncio
import logging
from os import PathLike

from theme_preview.archive.zip_adapter import open_zip_archive
from theme_preview.core.classify import (
    KIND_LAYOUT,
    KIND_LIQUID,
    KIND_SECTION,
    KIND_SNIPPET,
    KIND_TEMPLATE,
    classify,
    is_binary_path,
)
from theme_preview.core.errors import ArchiveError
from theme_preview.core.ports.archive import ArchiveEntry, ArchiveOpener, ArchiveReader
from theme_preview.core.ports.filesystem import FileStore
from theme_preview.models import IngestSummary
from theme_preview.vfs.memory import FileRecord, VirtualFileSystem

logger = logging.getLogger(__name__)

ASSETS_PREFIX = "assets/"


def decode_entry(reader: ArchiveReader, entry: ArchiveEntry) -> FileRecord:
    """Read one archive member and build its record: raw bytes for binary extensions, UTF-8 text otherwise."""
    raw = reader.read(entry)
    content: str | bytes
    if is_binary_path(entry.path):
        content = raw
    else:
        try:
            content = raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ArchiveError(f"Could not decode {entry.path!r} as UTF-8 text: {exc}") from exc
    return FileRecord(path=entry.path, content=content, kind=classify(entry.path))


async def ingest_archive(
    vfs: VirtualFileSystem,
    source: bytes | str | PathLike[str],
    open_archive: ArchiveOpener = open_zip_archive,
) -> IngestSummary:
    """Replace the contents of ``vfs`` with the files of the archive ``source``.

    The VFS is cleared before the archive is opened. Every member is decoded
    in its own task; the first failure cancels the rest and raises
    ``ArchiveError``, leaving the VFS empty. On success the whole file set is
    swapped in at once.
    """
    vfs.clear()
    reader = open_archive(source)
    try:
        entries = [entry for entry in reader.entries() if not entry.is_dir]
        tasks = [asyncio.create_task(asyncio.to_thread(decode_entry, reader, entry)) for entry in entries]
        try:
            records = await asyncio.gather(*tasks)
        except Exception as exc:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            logger.warning("Rejected theme archive: %s", exc)
            if isinstance(exc, ArchiveError):
                raise
            raise ArchiveError(f"Failed to process theme archive: {exc}") from exc
    finally:
        reader.close()

    vfs.replace(records)
    summary = file_counts(vfs)
    logger.info("Processed theme archive: %d files extracted (%d Liquid templates)", summary.total, summary.liquid)
    return summary


def file_counts(vfs: FileStore) -> IngestSummary:
    files = vfs.all_files()
    return IngestSummary(
        total=len(files),
        liquid=len(vfs.get_files_by_kind(KIND_LIQUID)),
        section=len(vfs.get_files_by_kind(KIND_SECTION)),
        snippet=len(vfs.get_files_by_kind(KIND_SNIPPET)),
        template=len(vfs.get_files_by_kind(KIND_TEMPLATE)),
        layout=len(vfs.get_files_by_kind(KIND_LAYOUT)),
        assets=len(vfs.get_files_by_prefix(ASSETS_PREFIX)),
    )
