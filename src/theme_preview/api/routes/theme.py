from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile

from theme_preview.api.dependencies import get_session
from theme_preview.api.schemas import FileInfo
from theme_preview.core.errors import ArchiveError
from theme_preview.models import IngestSummary
from theme_preview.session import PreviewSession

router = APIRouter(tags=["theme"])


@router.post("/theme", response_model=IngestSummary)
async def upload_theme(
    archive: UploadFile = File(...),
    session: PreviewSession = Depends(get_session),
) -> IngestSummary:
    """Replace the loaded theme with the uploaded zip archive."""
    data = await archive.read()
    try:
        return await session.load_archive(data)
    except ArchiveError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc


@router.get("/files", response_model=list[FileInfo])
async def list_files(
    kind: str | None = None,
    prefix: str | None = None,
    session: PreviewSession = Depends(get_session),
) -> list[FileInfo]:
    records = session.vfs.get_files_by_prefix(prefix) if prefix else session.vfs.all_files()
    if kind is not None:
        records = [record for record in records if record.kind == kind]
    return [
        FileInfo(
            path=record.path,
            name=record.name,
            kind=record.kind,
            size=record.size,
            binary=not record.is_text,
        )
        for record in sorted(records, key=lambda r: r.path)
    ]
