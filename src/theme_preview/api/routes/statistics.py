from __future__ import annotations

from fastapi import APIRouter, Depends

from theme_preview.api.dependencies import get_session
from theme_preview.models import IngestSummary
from theme_preview.session import PreviewSession

router = APIRouter(tags=["statistics"])


@router.get("/statistics", response_model=IngestSummary)
async def statistics(session: PreviewSession = Depends(get_session)) -> IngestSummary:
    """File counts of the loaded theme, by classification."""
    return session.summary()
