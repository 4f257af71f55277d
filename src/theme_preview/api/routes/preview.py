from __future__ import annotations

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from theme_preview.api.dependencies import get_session
from theme_preview.models import RenderRequest
from theme_preview.session import PreviewSession, RenderOutcome

router = APIRouter(tags=["preview"])

# Rendered themes may run their own scripts but get no further privileges.
PREVIEW_CSP = "sandbox allow-same-origin allow-scripts"


def _html_response(outcome: RenderOutcome) -> HTMLResponse:
    return HTMLResponse(
        content=outcome.html,
        headers={
            "Content-Security-Policy": PREVIEW_CSP,
            "X-Render-Generation": str(outcome.generation),
        },
    )


@router.post("/render", response_class=HTMLResponse)
async def render(body: RenderRequest, session: PreviewSession = Depends(get_session)) -> HTMLResponse:
    return _html_response(await session.render(body))


@router.get("/preview", response_class=HTMLResponse)
async def preview(template: str = "index", session: PreviewSession = Depends(get_session)) -> HTMLResponse:
    return _html_response(await session.render(RenderRequest(template=template)))
