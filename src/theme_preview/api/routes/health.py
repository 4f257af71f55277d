from fastapi import APIRouter, Depends, Response, status

from theme_preview.api.dependencies import get_session
from theme_preview.api.schemas import HealthResponse, ReadinessResponse
from theme_preview.session import PreviewSession

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse()


@router.get("/healthz/live", response_model=HealthResponse)
async def liveness() -> HealthResponse:
    """Liveness probe: is the process alive?"""
    return HealthResponse()


@router.get("/healthz/ready", response_model=ReadinessResponse)
async def readiness(
    response: Response,
    session: PreviewSession = Depends(get_session),
) -> ReadinessResponse:
    """Readiness probe: has a theme been loaded?"""
    if session.loaded:
        return ReadinessResponse(status="ok", theme="loaded")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", theme="missing")
