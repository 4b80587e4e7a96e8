from fastapi import APIRouter, Depends, Response, status

from filetable.api.dependencies import get_file_source
from filetable.api.schemas import HealthResponse, ReadinessResponse
from filetable.core.ports.file_source import FileSource

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
    source: FileSource = Depends(get_file_source),
) -> ReadinessResponse:
    """Readiness probe: can the upstream file API list files?"""
    if await source.ping():
        return ReadinessResponse(status="ok", upstream="up")
    response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return ReadinessResponse(status="degraded", upstream="down")
