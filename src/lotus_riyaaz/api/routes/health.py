"""GET /api/v1/health — server health check."""

from __future__ import annotations

from fastapi import APIRouter

from lotus_riyaaz import __version__
from lotus_riyaaz.api.schemas import HealthResponse
from lotus_riyaaz.tala.models import list_taals

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        taals=[t.name for t in list_taals()],
    )
