"""Health check endpoint."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from svglayout import __version__
from svglayout.config import Settings
from svglayout.dependencies import get_settings
from svglayout.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(settings: Settings = Depends(get_settings)) -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        env=settings.svglayout_env,
        dynamic_dim_threshold=settings.dynamic_dim_threshold,
    )
