"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from stocktake.api.dependencies import get_settings
from stocktake.core.config import AppSettings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "healthy"}


@router.get("/ready")
async def ready(settings: AppSettings = Depends(get_settings)) -> dict[str, str]:
    return {"status": "ready", "storage": settings.storage.backend}
