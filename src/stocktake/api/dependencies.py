"""Request-scoped accessors for objects wired into app.state."""

from __future__ import annotations

from fastapi import Request

from stocktake.core.config import AppSettings
from stocktake.core.protocols import IReportStore
from stocktake.ingest.pipeline import InventoryPipeline


def get_settings(request: Request) -> AppSettings:
    return request.app.state.settings


def get_store(request: Request) -> IReportStore:
    return request.app.state.store


def get_pipeline(request: Request) -> InventoryPipeline:
    return InventoryPipeline(config=request.app.state.settings.ingest)
