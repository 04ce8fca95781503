"""Pluggable report storage behind the IReportStore protocol."""

from __future__ import annotations

from stocktake.core.config import AppSettings
from stocktake.core.protocols import IReportStore
from stocktake.persistence.local_backend import LocalReportStore
from stocktake.persistence.memory_backend import MemoryReportStore


def create_store(settings: AppSettings | None = None) -> IReportStore:
    """Create the report store selected by ``settings.storage.backend``."""
    if settings is None:
        settings = AppSettings()

    if settings.storage.backend == "memory":
        return MemoryReportStore()
    return LocalReportStore(root=settings.storage.output_dir)
