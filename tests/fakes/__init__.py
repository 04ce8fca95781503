"""Shared test doubles — re-export memory backends."""

from __future__ import annotations

from stocktake.persistence.memory_backend import MemoryReportStore

__all__ = ["MemoryReportStore"]
