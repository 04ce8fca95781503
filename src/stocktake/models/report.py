"""Cleaning diagnostics and pipeline result models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from stocktake.core.types import CleanRow
from stocktake.models.product import Product


class SkippedRow(BaseModel):
    """A raw row dropped by the cleaner."""

    line: int
    raw: list[str]
    field_count: int  # surviving fields after filtering
    reason: str = ""


class CleanResult(BaseModel):
    """Cleaner output: surviving rows, their source lines, and skip diagnostics."""

    rows: list[CleanRow] = Field(default_factory=list)
    line_numbers: list[int] = Field(default_factory=list)
    skipped: list[SkippedRow] = Field(default_factory=list)


class InventoryReport(BaseModel):
    """Summarized inventory for one ingested file."""

    products: list[Product] = Field(default_factory=list)
    skipped: list[SkippedRow] = Field(default_factory=list)
    rows_read: int = 0

    @property
    def total_quantity(self) -> int:
        return sum(p.quantity for p in self.products)
