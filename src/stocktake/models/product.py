"""Product model: the typed inventory record used after parsing."""

from __future__ import annotations

from pydantic import BaseModel

from stocktake.core.types import AggregationKey


class Product(BaseModel):
    """Quantity of one product code held at a bay/shelf location."""

    code: str
    quantity: int
    bay: str
    shelf: int

    model_config = {"frozen": True}

    @property
    def location(self) -> str:
        """Location in the same "<bay> <shelf>" form it is read from."""
        return f"{self.bay} {self.shelf}"

    @property
    def aggregation_key(self) -> AggregationKey:
        """Composite identity of the inventory slot: code, bay and shelf."""
        return f"{self.code},{self.bay} {self.shelf}"
