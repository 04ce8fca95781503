"""Merge duplicate inventory slots and order them by location."""

from __future__ import annotations

from collections.abc import Iterable

from stocktake.core.types import AggregationKey
from stocktake.models.product import Product


def sort_by_location(products: Iterable[Product]) -> list[Product]:
    """Stable sort by bay (lexicographic) then shelf (numeric)."""
    return sorted(products, key=lambda p: (p.bay, p.shelf))


def summarize(products: Iterable[Product]) -> list[Product]:
    """Sum quantities of products sharing code, bay and shelf.

    The result is ordered by (bay, shelf); products in the same location
    keep the order in which their code first appears in the input.
    """
    summary: dict[AggregationKey, Product] = {}
    for product in sort_by_location(products):
        key = product.aggregation_key
        existing = summary.get(key)
        if existing is None:
            summary[key] = product
        else:
            summary[key] = existing.model_copy(
                update={"quantity": existing.quantity + product.quantity}
            )
    return list(summary.values())
