"""Type aliases used across the Stocktake package."""

from __future__ import annotations

from collections.abc import Sequence

RawRow = Sequence[str]
CleanRow = list[str]
AggregationKey = str
