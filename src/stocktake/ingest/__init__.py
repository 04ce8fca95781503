"""Inventory ingest: clean → parse → summarize."""

from __future__ import annotations

from stocktake.ingest.cleaner import clean
from stocktake.ingest.csv_io import read_rows, write_products
from stocktake.ingest.parser import parse
from stocktake.ingest.pipeline import InventoryPipeline
from stocktake.ingest.summarizer import summarize

__all__ = ["InventoryPipeline", "clean", "parse", "read_rows", "summarize", "write_products"]
