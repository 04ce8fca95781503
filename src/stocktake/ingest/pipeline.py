"""InventoryPipeline — clean, parse and summarize one inventory file."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import BinaryIO

from stocktake.core.config import IngestConfig
from stocktake.core.logging_config import get_logger
from stocktake.core.types import RawRow
from stocktake.ingest.cleaner import clean
from stocktake.ingest.csv_io import read_rows
from stocktake.ingest.parser import parse
from stocktake.ingest.summarizer import summarize
from stocktake.models.report import InventoryReport

logger = get_logger(__name__)


class InventoryPipeline:
    """Runs the ingest stages in sequence.

    Ingest settings are injected at construction time; each call is an
    independent, single-pass run with no state carried between calls.
    """

    def __init__(self, *, config: IngestConfig | None = None) -> None:
        self._config = config or IngestConfig()

    def run(self, rows: Sequence[RawRow]) -> InventoryReport:
        """Summarize already-decoded rows.

        Raises:
            ParseError: If any cleaned row cannot be parsed.
        """
        first_line = 1
        data_rows = rows
        if self._config.has_header:
            data_rows = rows[1:]
            first_line = 2

        cleaned = clean(data_rows, first_line=first_line)
        products = parse(cleaned.rows, line_numbers=cleaned.line_numbers)
        summary = summarize(products)

        report = InventoryReport(
            products=summary, skipped=cleaned.skipped, rows_read=len(data_rows)
        )
        logger.info(
            "inventory_summarized",
            rows_read=report.rows_read,
            rows_skipped=len(report.skipped),
            products=len(report.products),
            total_quantity=report.total_quantity,
        )
        return report

    def process_stream(self, stream: BinaryIO) -> InventoryReport:
        """Decode and summarize a CSV stream. The caller keeps ownership of ``stream``."""
        rows = read_rows(
            stream, encoding=self._config.encoding, delimiter=self._config.delimiter
        )
        return self.run(rows)

    def process_file(self, path: str | Path) -> InventoryReport:
        """Open, summarize and close a CSV file on disk."""
        with open(path, "rb") as stream:
            return self.process_stream(stream)
