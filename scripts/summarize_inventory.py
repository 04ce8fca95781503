"""Summarize an inventory CSV from the command line.

Usage:
    python scripts/summarize_inventory.py stock.csv --output sorted_products.csv
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from stocktake.core.config import IngestConfig
from stocktake.core.exceptions import StocktakeError
from stocktake.core.logging_config import configure_logging
from stocktake.ingest.csv_io import write_products
from stocktake.ingest.pipeline import InventoryPipeline
from stocktake.models.report import InventoryReport


def format_table(report: InventoryReport) -> str:
    """Render products as an aligned Code / Quantity / Location table."""
    rows = [("Code", "Quantity", "Location")]
    rows += [(p.code, str(p.quantity), p.location) for p in report.products]
    widths = [max(len(row[i]) for row in rows) for i in range(3)]
    lines = ["  ".join(cell.ljust(w) for cell, w in zip(row, widths)).rstrip() for row in rows]
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Sort and summarize a warehouse inventory CSV")
    parser.add_argument("input", type=Path, help="Inventory CSV with code, quantity, location columns")
    parser.add_argument("--output", type=Path, default=None, help="Write the summary CSV here")
    parser.add_argument("--no-header", action="store_true", help="First row is data, not a header")
    parser.add_argument("--delimiter", default=",", help="Field delimiter (default ',')")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default WARNING)",
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    config = IngestConfig(has_header=not args.no_header, delimiter=args.delimiter)

    try:
        report = InventoryPipeline(config=config).process_file(args.input)
    except (StocktakeError, OSError) as exc:
        print(f"Error processing CSV: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        args.output.write_bytes(write_products(report.products, delimiter=args.delimiter))
        print(f"Wrote {len(report.products)} products to {args.output}")
    else:
        print(format_table(report))

    if report.skipped:
        print(f"Skipped {len(report.skipped)} malformed rows", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
