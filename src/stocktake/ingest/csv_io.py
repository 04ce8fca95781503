"""CSV decoding of uploaded inventory files and encoding of summary reports."""

from __future__ import annotations

import csv
import io
from collections.abc import Iterable
from typing import BinaryIO

from stocktake.core.exceptions import CsvReadError
from stocktake.models.product import Product

REPORT_HEADER = ["Code", "Quantity", "Location"]


def read_rows(
    stream: BinaryIO, *, encoding: str = "utf-8-sig", delimiter: str = ","
) -> list[list[str]]:
    """Read every row from a binary CSV stream.

    Rows may have any number of fields. The stream is not closed.

    Raises:
        CsvReadError: If the bytes cannot be decoded or the CSV is malformed.
    """
    try:
        text = stream.read().decode(encoding)
    except UnicodeDecodeError as exc:
        raise CsvReadError(f"Failed to decode CSV as {encoding}: {exc}") from exc

    reader = csv.reader(io.StringIO(text, newline=""), delimiter=delimiter, strict=True)
    try:
        return [row for row in reader if row]
    except csv.Error as exc:
        raise CsvReadError(f"Failed to read CSV on line {reader.line_num}: {exc}") from exc


def write_products(products: Iterable[Product], *, delimiter: str = ",") -> bytes:
    """Encode products as CSV with a Code,Quantity,Location header."""
    buffer = io.StringIO(newline="")
    writer = csv.writer(buffer, delimiter=delimiter, lineterminator="\n")
    writer.writerow(REPORT_HEADER)
    for p in products:
        writer.writerow([p.code, p.quantity, p.location])
    return buffer.getvalue().encode("utf-8")
