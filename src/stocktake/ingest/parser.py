"""Record parser — converts clean rows into typed Products.

Unlike the cleaner, parsing is strict: the first bad row aborts the batch
with a ParseError naming its source line.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from stocktake.core.exceptions import ParseError
from stocktake.core.logging_config import get_logger
from stocktake.models.product import Product

logger = get_logger(__name__)

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(text: str) -> int | None:
    """Parse an ASCII decimal integer, returning None if ``text`` is not one."""
    if not _INTEGER.fullmatch(text):
        return None
    return int(text)


def parse_row(row: Sequence[str], line: int) -> Product:
    """Build a Product from ``[code, quantity, "<bay> <shelf>"]``."""
    if len(row) != 3:
        raise ParseError(line, "record", list(row))

    code, quantity_text, location_text = row

    quantity = parse_int(quantity_text)
    if quantity is None:
        raise ParseError(line, "quantity", quantity_text)

    parts = location_text.split()
    if len(parts) != 2:
        raise ParseError(line, "location format", location_text)

    bay, shelf_text = parts
    shelf = parse_int(shelf_text)
    if shelf is None:
        raise ParseError(line, "shelf", shelf_text)

    return Product(code=code, quantity=quantity, bay=bay, shelf=shelf)


def parse(
    rows: Sequence[Sequence[str]],
    *,
    line_numbers: Sequence[int] | None = None,
    first_line: int = 2,
) -> list[Product]:
    """Parse clean rows in order.

    Args:
        rows: Clean rows, each ``[code, quantity, location]``.
        line_numbers: Source line of each row, as reported by the cleaner.
        first_line: Line of ``rows[0]`` when ``line_numbers`` is omitted.
            Defaults to 2, the first line after a header.

    Returns:
        One Product per row, in input order.

    Raises:
        ParseError: On the first row that cannot be parsed.
    """
    if line_numbers is not None and len(line_numbers) != len(rows):
        raise ValueError("line_numbers must have one entry per row")

    products: list[Product] = []
    for index, row in enumerate(rows):
        line = line_numbers[index] if line_numbers is not None else first_line + index
        try:
            products.append(parse_row(row, line))
        except ParseError as exc:
            logger.warning("parse_failed", line=exc.line, reason=exc.reason, value=exc.value)
            raise
    return products
