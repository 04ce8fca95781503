"""Record cleaner: reduces raw rows to exactly-three-field clean rows.

Malformed rows are dropped and reported, never fatal: one bad line in a
stock count must not lose the rest of the file.
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable

from stocktake.core.logging_config import get_logger
from stocktake.core.types import RawRow
from stocktake.models.report import CleanResult, SkippedRow

logger = get_logger(__name__)

EXPECTED_FIELDS = 3

# str.isspace() also accepts the \x1c-\x1f separators; these do not count as space
_SPACE_CHARS = frozenset("\t\n\v\f\r \x85\xa0")


def is_space(ch: str) -> bool:
    """ASCII tab through carriage return, space, NEL, NBSP, or a Zs/Zl/Zp separator."""
    return ch in _SPACE_CHARS or unicodedata.category(ch) in ("Zs", "Zl", "Zp")


def is_valid_character(ch: str) -> bool:
    """Letters, digits, whitespace and commas survive filtering."""
    return ch.isalpha() or ch.isdecimal() or is_space(ch) or ch == ","


def clean_field(field: str) -> str:
    """Strip disallowed characters, then surrounding whitespace."""
    return "".join(ch for ch in field if is_valid_character(ch)).strip()


def clean(rows: Iterable[RawRow], *, first_line: int = 1) -> CleanResult:
    """Filter every field and keep only rows left with exactly three fields.

    Args:
        rows: Raw rows as decoded from the source table.
        first_line: 1-based source line of the first row.

    Returns:
        CleanResult with surviving rows, their source lines, and one
        SkippedRow per dropped row.
    """
    result = CleanResult()
    for line, raw in enumerate(rows, start=first_line):
        cleaned = [f for f in (clean_field(field) for field in raw) if f]
        if len(cleaned) == EXPECTED_FIELDS:
            result.rows.append(cleaned)
            result.line_numbers.append(line)
            continue

        skipped = SkippedRow(
            line=line,
            raw=list(raw),
            field_count=len(cleaned),
            reason=f"expected {EXPECTED_FIELDS} non-empty fields, found {len(cleaned)}",
        )
        result.skipped.append(skipped)
        logger.warning("row_skipped", line=line, raw=skipped.raw, reason=skipped.reason)

    logger.debug("rows_cleaned", kept=len(result.rows), skipped=len(result.skipped))
    return result
