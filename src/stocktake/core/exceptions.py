"""Stocktake exception hierarchy."""

from __future__ import annotations


class StocktakeError(Exception):
    """Base exception for all Stocktake errors."""


class CsvReadError(StocktakeError):
    """Inventory file could not be decoded into rows."""


class ParseError(StocktakeError):
    """A clean row could not be converted into a Product.

    Parsing is all-or-nothing, so this aborts the whole batch.
    """

    def __init__(self, line: int, reason: str, value: object) -> None:
        self.line = line
        self.reason = reason
        self.value = value
        super().__init__(f"Invalid {reason} on line {line}: {value}")


class ReportNotFoundError(StocktakeError):
    """No summary report has been stored yet."""


class StoreError(StocktakeError):
    """Report store read or write failed."""
