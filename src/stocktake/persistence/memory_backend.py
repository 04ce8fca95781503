"""In-memory backend for unit tests — dict-backed fake."""

from __future__ import annotations

from stocktake.core.exceptions import ReportNotFoundError


class MemoryReportStore:
    """Dict-backed IReportStore for unit tests."""

    def __init__(self) -> None:
        self._reports: dict[str, bytes] = {}

    def write(self, name: str, data: bytes) -> str:
        self._reports[name] = data
        return name

    def read(self, name: str) -> bytes:
        try:
            return self._reports[name]
        except KeyError as exc:
            raise ReportNotFoundError(f"No report named {name!r}") from exc

    def exists(self, name: str) -> bool:
        return name in self._reports
