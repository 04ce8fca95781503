"""Local filesystem backend implementing IReportStore."""

from __future__ import annotations

from pathlib import Path

from stocktake.core.exceptions import ReportNotFoundError, StoreError


class LocalReportStore:
    """Production IReportStore writing reports into a directory."""

    def __init__(self, root: str | Path = ".") -> None:
        self._root = Path(root)

    def _path(self, name: str) -> Path:
        path = self._root / name
        if path.resolve().parent != self._root.resolve():
            raise StoreError(f"Report name must be a plain file name: {name!r}")
        return path

    def write(self, name: str, data: bytes) -> str:
        path = self._path(name)
        try:
            self._root.mkdir(parents=True, exist_ok=True)
            path.write_bytes(data)
            return str(path)
        except OSError as exc:
            raise StoreError(f"Report write failed for {name!r}: {exc}") from exc

    def read(self, name: str) -> bytes:
        path = self._path(name)
        try:
            return path.read_bytes()
        except FileNotFoundError as exc:
            raise ReportNotFoundError(f"No report named {name!r}") from exc
        except OSError as exc:
            raise StoreError(f"Report read failed for {name!r}: {exc}") from exc

    def exists(self, name: str) -> bool:
        return self._path(name).is_file()
