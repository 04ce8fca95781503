"""Protocol interfaces for Stocktake abstractions.

Structural typing, no inheritance required, easy to test with isinstance().
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# Persistence: Report Store
# ---------------------------------------------------------------------------

@runtime_checkable
class IReportStore(Protocol):
    """Storage for encoded summary reports served by the download endpoint."""

    def write(self, name: str, data: bytes) -> str: ...

    def read(self, name: str) -> bytes: ...

    def exists(self, name: str) -> bool: ...
