"""Workbook source protocol for the sheet-container adapter.

Concrete sources wrap a third-party reader (openpyxl, xlrd) and satisfy
this interface via structural subtyping.  The protocol is
``@runtime_checkable`` so callers can optionally verify conformance with
``isinstance`` checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, Protocol, runtime_checkable

if TYPE_CHECKING:
    from sheetkit.classifier import RawValue


@runtime_checkable
class WorkbookSource(Protocol):
    """Interface for an opened multi-sheet container."""

    def sheet_names(self) -> list[str]:
        """Return sheet names in workbook order."""
        ...

    def iter_cells(self, sheet_name: str) -> Iterator[tuple[int, int, RawValue]]:
        """Yield ``(row, col, raw_value)`` with 0-based coordinates.

        Raises any exception the underlying reader raises when the sheet
        cannot be read.
        """
        ...

    def close(self) -> None:
        """Release any file handles held by the reader."""
        ...
