"""Shared test fixtures for sheetkit tests.

Provides a default config, an in-memory ``WorkbookSource`` double, and an
.xlsx byte generator built with openpyxl.
"""

from __future__ import annotations

import io
from typing import Any, Iterator

import openpyxl
import pytest

from sheetkit.classifier import RawValue
from sheetkit.config import SheetConverterConfig


class FakeWorkbookSource:
    """In-memory source satisfying the ``WorkbookSource`` protocol.

    *sheets* maps sheet name to a list of ``(row, col, raw)`` triples
    (0-based).  Sheets listed in *failing* raise ``OSError`` when read.
    """

    def __init__(
        self,
        sheets: dict[str, list[tuple[int, int, Any]]],
        failing: set[str] | None = None,
    ) -> None:
        self.sheets = sheets
        self.failing = failing or set()
        self.read_calls: list[str] = []
        self.closed = False

    def sheet_names(self) -> list[str]:
        return list(self.sheets)

    def iter_cells(self, sheet_name: str) -> Iterator[tuple[int, int, RawValue]]:
        self.read_calls.append(sheet_name)
        if sheet_name in self.failing:
            raise OSError(f"corrupt worksheet part for {sheet_name}")
        yield from self.sheets[sheet_name]

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def default_config() -> SheetConverterConfig:
    """Return a default SheetConverterConfig."""
    return SheetConverterConfig()


@pytest.fixture
def fake_source_factory():
    """Factory fixture returning a ``FakeWorkbookSource``."""

    def _make(sheets, failing=None) -> FakeWorkbookSource:
        return FakeWorkbookSource(sheets, failing)

    return _make


@pytest.fixture
def make_xlsx():
    """Factory fixture producing .xlsx bytes.

    Takes ``{sheet_name: {"A1": value, ...}}`` in sheet order.
    """

    def _make(sheets: dict[str, dict[str, Any]]) -> bytes:
        wb = openpyxl.Workbook()
        wb.remove(wb.active)
        for name, cells in sheets.items():
            ws = wb.create_sheet(title=name)
            for address, value in cells.items():
                ws[address] = value
        buf = io.BytesIO()
        wb.save(buf)
        return buf.getvalue()

    return _make
