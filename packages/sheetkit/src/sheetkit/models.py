"""Canonical table model shared by every adapter and serializer.

Contains the ``CellType`` taxonomy, the immutable ``SheetDescriptor``,
``Cell`` and ``MergedRange`` records, the ``Table`` aggregate, and the
``ConversionResult`` envelope returned by the dispatch layer.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


# ---------------------------------------------------------------------------
# Enumerations
# ---------------------------------------------------------------------------


class CellType(str, Enum):
    """Closed taxonomy of cell value types.

    There is deliberately no ``Unknown`` member: every raw value maps to
    exactly one of these or classification fails.
    """

    STRING = "String"
    NUMBER = "Number"
    BOOLEAN = "Boolean"
    ERROR = "Error"
    DATETIME = "DateTime"
    DATETIME_ISO = "DateTimeIso"
    DURATION_ISO = "DurationIso"


# ---------------------------------------------------------------------------
# Table Records
# ---------------------------------------------------------------------------


class SheetDescriptor(BaseModel):
    """One worksheet, in ingestion order."""

    model_config = ConfigDict(frozen=True)

    name: str
    index: int
    hidden: bool = False


class Cell(BaseModel):
    """A single non-empty cell.

    ``row`` and ``col`` are 1-based; ``address`` is always their
    spreadsheet-style encoding (see :func:`sheetkit.coordinates.encode_address`).
    ``value`` is the canonical text of the datum, never the typed value.
    """

    model_config = ConfigDict(frozen=True)

    sheet: str
    address: str
    row: int
    col: int
    data_type: CellType
    value: str
    formula: str | None = None


class MergedRange(BaseModel):
    """A merged block of cells, given by its corner addresses."""

    model_config = ConfigDict(frozen=True)

    sheet: str
    start: str
    end: str


class Table(BaseModel):
    """Aggregate root: everything one conversion ingests.

    ``cells`` are ordered sheet-major, then row-major, then by column.
    """

    sheets: list[SheetDescriptor] = []
    cells: list[Cell] = []
    merged_ranges: list[MergedRange] = []


# ---------------------------------------------------------------------------
# Result Models
# ---------------------------------------------------------------------------


class ConversionResult(BaseModel):
    """Successful output of ``SheetConverter.convert()``."""

    payload: str
    content_type: str
    format: str
