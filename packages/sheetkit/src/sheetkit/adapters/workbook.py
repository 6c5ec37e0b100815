"""Sheet-container adapter -- multi-sheet workbook bytes to a ``Table``.

Opens the container through a :class:`~sheetkit.protocols.WorkbookSource`,
emits one :class:`SheetDescriptor` per reported sheet, and classifies every
non-empty cell.  Any failure aborts the whole conversion; no partial
table is ever returned.
"""

from __future__ import annotations

import logging
from typing import Callable

from sheetkit.backends import open_workbook
from sheetkit.classifier import RawEmpty, RawValue, classify
from sheetkit.config import SheetConverterConfig
from sheetkit.coordinates import encode_address
from sheetkit.errors import ClassificationDefect, ErrorCode, IngestionError
from sheetkit.models import Cell, SheetDescriptor, Table
from sheetkit.protocols import WorkbookSource

logger = logging.getLogger("sheetkit")


def read_workbook(
    raw_bytes: bytes,
    config: SheetConverterConfig | None = None,
    opener: Callable[[bytes], WorkbookSource] | None = None,
) -> Table:
    """Build a ``Table`` from workbook container bytes.

    Parameters
    ----------
    raw_bytes:
        The uploaded container.
    config:
        Pipeline config.  Uses defaults when *None*.
    opener:
        Factory returning a ``WorkbookSource`` for *raw_bytes*.  Defaults to
        :func:`~sheetkit.backends.open_workbook`.

    Raises
    ------
    IngestionError
        ``E_PARSE_OPEN_FAILED`` if the container cannot be opened,
        ``E_PARSE_SHEET_READ`` if any sheet cannot be read.
    ClassificationDefect
        If the source yields a value outside the raw variant set.
    """
    if config is None:
        config = SheetConverterConfig()
    if opener is None:
        opener = open_workbook

    try:
        source = opener(raw_bytes)
    except Exception as exc:
        raise IngestionError(
            code=ErrorCode.E_PARSE_OPEN_FAILED,
            message=f"Workbook open error: {exc}",
            stage="open",
        ) from exc

    try:
        return _build_table(source, config)
    finally:
        source.close()


def _build_table(source: WorkbookSource, config: SheetConverterConfig) -> Table:
    sheets: list[SheetDescriptor] = []
    cells: list[Cell] = []

    try:
        names = source.sheet_names()
    except Exception as exc:
        raise IngestionError(
            code=ErrorCode.E_PARSE_OPEN_FAILED,
            message=f"Workbook open error: cannot list sheets: {exc}",
            stage="open",
        ) from exc

    for index, name in enumerate(names):
        sheets.append(SheetDescriptor(name=name, index=index))

        try:
            sheet_cells = [
                _make_cell(name, row, col, raw, config)
                for row, col, raw in source.iter_cells(name)
                if not isinstance(raw, RawEmpty)
            ]
        except ClassificationDefect:
            raise
        except Exception as exc:
            raise IngestionError(
                code=ErrorCode.E_PARSE_SHEET_READ,
                message=f"Error reading sheet {name}: {exc}",
                stage="read",
                sheet_name=name,
            ) from exc

        sheet_cells.sort(key=lambda c: (c.row, c.col))
        logger.debug(
            "sheetkit | sheet=%s | index=%d | cells=%d", name, index, len(sheet_cells)
        )
        cells.extend(sheet_cells)

    return Table(sheets=sheets, cells=cells)


def _make_cell(
    sheet: str, row: int, col: int, raw: RawValue, config: SheetConverterConfig
) -> Cell:
    data_type, value = classify(raw, config.datetime_format)
    if config.log_sample_data:
        logger.debug(
            "sheetkit | sheet=%s | row=%d | col=%d | %s=%r",
            sheet,
            row + 1,
            col + 1,
            data_type.value,
            value,
        )
    return Cell(
        sheet=sheet,
        address=encode_address(col + 1, row + 1),
        row=row + 1,
        col=col + 1,
        data_type=data_type,
        value=value,
    )
