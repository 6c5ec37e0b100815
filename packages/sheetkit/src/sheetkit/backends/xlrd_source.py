"""xlrd-backed workbook source for legacy ``.xls`` (OLE2) containers."""

from __future__ import annotations

import logging
from typing import Iterator

import xlrd  # type: ignore[import-untyped]

from sheetkit.classifier import (
    RawBool,
    RawDateTime,
    RawEmpty,
    RawError,
    RawFloat,
    RawString,
    RawValue,
)
from sheetkit.errors import ClassificationDefect, ErrorCode

logger = logging.getLogger("sheetkit")


class XlrdSource:
    """Workbook source over an xlrd ``Book``.

    Satisfies :class:`~sheetkit.protocols.WorkbookSource` via structural
    subtyping.  Sheets are loaded on demand so a broken sheet only fails
    when it is read.
    """

    def __init__(self, raw_bytes: bytes) -> None:
        self._book = xlrd.open_workbook(file_contents=raw_bytes, on_demand=True)

    def sheet_names(self) -> list[str]:
        return list(self._book.sheet_names())

    def iter_cells(self, sheet_name: str) -> Iterator[tuple[int, int, RawValue]]:
        sheet = self._book.sheet_by_name(sheet_name)
        for row_idx in range(sheet.nrows):
            for col_idx in range(sheet.ncols):
                cell = sheet.cell(row_idx, col_idx)
                yield row_idx, col_idx, self._to_raw_value(cell)

    def close(self) -> None:
        self._book.release_resources()

    def _to_raw_value(self, cell) -> RawValue:
        """Map an xlrd cell onto a raw variant."""
        if cell.ctype == xlrd.XL_CELL_EMPTY or cell.ctype == xlrd.XL_CELL_BLANK:
            return RawEmpty()
        elif cell.ctype == xlrd.XL_CELL_TEXT:
            return RawString(value=cell.value)
        elif cell.ctype == xlrd.XL_CELL_NUMBER:
            return RawFloat(value=cell.value)
        elif cell.ctype == xlrd.XL_CELL_DATE:
            try:
                dt = xlrd.xldate_as_datetime(cell.value, self._book.datemode)
            except Exception as exc:
                logger.warning(
                    "sheetkit | code=%s | detail=date conversion failed: %s | "
                    "keeping serial number",
                    ErrorCode.W_DATE_CONVERSION_FAILED.value,
                    exc,
                )
                return RawFloat(value=cell.value)
            return RawDateTime(value=dt)
        elif cell.ctype == xlrd.XL_CELL_BOOLEAN:
            return RawBool(value=bool(cell.value))
        elif cell.ctype == xlrd.XL_CELL_ERROR:
            text = xlrd.error_text_from_code.get(cell.value, f"#ERR{cell.value}")
            return RawError(value=text)

        raise ClassificationDefect(
            code=ErrorCode.E_CLASSIFY_UNKNOWN_VARIANT,
            message=f"xlrd returned an unsupported cell type: {cell.ctype!r}",
            stage="classify",
        )
