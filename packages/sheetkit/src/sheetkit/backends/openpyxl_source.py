"""openpyxl-backed workbook source for ``.xlsx`` / ``.xlsm`` containers.

The workbook is loaded in read-only mode with ``data_only=True`` so every
formula cell reports its cached value.  Chart sheets carry no cells and
are reported with an empty cell stream.
"""

from __future__ import annotations

import io
import logging
from datetime import date, datetime, time, timedelta
from typing import Iterator

import openpyxl
from openpyxl.cell.cell import TYPE_ERROR

from sheetkit.classifier import (
    RawBool,
    RawDateTime,
    RawDurationIso,
    RawEmpty,
    RawError,
    RawFloat,
    RawInt,
    RawString,
    RawValue,
)
from sheetkit.errors import ClassificationDefect, ErrorCode

logger = logging.getLogger("sheetkit")


def format_duration(delta: timedelta) -> str:
    """Render a ``timedelta`` as an ISO-8601 duration, e.g. ``P1DT2H30M``."""
    total_us = delta.days * 86_400_000_000 + delta.seconds * 1_000_000 + delta.microseconds
    sign = "-" if total_us < 0 else ""
    total_us = abs(total_us)

    days, rem_us = divmod(total_us, 86_400_000_000)
    hours, rem_us = divmod(rem_us, 3_600_000_000)
    minutes, rem_us = divmod(rem_us, 60_000_000)
    seconds, micros = divmod(rem_us, 1_000_000)

    out = f"{sign}P"
    if days:
        out += f"{days}D"
    if hours or minutes or seconds or micros or not days:
        out += "T"
        if hours:
            out += f"{hours}H"
        if minutes:
            out += f"{minutes}M"
        if seconds or micros or not (hours or minutes):
            if micros:
                out += f"{seconds}.{micros:06d}".rstrip("0") + "S"
            else:
                out += f"{seconds}S"
    return out


def to_raw_value(value: object, data_type: str | None = None) -> RawValue:
    """Map a Python value produced by openpyxl onto a raw variant.

    ``bool`` is tested before ``int`` and ``datetime`` before ``date``
    because of subclassing.
    """
    if value is None:
        return RawEmpty()
    if data_type == TYPE_ERROR:
        return RawError(value=str(value))
    if isinstance(value, bool):
        return RawBool(value=value)
    if isinstance(value, int):
        return RawInt(value=value)
    if isinstance(value, float):
        return RawFloat(value=value)
    if isinstance(value, (datetime, date, time)):
        return RawDateTime(value=value)
    if isinstance(value, timedelta):
        return RawDurationIso(value=format_duration(value))
    if isinstance(value, str):
        return RawString(value=value)

    raise ClassificationDefect(
        code=ErrorCode.E_CLASSIFY_UNKNOWN_VARIANT,
        message=f"openpyxl returned an unsupported value type: {type(value).__name__}",
        stage="classify",
    )


class OpenpyxlSource:
    """Workbook source over an openpyxl workbook.

    Satisfies :class:`~sheetkit.protocols.WorkbookSource` via structural
    subtyping.

    Parameters
    ----------
    raw_bytes:
        The complete container bytes.

    Raises
    ------
    Exception
        Whatever ``openpyxl.load_workbook`` raises for unreadable input.
    """

    def __init__(self, raw_bytes: bytes) -> None:
        self._workbook = openpyxl.load_workbook(
            io.BytesIO(raw_bytes), read_only=True, data_only=True
        )

    def sheet_names(self) -> list[str]:
        return list(self._workbook.sheetnames)

    def iter_cells(self, sheet_name: str) -> Iterator[tuple[int, int, RawValue]]:
        sheet = self._workbook[sheet_name]
        if not hasattr(sheet, "iter_rows"):
            logger.debug("sheetkit | chart sheet has no cells: %s", sheet_name)
            return

        for row in sheet.iter_rows():
            for cell in row:
                # EmptyCell placeholders in read-only mode carry no coordinates
                if cell.value is None:
                    continue
                yield (
                    cell.row - 1,
                    cell.column - 1,
                    to_raw_value(cell.value, cell.data_type),
                )

    def close(self) -> None:
        self._workbook.close()
