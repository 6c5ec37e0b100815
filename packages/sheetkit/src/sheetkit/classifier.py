"""Cell value classification.

Workbook sources describe each cell with one of the raw variant models
defined here.  :func:`classify` maps a variant onto the closed
:class:`~sheetkit.models.CellType` taxonomy plus the canonical text stored
in :attr:`Cell.value`.  The mapping has no fallback branch: anything that
is not a known, non-empty variant raises :class:`ClassificationDefect`.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time
from decimal import Decimal
from typing import Union

from pydantic import BaseModel, ConfigDict

from sheetkit.errors import ClassificationDefect, ErrorCode
from sheetkit.models import CellType


# ---------------------------------------------------------------------------
# Raw variants
# ---------------------------------------------------------------------------


class _RawValue(BaseModel):
    model_config = ConfigDict(frozen=True)


class RawEmpty(_RawValue):
    """An unset position.  Never classified; adapters skip it."""


class RawString(_RawValue):
    value: str


class RawInt(_RawValue):
    value: int


class RawFloat(_RawValue):
    value: float


class RawBool(_RawValue):
    value: bool


class RawError(_RawValue):
    """A spreadsheet error; ``value`` is its literal, e.g. ``#DIV/0!``."""

    value: str


class RawDateTime(_RawValue):
    """A native date/time value as decoded by the source library."""

    value: datetime | date | time


class RawDateTimeIso(_RawValue):
    """A date/time the source already stores as ISO-8601 text."""

    value: str


class RawDurationIso(_RawValue):
    """A duration in ISO-8601 form (``P1DT2H``)."""

    value: str


RawValue = Union[
    RawEmpty,
    RawString,
    RawInt,
    RawFloat,
    RawBool,
    RawError,
    RawDateTime,
    RawDateTimeIso,
    RawDurationIso,
]


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def format_number(value: int | float) -> str:
    """Locale-independent decimal text for a number.

    Integral floats drop the ``.0``; other floats are written positionally
    (``1e-07`` -> ``0.0000001``) so no reader has to parse an exponent.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "0"
    text = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        text = text[:-2]
    return text


def classify(
    raw: RawValue, datetime_format: str | None = None
) -> tuple[CellType, str]:
    """Return ``(CellType, canonical text)`` for a non-empty raw value.

    Parameters
    ----------
    raw:
        One of the raw variant models.  ``RawEmpty`` must be skipped by the
        caller.
    datetime_format:
        ``strftime`` pattern for ``RawDateTime``.  ISO-8601 when *None*.

    Raises
    ------
    ClassificationDefect
        If *raw* is not a known non-empty variant.
    """
    if isinstance(raw, RawString):
        return CellType.STRING, raw.value
    elif isinstance(raw, RawInt):
        return CellType.NUMBER, format_number(raw.value)
    elif isinstance(raw, RawFloat):
        return CellType.NUMBER, format_number(raw.value)
    elif isinstance(raw, RawBool):
        return CellType.BOOLEAN, "true" if raw.value else "false"
    elif isinstance(raw, RawError):
        return CellType.ERROR, raw.value
    elif isinstance(raw, RawDateTime):
        if datetime_format is None:
            return CellType.DATETIME, raw.value.isoformat()
        return CellType.DATETIME, raw.value.strftime(datetime_format)
    elif isinstance(raw, RawDateTimeIso):
        return CellType.DATETIME_ISO, raw.value
    elif isinstance(raw, RawDurationIso):
        return CellType.DURATION_ISO, raw.value

    raise ClassificationDefect(
        code=ErrorCode.E_CLASSIFY_UNKNOWN_VARIANT,
        message=f"Cannot classify raw value of type {type(raw).__name__}",
        stage="classify",
    )
