"""Delimited-text adapter -- CSV bytes to a single-sheet ``Table``.

There is no header row: the first record is data.  Every field becomes a
``String`` cell holding the field text verbatim; no type inference is done.
"""

from __future__ import annotations

import csv
import io
import logging

from sheetkit.config import SheetConverterConfig
from sheetkit.coordinates import encode_address
from sheetkit.errors import ErrorCode, IngestionError
from sheetkit.models import Cell, CellType, SheetDescriptor, Table

logger = logging.getLogger("sheetkit")

# csv.field_size_limit takes a C long
_MAX_FIELD_LIMIT = 2**31 - 1


def _raise_field_limit(size: int) -> None:
    """Let one field span the whole input; the stdlib default is 128 KiB."""
    wanted = min(size + 1, _MAX_FIELD_LIMIT)
    if csv.field_size_limit() < wanted:
        csv.field_size_limit(wanted)


def read_delimited(
    raw_bytes: bytes, config: SheetConverterConfig | None = None
) -> Table:
    """Build a ``Table`` from delimited text.

    Blank lines are not records and do not advance the row number.

    Raises
    ------
    IngestionError
        ``E_PARSE_DELIMITED`` if the bytes cannot be decoded, a record is
        malformed (e.g. unbalanced quoting), or -- unless
        ``config.allow_ragged_rows`` -- a record's field count differs from
        the first record's.
    """
    if config is None:
        config = SheetConverterConfig()

    sheet_name = config.default_sheet_name

    try:
        text = raw_bytes.decode(config.csv_encoding)
    except UnicodeDecodeError as exc:
        raise IngestionError(
            code=ErrorCode.E_PARSE_DELIMITED,
            message=f"Delimited text is not valid {config.csv_encoding}: {exc}",
            stage="read",
            sheet_name=sheet_name,
        ) from exc

    _raise_field_limit(len(text))

    reader = csv.reader(
        io.StringIO(text, newline=""),
        delimiter=config.csv_delimiter,
        quotechar=config.csv_quotechar,
        strict=True,
    )

    cells: list[Cell] = []
    expected_fields: int | None = None
    row = 0

    try:
        for record in reader:
            if not record:
                continue
            row += 1

            if expected_fields is None:
                expected_fields = len(record)
            elif len(record) != expected_fields and not config.allow_ragged_rows:
                raise IngestionError(
                    code=ErrorCode.E_PARSE_DELIMITED,
                    message=(
                        f"Record {row} (line {reader.line_num}) has "
                        f"{len(record)} fields, but the first record has "
                        f"{expected_fields}"
                    ),
                    stage="read",
                    sheet_name=sheet_name,
                )

            for col, field in enumerate(record, start=1):
                cells.append(
                    Cell(
                        sheet=sheet_name,
                        address=encode_address(col, row),
                        row=row,
                        col=col,
                        data_type=CellType.STRING,
                        value=field,
                    )
                )
    except csv.Error as exc:
        raise IngestionError(
            code=ErrorCode.E_PARSE_DELIMITED,
            message=f"Malformed record at line {reader.line_num}: {exc}",
            stage="read",
            sheet_name=sheet_name,
        ) from exc

    logger.debug("sheetkit | delimited | rows=%d | cells=%d", row, len(cells))

    return Table(
        sheets=[SheetDescriptor(name=sheet_name, index=0)],
        cells=cells,
    )
