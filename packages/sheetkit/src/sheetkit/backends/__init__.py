"""Concrete workbook sources for the sheet-container adapter.

``open_workbook`` sniffs the container's magic bytes and returns the
matching source: xlrd for legacy OLE2 ``.xls`` files, openpyxl for
everything else.
"""

from __future__ import annotations

from sheetkit.backends.openpyxl_source import OpenpyxlSource
from sheetkit.backends.xlrd_source import XlrdSource
from sheetkit.protocols import WorkbookSource

# OLE2 compound document header used by legacy .xls files
OLE2_MAGIC = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"


def open_workbook(raw_bytes: bytes) -> WorkbookSource:
    """Open *raw_bytes* with the reader matching its container format.

    Raises whatever the underlying reader raises for unreadable input.
    """
    if raw_bytes.startswith(OLE2_MAGIC):
        return XlrdSource(raw_bytes)
    return OpenpyxlSource(raw_bytes)


__all__ = [
    "OLE2_MAGIC",
    "OpenpyxlSource",
    "XlrdSource",
    "open_workbook",
]
