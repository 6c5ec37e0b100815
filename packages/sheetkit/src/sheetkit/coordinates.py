"""Spreadsheet-style coordinate naming.

Columns use bijective base-26 letters with no digit for zero
(1 -> ``A``, 26 -> ``Z``, 27 -> ``AA``); an address is the column letters
followed by the decimal row number (``AB12``).
"""

from __future__ import annotations

_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


def encode_column(col: int) -> str:
    """Return the letters for a 1-based column index.

    Raises
    ------
    ValueError
        If *col* is not a positive integer.
    """
    if col < 1:
        raise ValueError(f"Column index must be >= 1, got {col}")

    letters: list[str] = []
    while col > 0:
        col, rem = divmod(col - 1, 26)
        letters.append(_ALPHABET[rem])
    return "".join(reversed(letters))


def decode_column(letters: str) -> int:
    """Inverse of :func:`encode_column` (case-insensitive)."""
    if not letters or not letters.isascii() or not letters.isalpha():
        raise ValueError(f"Not a column name: {letters!r}")

    col = 0
    for ch in letters.upper():
        col = col * 26 + (ord(ch) - ord("A") + 1)
    return col


def encode_address(col: int, row: int) -> str:
    """Return the address for 1-based *col* and *row*, e.g. ``(28, 1) -> "AB1"``."""
    if row < 1:
        raise ValueError(f"Row index must be >= 1, got {row}")
    return f"{encode_column(col)}{row}"
