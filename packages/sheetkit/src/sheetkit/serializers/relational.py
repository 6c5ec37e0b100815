"""SQL serializer -- one ``CREATE TABLE`` plus one ``INSERT`` per cell.

The output is text only and is never executed here.  Text columns are
single-quoted with embedded quotes doubled; that is the only escape the
output relies on, so backslashes and keywords inside values pass through
unchanged.
"""

from __future__ import annotations

from sheetkit.models import Cell, Table

SQL_CONTENT_TYPE = "text/plain"

CREATE_STATEMENT = (
    "CREATE TABLE cell_data (sheet TEXT, address TEXT, row INTEGER, "
    "col INTEGER, data_type TEXT, value TEXT, formula TEXT);"
)

_INSERT_PREFIX = (
    "INSERT INTO cell_data (sheet, address, row, col, data_type, value, formula) "
    "VALUES "
)


def quote_literal(text: str) -> str:
    """Return *text* as a single-quoted SQL string literal."""
    return "'" + text.replace("'", "''") + "'"


def insert_statement(cell: Cell) -> str:
    formula = "NULL" if cell.formula is None else quote_literal(cell.formula)
    values = ",".join(
        [
            quote_literal(cell.sheet),
            quote_literal(cell.address),
            str(cell.row),
            str(cell.col),
            quote_literal(cell.data_type.value),
            quote_literal(cell.value),
            formula,
        ]
    )
    return f"{_INSERT_PREFIX}({values});"


def to_sql(table: Table) -> tuple[str, str]:
    """Serialize *table* as SQL statements, one per line."""
    lines = [CREATE_STATEMENT]
    lines.extend(insert_statement(cell) for cell in table.cells)
    return "\n".join(lines) + "\n", SQL_CONTENT_TYPE
