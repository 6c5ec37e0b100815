from sheetkit.adapters.delimited import read_delimited
from sheetkit.adapters.workbook import read_workbook

__all__ = [
    "read_delimited",
    "read_workbook",
]
