"""sheetkit -- spreadsheet and CSV conversion to JSON, YAML, XML, and SQL.

Public API re-exports for convenient access.
"""

from sheetkit.adapters import read_delimited, read_workbook
from sheetkit.backends import OpenpyxlSource, XlrdSource, open_workbook
from sheetkit.classifier import (
    RawBool,
    RawDateTime,
    RawDateTimeIso,
    RawDurationIso,
    RawEmpty,
    RawError,
    RawFloat,
    RawInt,
    RawString,
    RawValue,
    classify,
)
from sheetkit.config import SheetConverterConfig
from sheetkit.converter import SheetConverter
from sheetkit.coordinates import decode_column, encode_address, encode_column
from sheetkit.errors import (
    ClassificationDefect,
    ErrorCode,
    IngestError,
    IngestionError,
    RequestError,
    SheetkitException,
)
from sheetkit.models import (
    Cell,
    CellType,
    ConversionResult,
    MergedRange,
    SheetDescriptor,
    Table,
)
from sheetkit.protocols import WorkbookSource
from sheetkit.serializers import default_serializers, to_json, to_sql, to_xml, to_yaml

__all__ = [
    # Converter
    "SheetConverter",
    "SheetConverterConfig",
    # Models
    "CellType",
    "SheetDescriptor",
    "Cell",
    "MergedRange",
    "Table",
    "ConversionResult",
    # Coordinates
    "encode_column",
    "decode_column",
    "encode_address",
    # Classifier
    "RawValue",
    "RawEmpty",
    "RawString",
    "RawInt",
    "RawFloat",
    "RawBool",
    "RawError",
    "RawDateTime",
    "RawDateTimeIso",
    "RawDurationIso",
    "classify",
    # Adapters
    "read_delimited",
    "read_workbook",
    # Sources
    "WorkbookSource",
    "OpenpyxlSource",
    "XlrdSource",
    "open_workbook",
    # Serializers
    "default_serializers",
    "to_json",
    "to_yaml",
    "to_xml",
    "to_sql",
    # Errors
    "ErrorCode",
    "IngestError",
    "SheetkitException",
    "RequestError",
    "IngestionError",
    "ClassificationDefect",
]
