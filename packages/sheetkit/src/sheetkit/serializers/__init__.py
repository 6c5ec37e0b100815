"""Table serializers, one per output format.

Each serializer is a pure function ``Table -> (payload, content_type)``.
``default_serializers()`` builds a fresh format-name lookup for a
converter; nothing is registered globally.
"""

from __future__ import annotations

from functools import partial
from typing import Callable

from sheetkit.config import SheetConverterConfig
from sheetkit.models import Table
from sheetkit.serializers.markup import XML_CONTENT_TYPE, to_xml
from sheetkit.serializers.relational import SQL_CONTENT_TYPE, to_sql
from sheetkit.serializers.structured import (
    JSON_CONTENT_TYPE,
    YAML_CONTENT_TYPE,
    to_json,
    to_yaml,
)

Serializer = Callable[[Table], tuple[str, str]]


def default_serializers(
    config: SheetConverterConfig | None = None,
) -> dict[str, Serializer]:
    """Return the ``format name -> serializer`` mapping for *config*."""
    if config is None:
        config = SheetConverterConfig()
    return {
        "json": partial(to_json, indent=config.json_indent),
        "yaml": to_yaml,
        "xml": to_xml,
        "sql": to_sql,
    }


__all__ = [
    "JSON_CONTENT_TYPE",
    "SQL_CONTENT_TYPE",
    "XML_CONTENT_TYPE",
    "YAML_CONTENT_TYPE",
    "Serializer",
    "default_serializers",
    "to_json",
    "to_sql",
    "to_xml",
    "to_yaml",
]
