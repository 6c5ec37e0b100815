"""XML serializer.

Layout::

    <table>
      <sheets><sheet_descriptor>...</sheet_descriptor></sheets>
      <cells><cell>...</cell></cells>
      <merged_ranges><merged_range>...</merged_range></merged_ranges>
    </table>

Every model field becomes a child element of the same name.  An absent
``formula`` is omitted rather than written empty, so an empty string and
"no formula" stay distinguishable.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET

from sheetkit.models import Table

XML_CONTENT_TYPE = "application/xml"

_XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>\n'

# Code points XML 1.0 cannot carry, even escaped
_ILLEGAL_XML_CHARS = re.compile(
    "[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]"
)


def _text(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return _ILLEGAL_XML_CHARS.sub("\ufffd", str(value))


def _append_record(parent: ET.Element, tag: str, record: dict) -> None:
    element = ET.SubElement(parent, tag)
    for field, value in record.items():
        if value is None:
            continue
        ET.SubElement(element, field).text = _text(value)


def to_xml(table: Table) -> tuple[str, str]:
    """Serialize *table* as indented XML with a UTF-8 declaration."""
    data = table.model_dump(mode="json")
    root = ET.Element("table")

    sheets = ET.SubElement(root, "sheets")
    for record in data["sheets"]:
        _append_record(sheets, "sheet_descriptor", record)

    cells = ET.SubElement(root, "cells")
    for record in data["cells"]:
        _append_record(cells, "cell", record)

    merged = ET.SubElement(root, "merged_ranges")
    for record in data["merged_ranges"]:
        _append_record(merged, "merged_range", record)

    ET.indent(root)
    # CR survives line-end normalisation only as a character reference
    body = ET.tostring(root, encoding="unicode").replace("\r", "&#13;")
    payload = _XML_DECLARATION + body + "\n"
    return payload, XML_CONTENT_TYPE
