"""JSON and YAML serializers.

Both emit the table exactly as modelled: ``sheets``, ``cells`` and
``merged_ranges`` arrays with field names and order preserved.
"""

from __future__ import annotations

import json

import yaml

from sheetkit.models import Table

JSON_CONTENT_TYPE = "application/json"
YAML_CONTENT_TYPE = "application/x-yaml"


def to_json(table: Table, indent: int = 2) -> tuple[str, str]:
    """Serialize *table* as indented JSON."""
    payload = json.dumps(
        table.model_dump(mode="json"), indent=indent, ensure_ascii=False
    )
    return payload, JSON_CONTENT_TYPE


def to_yaml(table: Table) -> tuple[str, str]:
    """Serialize *table* as block-style YAML, keeping key order."""
    payload = yaml.safe_dump(
        table.model_dump(mode="json"),
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    )
    return payload, YAML_CONTENT_TYPE
