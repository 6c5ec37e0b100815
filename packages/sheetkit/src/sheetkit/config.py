"""Configuration model for the sheetkit conversion pipeline.

Provides ``SheetConverterConfig`` with all tunable parameters and sensible
defaults.  Supports loading overrides from YAML or JSON files via the
``from_file()`` classmethod.
"""

from __future__ import annotations

import json
import pathlib

import yaml
from pydantic import BaseModel


class SheetConverterConfig(BaseModel):
    """All tunable parameters with sensible defaults for sheet conversion."""

    # --- Identity ---
    parser_version: str = "sheetkit:1.0.0"

    # --- Security / Resource Limits ---
    max_file_size_mb: int = 100

    # --- Delimited text ---
    default_sheet_name: str = "Sheet1"
    csv_delimiter: str = ","
    csv_quotechar: str = '"'
    csv_encoding: str = "utf-8-sig"
    allow_ragged_rows: bool = False

    # --- Value rendering ---
    datetime_format: str | None = None

    # --- Output ---
    json_indent: int = 2

    # --- Logging / PII Safety ---
    log_sample_data: bool = False

    @classmethod
    def from_file(cls, path: str) -> SheetConverterConfig:
        """Load configuration from a YAML or JSON file.

        File format is detected by extension: ``.yaml`` / ``.yml`` for YAML,
        ``.json`` for JSON.  Any keys present in the file override the
        corresponding defaults; keys not present retain their defaults.
        """
        file_path = pathlib.Path(path)
        if not file_path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        suffix = file_path.suffix.lower()

        if suffix in (".yaml", ".yml"):
            with open(file_path) as fh:
                data = yaml.safe_load(fh)
        elif suffix == ".json":
            with open(file_path) as fh:
                data = json.load(fh)
        else:
            raise ValueError(
                f"Unsupported config file extension '{suffix}'. "
                "Use .yaml, .yml, or .json."
            )

        if data is None:
            data = {}

        return cls(**data)
