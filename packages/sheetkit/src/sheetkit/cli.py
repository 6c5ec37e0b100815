"""Command-line entry point: convert one file and print the payload.

Usage:
    sheetkit book.xlsx --format json
    sheetkit data.csv --format sql --output data.sql
    sheetkit book.xls --format yaml --config sheetkit.yaml --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from sheetkit.config import SheetConverterConfig
from sheetkit.converter import SheetConverter
from sheetkit.errors import SheetkitException

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sheetkit",
        description="Convert a workbook or CSV file to JSON, YAML, XML, or SQL.",
    )
    parser.add_argument("input", type=str, help="Path to the .xlsx, .xls, or .csv file.")
    parser.add_argument(
        "--format",
        required=True,
        help="Output format: json, yaml, xml, or sql.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Write the payload here instead of stdout.",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="YAML or JSON config file.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    config = SheetConverterConfig.from_file(args.config) if args.config else None
    input_path = Path(args.input)

    try:
        raw_bytes = input_path.read_bytes()
    except OSError as exc:
        print(f"error: cannot read {input_path}: {exc}", file=sys.stderr)
        return 1

    try:
        result = SheetConverter(config).convert(raw_bytes, input_path.name, args.format)
    except SheetkitException as exc:
        print(f"error: {exc.code.value}: {exc.message}", file=sys.stderr)
        return 1

    if args.output:
        Path(args.output).write_text(result.payload, encoding="utf-8")
    else:
        sys.stdout.write(result.payload)
    return 0


if __name__ == "__main__":
    sys.exit(main())
