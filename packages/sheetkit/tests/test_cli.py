"""Tests for the sheetkit command-line entry point."""

from __future__ import annotations

import json

import pytest

from sheetkit.cli import build_parser, main


class TestParser:
    def test_format_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["data.csv"])

    def test_any_format_name_parses(self):
        args = build_parser().parse_args(["data.csv", "--format", "toml"])
        assert args.format == "toml"

    def test_defaults(self):
        args = build_parser().parse_args(["data.csv", "--format", "json"])
        assert args.output is None
        assert args.config is None
        assert args.log_level == "WARNING"


class TestMain:
    def test_writes_stdout(self, tmp_path, capsys):
        src = tmp_path / "data.csv"
        src.write_bytes(b"a,b\n")

        assert main([str(src), "--format", "json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert [c["value"] for c in data["cells"]] == ["a", "b"]

    def test_writes_output_file(self, tmp_path, capsys):
        src = tmp_path / "data.csv"
        src.write_bytes(b"x\n")
        out = tmp_path / "data.sql"

        assert main([str(src), "--format", "sql", "--output", str(out)]) == 0

        assert capsys.readouterr().out == ""
        assert out.read_text(encoding="utf-8").startswith("CREATE TABLE cell_data")

    def test_xlsx_input(self, tmp_path, capsys, make_xlsx):
        src = tmp_path / "book.xlsx"
        src.write_bytes(make_xlsx({"Data": {"A1": 5}}))

        assert main([str(src), "--format", "xml"]) == 0
        assert "<name>Data</name>" in capsys.readouterr().out

    def test_config_file(self, tmp_path, capsys):
        src = tmp_path / "data.csv"
        src.write_bytes(b"a;b\n")
        cfg = tmp_path / "sheetkit.yaml"
        cfg.write_text("csv_delimiter: ';'\ndefault_sheet_name: Imported\n")

        assert main([str(src), "--format", "json", "--config", str(cfg)]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["sheets"][0]["name"] == "Imported"
        assert [c["value"] for c in data["cells"]] == ["a", "b"]

    def test_unknown_format_rejected_by_converter(self, tmp_path, capsys):
        src = tmp_path / "data.csv"
        src.write_bytes(b"a\n")

        assert main([str(src), "--format", "toml"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert (
            "error: E_REQUEST_UNSUPPORTED_FORMAT: Unsupported format 'toml'. "
            "Use one of: json, yaml, xml, sql."
        ) in captured.err

    def test_missing_input(self, tmp_path, capsys):
        assert main([str(tmp_path / "nope.csv"), "--format", "json"]) == 1
        assert "error: cannot read" in capsys.readouterr().err

    def test_conversion_error(self, tmp_path, capsys):
        src = tmp_path / "book.xlsx"
        src.write_bytes(b"garbage")

        assert main([str(src), "--format", "json"]) == 1

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "error: E_PARSE_OPEN_FAILED: Workbook open error:" in captured.err
