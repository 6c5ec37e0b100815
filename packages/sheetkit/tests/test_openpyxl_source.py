"""Tests for the openpyxl-backed workbook source."""

from __future__ import annotations

from datetime import date, datetime, time, timedelta

import pytest

from sheetkit.backends.openpyxl_source import (
    OpenpyxlSource,
    format_duration,
    to_raw_value,
)
from sheetkit.classifier import (
    RawBool,
    RawDateTime,
    RawDurationIso,
    RawEmpty,
    RawError,
    RawFloat,
    RawInt,
    RawString,
)
from sheetkit.errors import ClassificationDefect
from sheetkit.protocols import WorkbookSource


class TestFormatDuration:
    @pytest.mark.parametrize(
        "delta, text",
        [
            (timedelta(hours=1, minutes=30), "PT1H30M"),
            (timedelta(days=1, hours=2), "P1DT2H"),
            (timedelta(days=2), "P2D"),
            (timedelta(0), "PT0S"),
            (timedelta(seconds=1, milliseconds=500), "PT1.5S"),
            (timedelta(seconds=45), "PT45S"),
            (timedelta(hours=-1), "-PT1H"),
        ],
    )
    def test_iso_text(self, delta, text):
        assert format_duration(delta) == text


class TestToRawValue:
    def test_none_is_empty(self):
        assert isinstance(to_raw_value(None), RawEmpty)

    def test_error_type_wins(self):
        raw = to_raw_value("#N/A", "e")
        assert isinstance(raw, RawError)
        assert raw.value == "#N/A"

    def test_bool_before_int(self):
        raw = to_raw_value(True, "b")
        assert isinstance(raw, RawBool)
        assert raw.value is True

    def test_int(self):
        assert to_raw_value(7, "n") == RawInt(value=7)

    def test_float(self):
        assert to_raw_value(2.5, "n") == RawFloat(value=2.5)

    @pytest.mark.parametrize(
        "value", [datetime(2024, 5, 6, 7, 8), date(2024, 5, 6), time(7, 8)]
    )
    def test_temporal(self, value):
        raw = to_raw_value(value, "d")
        assert isinstance(raw, RawDateTime)
        assert raw.value == value

    def test_timedelta(self):
        assert to_raw_value(timedelta(minutes=5), "d") == RawDurationIso(value="PT5M")

    def test_string(self):
        assert to_raw_value("hello", "s") == RawString(value="hello")

    def test_unknown_type(self):
        with pytest.raises(ClassificationDefect, match="unsupported value type"):
            to_raw_value(b"bytes", "s")


class TestOpenpyxlSource:
    def test_satisfies_protocol(self, make_xlsx):
        source = OpenpyxlSource(make_xlsx({"S": {"A1": 1}}))
        try:
            assert isinstance(source, WorkbookSource)
        finally:
            source.close()

    def test_sheet_names_in_workbook_order(self, make_xlsx):
        source = OpenpyxlSource(make_xlsx({"Zeta": {}, "Alpha": {}, "Mid": {}}))
        try:
            assert source.sheet_names() == ["Zeta", "Alpha", "Mid"]
        finally:
            source.close()

    def test_cell_values(self, make_xlsx):
        raw_bytes = make_xlsx(
            {
                "Data": {
                    "A1": "name",
                    "B1": 42,
                    "C1": 3.5,
                    "D1": True,
                    "E1": "#DIV/0!",
                    "A2": datetime(2024, 1, 2, 3, 4, 5),
                }
            }
        )
        source = OpenpyxlSource(raw_bytes)
        try:
            triples = {(r, c): raw for r, c, raw in source.iter_cells("Data")}
        finally:
            source.close()

        assert triples[(0, 0)] == RawString(value="name")
        assert triples[(0, 1)] == RawInt(value=42)
        assert triples[(0, 2)] == RawFloat(value=3.5)
        assert triples[(0, 3)] == RawBool(value=True)
        assert triples[(0, 4)] == RawError(value="#DIV/0!")
        assert triples[(1, 0)] == RawDateTime(value=datetime(2024, 1, 2, 3, 4, 5))

    def test_empty_cells_not_yielded(self, make_xlsx):
        source = OpenpyxlSource(make_xlsx({"S": {"C3": "x", "A1": "y"}}))
        try:
            positions = [(r, c) for r, c, _ in source.iter_cells("S")]
        finally:
            source.close()
        assert sorted(positions) == [(0, 0), (2, 2)]

    def test_corrupt_bytes_raise(self):
        with pytest.raises(Exception):
            OpenpyxlSource(b"this is not a zip archive")
