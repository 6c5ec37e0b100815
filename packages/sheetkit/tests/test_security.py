"""Tests for sheetkit.security."""

from __future__ import annotations

import pytest

from sheetkit.config import SheetConverterConfig
from sheetkit.errors import ErrorCode
from sheetkit.security import SheetSecurityScanner


@pytest.fixture
def scanner(default_config) -> SheetSecurityScanner:
    return SheetSecurityScanner(default_config)


class TestRequiredFields:
    def test_all_present(self, scanner):
        assert scanner.scan(b"a,b\n", "data.csv", "json") == []

    def test_empty_file_is_present(self, scanner):
        assert scanner.scan(b"", "data.csv", "json") == []

    @pytest.mark.parametrize("fmt", [None, ""])
    def test_missing_format(self, scanner, fmt):
        errors = scanner.scan(b"x", "data.csv", fmt)
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.E_REQUEST_MISSING_FIELD
        assert errors[0].message == "Missing 'format'"

    @pytest.mark.parametrize("name", [None, ""])
    def test_missing_file_name(self, scanner, name):
        errors = scanner.scan(b"x", name, "json")
        assert errors[0].message == "Missing 'file name'"

    def test_missing_file(self, scanner):
        errors = scanner.scan(None, "data.csv", "json")
        assert errors[0].message == "Missing 'file'"


class TestSizeLimit:
    def test_over_limit(self):
        scanner = SheetSecurityScanner(SheetConverterConfig(max_file_size_mb=1))
        errors = scanner.scan(b"x" * (1024 * 1024 + 1), "big.csv", "json")
        assert len(errors) == 1
        assert errors[0].code == ErrorCode.E_SECURITY_TOO_LARGE
        assert errors[0].stage == "security"

    def test_at_limit(self):
        scanner = SheetSecurityScanner(SheetConverterConfig(max_file_size_mb=1))
        assert scanner.scan(b"x" * (1024 * 1024), "big.csv", "json") == []
