"""
Scanner Configuration Tests
===========================
"""

import pytest
from dfalex.config import ScannerOptions


class TestScannerOptions:
    """Defaults and validation."""

    def test_defaults(self):
        options = ScannerOptions()
        assert options.filename is None
        assert options.line_number == 1
        assert options.strict_eof is False

    def test_invalid_line_number(self):
        with pytest.raises(ValueError):
            ScannerOptions(line_number=0)


class TestFromEnv:
    """Reading options from environment variables."""

    @pytest.fixture(autouse=True)
    def clean_env(self, monkeypatch):
        for name in ("DFALEX_FILENAME", "DFALEX_LINE_NUMBER", "DFALEX_STRICT_EOF"):
            monkeypatch.delenv(name, raising=False)

    def test_no_variables(self):
        assert ScannerOptions.from_env() == ScannerOptions()

    def test_all_variables(self, monkeypatch):
        monkeypatch.setenv("DFALEX_FILENAME", "calc.txt")
        monkeypatch.setenv("DFALEX_LINE_NUMBER", "7")
        monkeypatch.setenv("DFALEX_STRICT_EOF", "true")
        assert ScannerOptions.from_env() == ScannerOptions(
            filename="calc.txt", line_number=7, strict_eof=True
        )

    @pytest.mark.parametrize("value", ["abc", "0", "-3", ""])
    def test_bad_line_number_ignored(self, monkeypatch, value):
        monkeypatch.setenv("DFALEX_LINE_NUMBER", value)
        assert ScannerOptions.from_env().line_number == 1

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("YES", True), (" true ", True), ("0", False), ("no", False),
    ])
    def test_strict_eof_values(self, monkeypatch, value, expected):
        monkeypatch.setenv("DFALEX_STRICT_EOF", value)
        assert ScannerOptions.from_env().strict_eof is expected
