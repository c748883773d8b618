"""
Printer and CLI Tests
=====================

Tests for token formatting and the ``dfalex`` command.
"""

import pytest
from click.testing import CliRunner

from dfalex import __version__
from dfalex.cli.dfalex import main
from dfalex.grammars import ARITHMETIC
from dfalex.printer import format_token, format_tokens
from dfalex.scanner import Scanner, Token, scan
from dfalex.stream import CodeStream
from dfalex.symbols import Symbol, symbol_name


# =============================================================================
# Printer Tests
# =============================================================================

class TestSymbolNames:

    def test_names(self):
        assert symbol_name(Symbol.INT) == "int"
        assert symbol_name(Symbol.DIVIDE) == "divide"
        assert symbol_name(Symbol.EOF) == "eof"

    def test_every_emitted_symbol_has_a_name(self):
        for symbol in Symbol:
            if symbol is not Symbol.SKIP:
                assert symbol_name(symbol)

    def test_skip_has_no_name(self):
        with pytest.raises(ValueError):
            symbol_name(Symbol.SKIP)


class TestPrinter:

    def test_format_token(self):
        assert format_token(Token(Symbol.INT, "42", 1, 3)) == 'int("42")'

    def test_format_token_with_position(self):
        token = Token(Symbol.VARIABLE, "x", 2, 5)
        assert format_token(token, positions=True) == 'variable("x")@2:5'

    def test_quotes_are_escaped(self):
        token = Token(Symbol.VARIABLE, 'a"b', 1, 1)
        assert format_token(token) == 'variable("a\\"b")'

    def test_format_tokens_stops_at_eof(self):
        assert format_tokens(scan("417549", ARITHMETIC)) == 'int("417549")'

    def test_format_expression(self):
        assert format_tokens(scan("1+2*(x-3)", ARITHMETIC)) == (
            'int("1") plus("+") int("2") times("*") lparen("(") '
            'variable("x") minus("-") int("3") rparen(")")'
        )

    def test_live_scanner(self):
        scanner = Scanner(ARITHMETIC, CodeStream.from_text("a|b"))
        assert format_tokens(scanner, separator="\n") == (
            'variable("a")\nbwor("|")\nvariable("b")'
        )

    def test_empty_input(self):
        assert format_tokens(scan("", ARITHMETIC)) == ""


# =============================================================================
# CLI Tests
# =============================================================================

class TestCli:
    """Tests for the dfalex command."""

    def test_expression(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "1+2*(x-3)"])
        assert result.exit_code == 0
        assert result.output == (
            'int("1") plus("+") int("2") times("*") lparen("(") '
            'variable("x") minus("-") int("3") rparen(")")\n'
        )

    def test_file_one_per_line_with_positions(self, tmp_path):
        source = tmp_path / "calc.txt"
        source.write_bytes(b"x\n  #1f")
        runner = CliRunner()
        result = runner.invoke(
            main, ["-g", "arithmetic-ws", "-p", "--one-per-line", str(source)]
        )
        assert result.exit_code == 0
        assert result.output == 'variable("x")@1:1\nhex("#1f")@2:3\n'

    def test_stdin(self):
        runner = CliRunner()
        result = runner.invoke(main, [], input="#ff|y")
        assert result.exit_code == 0
        assert result.output == 'hex("#ff") bwor("|") variable("y")\n'

    def test_empty_input_prints_nothing(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", ""])
        assert result.exit_code == 0
        assert result.output == ""

    def test_scan_error(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "1+@"])
        assert result.exit_code == 1
        assert "<expr>:1:3: error: invalid pattern at 1:3" in result.output

    def test_scan_error_keeps_earlier_tokens(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "1+@"])
        assert result.output.startswith('int("1") plus("+")\n')

    def test_filename_from_environment(self, monkeypatch):
        monkeypatch.setenv("DFALEX_FILENAME", "main.calc")
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "@"])
        assert result.exit_code == 1
        assert "main.calc:1:1" in result.output

    def test_whitespace_needs_ws_grammar(self):
        runner = CliRunner()
        assert runner.invoke(main, ["-e", "1 2"]).exit_code == 1
        result = runner.invoke(main, ["-g", "arithmetic-ws", "-e", "1 2"])
        assert result.exit_code == 0
        assert result.output == 'int("1") int("2")\n'

    def test_file_and_expression_conflict(self, tmp_path):
        source = tmp_path / "calc.txt"
        source.write_bytes(b"1")
        runner = CliRunner()
        result = runner.invoke(main, ["-e", "2", str(source)])
        assert result.exit_code == 2

    def test_missing_file(self, tmp_path):
        runner = CliRunner()
        result = runner.invoke(main, [str(tmp_path / "missing.txt")])
        assert result.exit_code == 2

    def test_unknown_grammar(self):
        runner = CliRunner()
        result = runner.invoke(main, ["-g", "pascal", "-e", "1"])
        assert result.exit_code == 2

    def test_version(self):
        runner = CliRunner()
        result = runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output
