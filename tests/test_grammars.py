"""
Reference Grammar Tests
=======================

End-to-end tests of the arithmetic grammar tables run through the scanner.
"""

import pytest
from dfalex.automaton import EOF, ERROR_STATE
from dfalex.errors import InvalidPatternError
from dfalex.grammars import ARITHMETIC, ARITHMETIC_WS, GRAMMARS, build_arithmetic_automaton
from dfalex.scanner import scan
from dfalex.symbols import Symbol


def pairs(text: str, automaton=ARITHMETIC) -> list:
    """Scan text and return (symbol, lexeme) pairs, EOF included."""
    return [(t.symbol, t.lexeme) for t in scan(text, automaton)]


# =============================================================================
# Table Shape Tests
# =============================================================================

class TestArithmeticTable:
    """Shape of the reference transition table."""

    def test_states(self):
        assert ARITHMETIC.states == frozenset(range(1, 16))
        assert ARITHMETIC.start_state == 1
        assert ARITHMETIC.alphabet == range(0, 256)

    def test_final_states(self):
        """Every state but the start state and the lone '#' is final."""
        assert ARITHMETIC.final_states == frozenset(range(1, 16)) - {1, 3}

    def test_eof_edge_only_from_start(self):
        assert ARITHMETIC.next(1, EOF) == 15
        assert all(
            ARITHMETIC.next(state, EOF) == ERROR_STATE
            for state in ARITHMETIC.states - {1}
        )

    def test_whitespace_variant_adds_skip_state(self):
        assert ARITHMETIC_WS.states == frozenset(range(1, 17))
        assert ARITHMETIC_WS.symbol(16) is Symbol.SKIP
        assert ARITHMETIC.next(1, ord(" ")) == ERROR_STATE

    def test_builder_returns_fresh_equal_tables(self):
        assert build_arithmetic_automaton() == ARITHMETIC
        assert build_arithmetic_automaton() is not ARITHMETIC

    def test_registry(self):
        assert GRAMMARS["arithmetic"] is ARITHMETIC
        assert GRAMMARS["arithmetic-ws"] is ARITHMETIC_WS


# =============================================================================
# End-to-End Tests
# =============================================================================

class TestArithmeticTokens:
    """Token sequences produced by the reference grammar."""

    def test_integer(self):
        assert pairs("417549") == [(Symbol.INT, "417549"), (Symbol.EOF, "")]

    def test_expression(self):
        assert pairs("1+2*(x-3)") == [
            (Symbol.INT, "1"),
            (Symbol.PLUS, "+"),
            (Symbol.INT, "2"),
            (Symbol.TIMES, "*"),
            (Symbol.LPAREN, "("),
            (Symbol.VARIABLE, "x"),
            (Symbol.MINUS, "-"),
            (Symbol.INT, "3"),
            (Symbol.RPAREN, ")"),
            (Symbol.EOF, ""),
        ]

    @pytest.mark.parametrize("text", ["#0", "#ff", "#DEADbeef", "#1a2B"])
    def test_hex(self, text):
        assert pairs(text) == [(Symbol.HEX, text), (Symbol.EOF, "")]

    def test_hex_stops_at_non_hex_letter(self):
        assert pairs("#fg")[:2] == [(Symbol.HEX, "#f"), (Symbol.VARIABLE, "g")]

    @pytest.mark.parametrize("text", ["x", "Total", "abc123", "Z9"])
    def test_variables(self, text):
        assert pairs(text) == [(Symbol.VARIABLE, text), (Symbol.EOF, "")]

    @pytest.mark.parametrize("char,symbol", [
        ("+", Symbol.PLUS),
        ("-", Symbol.MINUS),
        ("*", Symbol.TIMES),
        ("/", Symbol.DIVIDE),
        ("&", Symbol.BWAND),
        ("|", Symbol.BWOR),
        ("(", Symbol.LPAREN),
        (")", Symbol.RPAREN),
    ])
    def test_operators(self, char, symbol):
        assert pairs(char) == [(symbol, char), (Symbol.EOF, "")]

    def test_operators_are_single_characters(self):
        """'++' is two PLUS tokens; no operator spans two characters."""
        assert pairs("++")[:2] == [(Symbol.PLUS, "+"), (Symbol.PLUS, "+")]

    def test_number_then_variable(self):
        assert pairs("2x")[:2] == [(Symbol.INT, "2"), (Symbol.VARIABLE, "x")]

    def test_whitespace_grammar(self):
        assert pairs(" (a | #0F) & b2 ", ARITHMETIC_WS) == [
            (Symbol.LPAREN, "("),
            (Symbol.VARIABLE, "a"),
            (Symbol.BWOR, "|"),
            (Symbol.HEX, "#0F"),
            (Symbol.RPAREN, ")"),
            (Symbol.BWAND, "&"),
            (Symbol.VARIABLE, "b2"),
            (Symbol.EOF, ""),
        ]

    @pytest.mark.parametrize("text", ["@", "1+@", "#", "x_y", "3.5"])
    def test_invalid_input(self, text):
        with pytest.raises(InvalidPatternError):
            scan(text, ARITHMETIC)
