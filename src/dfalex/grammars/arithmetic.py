"""
Reference Arithmetic Grammar
============================

Transition table for a small arithmetic expression language.

| Token     | Pattern                   | States      |
|-----------|---------------------------|-------------|
| INT       | [0-9]+                    | 1 -> 2      |
| HEX       | #[0-9a-fA-F]+             | 1 -> 3 -> 4 |
| VARIABLE  | [a-zA-Z]+[0-9]*           | 1 -> 5 -> 6 |
| PLUS      | +                         | 1 -> 7      |
| MINUS     | -                         | 1 -> 8      |
| TIMES     | *                         | 1 -> 9      |
| DIVIDE    | /                         | 1 -> 10     |
| BWAND     | &                         | 1 -> 11     |
| BWOR      | \\|                       | 1 -> 12     |
| LPAREN    | (                         | 1 -> 13     |
| RPAREN    | )                         | 1 -> 14     |
| EOF       | end of input              | 1 -> 15     |
| SKIP      | [ \\t\\r\\n]+ (WS only)   | 1 -> 16     |

State 3 (a lone '#') is the only non-final state besides the start state,
so "#" followed by anything other than a hex digit is an invalid pattern.
Once a variable has digits (state 6) it cannot take letters again:
"ab12cd" scans as VARIABLE("ab12") VARIABLE("cd").

The plain grammar has no whitespace edges at all; ARITHMETIC_WS adds a
whitespace state whose tokens are skipped.

Copyright (c) 2026 dfalex Contributors
"""

from dfalex.automaton import EOF, AutomatonBuilder, TableAutomaton
from dfalex.symbols import Symbol


START = 1
WHITESPACE_STATE = 16

# Single-character tokens: character -> (state, symbol)
OPERATOR_STATES: dict[str, tuple[int, Symbol]] = {
    "+": (7, Symbol.PLUS),
    "-": (8, Symbol.MINUS),
    "*": (9, Symbol.TIMES),
    "/": (10, Symbol.DIVIDE),
    "&": (11, Symbol.BWAND),
    "|": (12, Symbol.BWOR),
    "(": (13, Symbol.LPAREN),
    ")": (14, Symbol.RPAREN),
}

WHITESPACE = " \t\r\n"


def _hex_digits(builder: AutomatonBuilder, from_state: int, to_state: int) -> None:
    builder.set_range(from_state, "0", "9", to_state)
    builder.set_range(from_state, "a", "f", to_state)
    builder.set_range(from_state, "A", "F", to_state)


def build_arithmetic_automaton(skip_whitespace: bool = False) -> TableAutomaton:
    """
    Build the arithmetic grammar's automaton.

    Args:
        skip_whitespace: Add state 16, which consumes runs of spaces, tabs
                         and line breaks and yields Symbol.SKIP

    Returns:
        A new immutable TableAutomaton
    """
    last_state = WHITESPACE_STATE if skip_whitespace else 15
    builder = AutomatonBuilder(states=range(START, last_state + 1), start_state=START)

    # int
    builder.set_range(START, "0", "9", 2)
    builder.set_range(2, "0", "9", 2)

    # hex
    builder.set_transition(START, "#", 3)
    _hex_digits(builder, 3, 4)
    _hex_digits(builder, 4, 4)

    # variable
    builder.set_range(START, "a", "z", 5)
    builder.set_range(START, "A", "Z", 5)
    builder.set_range(5, "a", "z", 5)
    builder.set_range(5, "A", "Z", 5)

    # variable with digits at the end
    builder.set_range(5, "0", "9", 6)
    builder.set_range(6, "0", "9", 6)

    for char, (state, symbol) in OPERATOR_STATES.items():
        builder.set_transition(START, char, state)
        builder.set_symbol(state, symbol)

    builder.set_transition(START, EOF, 15)

    if skip_whitespace:
        for char in WHITESPACE:
            builder.set_transition(START, char, WHITESPACE_STATE)
            builder.set_transition(WHITESPACE_STATE, char, WHITESPACE_STATE)
        builder.set_symbol(WHITESPACE_STATE, Symbol.SKIP)

    builder.set_symbol(2, Symbol.INT)
    builder.set_symbol(4, Symbol.HEX)
    builder.set_symbol(5, Symbol.VARIABLE)
    builder.set_symbol(6, Symbol.VARIABLE)
    builder.set_symbol(15, Symbol.EOF)

    return builder.build(strict=True)


ARITHMETIC = build_arithmetic_automaton()
ARITHMETIC_WS = build_arithmetic_automaton(skip_whitespace=True)
