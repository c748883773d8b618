"""
Symbol Taxonomy
===============

The closed set of symbol kinds an automaton's final states can yield.

Two kinds are reserved and understood by the scanner itself:

- ``SKIP``: recognized but never returned (whitespace, comments)
- ``EOF``: the end-of-input token that terminates every token sequence

The remaining kinds belong to the reference arithmetic grammar:

| Symbol    | Name       | Example lexeme |
|-----------|------------|----------------|
| INT       | int        | 417549         |
| HEX       | hex        | #1F            |
| VARIABLE  | variable   | x, total2      |
| PLUS      | plus       | +              |
| MINUS     | minus      | -              |
| TIMES     | times      | *              |
| DIVIDE    | divide     | /              |
| BWAND     | bwand      | &              |
| BWOR      | bwor       | \\|            |
| LPAREN    | lparen     | (              |
| RPAREN    | rparen     | )              |
"""

from enum import IntEnum


class Symbol(IntEnum):
    """Symbol kinds, numbered as in the reference transition table."""

    # === Reserved ===
    EOF = -1        # End of input
    SKIP = 0        # Recognized, then discarded

    # === Literals and names ===
    INT = 1
    HEX = 2
    VARIABLE = 3

    # === Operators ===
    PLUS = 4
    MINUS = 5
    TIMES = 6
    DIVIDE = 7
    BWAND = 8       # &
    BWOR = 9        # |

    # === Delimiters ===
    LPAREN = 10
    RPAREN = 11


# Human-readable names; SKIP has none since it never reaches a caller
SYMBOL_NAMES: dict[Symbol, str] = {
    Symbol.EOF: "eof",
    Symbol.INT: "int",
    Symbol.HEX: "hex",
    Symbol.VARIABLE: "variable",
    Symbol.PLUS: "plus",
    Symbol.MINUS: "minus",
    Symbol.TIMES: "times",
    Symbol.DIVIDE: "divide",
    Symbol.BWAND: "bwand",
    Symbol.BWOR: "bwor",
    Symbol.LPAREN: "lparen",
    Symbol.RPAREN: "rparen",
}


def symbol_name(symbol: Symbol) -> str:
    """
    Return the display name of a symbol kind.

    Raises:
        ValueError: For SKIP, which is never emitted as a token
    """
    try:
        return SYMBOL_NAMES[symbol]
    except KeyError:
        raise ValueError(f"invalid symbol: {symbol!r}") from None
