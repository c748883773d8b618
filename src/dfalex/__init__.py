"""
dfalex - Table-Driven Maximal-Munch Scanner
===========================================

This package turns a stream of 8-bit code units into classified tokens
using a deterministic finite automaton (DFA) and the longest-match rule.

Main Components
---------------
- **automaton**: the DFA protocol, the immutable TableAutomaton and the
  AutomatonBuilder used to author transition tables
- **scanner**: the Scanner driving an automaton over a CodeStream, and the
  Token it produces
- **stream**: CodeStream, reading code units from bytes, text or files
- **grammars**: ready-built automatons (the arithmetic reference grammar)
- **printer**: human-readable token listings
- **cli**: the ``dfalex`` command

Quick Start
-----------
Scan a string:
    >>> from dfalex import scan
    >>> from dfalex.grammars import ARITHMETIC
    >>> scan("12+x", ARITHMETIC)
    [Token(INT, '12', 1:1), Token(PLUS, '+', 1:3), Token(VARIABLE, 'x', 1:4), Token(EOF, '', 1:5)]

Author a grammar:
    >>> from dfalex import AutomatonBuilder, Symbol, EOF
    >>> builder = AutomatonBuilder(states=range(1, 4), start_state=1)
    >>> builder.set_range(1, "0", "9", 2).set_range(2, "0", "9", 2)
    >>> builder.set_transition(1, EOF, 3)
    >>> builder.set_symbol(2, Symbol.INT).set_symbol(3, Symbol.EOF)
    >>> digits = builder.build(strict=True)

Or use the command-line tool:
    $ dfalex -e "1+2*(x-3)"

Copyright (c) 2026 dfalex Contributors
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from dfalex.automaton import (
    DFA,
    EOF,
    ERROR_STATE,
    AutomatonBuilder,
    TableAutomaton,
)
from dfalex.config import ScannerOptions
from dfalex.errors import (
    DfaLexError,
    SourceLocation,
    ScanError,
    InvalidPatternError,
    ScannerExhaustedError,
    AutomatonError,
    InvalidStateError,
    InvalidCodeError,
)
from dfalex.scanner import Scanner, Token, scan
from dfalex.stream import CodeStream
from dfalex.symbols import Symbol, symbol_name

__all__ = [
    "__version__",
    # Automaton
    "DFA",
    "EOF",
    "ERROR_STATE",
    "AutomatonBuilder",
    "TableAutomaton",
    # Scanning
    "Scanner",
    "ScannerOptions",
    "Token",
    "CodeStream",
    "scan",
    # Symbols
    "Symbol",
    "symbol_name",
    # Errors
    "DfaLexError",
    "SourceLocation",
    "ScanError",
    "InvalidPatternError",
    "ScannerExhaustedError",
    "AutomatonError",
    "InvalidStateError",
    "InvalidCodeError",
]
