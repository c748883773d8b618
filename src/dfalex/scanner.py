"""
Maximal-Munch Scanner
=====================

This module implements the scanner: it drives a DFA over a CodeStream and
returns one token per call, always choosing the longest prefix of the
remaining input that the automaton can consume.

Algorithm
---------
For each token:

1. Remember the current row/column as the token's start.
2. Start from the automaton's start state with the buffered lookahead code,
   or a freshly read one.
3. While the automaton has an edge for (state, code): take it, append the
   code to the lexeme, advance the position and read the next code.
4. The code that had no edge is kept as the lookahead for the next token.
5. If the state reached is final, its symbol names the token. SKIP tokens
   are dropped and scanning starts over; anything else is returned.
   A SKIP match that consumed no input is treated as a dead end.
   A non-final state raises InvalidPatternError at the current position.

End of input is the EOF code (-1) and goes through the automaton like any
other code: a grammar recognizes the end of the file by giving its start
state an EOF edge into a state whose symbol is Symbol.EOF.

Position Tracking
-----------------
Rows and columns are 1-based. A newline code moves to the next row and
resets the column to 1; any other consumed code moves one column right.
Consuming EOF does not move the cursor.

Example
-------
>>> from dfalex import Scanner, CodeStream
>>> from dfalex.grammars import ARITHMETIC
>>> scanner = Scanner(ARITHMETIC, CodeStream.from_text("1+x"))
>>> for token in scanner:
...     print(token)
Token(INT, '1', 1:1)
Token(PLUS, '+', 1:2)
Token(VARIABLE, 'x', 1:3)
Token(EOF, '', 1:4)

Copyright (c) 2026 dfalex Contributors
"""

from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Union
import logging

from dfalex.automaton import DFA, EOF, ERROR_STATE
from dfalex.config import ScannerOptions
from dfalex.errors import (
    InvalidPatternError,
    ScannerExhaustedError,
    SourceLocation,
)
from dfalex.stream import CodeStream
from dfalex.symbols import Symbol

logger = logging.getLogger(__name__)

NEWLINE = ord("\n")


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A recognized lexeme and its symbol kind.

    Attributes:
        symbol: The Symbol the automaton's final state yielded
        lexeme: The consumed code units, one character per unit (Latin-1)
        start_row: Row of the first code unit (1-indexed)
        start_column: Column of the first code unit (1-indexed)
        filename: Name of the scanned source
    """
    symbol: Symbol
    lexeme: str
    start_row: int
    start_column: int
    filename: str = "<input>"

    def __repr__(self) -> str:
        return f"Token({self.symbol.name}, {self.lexeme!r}, {self.start_row}:{self.start_column})"

    @property
    def raw(self) -> bytes:
        """The lexeme as the original code units."""
        return self.lexeme.encode("latin-1")

    @property
    def location(self) -> SourceLocation:
        """Return a SourceLocation for error reporting."""
        return SourceLocation(self.filename, self.start_row, self.start_column)

    @property
    def is_eof(self) -> bool:
        return self.symbol is Symbol.EOF


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Splits a code stream into tokens using a DFA.

    One Scanner owns its stream, its lookahead and its position for its
    whole lifetime; it is not meant to be shared between threads.

    Usage:
        scanner = Scanner(ARITHMETIC, CodeStream.from_text("1+2"))
        token = scanner.get_token()

    Attributes:
        automaton: The DFA being driven
        stream: The code stream being read
        options: Scanner configuration
        filename: Source name reported in tokens and errors
    """

    def __init__(
        self,
        automaton: DFA,
        stream: Union[CodeStream, BinaryIO],
        options: Optional[ScannerOptions] = None,
    ):
        """
        Args:
            automaton: Any object implementing the DFA protocol
            stream: A CodeStream, or a binary file object to wrap in one
            options: Scanner configuration (defaults to ScannerOptions())
        """
        if not isinstance(stream, CodeStream):
            stream = CodeStream(stream)

        self.automaton = automaton
        self.stream = stream
        self.options = options or ScannerOptions()
        self.filename = self.options.filename or stream.name

        # Code read from the stream but not yet part of any lexeme
        self._lookahead: Optional[int] = None

        self._row = self.options.line_number
        self._column = 1

        # Consumed text of the current row, for error context
        self._line_text: list[str] = []

        self._eof_token: Optional[Token] = None

    # =========================================================================
    # Position
    # =========================================================================

    @property
    def row(self) -> int:
        """Current row of the cursor (1-indexed)."""
        return self._row

    @property
    def column(self) -> int:
        """Current column of the cursor (1-indexed)."""
        return self._column

    @property
    def location(self) -> SourceLocation:
        """Current cursor position as a SourceLocation."""
        return SourceLocation(self.filename, self._row, self._column)

    def _advance(self, code: int) -> None:
        """Move the cursor over a consumed code unit."""
        if code == NEWLINE:
            self._row += 1
            self._column = 1
            self._line_text.clear()
        else:
            self._column += 1
            self._line_text.append(chr(code))

    # =========================================================================
    # Token Extraction
    # =========================================================================

    def get_token(self) -> Token:
        """
        Return the next significant token.

        Returns:
            The next token; the last one has symbol Symbol.EOF. Once it has
            been returned, later calls return it again unless strict_eof
            is set.

        Raises:
            InvalidPatternError: If the input cannot be matched
            ScannerExhaustedError: If called after EOF with strict_eof
        """
        if self._eof_token is not None:
            if self.options.strict_eof:
                raise ScannerExhaustedError(self.location)
            logger.debug("Input exhausted, repeating EOF token")
            return self._eof_token

        while True:
            start_row = self._row
            start_column = self._column

            state, lexeme = self._longest_match()

            if state not in self.automaton.final_states:
                raise self._dead_end()

            symbol = Symbol(self.automaton.symbol(state))
            if symbol is Symbol.SKIP:
                if not lexeme:
                    # Skipping nothing would rescan the same lookahead forever
                    raise self._dead_end()
                logger.debug(f"Skipped {lexeme!r} at {start_row}:{start_column}")
                continue

            token = Token(symbol, lexeme, start_row, start_column, self.filename)
            logger.debug(f"Recognized {token!r}")

            if symbol is Symbol.EOF:
                self._eof_token = token
            return token

    def _longest_match(self) -> tuple[int, str]:
        """
        Run the automaton from its start state for as long as it has edges.

        Returns:
            The state reached and the consumed lexeme. The code that ended
            the match is left in the lookahead buffer.
        """
        if self._lookahead is not None:
            code = self._lookahead
        else:
            code = self.stream.read()

        state = self.automaton.start_state
        lexeme: list[str] = []

        while True:
            candidate = self.automaton.next(state, code)
            if candidate == ERROR_STATE:
                break

            state = candidate
            if code != EOF:
                lexeme.append(chr(code))
                self._advance(code)
            code = self.stream.read()

        self._lookahead = code
        return state, "".join(lexeme)

    def _dead_end(self) -> InvalidPatternError:
        """Build the error for a match that stopped outside a final state."""
        code = self._lookahead
        line = "".join(self._line_text)
        if code is not None and code not in (EOF, NEWLINE):
            line += chr(code)
        return InvalidPatternError(
            self.location,
            code=None if code == EOF else code,
            source_line=line,
        )

    # =========================================================================
    # Iteration
    # =========================================================================

    def tokens(self) -> Iterator[Token]:
        """
        Generate tokens up to and including the EOF token.

        Yields:
            Token objects in input order

        Raises:
            InvalidPatternError: If the input cannot be matched
        """
        while True:
            token = self.get_token()
            yield token
            if token.is_eof:
                return

    def __iter__(self) -> Iterator[Token]:
        return self.tokens()


# =============================================================================
# Convenience Function
# =============================================================================

Source = Union[bytes, str, Path, CodeStream, BinaryIO]


def scan(
    source: Source,
    automaton: DFA,
    options: Optional[ScannerOptions] = None,
) -> list[Token]:
    """
    Scan a whole input and return its tokens.

    Args:
        source: bytes, text (encoded as UTF-8), a Path to a file, a
                CodeStream or a binary file object
        automaton: The DFA to scan with
        options: Scanner configuration

    Returns:
        All tokens, ending with the EOF token

    Raises:
        InvalidPatternError: If the input cannot be matched
        FileNotFoundError: If source is a Path that does not exist
    """
    if isinstance(source, Path):
        with CodeStream.from_path(source) as stream:
            return list(Scanner(automaton, stream, options))

    if isinstance(source, bytes):
        stream = CodeStream.from_bytes(source)
    elif isinstance(source, str):
        stream = CodeStream.from_text(source)
    else:
        stream = source

    return list(Scanner(automaton, stream, options))
