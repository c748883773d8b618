"""
dfalex Error Hierarchy
======================

This module defines the exception hierarchy for dfalex.
All exceptions inherit from DfaLexError, allowing callers to catch all
library errors with a single except clause if desired.

Exception Hierarchy
-------------------
DfaLexError (base)
├── ScanError (input-side failures, carry a SourceLocation)
│   ├── InvalidPatternError - no transition and no accepting state reached
│   └── ScannerExhaustedError - token requested after EOF in strict mode
└── AutomatonError (programming errors in a transition table, also ValueError)
    ├── InvalidStateError - state outside the automaton, or not final
    └── InvalidCodeError - code outside the automaton's alphabet

Scan errors are reported to the user; automaton errors indicate a broken
table and should never be caught as part of normal scanning.

Error messages follow this format:
    filename:line:column: error: description
        source_line_text
        ^ (pointer to error location)

Copyright (c) 2026 dfalex Contributors
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# Base Exception Class
# =============================================================================

class DfaLexError(Exception):
    """
    Base exception for all dfalex errors.

        try:
            tokens = scan("1 + 2", ARITHMETIC_WS)
        except DfaLexError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Source Location Tracking
# =============================================================================

@dataclass(frozen=True)
class SourceLocation:
    """
    Represents a location in scanned input for error reporting.

    Attributes:
        filename: Name of the source (or "<input>" for in-memory input)
        line: Row number (1-indexed)
        column: Column number (1-indexed)
    """
    filename: str
    line: int
    column: int

    def __str__(self) -> str:
        """Format as 'filename:line:column' for error messages."""
        return f"{self.filename}:{self.line}:{self.column}"


# =============================================================================
# Scan Errors
# =============================================================================

class ScanError(DfaLexError):
    """
    Base exception for errors raised while scanning input.

    Attributes:
        message: The error description
        location: Where in the input the error occurred (optional)
        source_line: Text of the current line read so far (optional)
    """

    def __init__(
        self,
        message: str,
        location: Optional[SourceLocation] = None,
        source_line: Optional[str] = None,
    ):
        self.message = message
        self.location = location
        self.source_line = source_line
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """
        Format the error message with location and source context.

            calc.txt:1:3: error: invalid pattern at 1:3
                1+@
                  ^
        """
        parts = []

        if self.location:
            parts.append(f"{self.location}: error: {self.message}")
        else:
            parts.append(f"error: {self.message}")

        if self.source_line is not None and self.location is not None:
            parts.append(f"    {self.source_line}")
            if self.location.column > 0:
                padding = " " * (4 + self.location.column - 1)
                parts.append(f"{padding}^")

        return "\n".join(parts)


class InvalidPatternError(ScanError):
    """
    The automaton reached its error state before any accepting state.

    Raised when the longest prefix the automaton could consume ends in a
    non-final state, including the case where the very first code has no
    transition from the start state. The location is the position of the
    code that could not extend the match, not the start of the token.

    Attributes:
        code: The offending code unit, or None when it was end of input
    """

    def __init__(
        self,
        location: SourceLocation,
        code: Optional[int] = None,
        source_line: Optional[str] = None,
    ):
        self.code = code
        super().__init__(
            f"invalid pattern at {location.line}:{location.column}",
            location=location,
            source_line=source_line,
        )


class ScannerExhaustedError(ScanError):
    """
    A token was requested after the EOF token had already been returned.

    Only raised when the scanner runs with ``strict_eof`` enabled; by
    default the scanner keeps returning the EOF token.
    """

    def __init__(self, location: Optional[SourceLocation] = None):
        super().__init__("no tokens left after end of input", location=location)


# =============================================================================
# Automaton Errors
# =============================================================================

class AutomatonError(DfaLexError, ValueError):
    """
    A transition table was built or queried incorrectly.

    These are programming errors in the table, not problems with the
    scanned input, so they also derive from ValueError.
    """
    pass


class InvalidStateError(AutomatonError):
    """A state is not part of the automaton, or is not a final state."""

    def __init__(self, state: int, reason: str = "is not a state of the automaton"):
        self.state = state
        super().__init__(f"state {state} {reason}")


class InvalidCodeError(AutomatonError):
    """A code is outside the automaton's alphabet (and is not EOF)."""

    def __init__(self, code: int):
        self.code = code
        super().__init__(f"code {code} is outside the alphabet")
