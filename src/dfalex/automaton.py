"""
Deterministic Finite Automaton
==============================

This module defines the automaton abstraction the scanner runs on, and an
immutable table-based implementation with a builder for authoring it.

An automaton is configuration data, not behavior. It is described by:

- ``states``: the finite set of state ids (never containing ERROR_STATE)
- ``alphabet``: a contiguous range of valid codes, plus EOF (-1)
- ``start_state``: where every token starts
- ``final_states``: states where a complete token has been recognized
- ``next(state, code)``: the transition function, ERROR_STATE if undefined
- ``symbol(state)``: the symbol kind of a final state

Table Layout
------------
Each row of the table holds one column per code, with EOF in column 0:

    column = code - alphabet.start + 1      (EOF -> column 0)

Row 0 belongs to ERROR_STATE and is all zeros, so a row index is simply the
state id.

Example
-------
>>> from dfalex.automaton import AutomatonBuilder, EOF
>>> from dfalex.symbols import Symbol
>>> builder = AutomatonBuilder(states=range(1, 4), start_state=1)
>>> builder.set_range(1, "0", "9", 2).set_range(2, "0", "9", 2)
>>> builder.set_transition(1, EOF, 3)
>>> builder.set_symbol(2, Symbol.INT).set_symbol(3, Symbol.EOF)
>>> dfa = builder.build()
>>> dfa.next(1, ord("7"))
2
>>> dfa.next(2, ord("x"))
0

Copyright (c) 2026 dfalex Contributors
"""

from collections import deque
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Mapping, Protocol, Union
import logging

from dfalex.errors import AutomatonError, InvalidCodeError, InvalidStateError
from dfalex.symbols import Symbol

logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

ERROR_STATE = 0     # "no transition": never a member of an automaton's states
EOF = -1            # end-of-input code, a regular transition input

BYTE_ALPHABET = range(0, 256)


# =============================================================================
# Automaton Protocol
# =============================================================================

class DFA(Protocol):
    """
    The capability set the scanner needs from an automaton.

    Any object exposing these members can drive a Scanner; TableAutomaton
    is the implementation shipped with the library.
    """

    states: frozenset[int]
    alphabet: range
    start_state: int
    final_states: frozenset[int]

    def next(self, state: int, code: int) -> int:
        """Return the next state, or ERROR_STATE if no edge is defined."""
        ...

    def symbol(self, state: int) -> Symbol:
        """Return the symbol kind of a final state."""
        ...


# =============================================================================
# Table Automaton
# =============================================================================

@dataclass(frozen=True)
class TableAutomaton:
    """
    Immutable table-driven DFA.

    Instances are produced by AutomatonBuilder.build(); the table and the
    symbol map cannot be changed afterwards.

    Attributes:
        states: State ids of the automaton
        alphabet: Valid codes besides EOF
        start_state: Initial state for every token
        final_states: Accepting states
    """
    states: frozenset[int]
    alphabet: range
    start_state: int
    final_states: frozenset[int]
    _table: tuple[tuple[int, ...], ...] = field(repr=False, hash=False)
    _symbols: Mapping[int, Symbol] = field(repr=False, hash=False)

    def next(self, state: int, code: int) -> int:
        """
        Return the state reached from ``state`` on ``code``.

        Raises:
            InvalidStateError: If state is not one of the automaton's states
            InvalidCodeError: If code is neither EOF nor in the alphabet
        """
        if state not in self.states:
            raise InvalidStateError(state)
        return self._table[state][_column(self.alphabet, code)]

    def symbol(self, state: int) -> Symbol:
        """
        Return the symbol kind yielded by a final state.

        Raises:
            InvalidStateError: If state is not a final state
        """
        if state not in self.final_states:
            raise InvalidStateError(state, "is not a final state")
        return self._symbols[state]


def _column(alphabet: range, code: int) -> int:
    """Map a code to its table column (EOF is column 0)."""
    if code == EOF:
        return 0
    if code not in alphabet:
        raise InvalidCodeError(code)
    return code - alphabet.start + 1


# =============================================================================
# Builder
# =============================================================================

TransitionInput = Union[int, str, range]


class AutomatonBuilder:
    """
    Accumulates transitions and final states, then builds a TableAutomaton.

    The builder is the only mutable piece: it is meant to be used inside a
    function that returns the built automaton, so no table is ever shared
    while still being edited.

    Usage:
        builder = AutomatonBuilder(states=range(1, 16), start_state=1)
        builder.set_range(1, "0", "9", 2)
        builder.set_symbol(2, Symbol.INT)
        automaton = builder.build(strict=True)
    """

    def __init__(
        self,
        states: Iterable[int],
        start_state: int,
        alphabet: range = BYTE_ALPHABET,
    ):
        """
        Args:
            states: State ids; ERROR_STATE (0) and negative ids are rejected
            start_state: Initial state, must be one of ``states``
            alphabet: Contiguous range of valid codes (EOF is always valid)
        """
        self.states = frozenset(states)
        if not self.states:
            raise AutomatonError("an automaton needs at least one state")
        if min(self.states) <= ERROR_STATE:
            raise AutomatonError(
                f"state ids must be positive, {ERROR_STATE} is the error state"
            )
        if start_state not in self.states:
            raise InvalidStateError(start_state)
        if alphabet.step != 1 or len(alphabet) == 0 or alphabet.start < 0:
            raise AutomatonError(f"alphabet must be a contiguous range of codes: {alphabet!r}")

        self.start_state = start_state
        self.alphabet = alphabet

        width = len(alphabet) + 1
        self._rows = [[ERROR_STATE] * width for _ in range(max(self.states) + 1)]
        self._symbols: dict[int, Symbol] = {}

    # =========================================================================
    # Authoring
    # =========================================================================

    def set_transition(
        self,
        from_state: int,
        on: TransitionInput,
        to_state: int,
    ) -> "AutomatonBuilder":
        """
        Declare the edge(s) from ``from_state`` to ``to_state``.

        Args:
            from_state: Source state
            on: A code (EOF included), a single character, or a range of codes
            to_state: Destination state; ERROR_STATE removes the edge

        Returns:
            The builder, for chaining
        """
        self._check_state(from_state)
        if to_state != ERROR_STATE:
            self._check_state(to_state)

        # Resolve every column first so a bad code leaves the row untouched
        columns = [_column(self.alphabet, code) for code in self._codes(on)]
        row = self._rows[from_state]
        for column in columns:
            row[column] = to_state
        return self

    def set_range(
        self,
        from_state: int,
        first: str,
        last: str,
        to_state: int,
    ) -> "AutomatonBuilder":
        """Declare edges for every character from ``first`` to ``last`` inclusive."""
        if len(first) != 1 or len(last) != 1:
            raise AutomatonError(
                f"range bounds must be single characters, got {first!r}..{last!r}"
            )
        if ord(first) > ord(last):
            raise AutomatonError(f"empty character range {first!r}..{last!r}")
        return self.set_transition(from_state, range(ord(first), ord(last) + 1), to_state)

    def set_symbol(self, state: int, symbol: Symbol) -> "AutomatonBuilder":
        """Mark ``state`` as final, yielding ``symbol``."""
        self._check_state(state)
        self._symbols[state] = Symbol(symbol)
        return self

    # =========================================================================
    # Validation and Building
    # =========================================================================

    def dead_end_states(self) -> list[int]:
        """
        Return reachable states that are neither final nor have any edge.

        Entering such a state always ends in a scan error, which almost
        certainly means a transition or a set_symbol() call is missing.
        """
        reachable = {self.start_state}
        pending = deque([self.start_state])
        while pending:
            state = pending.popleft()
            for target in self._rows[state]:
                if target != ERROR_STATE and target not in reachable:
                    reachable.add(target)
                    pending.append(target)

        return sorted(
            state for state in reachable
            if state not in self._symbols
            and not any(self._rows[state])
        )

    def build(self, strict: bool = False) -> TableAutomaton:
        """
        Freeze the accumulated table into a TableAutomaton.

        Args:
            strict: Raise AutomatonError on dead-end states instead of
                    only logging a warning

        Returns:
            The immutable automaton
        """
        dead_ends = self.dead_end_states()
        if dead_ends:
            if strict:
                raise AutomatonError(f"dead-end states: {dead_ends}")
            for state in dead_ends:
                logger.warning(f"State {state} is reachable but has no edges and is not final")

        table = tuple(tuple(row) for row in self._rows)
        edge_count = sum(1 for row in table for target in row if target != ERROR_STATE)
        logger.debug(
            f"Built automaton: {len(self.states)} states, "
            f"{len(self._symbols)} final, {edge_count} edges"
        )

        return TableAutomaton(
            states=self.states,
            alphabet=self.alphabet,
            start_state=self.start_state,
            final_states=frozenset(self._symbols),
            _table=table,
            _symbols=MappingProxyType(dict(self._symbols)),
        )

    # =========================================================================
    # Helpers
    # =========================================================================

    def _check_state(self, state: int) -> None:
        if state not in self.states:
            raise InvalidStateError(state)

    @staticmethod
    def _codes(on: TransitionInput) -> Iterable[int]:
        if isinstance(on, str):
            if len(on) != 1:
                raise AutomatonError(
                    f"expected a single character, got {on!r} (use set_range for ranges)"
                )
            return (ord(on),)
        if isinstance(on, range):
            return on
        return (on,)
