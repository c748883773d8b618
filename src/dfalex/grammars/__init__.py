"""
Grammars
========

Ready-built automatons. Each grammar module exposes a builder function
returning a fresh TableAutomaton and module-level constants built from it.

GRAMMARS maps the names accepted by the ``dfalex --grammar`` option to
their automatons.
"""

from dfalex.automaton import TableAutomaton
from dfalex.grammars.arithmetic import (
    ARITHMETIC,
    ARITHMETIC_WS,
    build_arithmetic_automaton,
)

GRAMMARS: dict[str, TableAutomaton] = {
    "arithmetic": ARITHMETIC,
    "arithmetic-ws": ARITHMETIC_WS,
}

__all__ = [
    "ARITHMETIC",
    "ARITHMETIC_WS",
    "GRAMMARS",
    "build_arithmetic_automaton",
]
