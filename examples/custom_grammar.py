#!/usr/bin/env python3
"""
dfalex Custom Grammar Demo
==========================

This script demonstrates how to:
1. Author a transition table with AutomatonBuilder
2. Scan text with the longest-match rule
3. Handle skipped whitespace and scan errors

Usage:
    python examples/custom_grammar.py
"""

from dfalex import (
    EOF,
    AutomatonBuilder,
    CodeStream,
    InvalidPatternError,
    Scanner,
    Symbol,
)
from dfalex.printer import format_token


def build_digits_automaton():
    # ==========================================================================
    # States
    # ==========================================================================
    # 1: start
    # 2: digit run (INT)
    # 3: run of spaces (SKIP)
    # 4: end of input (EOF)
    builder = AutomatonBuilder(states=range(1, 5), start_state=1)

    builder.set_range(1, "0", "9", 2)
    builder.set_range(2, "0", "9", 2)

    builder.set_transition(1, " ", 3)
    builder.set_transition(3, " ", 3)

    builder.set_transition(1, EOF, 4)

    builder.set_symbol(2, Symbol.INT)
    builder.set_symbol(3, Symbol.SKIP)
    builder.set_symbol(4, Symbol.EOF)

    return builder.build(strict=True)


def main():
    digits = build_digits_automaton()

    print("Scanning '12  345 6'...")
    scanner = Scanner(digits, CodeStream.from_text("12  345 6"))
    for token in scanner:
        if token.is_eof:
            break
        print(f"  {format_token(token, positions=True)}")

    print("\nScanning '12 x'...")
    try:
        for token in Scanner(digits, CodeStream.from_text("12 x")):
            print(f"  {token!r}")
    except InvalidPatternError as e:
        print(e)


if __name__ == "__main__":
    main()
