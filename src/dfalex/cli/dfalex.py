"""
dfalex - Token Dump Command-Line Interface
==========================================

This module implements the command-line interface of the scanner. It runs
a grammar's automaton over some input and prints the tokens.

Usage Examples
--------------
Scan an expression:
    $ dfalex -e "1+2*(x-3)"
    int("1") plus("+") int("2") times("*") lparen("(") variable("x") minus("-") int("3") rparen(")")

Scan a file, one token per line with positions:
    $ dfalex -g arithmetic-ws -p --one-per-line calc.txt

Scan standard input:
    $ echo -n "#ff|x" | dfalex

Copyright (c) 2026 dfalex Contributors
"""

import logging
from pathlib import Path
from typing import Optional

import click

from dfalex import __version__
from dfalex.cli.errors import handle_cli_exception
from dfalex.config import ScannerOptions
from dfalex.grammars import GRAMMARS
from dfalex.printer import format_token
from dfalex.scanner import Scanner
from dfalex.stream import CodeStream

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


def open_input(input_file: Optional[Path], expr: Optional[str]) -> CodeStream:
    """Pick the input source from the command-line arguments."""
    if input_file is not None and expr is not None:
        raise click.BadParameter("give either INPUT_FILE or --expr, not both")
    if expr is not None:
        return CodeStream.from_text(expr, name="<expr>")
    if input_file is not None:
        return CodeStream.from_path(input_file)
    return CodeStream(click.get_binary_stream("stdin"), name="<stdin>")


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    required=False,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-e", "--expr",
    help="Scan this text instead of a file",
)
@click.option(
    "-g", "--grammar",
    type=click.Choice(sorted(GRAMMARS)),
    default="arithmetic",
    show_default=True,
    help="Automaton to scan with",
)
@click.option(
    "-p", "--positions",
    is_flag=True,
    help="Show row:column of each token",
)
@click.option(
    "--one-per-line",
    is_flag=True,
    help="Print one token per line",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="dfalex")
def main(
    input_file: Optional[Path],
    expr: Optional[str],
    grammar: str,
    positions: bool,
    one_per_line: bool,
    verbose: bool,
) -> None:
    """
    Scan input with a DFA and print its tokens.

    INPUT_FILE is the file to scan. Without it (and without --expr),
    standard input is scanned.

    \b
    Examples:
        dfalex -e "417549"            # int("417549")
        dfalex -g arithmetic-ws a.txt # skip whitespace
        dfalex -p --one-per-line a.txt
    """
    setup_logging(verbose)

    open_line = False
    try:
        with open_input(input_file, expr) as stream:
            options = ScannerOptions.from_env()
            logger.debug(f"Scanning {stream.name} with grammar '{grammar}'")

            scanner = Scanner(GRAMMARS[grammar], stream, options)
            count = 0
            for token in scanner:
                if token.is_eof:
                    break
                text = format_token(token, positions=positions)
                if one_per_line:
                    click.echo(text)
                else:
                    click.echo(text if not open_line else f" {text}", nl=False)
                    open_line = True
                count += 1

        if open_line:
            click.echo()
        logger.debug(f"Scanned {count} tokens")

    except Exception as e:
        if open_line:
            click.echo()
        handle_cli_exception(e, verbose=verbose)


if __name__ == "__main__":
    main()
