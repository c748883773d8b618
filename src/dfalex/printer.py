"""
Token Printer
=============

Renders tokens the way a person reads them:

    int("1") plus("+") variable("x")

The EOF token ends the listing and is not printed itself.
"""

from typing import Iterable, Iterator

from dfalex.scanner import Token
from dfalex.symbols import symbol_name


def format_token(token: Token, positions: bool = False) -> str:
    """
    Format a single token as name("lexeme").

    Args:
        token: The token to format
        positions: Append "@row:column" of the token's first character

    Returns:
        The formatted token, e.g. 'int("42")' or 'int("42")@1:3'
    """
    lexeme = token.lexeme.replace("\\", "\\\\").replace('"', '\\"')
    text = f'{symbol_name(token.symbol)}("{lexeme}")'
    if positions:
        text += f"@{token.start_row}:{token.start_column}"
    return text


def iter_formatted(tokens: Iterable[Token], positions: bool = False) -> Iterator[str]:
    """Format tokens lazily, stopping at the first EOF token."""
    for token in tokens:
        if token.is_eof:
            return
        yield format_token(token, positions=positions)


def format_tokens(
    tokens: Iterable[Token],
    positions: bool = False,
    separator: str = " ",
) -> str:
    """
    Format a token sequence on one line (or one per line with separator="\\n").

    Tokens are consumed only up to the EOF token, so this can be given a
    live Scanner.
    """
    return separator.join(iter_formatted(tokens, positions=positions))
