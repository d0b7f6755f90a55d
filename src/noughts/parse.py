"""
Decoding of player input.

A move token is a row digit followed by a column letter, e.g. "1a" for the
top-left cell. Decoding does not bounds-check: "4a" becomes (3, 0) and the
board rejects it.
"""

from .errors import MalformedInput
from .game import Move

HUMAN_FIRST = "p"
COMPUTER_FIRST = "c"


def parse_move(token: str) -> Move:
    """
    Convert a token such as "2B" into zero-based (row, column).

    Raises:
        MalformedInput: if the token is not a digit followed by a letter
    """
    text = token.strip()
    if len(text) != 2:
        raise MalformedInput(f"expected a row digit and a column letter like '2b', got {token.strip()!r}")
    row, col = text[0], text[1]
    if not row.isdigit() or not row.isascii():
        raise MalformedInput(f"row must be a digit, got {row!r}")
    if not col.isalpha() or not col.isascii():
        raise MalformedInput(f"column must be a letter, got {col!r}")
    return int(row) - 1, ord(col.upper()) - ord("A")


def format_move(x: int, y: int) -> str:
    """Inverse of parse_move: (1, 1) -> "2B"."""
    return f"{x + 1}{chr(ord('A') + y)}"


def parse_first_player(answer: str) -> bool:
    """
    Interpret the "who moves first" answer.

    Returns:
        True when the human moves first ('p' or empty), False for 'c'
    """
    text = answer.strip().lower()
    if text in ("", HUMAN_FIRST):
        return True
    if text == COMPUTER_FIRST:
        return False
    raise MalformedInput(f"answer '{HUMAN_FIRST}' or '{COMPUTER_FIRST}', got {answer.strip()!r}")
