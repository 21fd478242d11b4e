"""
Console input parsing.

Players type moves as ``row column action`` with 1-based coordinates,
for example ``3 5 free`` or ``1 1 mine``.
"""
from typing import Dict, Optional

from .moves import Action, Move


ACTION_TOKENS: Dict[str, Action] = {
    "free": Action.REVEAL,
    "reveal": Action.REVEAL,
    "mine": Action.FLAG,
    "flag": Action.FLAG,
}


def parse_action(token: str) -> Optional[Action]:
    """Map an action keyword to an Action, or None if unrecognized."""
    return ACTION_TOKENS.get(token.strip().lower())


def parse_move(line: str) -> Optional[Move]:
    """
    Parse a move line into a 0-based Move.

    Args:
        line: Raw player input.

    Returns:
        The move, with action None for an unknown keyword, or None if
        the line does not hold two integers and a keyword.
    """
    tokens = line.split()
    if len(tokens) != 3:
        return None
    try:
        row = int(tokens[0])
        col = int(tokens[1])
    except ValueError:
        return None
    return Move(row - 1, col - 1, parse_action(tokens[2]))


def parse_mine_count(line: str) -> Optional[int]:
    """Parse a mine count, or None if the input is not an integer."""
    try:
        return int(line.strip())
    except ValueError:
        return None
