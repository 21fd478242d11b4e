"""
Game state tracking: derives in-progress/won/lost from board counters.
"""
from enum import Enum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board


class GameState(Enum):
    """Possible states of the game."""

    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


def has_won(board: "Board") -> bool:
    """
    Check the victory condition.

    Won when every safe cell is revealed, or when all and only the mines
    are flagged.
    """
    if board.revealed_safe_count == board.total_safe_cells:
        return True
    return (
        board.flagged_mine_count == board.config.num_mines
        and board.flagged_safe_count == 0
    )


def evaluate_state(board: "Board", mine_hit: bool) -> GameState:
    """Recompute the game state after a move."""
    if mine_hit:
        return GameState.LOST
    if has_won(board):
        return GameState.WON
    return GameState.IN_PROGRESS


def reveal_all_mines(board: "Board") -> int:
    """
    Open every mine, flagged or not, for the end-of-game display.

    Returns:
        Number of mines exposed.
    """
    exposed = 0
    for _, _, cell in board.cells():
        if cell.is_mine:
            cell.expose()
            exposed += 1
    return exposed
