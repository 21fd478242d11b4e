"""
Move processor: validates a player action and applies it to the board.

Every (action, cell state) pair has a defined outcome. Only MINE_HIT
ends the game in defeat, and it is reported rather than raised.
"""
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import TYPE_CHECKING, List, Optional

from .cell import Cell
from .grid import Position
from .status import GameState

if TYPE_CHECKING:
    from .board import Board


# ============================================================================
# Move Types
# ============================================================================

class Action(Enum):
    """Player actions."""

    FLAG = "flag"
    REVEAL = "reveal"


class MoveOutcome(Enum):
    """Result of applying a move."""

    FLAGGED = auto()
    UNFLAGGED = auto()
    OPENED = auto()
    MINE_HIT = auto()
    ALREADY_REVEALED = auto()
    CELL_FLAGGED = auto()
    INVALID_INPUT = auto()
    GAME_OVER = auto()

    @property
    def is_informational(self) -> bool:
        """True for no-op outcomes the driver may display."""
        return self in (
            MoveOutcome.ALREADY_REVEALED,
            MoveOutcome.CELL_FLAGGED,
            MoveOutcome.INVALID_INPUT,
            MoveOutcome.GAME_OVER,
        )


@dataclass(frozen=True)
class Move:
    """
    A single player move in 0-based board coordinates.

    Attributes:
        row: Row index.
        col: Column index.
        action: Action to apply, or None for unrecognized input.
    """

    row: int
    col: int
    action: Optional[Action]


@dataclass
class MoveResult:
    """
    Outcome of a processed move.

    Attributes:
        move: The move that was applied.
        outcome: What happened.
        state: Game state after the move.
        opened: Positions revealed by the move, in reveal order.
    """

    move: Move
    outcome: MoveOutcome
    state: GameState
    opened: List[Position] = field(default_factory=list)

    @property
    def cells_opened(self) -> int:
        """Number of cells revealed by the move."""
        return len(self.opened)


# ============================================================================
# Transition Table
# ============================================================================

def classify_move(action: Action, cell: Cell) -> MoveOutcome:
    """
    Decide the outcome of an action on a cell without mutating it.

    Args:
        action: Flag or reveal.
        cell: Target cell, with mines already placed.

    Returns:
        The outcome the move will produce.
    """
    if action == Action.FLAG:
        if cell.is_revealed:
            return MoveOutcome.ALREADY_REVEALED
        if cell.is_flagged:
            return MoveOutcome.UNFLAGGED
        return MoveOutcome.FLAGGED

    if cell.is_flagged:
        return MoveOutcome.CELL_FLAGGED
    if cell.is_revealed:
        return MoveOutcome.ALREADY_REVEALED
    if cell.is_mine:
        return MoveOutcome.MINE_HIT
    return MoveOutcome.OPENED


def process_move(board: "Board", move: Move) -> MoveResult:
    """
    Validate and apply a move to the board.

    Mines are placed lazily around the first accepted move. Moves after
    the game has ended change nothing.

    Args:
        board: Board to mutate.
        move: Move in 0-based coordinates.

    Returns:
        The move result, including the game state afterwards.

    Raises:
        OutOfBoundsError: If the coordinates are outside the board.
    """
    if move.action is None:
        return MoveResult(move, MoveOutcome.INVALID_INPUT, board.status)

    cell = board.at(move.row, move.col)

    if board.status != GameState.IN_PROGRESS:
        return MoveResult(move, MoveOutcome.GAME_OVER, board.status)

    if not board.mines_placed:
        board.place_mines_avoiding(move.row, move.col)

    outcome = classify_move(move.action, cell)
    opened: List[Position] = []

    if outcome in (MoveOutcome.FLAGGED, MoveOutcome.UNFLAGGED):
        board.flip_flag(move.row, move.col)
    elif outcome == MoveOutcome.OPENED:
        opened = board.open_cells(move.row, move.col)

    state = board.refresh_state(mine_hit=outcome == MoveOutcome.MINE_HIT)
    return MoveResult(move, outcome, state, opened)
