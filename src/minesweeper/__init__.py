"""
Minesweeper game module.

Provides the core board state machine (cells, deferred mine placement,
reveal cascade, move processing, win/loss tracking) plus text-mode and
gymnasium front ends.
"""
from .cell import Cell, CellContent, CellVisibility
from .exceptions import (
    AlreadyPlacedError,
    AlreadyRevealedError,
    FlaggedCellError,
    InvalidMineCountError,
    MinesweeperError,
    OutOfBoundsError,
)
from .status import GameState
from .moves import Action, Move, MoveOutcome, MoveResult
from .board import Board, BoardConfig
from .render import render_board
from .console import parse_move
from .session import GameSession
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellContent",
    "CellVisibility",
    "MinesweeperError",
    "OutOfBoundsError",
    "AlreadyPlacedError",
    "InvalidMineCountError",
    "AlreadyRevealedError",
    "FlaggedCellError",
    "GameState",
    "Action",
    "Move",
    "MoveOutcome",
    "MoveResult",
    "Board",
    "BoardConfig",
    "render_board",
    "parse_move",
    "GameSession",
    "MinesweeperEnv",
]
