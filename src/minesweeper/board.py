"""
Board module for Minesweeper game.

Implements the square game board with deferred mine placement, cell
revealing, flag bookkeeping and game state management.
"""
import random
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .cell import Cell
from .exceptions import (
    AlreadyPlacedError,
    InvalidMineCountError,
    OutOfBoundsError,
)
from .grid import Grid, Position, get_neighbors, is_valid_position, make_grid
from .moves import Action, Move, MoveResult, process_move
from .placement import place_mines, validate_mine_count
from .reveal import open_region
from .status import GameState, evaluate_state, reveal_all_mines


# ============================================================================
# Configuration
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        size: Side length of the square board.
        num_mines: Total mines to place.
        seed: Seed for mine placement, or None for a random layout.
    """

    size: int = 9
    num_mines: int = 10
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.size < 1:
            raise ValueError("Board size must be positive")
        validate_mine_count(self.num_mines, self.size)

    @property
    def total_cells(self) -> int:
        """Number of cells on the board."""
        return self.size * self.size


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the grid of cells and the mine/flag/reveal counters. Mines are
    placed on the first accepted move, away from that move's cell.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _grid: Grid = field(default_factory=list, repr=False)
    _rng: random.Random = field(default_factory=random.Random, repr=False)
    _game_state: GameState = GameState.IN_PROGRESS
    _mines_placed: bool = False
    _flagged_mine_count: int = 0
    _flagged_safe_count: int = 0
    _revealed_safe_count: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        self._rng.seed(self.config.seed)
        self._init_grid()

    def _init_grid(self) -> None:
        """Create empty grid of cells."""
        self._grid = make_grid(self.config.size)

    # ========================================================================
    # Queries
    # ========================================================================

    @property
    def size(self) -> int:
        """Side length of the board."""
        return self.config.size

    @property
    def total_safe_cells(self) -> int:
        """Number of cells without a mine."""
        return self.config.total_cells - self.config.num_mines

    @property
    def mines_placed(self) -> bool:
        """Whether mines have been seeded yet."""
        return self._mines_placed

    @property
    def flagged_mine_count(self) -> int:
        """Mines currently flagged."""
        return self._flagged_mine_count

    @property
    def flagged_safe_count(self) -> int:
        """Safe cells currently flagged by mistake."""
        return self._flagged_safe_count

    @property
    def revealed_safe_count(self) -> int:
        """Safe cells revealed so far."""
        return self._revealed_safe_count

    @property
    def mines_remaining(self) -> int:
        """Mines left to flag, assuming every flag is correct."""
        flags = self._flagged_mine_count + self._flagged_safe_count
        return self.config.num_mines - flags

    @property
    def status(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.IN_PROGRESS

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    def at(self, row: int, col: int) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If either coordinate is outside the board.
        """
        if not is_valid_position(row, col, self.config.size):
            raise OutOfBoundsError(row, col, self.config.size)
        return self._grid[row][col]

    def neighbors(self, row: int, col: int) -> List[Position]:
        """In-bounds neighbor positions of a cell."""
        return get_neighbors(row, col, self.config.size)

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def mine_positions(self) -> List[Position]:
        """Positions of all placed mines."""
        return [(row, col) for row, col, cell in self.cells() if cell.is_mine]

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def place_mines_avoiding(self, safe_row: int, safe_col: int) -> None:
        """
        Place mines randomly, keeping the 3x3 zone around a cell clear.

        Raises:
            AlreadyPlacedError: If mines were already placed.
            OutOfBoundsError: If the safe cell is outside the board.
            InvalidMineCountError: If the mines cannot fit outside the zone.
        """
        if self._mines_placed:
            raise AlreadyPlacedError("Mines have already been placed")
        self.at(safe_row, safe_col)
        place_mines(
            self._grid, self.config.num_mines, safe_row, safe_col, self._rng
        )
        self._mines_placed = True

    def seed_mines(self, positions: Iterable[Position]) -> None:
        """
        Place mines at fixed positions instead of sampling them.

        Raises:
            AlreadyPlacedError: If mines were already placed.
            OutOfBoundsError: If a position is outside the board.
            InvalidMineCountError: If the number of distinct positions
                differs from the configured mine count.
        """
        if self._mines_placed:
            raise AlreadyPlacedError("Mines have already been placed")
        unique = set(positions)
        if len(unique) != self.config.num_mines:
            raise InvalidMineCountError(
                f"Expected {self.config.num_mines} mine positions, "
                f"got {len(unique)}"
            )
        cells = [self.at(row, col) for row, col in unique]
        for cell in cells:
            cell.is_mine = True
        self._mines_placed = True

    # ========================================================================
    # Mutation Primitives
    # ========================================================================

    def flip_flag(self, row: int, col: int) -> bool:
        """
        Toggle the flag on a cell and update the flag counters.

        Returns:
            True if the cell is now flagged.
        """
        cell = self.at(row, col)
        flagged = cell.toggle_flag()
        delta = 1 if flagged else -1
        if cell.is_mine:
            self._flagged_mine_count += delta
        else:
            self._flagged_safe_count += delta
        return flagged

    def open_cells(self, row: int, col: int) -> List[Position]:
        """Run the reveal cascade from a safe hidden cell."""
        opened = open_region(self._grid, row, col)
        self._revealed_safe_count += len(opened)
        return opened

    def refresh_state(self, mine_hit: bool = False) -> GameState:
        """Recompute the game state, exposing all mines on a loss."""
        self._game_state = evaluate_state(self, mine_hit)
        if self._game_state == GameState.LOST:
            reveal_all_mines(self)
        return self._game_state

    # ========================================================================
    # Game Actions
    # ========================================================================

    def apply(self, move: Move) -> MoveResult:
        """Apply a move and return its result."""
        return process_move(self, move)

    def reveal(self, row: int, col: int) -> MoveResult:
        """
        Reveal a cell at the given position.

        On the first move, places mines avoiding this cell. A zero-count
        cell opens its whole connected empty region. Revealing a mine
        loses the game.
        """
        return self.apply(Move(row, col, Action.REVEAL))

    def toggle_flag(self, row: int, col: int) -> MoveResult:
        """Flag or unflag a cell at the given position."""
        return self.apply(Move(row, col, Action.FLAG))

    # ========================================================================
    # Agent Views
    # ========================================================================

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array for an agent.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        size = self.config.size
        obs = np.zeros((size, size), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells a move can still change.

        Returns:
            List of (row, col) positions that are hidden or flagged.
        """
        return [
            (row, col)
            for row, col, cell in self.cells()
            if not cell.is_revealed
        ]

    def reset(self, seed: Optional[int] = None) -> None:
        """Reset board to initial state for new game."""
        if seed is not None:
            self._rng.seed(seed)
        self._init_grid()
        self._game_state = GameState.IN_PROGRESS
        self._mines_placed = False
        self._flagged_mine_count = 0
        self._flagged_safe_count = 0
        self._revealed_safe_count = 0
