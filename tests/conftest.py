"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path
from typing import List, Tuple

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import Board, BoardConfig, Cell


# Mines down the third column plus the bottom-right corner. Revealing
# (0, 0) opens the first two columns only.
WALL_MINES: List[Tuple[int, int]] = [(row, 2) for row in range(9)] + [(8, 8)]


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with 10 mines."""
    return Board()


@pytest.fixture
def seeded_board() -> Board:
    """Create a 9x9 board with a fixed placement seed."""
    return Board(BoardConfig(9, 10, seed=1234))


@pytest.fixture
def wall_board() -> Board:
    """Create a 9x9 board with mines placed along WALL_MINES."""
    board = Board(BoardConfig(9, 10))
    board.seed_mines(WALL_MINES)
    return board


@pytest.fixture
def corner_mine_board() -> Board:
    """Create a 4x4 board with a single mine in the bottom-right corner."""
    board = Board(BoardConfig(4, 1))
    board.seed_mines([(3, 3)])
    return board


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell()
    cell.reveal(3)
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 10)


@pytest.fixture
def wall_mines() -> List[Tuple[int, int]]:
    """Mine positions used by wall_board."""
    return list(WALL_MINES)
