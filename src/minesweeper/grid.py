"""
Grid helpers shared by placement, reveal and the board.
"""
from typing import List, Tuple

from .cell import Cell

Position = Tuple[int, int]
Grid = List[List[Cell]]


def make_grid(size: int) -> Grid:
    """Create a size x size grid of hidden, mine-free cells."""
    return [[Cell() for _ in range(size)] for _ in range(size)]


def is_valid_position(row: int, col: int, size: int) -> bool:
    """Check if position is within board bounds."""
    return 0 <= row < size and 0 <= col < size


def get_neighbors(row: int, col: int, size: int) -> List[Position]:
    """
    Get valid neighboring cell positions.

    Args:
        row: Row index of center cell.
        col: Column index of center cell.
        size: Side length of the board.

    Returns:
        List of (row, col) tuples for in-bounds neighbors (at most 8).
    """
    neighbors = []
    for delta_row in (-1, 0, 1):
        for delta_col in (-1, 0, 1):
            if delta_row == 0 and delta_col == 0:
                continue
            new_row = row + delta_row
            new_col = col + delta_col
            if is_valid_position(new_row, new_col, size):
                neighbors.append((new_row, new_col))
    return neighbors
