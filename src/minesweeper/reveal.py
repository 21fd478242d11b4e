"""
Reveal engine: adjacency counting and zero-region flood fill.
"""
from typing import List

from .grid import Grid, Position, get_neighbors


def count_adjacent_mines(grid: Grid, row: int, col: int) -> int:
    """Count mines adjacent to a specific cell, flagged or not."""
    size = len(grid)
    count = 0
    for neighbor_row, neighbor_col in get_neighbors(row, col, size):
        if grid[neighbor_row][neighbor_col].is_mine:
            count += 1
    return count


def open_region(grid: Grid, row: int, col: int) -> List[Position]:
    """
    Reveal a safe hidden cell, cascading through zero-count neighbors.

    Uses an explicit work-list so large empty regions do not grow the
    call stack. A cell's REVEALED visibility is the visited check: each
    cell is opened at most once. Flagged cells are never opened.

    Args:
        grid: Square grid of cells with mines already placed.
        row: Row of a hidden, non-mine cell.
        col: Column of a hidden, non-mine cell.

    Returns:
        Positions opened, in the order they were revealed.
    """
    size = len(grid)
    opened = []
    stack = [(row, col)]

    while stack:
        current_row, current_col = stack.pop()
        cell = grid[current_row][current_col]
        if not cell.is_hidden or cell.is_mine:
            continue

        count = count_adjacent_mines(grid, current_row, current_col)
        cell.reveal(count)
        opened.append((current_row, current_col))

        if count == 0:
            for neighbor_row, neighbor_col in get_neighbors(
                current_row, current_col, size
            ):
                if grid[neighbor_row][neighbor_col].is_hidden:
                    stack.append((neighbor_row, neighbor_col))

    return opened
