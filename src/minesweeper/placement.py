"""
Deferred mine placement.

Mines are seeded on the first move, keeping the 3x3 neighborhood around
that move free so the opening reveal is always safe.
"""
import random
from typing import List, Set

from .exceptions import InvalidMineCountError
from .grid import Grid, Position, get_neighbors


def max_zone_size(size: int) -> int:
    """Largest excluded zone a first move can produce on this board."""
    return min(9, size * size)


def validate_mine_count(num_mines: int, size: int) -> None:
    """
    Check a mine count against the board size.

    The count must stay below the number of cells outside the largest
    possible excluded zone, so any first move can be placed around.

    Raises:
        InvalidMineCountError: If the count is not placeable.
    """
    total_cells = size * size
    if not 0 < num_mines < total_cells:
        raise InvalidMineCountError(
            f"Mine count must be between 1 and {total_cells - 1}, "
            f"got {num_mines}"
        )
    max_mines = total_cells - max_zone_size(size) - 1
    if num_mines > max_mines:
        raise InvalidMineCountError(
            f"Too many mines (max {max_mines} on a {size}x{size} board)"
        )


def excluded_zone(row: int, col: int, size: int) -> Set[Position]:
    """The first move's cell and its in-bounds neighbors."""
    zone = set(get_neighbors(row, col, size))
    zone.add((row, col))
    return zone


def place_mines(
    grid: Grid,
    num_mines: int,
    safe_row: int,
    safe_col: int,
    rng: random.Random,
) -> List[Position]:
    """
    Place mines by rejection sampling outside the excluded zone.

    Args:
        grid: Square grid of cells, all mine-free.
        num_mines: Number of mines to place.
        safe_row: Row of the first move.
        safe_col: Column of the first move.
        rng: Random source.

    Returns:
        Positions of the placed mines, in placement order.

    Raises:
        InvalidMineCountError: If the mines would fill every eligible cell.
    """
    size = len(grid)
    zone = excluded_zone(safe_row, safe_col, size)
    eligible = size * size - len(zone)
    if num_mines >= eligible:
        raise InvalidMineCountError(
            f"Cannot place {num_mines} mines: only {eligible} cells "
            f"lie outside the safe zone"
        )

    placed = []
    while len(placed) < num_mines:
        row = rng.randrange(size)
        col = rng.randrange(size)
        if (row, col) in zone or grid[row][col].is_mine:
            continue
        grid[row][col].is_mine = True
        placed.append((row, col))
    return placed
