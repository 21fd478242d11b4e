"""
Unit tests for mine placement helpers.
"""
import random

import pytest
from minesweeper import InvalidMineCountError
from minesweeper.grid import make_grid
from minesweeper.placement import (
    excluded_zone,
    max_zone_size,
    place_mines,
    validate_mine_count,
)


# ============================================================================
# Excluded Zone Tests
# ============================================================================

class TestExcludedZone:
    """Test the safe zone around the first move."""

    def test_interior_zone_is_three_by_three(self) -> None:
        zone = excluded_zone(4, 4, 9)
        assert len(zone) == 9
        assert (4, 4) in zone
        assert (3, 5) in zone

    def test_corner_zone_is_clamped(self) -> None:
        assert excluded_zone(0, 0, 9) == {(0, 0), (0, 1), (1, 0), (1, 1)}

    def test_edge_zone_is_clamped(self) -> None:
        assert len(excluded_zone(0, 4, 9)) == 6

    @pytest.mark.parametrize("size,expected", [(1, 1), (2, 4), (3, 9), (9, 9)])
    def test_max_zone_size(self, size: int, expected: int) -> None:
        assert max_zone_size(size) == expected


# ============================================================================
# Mine Count Validation Tests
# ============================================================================

class TestValidateMineCount:
    """Test the setup-time feasibility check."""

    @pytest.mark.parametrize("count", [1, 10, 71])
    def test_valid_counts(self, count: int) -> None:
        validate_mine_count(count, 9)

    @pytest.mark.parametrize("count", [-1, 0, 72, 73, 81, 200])
    def test_invalid_counts(self, count: int) -> None:
        with pytest.raises(InvalidMineCountError):
            validate_mine_count(count, 9)

    def test_three_by_three_board_has_no_room(self) -> None:
        """A 3x3 board is all safe zone for a center move."""
        with pytest.raises(InvalidMineCountError):
            validate_mine_count(1, 3)


# ============================================================================
# Placement Tests
# ============================================================================

class TestPlaceMines:
    """Test rejection-sampling placement."""

    def test_places_distinct_mines_outside_zone(self) -> None:
        grid = make_grid(9)
        placed = place_mines(grid, 10, 4, 4, random.Random(0))
        assert len(placed) == 10
        assert len(set(placed)) == 10
        assert not set(placed) & excluded_zone(4, 4, 9)
        assert sum(cell.is_mine for row in grid for cell in row) == 10

    def test_corner_move_leaves_more_room(self) -> None:
        """Clamped zones allow denser boards for that move."""
        grid = make_grid(3)
        placed = place_mines(grid, 4, 0, 0, random.Random(1))
        assert len(set(placed)) == 4
        assert set(placed) <= {(0, 2), (1, 2), (2, 0), (2, 1), (2, 2)}

    def test_raises_when_mines_fill_every_eligible_cell(self) -> None:
        """Mines may not take every cell outside the zone."""
        grid = make_grid(3)
        with pytest.raises(InvalidMineCountError):
            place_mines(grid, 5, 0, 0, random.Random(1))

    def test_raises_when_zone_leaves_no_room(self) -> None:
        """Fails fast instead of sampling forever."""
        grid = make_grid(3)
        with pytest.raises(InvalidMineCountError):
            place_mines(grid, 1, 1, 1, random.Random(0))
        assert not any(cell.is_mine for row in grid for cell in row)

    def test_zone_cells_stay_plain_hidden_cells(self) -> None:
        grid = make_grid(9)
        place_mines(grid, 10, 0, 0, random.Random(2))
        for row, col in excluded_zone(0, 0, 9):
            cell = grid[row][col]
            assert cell.is_hidden is True
            assert cell.number is None
