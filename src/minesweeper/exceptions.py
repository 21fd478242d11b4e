"""
Exception hierarchy for the Minesweeper core.

Structural errors signal caller or setup defects and propagate to the
driver. Informational situations (already revealed, flagged cell) are
reported as move outcomes at the board level, not raised.
"""


class MinesweeperError(Exception):
    """Base class for all Minesweeper errors."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """Coordinate outside the board."""

    def __init__(self, row: int, col: int, size: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside a {size}x{size} board"
        )
        self.row = row
        self.col = col
        self.size = size


class AlreadyPlacedError(MinesweeperError):
    """Mines were already placed on this board."""


class InvalidMineCountError(MinesweeperError, ValueError):
    """Requested mine count cannot fit on the board."""


class AlreadyRevealedError(MinesweeperError):
    """Cell is already revealed."""


class FlaggedCellError(MinesweeperError):
    """Cell is flagged and must be unflagged first."""
