"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their visibility
(hidden/revealed/flagged) and content (mine/empty/number).
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional

from .exceptions import AlreadyRevealedError, FlaggedCellError


# ============================================================================
# Constants
# ============================================================================

class CellVisibility(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class CellContent(Enum):
    """What a cell holds once known."""

    MINE = auto()
    EMPTY = auto()
    NUMBER = auto()


HIDDEN_SYMBOL = "."
FLAG_SYMBOL = "*"
EMPTY_SYMBOL = "/"
MINE_SYMBOL = "X"


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        is_mine: Whether this cell contains a mine. Fixed at placement.
        visibility: Current visual state (hidden, revealed, or flagged).
        number: Adjacent mine count (0-8), present only once a safe cell
            has been revealed.
    """

    is_mine: bool = False
    visibility: CellVisibility = CellVisibility.HIDDEN
    number: Optional[int] = None

    def reveal(self, adjacent_mines: int = 0) -> None:
        """
        Reveal this cell.

        Args:
            adjacent_mines: Mine count among the neighbors, recorded for
                safe cells and ignored for mines.

        Raises:
            AlreadyRevealedError: If the cell is already revealed.
            FlaggedCellError: If the cell is flagged.
            ValueError: If adjacent_mines is outside 0-8.
        """
        if self.visibility == CellVisibility.REVEALED:
            raise AlreadyRevealedError("Cell is already revealed")
        if self.visibility == CellVisibility.FLAGGED:
            raise FlaggedCellError("Cell is flagged, unflag it first")
        if not 0 <= adjacent_mines <= 8:
            raise ValueError(f"Invalid adjacent mine count: {adjacent_mines}")

        self.visibility = CellVisibility.REVEALED
        if not self.is_mine:
            self.number = adjacent_mines

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if the cell is now flagged, False if it is hidden again.

        Raises:
            AlreadyRevealedError: If the cell is revealed.
        """
        if self.visibility == CellVisibility.REVEALED:
            raise AlreadyRevealedError("Cannot flag a revealed cell")
        if self.visibility == CellVisibility.HIDDEN:
            self.visibility = CellVisibility.FLAGGED
            return True
        self.visibility = CellVisibility.HIDDEN
        return False

    def expose(self) -> None:
        """Force a mine open for the end-of-game display."""
        self.visibility = CellVisibility.REVEALED

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.visibility == CellVisibility.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.visibility == CellVisibility.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.visibility == CellVisibility.FLAGGED

    @property
    def content(self) -> Optional[CellContent]:
        """Known content, or None for a safe cell not yet revealed."""
        if self.is_mine:
            return CellContent.MINE
        if self.number is None:
            return None
        if self.number == 0:
            return CellContent.EMPTY
        return CellContent.NUMBER

    def display_symbol(self) -> str:
        """
        Single character used by the text renderer.

        Returns:
            ".": Hidden cell (mine or not)
            "*": Flagged cell
            "/": Revealed cell with no adjacent mines
            "X": Revealed mine (after a loss)
            "1"-"8": Revealed cell with adjacent mine count
        """
        if self.visibility == CellVisibility.HIDDEN:
            return HIDDEN_SYMBOL
        if self.visibility == CellVisibility.FLAGGED:
            return FLAG_SYMBOL
        if self.is_mine:
            return MINE_SYMBOL
        if self.number == 0:
            return EMPTY_SYMBOL
        return str(self.number)

    def to_observation(self) -> int:
        """
        Convert cell to observation value for an agent.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        if self.visibility == CellVisibility.HIDDEN:
            return -1
        if self.visibility == CellVisibility.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.number
