"""
Text rendering of the board.

Produces a framed grid with 1-based row and column labels:

     |123456789|
    -|---------|
    1|.........|
    ...
    -|---------|
"""
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .board import Board


def render_board(board: "Board") -> str:
    """Render board as a framed text grid."""
    size = board.size
    label_width = len(str(size))
    digits = "".join(str((col + 1) % 10) for col in range(size))
    rule = "-" * label_width + "|" + "-" * size + "|"

    lines = [" " * label_width + "|" + digits + "|", rule]
    for row in range(size):
        symbols = "".join(
            board.at(row, col).display_symbol() for col in range(size)
        )
        lines.append(str(row + 1).rjust(label_width) + "|" + symbols + "|")
    lines.append(rule)
    return "\n".join(lines)
