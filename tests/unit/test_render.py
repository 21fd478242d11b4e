"""
Unit tests for text rendering.
"""
from minesweeper import Board, BoardConfig, render_board


class TestRenderBoard:
    """Test the framed text grid."""

    def test_new_board_render(self, default_board: Board) -> None:
        expected = "\n".join(
            [" |123456789|", "-|---------|"]
            + [f"{row}|.........|" for row in range(1, 10)]
            + ["-|---------|"]
        )
        assert render_board(default_board) == expected

    def test_render_after_cascade(self, wall_board: Board) -> None:
        wall_board.toggle_flag(1, 2)
        wall_board.reveal(0, 0)
        lines = render_board(wall_board).splitlines()
        assert lines[2] == "1|/2.......|"
        assert lines[3] == "2|/3*......|"
        assert lines[10] == "9|/2.......|"

    def test_loss_shows_every_mine(self, wall_board: Board) -> None:
        """All ten mines appear as X after a loss."""
        wall_board.toggle_flag(0, 2)
        wall_board.reveal(0, 0)
        wall_board.reveal(8, 8)
        text = render_board(wall_board)
        assert text.count("X") == 10
        assert "*" not in text

    def test_wide_board_labels(self) -> None:
        board = Board(BoardConfig(12, 10))
        lines = render_board(board).splitlines()
        assert lines[0] == "  |123456789012|"
        assert lines[1] == "--|------------|"
        assert lines[2] == " 1|............|"
        assert lines[13] == "12|............|"
