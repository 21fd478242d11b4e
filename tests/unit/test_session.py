"""
Unit tests for the interactive session driver.
"""
from typing import Iterable, List, Tuple

import pytest
from minesweeper import GameSession, GameState, InvalidMineCountError
from minesweeper.session import LOSS_MESSAGE, WIN_MESSAGE


def scripted_session(
    lines: Iterable[str], **kwargs
) -> Tuple[GameSession, List[str]]:
    """Build a session fed from a list of input lines."""
    feed = iter(lines)
    output: List[str] = []
    session = GameSession(
        read=lambda prompt: next(feed), write=output.append, **kwargs
    )
    return session, output


# ============================================================================
# Setup Tests
# ============================================================================

class TestSetup:
    """Test board creation and the mine count prompt."""

    def test_prompts_until_valid_count(self) -> None:
        session, output = scripted_session(["abc", "0", "73", "12"])
        board = session.setup()
        assert board.config.num_mines == 12
        assert output[0] == "Please enter a whole number."
        assert len(output) == 3

    def test_preset_count_skips_prompt(self) -> None:
        session, output = scripted_session([], num_mines=5, seed=1)
        board = session.setup()
        assert board.config.num_mines == 5
        assert board.config.seed == 1
        assert output == []

    def test_invalid_preset_count_raises(self) -> None:
        session, _ = scripted_session([], num_mines=80)
        with pytest.raises(InvalidMineCountError):
            session.setup()

    def test_setup_is_idempotent(self) -> None:
        session, _ = scripted_session([], num_mines=10)
        assert session.setup() is session.setup()


# ============================================================================
# Game Loop Tests
# ============================================================================

class TestRun:
    """Test full scripted games."""

    def test_loss(self, wall_mines: List[Tuple[int, int]]) -> None:
        session, output = scripted_session(
            ["1 1 free", "9 9 free"], num_mines=10
        )
        session.setup().seed_mines(wall_mines)

        assert session.run() == GameState.LOST
        assert output[-1] == LOSS_MESSAGE
        assert output[-2].count("X") == 10

    def test_win_by_flags(self, wall_mines: List[Tuple[int, int]]) -> None:
        lines = [f"{row + 1} {col + 1} mine" for row, col in wall_mines]
        session, output = scripted_session(lines, num_mines=10)
        session.setup().seed_mines(wall_mines)

        assert session.run() == GameState.WON
        assert output[-1] == WIN_MESSAGE

    def test_informational_messages(
        self, wall_mines: List[Tuple[int, int]]
    ) -> None:
        lines = [
            "1 1 free",
            "1 1 free",
            "1 2 mine",
            "5 5 mine",
            "5 5 free",
            "hello",
            "0 4 free",
            "1 1 dig",
            "9 9 free",
        ]
        session, output = scripted_session(lines, num_mines=10)
        session.setup().seed_mines(wall_mines)
        session.run()

        messages = [line for line in output if "\n" not in line]
        assert messages == [
            "This is a safe square!",
            "There is a number here!",
            "This is marked square",
            "Enter a move as: row column free|mine",
            "Coordinates must be between 1 and 9",
            "Unknown action, use 'free' or 'mine'",
            LOSS_MESSAGE,
        ]
