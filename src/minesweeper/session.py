"""
Interactive session driver.

Owns the turn loop: asks for a mine count once, then reads moves,
applies them to the board and prints the grid until the game ends.
"""
from typing import Callable, Optional

from .board import Board, BoardConfig
from .console import parse_mine_count, parse_move
from .exceptions import InvalidMineCountError
from .moves import Move, MoveOutcome, MoveResult
from .render import render_board
from .status import GameState


MINE_COUNT_PROMPT = "How many mines do you want on the field? > "
MOVE_PROMPT = "Set/unset mines marks or claim a cell as free: > "

WIN_MESSAGE = "Congratulations! You found all the mines!"
LOSS_MESSAGE = "You stepped on a mine and failed!"


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Text-mode game driver.

    Input and output go through the ``read`` and ``write`` callables so
    the loop can be driven from scripts and tests.
    """

    def __init__(
        self,
        size: int = 9,
        num_mines: Optional[int] = None,
        seed: Optional[int] = None,
        read: Callable[[str], str] = input,
        write: Callable[[str], None] = print,
    ) -> None:
        """
        Initialize the session.

        Args:
            size: Side length of the board.
            num_mines: Mine count, or None to ask the player.
            seed: Seed for mine placement.
            read: Prompt-and-read function.
            write: Output function.
        """
        self.size = size
        self.num_mines = num_mines
        self.seed = seed
        self.read = read
        self.write = write
        self.board: Optional[Board] = None

    def setup(self) -> Board:
        """
        Create the board, prompting for a mine count if none was given.

        Raises:
            InvalidMineCountError: If a preset mine count does not fit.
        """
        if self.board is not None:
            return self.board
        if self.num_mines is not None:
            self.board = Board(
                BoardConfig(self.size, self.num_mines, self.seed)
            )
            return self.board

        while self.board is None:
            count = parse_mine_count(self.read(MINE_COUNT_PROMPT))
            if count is None:
                self.write("Please enter a whole number.")
                continue
            try:
                config = BoardConfig(self.size, count, self.seed)
            except InvalidMineCountError as error:
                self.write(str(error))
                continue
            self.board = Board(config)
        return self.board

    def next_move(self) -> Move:
        """Prompt until the player enters a move inside the board."""
        while True:
            move = parse_move(self.read(MOVE_PROMPT))
            if move is None:
                self.write("Enter a move as: row column free|mine")
                continue
            if move.action is not None and not self._in_range(move):
                self.write(
                    f"Coordinates must be between 1 and {self.size}"
                )
                continue
            return move

    def _in_range(self, move: Move) -> bool:
        return 0 <= move.row < self.size and 0 <= move.col < self.size

    def describe(self, result: MoveResult) -> Optional[str]:
        """Player-facing message for a move result, if any."""
        outcome = result.outcome
        if outcome == MoveOutcome.ALREADY_REVEALED:
            cell = self.board.at(result.move.row, result.move.col)
            if cell.number:
                return "There is a number here!"
            return "This is a safe square!"
        if outcome == MoveOutcome.CELL_FLAGGED:
            return "This is marked square"
        if outcome == MoveOutcome.INVALID_INPUT:
            return "Unknown action, use 'free' or 'mine'"
        if outcome == MoveOutcome.GAME_OVER:
            return "The game is over"
        return None

    def play_turn(self) -> MoveResult:
        """Read one move, apply it and report informational outcomes."""
        result = self.board.apply(self.next_move())
        message = self.describe(result)
        if message:
            self.write(message)
        return result

    def run(self) -> GameState:
        """
        Play a full game.

        Returns:
            The final game state, WON or LOST.
        """
        board = self.setup()
        self.write(render_board(board))

        while board.is_playing:
            self.play_turn()
            if board.is_playing:
                self.write("\n" + render_board(board))

        self.write(render_board(board))
        self.write(WIN_MESSAGE if board.is_won else LOSS_MESSAGE)
        return board.status
