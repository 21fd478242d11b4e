"""
Gymnasium environment wrapper for Minesweeper.

Provides a standard RL interface for automated players.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import Board, BoardConfig
from .moves import Action, Move, MoveOutcome, MoveResult
from .render import render_board


# ============================================================================
# Minesweeper Environment
# ============================================================================

class MinesweeperEnv(gym.Env):
    """
    Gymnasium environment for Minesweeper.

    Observation:
        2D array where:
        - -1 = hidden cell
        - -2 = flagged cell
        - 0-8 = revealed cell with adjacent mine count
        - 9 = revealed mine (after a loss)

    Actions:
        Discrete action space of size 2 * size * size.
        Action i < size * size reveals cell (i // size, i % size);
        the second half toggles the flag on the same cells.

    Rewards:
        - +1 for a reveal that opens cells
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for a no-op action (already revealed, flagged, game over)
        - 0 for flag toggles
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        """
        Initialize the Minesweeper environment.

        Args:
            config: Board configuration (default: 9x9 with 10 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.board = Board(self.config)
        self.render_mode = render_mode

        size = self.config.size
        self._cells = size * size

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(size, size),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(2 * self._cells)

        self._steps = 0

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Reset the environment for a new episode.

        Args:
            seed: Random seed for reproducibility.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        board_seed = int(self.np_random.integers(0, 2**31 - 1))
        self.board.reset(seed=board_seed)
        self._steps = 0

        return self.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Execute one action in the environment.

        Args:
            action: Flat action index, see class docstring.

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        move = self.action_to_move(action)
        self._steps += 1

        result = self.board.apply(move)
        reward = self._calculate_reward(result)

        observation = self.board.get_observation()
        terminated = not self.board.is_playing
        truncated = False

        info = self._get_info()
        info["outcome"] = result.outcome.name

        return observation, reward, terminated, truncated, info

    def action_to_move(self, action: int) -> Move:
        """Convert flat action index to a Move."""
        action = int(action)
        kind = Action.REVEAL if action < self._cells else Action.FLAG
        index = action % self._cells
        return Move(index // self.config.size, index % self.config.size, kind)

    def move_to_action(self, move: Move) -> int:
        """Convert a Move to its flat action index."""
        index = move.row * self.config.size + move.col
        if move.action == Action.FLAG:
            return self._cells + index
        return index

    def _calculate_reward(self, result: MoveResult) -> float:
        """Reward for a processed move."""
        if result.outcome == MoveOutcome.MINE_HIT:
            return -10.0
        if self.board.is_won:
            return 10.0
        if result.outcome == MoveOutcome.OPENED:
            return 1.0
        if result.outcome.is_informational:
            return -0.1
        return 0.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.board.revealed_safe_count,
            "total_safe": self.board.total_safe_cells,
            "mines_remaining": self.board.mines_remaining,
            "game_state": self.board.status.name,
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        if self.render_mode == "ansi":
            return render_board(self.board)
        if self.render_mode == "human":
            print(render_board(self.board))
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of actions that can change the board.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        if not self.board.is_playing:
            return mask
        for row, col in self.board.get_valid_actions():
            index = row * self.config.size + col
            if self.board.at(row, col).is_hidden:
                mask[index] = True
            mask[self._cells + index] = True
        return mask
