"""
Base agent interface for Minesweeper players.

Defines the abstract interface that all agents must implement.
"""
from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


# ============================================================================
# Base Agent Interface
# ============================================================================

class BaseAgent(ABC):
    """
    Abstract base class for Minesweeper agents.

    Actions follow the environment layout: the first size * size indices
    reveal a cell, the next size * size toggle its flag.
    """

    def __init__(self, board_size: int) -> None:
        """
        Initialize the agent.

        Args:
            board_size: Side length of the square board.
        """
        self.board_size = board_size
        self.total_cells = board_size * board_size

    @abstractmethod
    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Select an action based on the current observation.

        Args:
            observation: 2D array of cell states.
            valid_actions: Optional mask of valid actions.

        Returns:
            Flat action index.
        """
        pass

    def get_valid_actions_from_obs(self, observation: np.ndarray) -> np.ndarray:
        """
        Get valid actions mask from observation.

        Hidden cells (-1) can be revealed; hidden or flagged cells (-2)
        can have their flag toggled.
        """
        flat_obs = observation.flatten()
        reveal = flat_obs == -1
        flag = (flat_obs == -1) | (flat_obs == -2)
        return np.concatenate([reveal, flag])

    def reset(self) -> None:
        """Reset agent state for new episode."""
        pass
