"""
Random baseline player.

Picks uniformly among the moves the action mask allows, optionally
mixing flag toggles in with reveals.
"""
from typing import Optional

import numpy as np

from .base_agent import BaseAgent


# ============================================================================
# Random Agent
# ============================================================================

class RandomAgent(BaseAgent):
    """
    Uniform random player.

    Attributes:
        flag_rate: Chance of toggling a flag instead of revealing when
            both kinds of move are open. With 0.0 the agent only flags
            once nothing is left to reveal.
    """

    def __init__(
        self,
        board_size: int = 9,
        seed: Optional[int] = None,
        flag_rate: float = 0.0,
    ) -> None:
        super().__init__(board_size)
        if not 0.0 <= flag_rate <= 1.0:
            raise ValueError("flag_rate must be between 0 and 1")
        self.rng = np.random.default_rng(seed)
        self.flag_rate = flag_rate

    def select_action(
        self,
        observation: np.ndarray,
        valid_actions: Optional[np.ndarray] = None,
    ) -> int:
        """
        Pick a random reveal, or a random flag toggle at flag_rate.

        Returns:
            Flat action index, or 0 when the mask allows nothing.
        """
        if valid_actions is None:
            valid_actions = self.get_valid_actions_from_obs(observation)

        reveals = np.flatnonzero(valid_actions[: self.total_cells])
        flags = np.flatnonzero(valid_actions[self.total_cells:])
        flags = flags + self.total_cells

        wants_flag = len(flags) > 0 and self.rng.random() < self.flag_rate
        candidates = flags if wants_flag or len(reveals) == 0 else reveals
        if len(candidates) == 0:
            return 0
        return int(self.rng.choice(candidates))
