"""
Gymnasium environment wrapper for Minesweeper.

Drives a GameSession through the standard step/reset interface and renders
observations as text.
"""
import random
from typing import Any, Dict, Optional, SupportsFloat, Tuple

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .config import BoardConfig
from .reveal import RevealOutcome, reveal
from .session import GameSession, new_game


# ============================================================================
# Text Rendering
# ============================================================================

def render_text(observation: np.ndarray) -> str:
    """
    Render an observation array as ASCII rows.

    Hidden cells are '.', flags 'F', mines '*', zeros blank, numbers as-is.
    """
    lines = []
    for values in observation:
        row_str = ""
        for val in values:
            if val == -1:
                row_str += "."
            elif val == -2:
                row_str += "F"
            elif val == 9:
                row_str += "*"
            elif val == 0:
                row_str += " "
            else:
                row_str += str(val)
            row_str += " "
        lines.append(row_str)
    return "\n".join(lines)


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
        - 9 = revealed mine

    Actions:
        Discrete action space of size width * height.
        Action i reveals the cell at (i // width, i % width).

    Rewards:
        - +1 for revealing a safe cell
        - +10 for winning the game
        - -10 for hitting a mine
        - -0.1 for invalid action (already revealed/flagged)
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
            config: Board configuration (default: 9x9 with 12 mines).
            render_mode: How to render the environment.
        """
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.session: GameSession = self._new_session()

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.height, self.config.width),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(
            self.config.height * self.config.width
        )

        self._steps = 0

    def _new_session(self) -> GameSession:
        seed = int(self.np_random.integers(2 ** 32))
        return new_game(
            self.config.width,
            self.config.height,
            self.config.num_mines,
            rng=random.Random(seed),
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Start a new game.

        Args:
            seed: Random seed for reproducible mine layouts.
            options: Additional options (unused).

        Returns:
            Tuple of (observation, info dict).
        """
        super().reset(seed=seed)
        self.session = self._new_session()
        self._steps = 0
        return self.session.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """
        Reveal one cell.

        Args:
            action: Cell index to reveal (row * width + col).

        Returns:
            Tuple of (observation, reward, terminated, truncated, info).
        """
        row, col = self._action_to_position(action)
        self._steps += 1

        reward = self._calculate_reward(row, col)
        observation = self.session.get_observation()
        terminated = self.session.is_over

        return observation, reward, terminated, False, self._get_info()

    def _action_to_position(self, action: int) -> Tuple[int, int]:
        """Convert flat action index to (row, col) position."""
        return int(action) // self.config.width, int(action) % self.config.width

    def _calculate_reward(self, row: int, col: int) -> float:
        outcome = reveal(self.session, row, col)
        if outcome == RevealOutcome.NO_OP:
            return -0.1
        if self.session.is_won:
            return 10.0
        if outcome == RevealOutcome.MINE_HIT:
            return -10.0
        return 1.0

    def _get_info(self) -> Dict[str, Any]:
        """Get info dictionary for current state."""
        return {
            "steps": self._steps,
            "revealed": self.session.safe_revealed_count,
            "total_safe": self.session.board.safe_cell_count,
            "mines_remaining": self.session.mines_remaining,
            "game_state": self.session.state.name,
            "valid_actions": len(self.session.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        """Render the current board state."""
        text = render_text(self.session.get_observation())
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """
        Get mask of valid actions.

        Returns:
            Boolean array where True = valid action.
        """
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.session.get_valid_actions():
            mask[row * self.config.width + col] = True
        return mask
