"""
Minesweeper engine.

Provides board generation, first-click protection, reveal propagation,
chording, flag bookkeeping and win/loss tracking, plus a Gymnasium adapter.
"""
from .cell import Cell, CellState, CellView
from .board import Board, generate
from .safety import adjust_for_first_click
from .events import CellRevealed, FlagToggled, GameWon, GameLost
from .session import GameSession, GameState, new_game
from .reveal import RevealOutcome, reveal
from .chord import chord
from .flags import toggle_flag
from .config import BoardConfig, recommend_mines
from .errors import SweeperError, ConfigurationError, OutOfBoundsError
from .environment import MinesweeperEnv, render_text

__all__ = [
    "Cell",
    "CellState",
    "CellView",
    "Board",
    "generate",
    "adjust_for_first_click",
    "CellRevealed",
    "FlagToggled",
    "GameWon",
    "GameLost",
    "GameSession",
    "GameState",
    "new_game",
    "RevealOutcome",
    "reveal",
    "chord",
    "toggle_flag",
    "BoardConfig",
    "recommend_mines",
    "SweeperError",
    "ConfigurationError",
    "OutOfBoundsError",
    "MinesweeperEnv",
    "render_text",
]
