"""
Game session module.

A GameSession owns one board plus the counters and state of a single game.
It is created by `new_game` (or `GameSession.from_layout` for fixed boards)
and replaced wholesale when a new game starts.
"""
import random
from enum import Enum, auto
from typing import Iterable, List, Optional, Tuple

import numpy as np

from .board import Board, Position, generate
from .cell import Cell, CellView
from .events import Event, Listener


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATES = (GameState.WON, GameState.LOST)


# ============================================================================
# Session Class
# ============================================================================

class GameSession:
    """
    Mutable state of one Minesweeper game.

    Attributes:
        board: The grid of cells.
        rng: Randomness used if the first click needs a relayout.
        safe_first_click: Run first-click protection on the first reveal.
        mines_remaining: Mines minus flags; goes negative when over-flagged.
        safe_revealed_count: Non-mine cells revealed so far.
        state: Current GameState.
    """

    def __init__(
        self,
        board: Board,
        rng: Optional[random.Random] = None,
        safe_first_click: bool = True,
    ) -> None:
        self.board = board
        self.rng = rng or random.Random()
        self.safe_first_click = safe_first_click
        self.mines_remaining = board.mine_count
        self.safe_revealed_count = 0
        self.state = GameState.NOT_STARTED
        self._listeners: List[Listener] = []

    @classmethod
    def from_layout(
        cls,
        width: int,
        height: int,
        mines: Iterable[Position],
        safe_first_click: bool = True,
        rng: Optional[random.Random] = None,
    ) -> "GameSession":
        """Start a session on a board with mines at fixed positions."""
        board = Board.from_mines(width, height, mines)
        return cls(board, rng=rng, safe_first_click=safe_first_click)

    # ========================================================================
    # Events
    # ========================================================================

    def subscribe(self, listener: Listener) -> None:
        """Register a callable that receives every emitted event."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        self._listeners.remove(listener)

    def emit(self, event: Event) -> None:
        for listener in list(self._listeners):
            listener(event)

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def width(self) -> int:
        return self.board.width

    @property
    def height(self) -> int:
        return self.board.height

    @property
    def mine_count(self) -> int:
        return self.board.mine_count

    @property
    def outcome(self) -> GameState:
        """Alias of `state` for presentation code."""
        return self.state

    @property
    def started(self) -> bool:
        """True once the first reveal has been accepted."""
        return self.state != GameState.NOT_STARTED

    @property
    def is_over(self) -> bool:
        return self.state in TERMINAL_STATES

    @property
    def is_playing(self) -> bool:
        """Check if the game still accepts moves."""
        return not self.is_over

    @property
    def is_won(self) -> bool:
        return self.state == GameState.WON

    @property
    def is_lost(self) -> bool:
        return self.state == GameState.LOST

    def cell(self, row: int, col: int) -> Cell:
        """Get the cell at a position (raises OutOfBoundsError)."""
        return self.board.cell(row, col)

    def cell_view(self, row: int, col: int) -> CellView:
        """Read-only view of a cell; mines stay hidden until revealed or lost."""
        return self.board.cell(row, col).view(show_mine=self.is_lost)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array.

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.height, self.width), dtype=np.int8)
        for cell in self.board.cells():
            obs[cell.row, cell.col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Tuple[int, int]]:
        """
        Get list of cells that can still be revealed.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        if self.is_over:
            return []
        return [cell.position for cell in self.board.cells() if cell.is_hidden]


def new_game(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> GameSession:
    """
    Generate a random board and wrap it in a fresh session.

    Raises:
        ConfigurationError: If the dimensions or mine count are invalid.
    """
    rng = rng or random.Random()
    return GameSession(generate(width, height, mine_count, rng), rng=rng)
