"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged) and content (mine/number).
"""
from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Tuple


# ============================================================================
# Constants
# ============================================================================

MINE_SENTINEL = -1


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    Attributes:
        row: Row index (0-based).
        col: Column index (0-based).
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8), or -1
            when the cell is itself a mine.
        is_flagged: Whether the player has flagged this cell.
        is_revealed: Whether this cell has been opened.
    """

    row: int
    col: int
    is_mine: bool = False
    adjacent_mines: int = 0
    is_flagged: bool = False
    is_revealed: bool = False

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.is_revealed or self.is_flagged:
            return False
        self.is_revealed = True
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.is_revealed:
            return False
        self.is_flagged = not self.is_flagged
        return True

    def expose(self) -> None:
        """Show a mine after a loss, leaving any flag in place."""
        self.is_revealed = True

    def clear(self) -> None:
        """Remove mine content ahead of a relayout."""
        self.is_mine = False
        self.adjacent_mines = 0

    @property
    def is_hidden(self) -> bool:
        """Check if cell is neither revealed nor flagged."""
        return not (self.is_revealed or self.is_flagged)

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    @property
    def state(self) -> CellState:
        """Visual state; a flag wins over an exposed mine."""
        if self.is_flagged:
            return CellState.FLAGGED
        if self.is_revealed:
            return CellState.REVEALED
        return CellState.HIDDEN

    def to_observation(self) -> int:
        """
        Convert cell to an integer observation.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine (game over state)
        """
        state = self.state
        if state == CellState.HIDDEN:
            return -1
        if state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines

    def view(self, show_mine: bool = False) -> "CellView":
        """
        Build a read-only view for presentation code.

        Args:
            show_mine: Expose mine identity even if the cell is hidden
                (used once the game is lost).
        """
        known = self.is_revealed or show_mine
        return CellView(
            row=self.row,
            col=self.col,
            is_revealed=self.is_revealed,
            is_flagged=self.is_flagged,
            is_mine=self.is_mine if known else None,
            adjacent_mines=self.adjacent_mines if self.is_revealed else None,
        )


@dataclass(frozen=True)
class CellView:
    """Snapshot of a cell with mine identity hidden until it is known."""

    row: int
    col: int
    is_revealed: bool
    is_flagged: bool
    is_mine: Optional[bool]
    adjacent_mines: Optional[int]
