"""
Error types raised by the Minesweeper engine.

Reveal, flag and chord calls on a finished game or a blocked cell are not
errors: they return quietly without touching the board.
"""


class SweeperError(Exception):
    """Base class for engine errors."""


class ConfigurationError(SweeperError, ValueError):
    """Board dimensions or mine count are outside the valid range."""


class OutOfBoundsError(SweeperError, IndexError):
    """A row/column pair does not address a cell on the board."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        super().__init__(
            f"Position ({row}, {col}) is outside the {height}x{width} board"
        )
        self.row = row
        self.col = col
