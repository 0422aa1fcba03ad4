"""
Board configuration.

Validates and normalizes the width/height/mine-count triple a player asks
for before a game is generated.
"""
import math
from dataclasses import dataclass, field
from typing import Any

from .errors import ConfigurationError


# ============================================================================
# Constants
# ============================================================================

MIN_SIZE = 5
MAX_SIZE = 30
DEFAULT_WIDTH = 9
DEFAULT_HEIGHT = 9
FALLBACK_MINES = 10


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def recommend_mines(width: int, height: int) -> int:
    """
    Suggest a mine count for a board size.

    Density is 15% up to 100 cells, 17% up to 300 cells, 20% beyond.
    """
    total = width * height
    if total <= 100:
        density = 0.15
    elif total <= 300:
        density = 0.17
    else:
        density = 0.2
    # half-up rounding, not banker's rounding
    suggestion = math.floor(total * density + 0.5)
    return _clamp(suggestion, 1, total - 1)


def _parse_int(value: Any, fallback: int) -> int:
    """Parse loose user input; blanks, junk and zero give the fallback."""
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return fallback
    return parsed or fallback


# ============================================================================
# Configuration Data Class
# ============================================================================

@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns, 5-30.
        height: Number of rows, 5-30.
        num_mines: Total mines to place, 1 to width * height - 1.
    """

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    num_mines: int = field(
        default_factory=lambda: recommend_mines(DEFAULT_WIDTH, DEFAULT_HEIGHT)
    )

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        for name, value in (("width", self.width), ("height", self.height)):
            if not MIN_SIZE <= value <= MAX_SIZE:
                raise ConfigurationError(
                    f"Board {name} must be between {MIN_SIZE} and {MAX_SIZE}"
                )
        if self.num_mines < 1:
            raise ConfigurationError("Board needs at least one mine")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise ConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @classmethod
    def from_input(cls, width: Any, height: Any, mines: Any) -> "BoardConfig":
        """
        Build a config from raw form or command-line values.

        Unparsable or zero values fall back to defaults and everything is
        clamped into range, so this never raises.
        """
        width = _clamp(_parse_int(width, DEFAULT_WIDTH), MIN_SIZE, MAX_SIZE)
        height = _clamp(_parse_int(height, DEFAULT_HEIGHT), MIN_SIZE, MAX_SIZE)
        num_mines = _clamp(
            _parse_int(mines, FALLBACK_MINES), 1, width * height - 1
        )
        return cls(width, height, num_mines)
