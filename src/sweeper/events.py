"""
Domain events emitted by a game session.

Presentation code subscribes to a session and redraws from these; the
engine never holds a reference back into the rendering layer.
"""
from dataclasses import dataclass
from typing import Callable, Union


@dataclass(frozen=True)
class CellRevealed:
    """A cell was opened (including mines shown after a loss)."""

    row: int
    col: int


@dataclass(frozen=True)
class FlagToggled:
    """A flag was placed or removed."""

    row: int
    col: int
    is_flagged: bool


@dataclass(frozen=True)
class GameWon:
    """Every safe cell has been revealed."""


@dataclass(frozen=True)
class GameLost:
    """A mine was revealed."""


Event = Union[CellRevealed, FlagToggled, GameWon, GameLost]
Listener = Callable[[Event], None]
