"""
Pytest configuration and shared fixtures.
"""
import random
import sys
from pathlib import Path
from typing import List

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell, GameSession, new_game


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with a single mine at (0, 0)."""
    return Board.from_mines(3, 3, [(0, 0)])


@pytest.fixture
def seeded_rng() -> random.Random:
    """Deterministic randomness for generation tests."""
    return random.Random(1234)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def corner_mine_session() -> GameSession:
    """3x3 game with one mine at (0, 0) and first-click protection on."""
    return GameSession.from_layout(3, 3, [(0, 0)])


@pytest.fixture
def unprotected_session() -> GameSession:
    """3x3 game with one mine at (0, 0) and no first-click relayout."""
    return GameSession.from_layout(3, 3, [(0, 0)], safe_first_click=False)


@pytest.fixture
def two_mine_session() -> GameSession:
    """
    5x5 game with mines at (0, 0) and (0, 4), already started.

    Row 0:  *  1  0  1  *
    Row 1:  1  1  0  1  1
    Rows 2-4 all zero.
    """
    return GameSession.from_layout(
        5, 5, [(0, 0), (0, 4)], safe_first_click=False
    )


@pytest.fixture
def default_session(seeded_rng: random.Random) -> GameSession:
    """Seeded 9x9 game with 10 mines."""
    return new_game(9, 9, 10, rng=seeded_rng)


@pytest.fixture
def event_log(corner_mine_session: GameSession) -> List[object]:
    """Events emitted by the corner-mine session, in order."""
    events: List[object] = []
    corner_mine_session.subscribe(events.append)
    return events


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell(0, 0)


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(0, 0, is_mine=True, adjacent_mines=-1)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
