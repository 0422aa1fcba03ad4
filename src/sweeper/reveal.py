"""
Reveal propagation.

Opening a cell with no adjacent mines opens its neighbors too, so one click
uncovers a whole zero region plus its numbered border. Propagation uses an
explicit work-list: every cell is queued at most once, and each expansion
reveals a hidden cell, so the loop ends after at most width * height steps.
"""
from collections import deque
from enum import Enum, auto
from typing import Deque

from .cell import Cell
from .events import CellRevealed
from .safety import adjust_for_first_click
from .session import GameSession, GameState
from . import state


class RevealOutcome(Enum):
    """Result of a reveal request."""

    NO_OP = auto()
    SAFE_REVEAL = auto()
    MINE_HIT = auto()


def reveal(session: GameSession, row: int, col: int) -> RevealOutcome:
    """
    Reveal a cell at the given position.

    On the first accepted reveal, first-click protection runs and the game
    starts. Revealing a mine loses the game; revealing the last safe cell
    wins it.

    Args:
        session: Game to act on.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        NO_OP if the game is over or the cell is revealed/flagged,
        MINE_HIT if the cell was a mine, SAFE_REVEAL otherwise.

    Raises:
        OutOfBoundsError: If the position is outside the board.
    """
    cell = session.cell(row, col)
    if session.is_over or not cell.is_hidden:
        return RevealOutcome.NO_OP

    if session.state == GameState.NOT_STARTED:
        if session.safe_first_click:
            adjust_for_first_click(
                session.board, cell, session.mine_count, session.rng
            )
        state.start(session)

    outcome = open_cell(session, cell)
    if outcome == RevealOutcome.SAFE_REVEAL:
        state.check_win(session)
    return outcome


def open_cell(session: GameSession, origin: Cell) -> RevealOutcome:
    """Reveal one cell and flood outward if it has no adjacent mines."""
    if not origin.reveal():
        return RevealOutcome.NO_OP
    session.emit(CellRevealed(origin.row, origin.col))

    if origin.is_mine:
        state.declare_lost(session)
        return RevealOutcome.MINE_HIT

    session.safe_revealed_count += 1
    if origin.adjacent_mines == 0:
        _flood_fill(session, origin)
    return RevealOutcome.SAFE_REVEAL


def _flood_fill(session: GameSession, origin: Cell) -> None:
    """Open every cell reachable through zero-count cells."""
    board = session.board
    work: Deque[Cell] = deque([origin])

    while work:
        current = work.popleft()
        for neighbor in board.neighbors(current.row, current.col):
            if not neighbor.is_hidden:
                continue
            # zero-count cells never border a mine
            neighbor.reveal()
            session.safe_revealed_count += 1
            session.emit(CellRevealed(neighbor.row, neighbor.col))
            if neighbor.adjacent_mines == 0:
                work.append(neighbor)
