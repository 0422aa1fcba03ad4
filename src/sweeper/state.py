"""
Game state transitions.

NOT_STARTED -> IN_PROGRESS on the first accepted reveal, then IN_PROGRESS
-> WON or LOST. Both end states are final.
"""
import logging

from .events import CellRevealed, FlagToggled, GameLost, GameWon
from .session import GameSession, GameState

logger = logging.getLogger(__name__)


def start(session: GameSession) -> None:
    """Move a fresh session into play."""
    if session.state == GameState.NOT_STARTED:
        session.state = GameState.IN_PROGRESS


def check_win(session: GameSession) -> bool:
    """
    Declare the game won if every safe cell is revealed.

    Returns:
        True if the session is won after the check.
    """
    if session.state != GameState.IN_PROGRESS:
        return session.is_won
    if session.safe_revealed_count == session.board.safe_cell_count:
        declare_won(session)
        return True
    return False


def declare_won(session: GameSession) -> None:
    """Flag every remaining mine and zero the mine counter."""
    session.state = GameState.WON
    for cell in session.board.mines():
        if not cell.is_flagged:
            cell.is_flagged = True
            session.emit(FlagToggled(cell.row, cell.col, True))
    session.mines_remaining = 0
    logger.debug("Game won")
    session.emit(GameWon())


def declare_lost(session: GameSession) -> None:
    """Show every mine; flags stay exactly as the player left them."""
    session.state = GameState.LOST
    for cell in session.board.mines():
        if not cell.is_revealed:
            cell.expose()
            session.emit(CellRevealed(cell.row, cell.col))
    logger.debug("Game lost")
    session.emit(GameLost())
