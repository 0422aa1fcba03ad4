"""
Flag toggling.
"""
from .events import FlagToggled
from .session import GameSession


def toggle_flag(session: GameSession, row: int, col: int) -> bool:
    """
    Toggle flag on a cell.

    The mine counter moves by one each way and is allowed to go negative.

    Args:
        session: Game to act on.
        row: Row index.
        col: Column index.

    Returns:
        True if flag was toggled, False if the cell is revealed or the game
        is over.

    Raises:
        OutOfBoundsError: If the position is outside the board.
    """
    cell = session.cell(row, col)
    if session.is_over or not cell.toggle_flag():
        return False
    session.mines_remaining += -1 if cell.is_flagged else 1
    session.emit(FlagToggled(row, col, cell.is_flagged))
    return True
