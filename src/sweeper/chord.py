"""
Chording: open every unflagged neighbor of a numbered cell at once.
"""
from .reveal import RevealOutcome, open_cell
from .session import GameSession
from . import state


def chord(session: GameSession, row: int, col: int) -> RevealOutcome:
    """
    Chord action: reveal all unflagged neighbors if flag count matches.

    Flags are not checked for correctness, so a misplaced flag lets the
    chord open a mine. Any other flag count does nothing.

    Args:
        session: Game to act on.
        row: Row index of a revealed, numbered cell.
        col: Column index of a revealed, numbered cell.

    Returns:
        MINE_HIT if a mine was opened, SAFE_REVEAL if any cell was opened,
        NO_OP otherwise.

    Raises:
        OutOfBoundsError: If the position is outside the board.
    """
    cell = session.cell(row, col)
    if session.is_over or not cell.is_revealed or cell.adjacent_mines <= 0:
        return RevealOutcome.NO_OP

    neighbors = session.board.neighbors(row, col)
    flag_count = sum(1 for neighbor in neighbors if neighbor.is_flagged)
    if flag_count != cell.adjacent_mines:
        return RevealOutcome.NO_OP

    result = RevealOutcome.NO_OP
    for neighbor in neighbors:
        if session.is_over:
            break
        outcome = open_cell(session, neighbor)
        if outcome != RevealOutcome.NO_OP:
            result = outcome

    if result == RevealOutcome.SAFE_REVEAL:
        state.check_win(session)
    return result
