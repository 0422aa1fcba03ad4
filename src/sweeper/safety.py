"""
First-click protection.

Before the first reveal of a game the mines may be relaid so that the
clicked cell is never a mine and, when the board has room, none of its
neighbors are either.
"""
import logging
import random

from .board import Board
from .cell import Cell
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

MAX_RELAYOUT_ATTEMPTS = 100


def adjust_for_first_click(
    board: Board,
    first_cell: Cell,
    mine_count: int,
    rng: random.Random,
    max_attempts: int = MAX_RELAYOUT_ATTEMPTS,
) -> bool:
    """
    Relay mines so the first clicked cell opens safely.

    The safe zone is the clicked cell plus its neighbors. If every mine fits
    outside that zone, mines are drawn only from its complement and a single
    pass is enough. Otherwise mines are relaid over the whole board until the
    clicked cell is clear, and after `max_attempts` tries the mine on the
    clicked cell is moved to the first free cell.

    Args:
        board: Board to mutate in place.
        first_cell: The cell about to be revealed.
        mine_count: Number of mines on the board.
        rng: Source of randomness for the relayout.
        max_attempts: Cap on full-board relayouts for dense boards.

    Returns:
        True if the mine layout was changed.

    Raises:
        ConfigurationError: If mine_count disagrees with the board.
    """
    if mine_count != board.mine_count:
        raise ConfigurationError(
            f"Mine count {mine_count} does not match the board's "
            f"{board.mine_count}"
        )
    safe_zone = [first_cell] + board.neighbors(first_cell.row, first_cell.col)
    can_guarantee_zone = mine_count <= board.size - len(safe_zone)
    needs_relayout = first_cell.is_mine or (
        can_guarantee_zone and first_cell.adjacent_mines > 0
    )
    if not needs_relayout:
        return False

    if can_guarantee_zone:
        zone = {cell.position for cell in safe_zone}
        allowed = [cell for cell in board.cells() if cell.position not in zone]
        board.layout_mines(allowed, rng)
        logger.debug(f"Cleared safe zone around {first_cell.position}")
        return True

    everything = list(board.cells())
    for attempt in range(1, max_attempts + 1):
        board.layout_mines(everything, rng)
        if not first_cell.is_mine:
            logger.debug(
                f"First click {first_cell.position} cleared after "
                f"{attempt} relayout(s)"
            )
            return True

    # mine_count < board.size, so a free cell always exists
    replacement = next(cell for cell in board.cells() if not cell.is_mine)
    replacement.is_mine = True
    first_cell.is_mine = False
    board.compute_adjacency()
    logger.debug(
        f"Moved mine from {first_cell.position} to {replacement.position}"
    )
    return True
