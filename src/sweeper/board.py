"""
Board module for Minesweeper game.

Implements the grid of cells, mine placement and adjacency counting.
Game flow (revealing, flagging, win/lose) lives in the session modules.
"""
import logging
import random
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from .cell import MINE_SENTINEL, Cell
from .errors import ConfigurationError, OutOfBoundsError

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Validation
# ============================================================================

def validate_dimensions(width: int, height: int, mine_count: int) -> None:
    """
    Reject degenerate grids and impossible mine counts.

    Raises:
        ConfigurationError: If width/height < 1 or the mine count is not in
            [1, width * height - 1].
    """
    if width < 1 or height < 1:
        raise ConfigurationError("Board dimensions must be positive")
    max_mines = width * height - 1
    if mine_count < 1:
        raise ConfigurationError("Board needs at least one mine")
    if mine_count > max_mines:
        raise ConfigurationError(f"Too many mines (max {max_mines})")


# ============================================================================
# Board Class
# ============================================================================

class Board:
    """
    Minesweeper game board.

    Owns a fixed width x height grid of cells. Cells keep their identity for
    the life of the board; relaying mines rewrites their content in place.
    """

    def __init__(self, width: int, height: int, mine_count: int) -> None:
        validate_dimensions(width, height, mine_count)
        self.width = width
        self.height = height
        self.mine_count = mine_count
        self._grid: List[List[Cell]] = [
            [Cell(row, col) for col in range(width)]
            for row in range(height)
        ]

    @classmethod
    def from_mines(
        cls, width: int, height: int, mines: Iterable[Position]
    ) -> "Board":
        """
        Build a board with mines at exact positions.

        Args:
            width: Number of columns.
            height: Number of rows.
            mines: (row, col) positions of every mine.

        Returns:
            Board with adjacency counts already computed.

        Raises:
            ConfigurationError: If a position is off the grid or the
                mine count is invalid.
        """
        positions = set(mines)
        board = cls(width, height, len(positions))
        for row, col in positions:
            if not board.is_valid_position(row, col):
                raise ConfigurationError(
                    f"Mine position ({row}, {col}) is outside the "
                    f"{height}x{width} board"
                )
        for row, col in positions:
            board.cell(row, col).is_mine = True
        board.compute_adjacency()
        return board

    # ========================================================================
    # Grid Access
    # ========================================================================

    @property
    def size(self) -> int:
        """Total number of cells."""
        return self.width * self.height

    @property
    def safe_cell_count(self) -> int:
        """Number of cells without a mine."""
        return self.size - self.mine_count

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.height and 0 <= col < self.width

    def cell(self, row: int, col: int) -> Cell:
        """
        Get the cell at a position.

        Raises:
            OutOfBoundsError: If the position is outside the grid.
        """
        if not self.is_valid_position(row, col):
            raise OutOfBoundsError(row, col, self.height, self.width)
        return self._grid[row][col]

    def cells(self) -> Iterator[Cell]:
        """Iterate over all cells in row-major order."""
        for row in self._grid:
            yield from row

    def mines(self) -> List[Cell]:
        """All mine cells in row-major order."""
        return [cell for cell in self.cells() if cell.is_mine]

    def neighbors(self, row: int, col: int) -> List[Cell]:
        """
        Get the up to 8 cells around a position.

        Neighbors are listed row-major, skipping the center, so anything
        iterating them (flood fill, chords) behaves the same every run.
        """
        result = []
        for delta_row in (-1, 0, 1):
            for delta_col in (-1, 0, 1):
                if delta_row == 0 and delta_col == 0:
                    continue
                new_row = row + delta_row
                new_col = col + delta_col
                if self.is_valid_position(new_row, new_col):
                    result.append(self._grid[new_row][new_col])
        return result

    # ========================================================================
    # Mine Placement
    # ========================================================================

    def clear_mines(self) -> None:
        """Remove every mine and zero all counts."""
        for cell in self.cells():
            cell.clear()

    def layout_mines(
        self, candidates: Sequence[Cell], rng: random.Random
    ) -> None:
        """
        Clear the board and place mines among the given cells.

        Candidates are shuffled (Fisher-Yates) and the first `mine_count`
        become mines, then adjacency is recomputed.

        Args:
            candidates: Cells allowed to receive a mine.
            rng: Source of randomness.
        """
        if len(candidates) < self.mine_count:
            raise ConfigurationError(
                f"Cannot place {self.mine_count} mines in "
                f"{len(candidates)} cells"
            )
        self.clear_mines()
        pool = list(candidates)
        rng.shuffle(pool)
        for cell in pool[:self.mine_count]:
            cell.is_mine = True
        self.compute_adjacency()

    def compute_adjacency(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for cell in self.cells():
            if cell.is_mine:
                cell.adjacent_mines = MINE_SENTINEL
            else:
                cell.adjacent_mines = self._count_adjacent_mines(cell)

    def _count_adjacent_mines(self, cell: Cell) -> int:
        """Count mines adjacent to a specific cell."""
        return sum(
            1 for neighbor in self.neighbors(cell.row, cell.col)
            if neighbor.is_mine
        )


# ============================================================================
# Generation
# ============================================================================

def generate(
    width: int,
    height: int,
    mine_count: int,
    rng: Optional[random.Random] = None,
) -> Board:
    """
    Allocate a board and place mines uniformly at random.

    Args:
        width: Number of columns.
        height: Number of rows.
        mine_count: Mines to place, in [1, width * height - 1].
        rng: Optional seeded generator for reproducible layouts.

    Returns:
        Populated board with adjacency counts.

    Raises:
        ConfigurationError: If the dimensions or mine count are invalid.
    """
    board = Board(width, height, mine_count)
    board.layout_mines(list(board.cells()), rng or random.Random())
    logger.debug(
        f"Generated {width}x{height} board with {mine_count} mines"
    )
    return board
