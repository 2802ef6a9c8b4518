"""
Win detection for Bingo card grids.

A cell is marked when it is FREE or its number has been called. A card
wins when any line is fully marked:
- any row
- any column
- the main or anti diagonal, only on square grids

Non-square grids never win by diagonal. There is no blackout rule.

All functions are pure; callers recompute from scratch whenever the
called numbers change.
"""

from collections.abc import Iterator, Set
from dataclasses import dataclass
from enum import Enum

from bingoboard.models.card import FREE, CellValue, Grid


class LineKind(str, Enum):
    """Orientation of a winning line."""

    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"
    ANTI_DIAGONAL = "anti_diagonal"


@dataclass(frozen=True)
class WinningLine:
    """A fully marked line. `index` is the row/column index; 0 for diagonals."""

    kind: LineKind
    index: int = 0


def is_marked(value: CellValue, called: Set[int]) -> bool:
    """Check if a cell counts as marked."""
    return value is FREE or value in called


def _iter_winning_lines(grid: Grid, called: Set[int]) -> Iterator[WinningLine]:
    rows = len(grid)
    if rows == 0:
        return
    cols = len(grid[0])
    if cols == 0:
        return

    for r in range(rows):
        if all(is_marked(value, called) for value in grid[r]):
            yield WinningLine(LineKind.ROW, r)

    for c in range(cols):
        if all(is_marked(grid[r][c], called) for r in range(rows)):
            yield WinningLine(LineKind.COLUMN, c)

    if rows == cols:
        if all(is_marked(grid[i][i], called) for i in range(rows)):
            yield WinningLine(LineKind.DIAGONAL)
        if all(is_marked(grid[i][rows - 1 - i], called) for i in range(rows)):
            yield WinningLine(LineKind.ANTI_DIAGONAL)


def winning_lines(grid: Grid, called: Set[int]) -> list[WinningLine]:
    """
    List every fully marked line on the grid.

    Rows come first (top to bottom), then columns (left to right), then
    the diagonals.
    """
    return list(_iter_winning_lines(grid, called))


def detect_win(grid: Grid, called: Set[int]) -> bool:
    """Check if any row, column or (square grids only) diagonal is fully marked."""
    return next(_iter_winning_lines(grid, called), None) is not None


def count_marked(grid: Grid, called: Set[int]) -> int:
    """Count marked cells. Used for display; has no bearing on winning."""
    return sum(1 for row in grid for value in row if is_marked(value, called))
