"""
Card and game configuration models.

A grid cell holds either a called-number candidate (int) or FREE, the
free-space sentinel, which is always considered marked.
"""

from collections.abc import Sequence
from dataclasses import dataclass, field

FREE = None

CellValue = int | None
Grid = Sequence[Sequence[CellValue]]
FrozenGrid = tuple[tuple[CellValue, ...], ...]


@dataclass(frozen=True)
class GridDimensions:
    """Rows x cols shape of a card grid."""

    rows: int
    cols: int

    @property
    def is_square(self) -> bool:
        return self.rows == self.cols

    @property
    def cell_count(self) -> int:
        return self.rows * self.cols


@dataclass(frozen=True)
class GameSettings:
    """
    Configuration used when creating new cards.

    Attributes:
        dimensions: Shape of newly created cards
        center_free: Pre-fill the true center cell as FREE. Only applies
            when both dimensions are odd, since even sizes have no single
            center cell.
    """

    dimensions: GridDimensions = field(default_factory=lambda: GridDimensions(5, 5))
    center_free: bool = True

    @property
    def center(self) -> tuple[int, int] | None:
        """(row, col) of the pre-filled free cell, or None if there is none."""
        rows, cols = self.dimensions.rows, self.dimensions.cols
        if not self.center_free or rows % 2 == 0 or cols % 2 == 0:
            return None
        return rows // 2, cols // 2


@dataclass
class Card:
    """
    A single Bingo card being tracked.

    `numbers` is frozen at creation so the card's shape can never change.
    `is_winner` and `marked_count` are derived from the called numbers and
    are only written by CardCollection.recompute_all().
    """

    id: str
    title: str
    numbers: FrozenGrid
    is_winner: bool = field(default=False, init=False)
    marked_count: int = field(default=0, init=False)

    @property
    def rows(self) -> int:
        return len(self.numbers)

    @property
    def cols(self) -> int:
        return len(self.numbers[0]) if self.numbers else 0

    @property
    def dimensions(self) -> GridDimensions:
        return GridDimensions(self.rows, self.cols)

    @property
    def display_title(self) -> str:
        """Title shown to the user; blank titles fall back to the id."""
        return self.title.strip() or self.id

    @property
    def free_count(self) -> int:
        """Number of free-space cells on the card."""
        return sum(1 for row in self.numbers for value in row if value is FREE)

    def contains(self, number: int) -> bool:
        """Check if `number` appears anywhere on the card."""
        return any(number in row for row in self.numbers)
