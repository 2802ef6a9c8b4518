"""
Card collection: lifecycle and presentation order of tracked cards.

recompute_all() is the single writer of each card's derived state
(is_winner, marked_count). It must run after every change to the called
numbers, and GameState also runs it after card additions and removals so
the winner count is always current.
"""

import logging
import uuid
from collections.abc import Callable, Iterator, Set
from dataclasses import dataclass

from bingoboard.analysis.win_detector import count_marked, detect_win
from bingoboard.models.card import Card, FrozenGrid, Grid
from bingoboard.models.failure import InvalidGridError

logger = logging.getLogger(__name__)


def new_card_id() -> str:
    """Generate a fresh card id."""
    return f"CARD-{uuid.uuid4().hex[:12]}"


def freeze_grid(grid: Grid) -> FrozenGrid:
    """
    Copy a grid into immutable tuples, enforcing the rectangular shape.

    Raises:
        InvalidGridError: If the grid has no cells or ragged rows
    """
    frozen = tuple(tuple(row) for row in grid)
    if not frozen or not frozen[0]:
        raise InvalidGridError("grid has no cells")

    width = len(frozen[0])
    for index, row in enumerate(frozen):
        if len(row) != width:
            raise InvalidGridError(f"row {index + 1} has {len(row)} cells, expected {width}")
    return frozen


@dataclass(frozen=True)
class RecomputeSummary:
    """Result of recomputing every card."""

    winner_count: int
    card_count: int


class CardCollection:
    """Cards in insertion order."""

    def __init__(self, id_factory: Callable[[], str] = new_card_id) -> None:
        self._cards: list[Card] = []
        self._id_factory = id_factory

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards(self) -> list[Card]:
        """Cards in insertion order (a copy)."""
        return list(self._cards)

    def get(self, card_id: str) -> Card | None:
        """Find a card by id."""
        for card in self._cards:
            if card.id == card_id:
                return card
        return None

    def add(self, grid: Grid) -> Card:
        """
        Create a card from a grid and append it.

        The default title numbers cards by collection size, so titles may
        repeat after deletions. Derived state starts clean and is filled in
        by the next recompute_all().
        """
        card = Card(
            id=self._id_factory(),
            title=f"Card #{len(self._cards) + 1}",
            numbers=freeze_grid(grid),
        )
        self._cards.append(card)
        logger.info("Added %s (%dx%d)", card.id, card.rows, card.cols)
        return card

    def remove(self, card_id: str) -> bool:
        """Remove a card. Unknown ids are ignored."""
        for index, card in enumerate(self._cards):
            if card.id == card_id:
                del self._cards[index]
                logger.info("Removed %s", card_id)
                return True
        logger.debug("Remove ignored, no card %s", card_id)
        return False

    def rename(self, card_id: str, title: str) -> bool:
        """Replace a card's title. Unknown ids are ignored."""
        card = self.get(card_id)
        if card is None:
            logger.debug("Rename ignored, no card %s", card_id)
            return False
        card.title = title
        return True

    def clear(self) -> None:
        """Remove every card."""
        self._cards.clear()

    def recompute_all(self, called: Set[int]) -> RecomputeSummary:
        """Recompute winner status and marked count for every card."""
        winners = 0
        for card in self._cards:
            card.is_winner = detect_win(card.numbers, called)
            card.marked_count = count_marked(card.numbers, called)
            if card.is_winner:
                winners += 1
        return RecomputeSummary(winner_count=winners, card_count=len(self._cards))

    def sorted_view(self) -> list[Card]:
        """Winners first; insertion order is kept within each group."""
        winners = [card for card in self._cards if card.is_winner]
        others = [card for card in self._cards if not card.is_winner]
        return winners + others

    def count_containing(self, number: int) -> int:
        """Number of cards that have `number` somewhere on them."""
        return sum(1 for card in self._cards if card.contains(number))
