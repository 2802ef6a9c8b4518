"""
Game state: the command surface of a Bingo session.

GameState owns the configuration, the call ledger and the card
collection. Every command runs to completion synchronously and leaves
derived card state fully recomputed, so is_winner / marked_count can
never be observed stale relative to the called numbers.

Commands:
- configure(rows, cols, center_free)
- add_card(grid) / add_card_from_entry(entry)
- delete_card(card_id) / rename_card(card_id, title)
- call_number(n) / call_from_input(raw)
- undo_last_call()
- clear_round()    clears called numbers, keeps cards
- full_reset()     clears called numbers and cards
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from enum import Enum

from bingoboard.config import settings
from bingoboard.models.card import Card, GameSettings, Grid, GridDimensions
from bingoboard.models.failure import InvalidDimensionsError
from bingoboard.parsers.grid_entry import (
    EntryGrid,
    blank_entry,
    parse_call_input,
    parse_entry,
)
from bingoboard.services.call_ledger import CallLedger, CallStatus
from bingoboard.services.card_collection import CardCollection, freeze_grid, new_card_id

logger = logging.getLogger(__name__)


class NoticeKind(str, Enum):
    """What the last command did, for the notification banner."""

    CALLED = "called"
    DUPLICATE_CALL = "duplicate_call"
    UNDONE = "undone"
    NOTHING_TO_UNDO = "nothing_to_undo"
    ROUND_CLEARED = "round_cleared"


@dataclass(frozen=True)
class Notice:
    """Informational message produced by a command. Never an error."""

    kind: NoticeKind
    message: str


def check_dimensions(rows: int, cols: int) -> GridDimensions:
    """
    Validate a grid shape against the configured bounds.

    Raises:
        InvalidDimensionsError: If rows or cols fall outside the configured bounds
    """
    minimum = settings.min_grid_size
    if not (minimum <= rows <= settings.max_grid_rows) or not (
        minimum <= cols <= settings.max_grid_cols
    ):
        raise InvalidDimensionsError(
            rows, cols, minimum, settings.max_grid_rows, settings.max_grid_cols
        )
    return GridDimensions(rows, cols)


class GameState:
    """A single in-memory Bingo session."""

    def __init__(
        self,
        game_settings: GameSettings | None = None,
        id_factory: Callable[[], str] = new_card_id,
    ) -> None:
        self.settings = game_settings or GameSettings(
            dimensions=GridDimensions(settings.default_rows, settings.default_cols),
            center_free=settings.default_center_free,
        )
        self.ledger = CallLedger()
        self.cards = CardCollection(id_factory=id_factory)
        self.bingo_count = 0
        self.last_notice: Notice | None = None

    def _recompute(self) -> None:
        summary = self.cards.recompute_all(self.ledger.called)
        if summary.winner_count != self.bingo_count:
            logger.info("Winners: %d of %d cards", summary.winner_count, summary.card_count)
        self.bingo_count = summary.winner_count

    def _notify(self, kind: NoticeKind, message: str) -> Notice:
        notice = Notice(kind, message)
        self.last_notice = notice
        return notice

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def configure(self, rows: int, cols: int, center_free: bool) -> GameSettings:
        """
        Set the shape used for new cards.

        Existing cards keep the shape they were created with.

        Raises:
            InvalidDimensionsError: If rows or cols fall outside the configured bounds
        """
        self.settings = GameSettings(check_dimensions(rows, cols), center_free)
        logger.info("Configured %dx%d grid (center_free=%s)", rows, cols, center_free)
        return self.settings

    def blank_entry(self) -> EntryGrid:
        """Entry grid template for a new card."""
        return blank_entry(self.settings)

    # -------------------------------------------------------------------------
    # Cards
    # -------------------------------------------------------------------------

    def add_card(self, grid: Grid) -> Card:
        """
        Add a card from parsed cell values.

        Raises:
            InvalidGridError: If the grid is empty or ragged
            InvalidDimensionsError: If its shape is outside the configured bounds
        """
        frozen = freeze_grid(grid)
        check_dimensions(len(frozen), len(frozen[0]))
        card = self.cards.add(frozen)
        self._recompute()
        return card

    def add_card_from_entry(self, entry: Sequence[Sequence[str]]) -> Card:
        """Parse a manual entry grid and add it as a card."""
        return self.add_card(parse_entry(entry))

    def delete_card(self, card_id: str) -> bool:
        """Delete a card. Unknown ids are tolerated."""
        removed = self.cards.remove(card_id)
        self._recompute()
        return removed

    def rename_card(self, card_id: str, title: str) -> bool:
        """Rename a card. Unknown ids are tolerated."""
        return self.cards.rename(card_id, title)

    # -------------------------------------------------------------------------
    # Calls
    # -------------------------------------------------------------------------

    def call_number(self, number: int) -> Notice:
        """Call a number and mark it on every card."""
        result = self.ledger.call(number)
        if result.status == CallStatus.DUPLICATE:
            return self._notify(NoticeKind.DUPLICATE_CALL, f"Number {number} was already called!")

        self._recompute()
        affected = self.cards.count_containing(number)
        logger.info("Called %d (on %d cards)", number, affected)
        return self._notify(NoticeKind.CALLED, f"Number {number} marked on {affected} cards!")

    def call_from_input(self, raw: str) -> Notice:
        """
        Call a number typed by the user.

        Raises:
            InvalidInputError: If the text is not a positive whole number
        """
        return self.call_number(parse_call_input(raw))

    def undo_last_call(self) -> Notice:
        """Un-call the most recently called number."""
        result = self.ledger.undo_last()
        if result.status == CallStatus.EMPTY:
            return self._notify(NoticeKind.NOTHING_TO_UNDO, "No numbers to undo")

        self._recompute()
        logger.info("Undid %d", result.number)
        return self._notify(NoticeKind.UNDONE, f"Undid number {result.number}")

    def recent_calls(self, k: int | None = None) -> list[int]:
        """Most recent calls first, `recent_calls_limit` of them by default."""
        return self.ledger.recent(settings.recent_calls_limit if k is None else k)

    # -------------------------------------------------------------------------
    # Resets
    # -------------------------------------------------------------------------

    def clear_round(self) -> Notice:
        """Clear called numbers but keep every card."""
        self.ledger.clear()
        self._recompute()
        logger.info("Round cleared, %d cards kept", len(self.cards))
        return self._notify(NoticeKind.ROUND_CLEARED, "Board cleared! Cards kept.")

    def full_reset(self) -> None:
        """Delete every card and clear called numbers."""
        self.cards.clear()
        self.ledger.clear()
        self._recompute()
        self.last_notice = None
        logger.info("Game reset")
