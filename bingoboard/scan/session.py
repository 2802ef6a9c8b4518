"""
Scan session: the add-card dialog as a state machine.

The user edits a draft entry grid by hand, or scans a photo to fill it.
Scanning is the only asynchronous step in the game, so it is guarded by
a token: begin() issues one, cancel() invalidates it, and a result that
arrives for an invalidated token is discarded without touching the draft.

A successful scan overwrites the draft and switches back to manual mode
so the user can correct mistakes before committing. Nothing else
overwrites the draft.
"""

import logging
from enum import Enum

from bingoboard.models.card import Card, GameSettings, GridDimensions
from bingoboard.models.failure import GridEntryError, ScanError
from bingoboard.parsers.grid_entry import EntryGrid, blank_entry, grid_to_entry, parse_entry
from bingoboard.scan.adapter import ScanAdapter, ScanResult, normalize_grid
from bingoboard.services.game_state import GameState

logger = logging.getLogger(__name__)

SCAN_FAILED_TEMPLATE = (
    "Could not identify grid: {reason}. "
    "Ensure the photo is clear, well-lit, and contains only the Bingo card."
)


class EntryMode(str, Enum):
    MANUAL = "manual"
    SCAN = "scan"


class ScanPhase(str, Enum):
    IDLE = "idle"
    SCANNING = "scanning"
    FAILED = "failed"
    REVIEW = "review"


class ScanOutcome(str, Enum):
    """Exactly one of these results from each scan attempt."""

    APPLIED = "applied"
    FAILED = "failed"
    CANCELLED = "cancelled"


class ScanSession:
    """Draft card being entered by hand or by scan."""

    def __init__(self, game_settings: GameSettings) -> None:
        self.mode = EntryMode.MANUAL
        self.phase = ScanPhase.IDLE
        self.error: str | None = None
        self.draft: EntryGrid = []
        self._token = 0
        self._active: int | None = None
        self.reset(game_settings)

    @property
    def is_scanning(self) -> bool:
        return self._active is not None

    def reset(self, game_settings: GameSettings) -> None:
        """Start over with a blank draft for the configured size."""
        self.cancel()
        self.draft = blank_entry(game_settings)
        self.mode = EntryMode.MANUAL

    def switch_mode(self, mode: EntryMode) -> None:
        """Change tabs. Never touches the draft or an in-flight scan."""
        self.mode = mode

    def edit_cell(self, row: int, col: int, value: str) -> None:
        """
        Overwrite one draft cell (0-based position).

        Raises:
            GridEntryError: If the position is outside the draft
        """
        if not (0 <= row < len(self.draft) and 0 <= col < len(self.draft[row])):
            raise GridEntryError(row + 1, col + 1, value)
        self.draft[row][col] = value

    # -------------------------------------------------------------------------
    # Scan lifecycle
    # -------------------------------------------------------------------------

    def begin(self) -> int:
        """Start a scan and return its token."""
        self._token += 1
        self._active = self._token
        self.mode = EntryMode.SCAN
        self.phase = ScanPhase.SCANNING
        self.error = None
        return self._token

    def cancel(self) -> None:
        """Abandon the in-flight scan. Its result will be ignored."""
        if self._active is not None:
            logger.info("Scan %d cancelled", self._active)
        self._active = None
        self.phase = ScanPhase.IDLE
        self.error = None

    def retry(self) -> None:
        """Clear a failed scan so a new photo can be picked."""
        if self.phase == ScanPhase.FAILED:
            self.phase = ScanPhase.IDLE
            self.error = None

    def apply_result(self, token: int, result: ScanResult) -> bool:
        """
        Load a scan result into the draft.

        Returns False, changing nothing, if the scan was cancelled or
        superseded.
        """
        if token != self._active:
            logger.info("Discarding late result for scan %d", token)
            return False

        grid = normalize_grid(result.grid, result.rows, result.cols)
        self.draft = grid_to_entry(grid)
        self.mode = EntryMode.MANUAL
        self.phase = ScanPhase.REVIEW
        self._active = None
        return True

    def fail(self, token: int, reason: str) -> bool:
        """Record a scan failure. Ignored if the scan was cancelled or superseded."""
        if token != self._active:
            return False

        self.error = SCAN_FAILED_TEMPLATE.format(reason=reason)
        self.phase = ScanPhase.FAILED
        self._active = None
        return True

    async def run(
        self,
        adapter: ScanAdapter,
        image: bytes,
        dimensions: GridDimensions | None = None,
    ) -> ScanOutcome:
        """Scan an image and apply the result unless cancelled meanwhile."""
        token = self.begin()
        try:
            result = await adapter.scan(image, dimensions)
        except ScanError as e:
            applied = self.fail(token, e.message)
        except Exception as e:
            logger.exception("Unexpected scan failure")
            applied = self.fail(token, str(e) or type(e).__name__)
        else:
            if self.apply_result(token, result):
                return ScanOutcome.APPLIED
            return ScanOutcome.CANCELLED

        return ScanOutcome.FAILED if applied else ScanOutcome.CANCELLED

    # -------------------------------------------------------------------------
    # Commit
    # -------------------------------------------------------------------------

    def commit(self, game: GameState) -> Card:
        """
        Parse the draft and add it to the game as a new card.

        Raises:
            GridEntryError: If a draft cell is not a number or free space
        """
        card = game.add_card_from_entry(self.draft)
        self.reset(game.settings)
        return card
