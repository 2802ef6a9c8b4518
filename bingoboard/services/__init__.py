"""
BingoBoard services.

Call tracking, card lifecycle and the game command surface.
"""

from bingoboard.services.call_ledger import CallLedger, CallResult, CallStatus
from bingoboard.services.card_collection import (
    CardCollection,
    RecomputeSummary,
    freeze_grid,
    new_card_id,
)
from bingoboard.services.game_state import GameState, Notice, NoticeKind, check_dimensions

__all__ = [
    "CallLedger",
    "CallResult",
    "CallStatus",
    "CardCollection",
    "GameState",
    "Notice",
    "NoticeKind",
    "RecomputeSummary",
    "check_dimensions",
    "freeze_grid",
    "new_card_id",
]
