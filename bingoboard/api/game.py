"""
Game API endpoints.

Each endpoint runs one synchronous GameState command and returns the full
game snapshot, so clients never hold derived state that could drift.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from bingoboard.analysis.win_detector import winning_lines
from bingoboard.api.dependencies import get_game
from bingoboard.models.card import Card, CellValue
from bingoboard.services.game_state import GameState

router = APIRouter(prefix="/game", tags=["game"])


class SettingsResponse(BaseModel):
    """Configuration applied to new cards."""

    rows: int
    cols: int
    center_free: bool


class LineResponse(BaseModel):
    """A fully marked line on a card."""

    kind: str
    index: int


class CardResponse(BaseModel):
    """A card with its derived state."""

    id: str
    title: str
    display_title: str
    rows: int
    cols: int
    numbers: list[list[CellValue]]
    is_winner: bool
    marked_count: int
    winning_lines: list[LineResponse] = Field(default_factory=list)


class NoticeResponse(BaseModel):
    """Informational message from the last command."""

    kind: str
    message: str


class GameResponse(BaseModel):
    """Full game snapshot."""

    settings: SettingsResponse
    called: list[int] = Field(default_factory=list, description="Called numbers, oldest first")
    recent: list[int] = Field(default_factory=list, description="Latest calls, newest first")
    last_call: int | None = None
    cards: list[CardResponse] = Field(default_factory=list, description="Winners first")
    bingo_count: int = 0
    notice: NoticeResponse | None = None


class ConfigureRequest(BaseModel):
    """Request body for changing the grid configuration."""

    rows: int
    cols: int
    center_free: bool = True


class CallRequest(BaseModel):
    """Request body for calling a number."""

    number: str | int = Field(..., description="Number as typed by the host")


def card_to_response(card: Card, called: frozenset[int]) -> CardResponse:
    """Convert a Card to its API representation."""
    return CardResponse(
        id=card.id,
        title=card.title,
        display_title=card.display_title,
        rows=card.rows,
        cols=card.cols,
        numbers=[list(row) for row in card.numbers],
        is_winner=card.is_winner,
        marked_count=card.marked_count,
        winning_lines=[
            LineResponse(kind=line.kind.value, index=line.index)
            for line in winning_lines(card.numbers, called)
        ],
    )


def build_game_response(game: GameState) -> GameResponse:
    """Snapshot the game for the client."""
    called = game.ledger.called
    dims = game.settings.dimensions
    notice = game.last_notice
    return GameResponse(
        settings=SettingsResponse(
            rows=dims.rows, cols=dims.cols, center_free=game.settings.center_free
        ),
        called=list(game.ledger.history),
        recent=game.recent_calls(),
        last_call=game.ledger.last,
        cards=[card_to_response(card, called) for card in game.cards.sorted_view()],
        bingo_count=game.bingo_count,
        notice=NoticeResponse(kind=notice.kind.value, message=notice.message) if notice else None,
    )


@router.get("", response_model=GameResponse)
async def get_game_state(game: Annotated[GameState, Depends(get_game)]) -> GameResponse:
    """Current game snapshot."""
    return build_game_response(game)


@router.put("/settings", response_model=GameResponse)
async def configure(
    request: ConfigureRequest,
    game: Annotated[GameState, Depends(get_game)],
) -> GameResponse:
    """
    Change the grid size and free-center option for new cards.

    Existing cards keep their shape. Returns 400 if the size is out of bounds.
    """
    game.configure(request.rows, request.cols, request.center_free)
    return build_game_response(game)


@router.post("/calls", response_model=GameResponse)
async def call_number(
    request: CallRequest,
    game: Annotated[GameState, Depends(get_game)],
) -> GameResponse:
    """
    Call a number.

    A repeated number is not an error: the snapshot carries a
    duplicate_call notice and nothing changes. Returns 400 for input that
    is not a positive whole number.
    """
    game.call_from_input(str(request.number))
    return build_game_response(game)


@router.get("/calls/recent", response_model=list[int])
async def recent_calls(
    game: Annotated[GameState, Depends(get_game)],
    limit: Annotated[int | None, Query(ge=1, le=100)] = None,
) -> list[int]:
    """Latest calls, newest first."""
    return game.recent_calls(limit)


@router.delete("/calls/last", response_model=GameResponse)
async def undo_last_call(game: Annotated[GameState, Depends(get_game)]) -> GameResponse:
    """Undo the most recent call. A no-op with a notice when nothing was called."""
    game.undo_last_call()
    return build_game_response(game)


@router.post("/clear-round", response_model=GameResponse)
async def clear_round(game: Annotated[GameState, Depends(get_game)]) -> GameResponse:
    """Clear called numbers but keep cards."""
    game.clear_round()
    return build_game_response(game)


@router.post("/reset", response_model=GameResponse)
async def full_reset(game: Annotated[GameState, Depends(get_game)]) -> GameResponse:
    """Delete every card and clear called numbers."""
    game.full_reset()
    return build_game_response(game)
