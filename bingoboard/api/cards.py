"""
Card API endpoints.

Cards are added from parsed numbers (null = free space) or from a manual
entry grid of strings. Deleting or renaming an unknown card is tolerated
and simply returns the unchanged snapshot.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field, PositiveInt, model_validator

from bingoboard.api.dependencies import get_game
from bingoboard.api.game import CardResponse, GameResponse, build_game_response, card_to_response
from bingoboard.services.game_state import GameState

router = APIRouter(prefix="/cards", tags=["cards"])


class AddCardRequest(BaseModel):
    """Request body for adding a card. Exactly one of numbers / entry."""

    numbers: list[list[PositiveInt | None]] | None = Field(
        default=None, description="Grid of numbers, null for free spaces"
    )
    entry: list[list[str]] | None = Field(
        default=None, description="Grid as typed; '', '0', 'F' or 'FREE' for free spaces"
    )

    @model_validator(mode="after")
    def _exactly_one_grid(self) -> "AddCardRequest":
        if (self.numbers is None) == (self.entry is None):
            raise ValueError("Provide exactly one of 'numbers' or 'entry'")
        return self


class RenameRequest(BaseModel):
    """Request body for renaming a card."""

    title: str = Field(..., max_length=80)


class TemplateResponse(BaseModel):
    """Blank entry grid for the current configuration."""

    rows: int
    cols: int
    entry: list[list[str]]


@router.get("", response_model=list[CardResponse])
async def list_cards(game: Annotated[GameState, Depends(get_game)]) -> list[CardResponse]:
    """All cards, winners first."""
    called = game.ledger.called
    return [card_to_response(card, called) for card in game.cards.sorted_view()]


@router.get("/template", response_model=TemplateResponse)
async def card_template(game: Annotated[GameState, Depends(get_game)]) -> TemplateResponse:
    """Blank entry grid, with the center pre-filled when configured."""
    dims = game.settings.dimensions
    return TemplateResponse(rows=dims.rows, cols=dims.cols, entry=game.blank_entry())


@router.post("", response_model=CardResponse, status_code=status.HTTP_201_CREATED)
async def add_card(
    request: AddCardRequest,
    game: Annotated[GameState, Depends(get_game)],
) -> CardResponse:
    """
    Add a card.

    Returns 400 if the grid is ragged or an entry cell cannot be parsed.
    """
    if request.numbers is not None:
        card = game.add_card(request.numbers)
    else:
        card = game.add_card_from_entry(request.entry or [])
    return card_to_response(card, game.ledger.called)


@router.patch("/{card_id}", response_model=GameResponse)
async def rename_card(
    card_id: str,
    request: RenameRequest,
    game: Annotated[GameState, Depends(get_game)],
) -> GameResponse:
    """Rename a card."""
    game.rename_card(card_id, request.title)
    return build_game_response(game)


@router.delete("/{card_id}", response_model=GameResponse)
async def delete_card(
    card_id: str,
    game: Annotated[GameState, Depends(get_game)],
) -> GameResponse:
    """Delete a card."""
    game.delete_card(card_id)
    return build_game_response(game)
