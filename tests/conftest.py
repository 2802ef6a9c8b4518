import itertools

import pytest
from httpx import ASGITransport, AsyncClient

from bingoboard.api.dependencies import get_game, get_scan_adapter
from bingoboard.main import app
from bingoboard.models.card import FREE, CellValue, GameSettings, GridDimensions
from bingoboard.scan.demo import DemoScanAdapter
from bingoboard.services.game_state import GameState


def sequential_ids():
    """Predictable card ids: CARD-1, CARD-2, ..."""
    counter = itertools.count(1)
    return lambda: f"CARD-{next(counter)}"


@pytest.fixture
def id_factory():
    return sequential_ids()


@pytest.fixture
def game(id_factory) -> GameState:
    """Fresh 5x5 game with a free center and predictable ids."""
    return GameState(
        GameSettings(GridDimensions(5, 5), center_free=True),
        id_factory=id_factory,
    )


@pytest.fixture
def center_free_grid() -> list[list[CellValue]]:
    """5x5 card whose middle row is [7, 12, FREE, 19, 24]."""
    return [
        [1, 16, 31, 46, 61],
        [2, 17, 32, 47, 62],
        [7, 12, FREE, 19, 24],
        [4, 18, 34, 49, 64],
        [5, 20, 35, 50, 65],
    ]


@pytest.fixture
def small_grid() -> list[list[CellValue]]:
    """3x3 card with no free space."""
    return [
        [1, 2, 3],
        [4, 5, 6],
        [7, 8, 9],
    ]


@pytest.fixture
async def client(game: GameState):
    """Async test client bound to a fresh game and the demo scanner."""
    app.dependency_overrides[get_game] = lambda: game
    app.dependency_overrides[get_scan_adapter] = lambda: DemoScanAdapter()

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
