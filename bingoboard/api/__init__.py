from bingoboard.api.cards import router as cards_router
from bingoboard.api.game import router as game_router
from bingoboard.api.health import router as health_router
from bingoboard.api.scan import router as scan_router

__all__ = [
    "cards_router",
    "game_router",
    "health_router",
    "scan_router",
]
