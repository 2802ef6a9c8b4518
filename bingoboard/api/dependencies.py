"""
Request dependencies.

The game is a single in-memory session per process; state is lost on
restart. Tests replace both providers through app.dependency_overrides.
"""

import logging
from functools import lru_cache

from bingoboard.config import settings
from bingoboard.scan.adapter import ScanAdapter
from bingoboard.scan.anthropic_scanner import AnthropicScanAdapter
from bingoboard.scan.demo import DemoScanAdapter
from bingoboard.services.game_state import GameState

logger = logging.getLogger(__name__)

_game = GameState()


def get_game() -> GameState:
    """The process-wide game session."""
    return _game


@lru_cache(maxsize=1)
def get_scan_adapter() -> ScanAdapter:
    """Anthropic vision scanner, or the demo scanner when no API key is set."""
    if not settings.anthropic_api_key:
        logger.warning("ANTHROPIC_API_KEY not set; card scans return demo grids")
        return DemoScanAdapter(default_size=settings.default_rows)
    return AnthropicScanAdapter(api_key=settings.anthropic_api_key)
