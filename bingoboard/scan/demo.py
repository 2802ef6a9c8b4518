"""
Offline scan adapter for development.

Used when no Anthropic API key is configured, so the scan flow can be
exercised end to end without network access.
"""

import logging

from bingoboard.models.card import CellValue, GridDimensions
from bingoboard.scan.adapter import ScanResult

logger = logging.getLogger(__name__)


class DemoScanAdapter:
    """Returns a deterministic grid regardless of the image."""

    def __init__(self, default_size: int = 5) -> None:
        self.default_size = default_size

    async def scan(self, image: bytes, dimensions: GridDimensions | None = None) -> ScanResult:
        rows = dimensions.rows if dimensions else self.default_size
        cols = dimensions.cols if dimensions else self.default_size
        logger.info("No API key configured, returning demo %dx%d grid", rows, cols)

        grid: list[list[CellValue]] = [
            [((r * cols + c + 1) % 75) + 1 for c in range(cols)] for r in range(rows)
        ]
        return ScanResult(rows=rows, cols=cols, grid=grid)
