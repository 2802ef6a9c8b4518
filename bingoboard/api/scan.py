"""
Card scan endpoint.

Proxies a base64 photo to the configured scan adapter and returns the
normalized grid. The result is not added to the game: clients load it
into their entry grid for review and then POST /cards.
"""

import base64
import binascii
import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from bingoboard.api.dependencies import get_scan_adapter
from bingoboard.models.card import CellValue
from bingoboard.models.failure import FailureKind, KnownError
from bingoboard.parsers.grid_entry import grid_to_entry
from bingoboard.scan.adapter import ScanAdapter
from bingoboard.services.game_state import check_dimensions

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scan", tags=["scan"])


class DimensionsModel(BaseModel):
    """Target grid size."""

    rows: int
    cols: int


class ScanRequest(BaseModel):
    """Request body for scanning a card photo."""

    image: str = Field(..., min_length=1, description="Base64 image, optionally a data URL")
    dimensions: DimensionsModel | None = Field(
        default=None, description="Expected size; detected from the photo when omitted"
    )


class ScanResponse(BaseModel):
    """Grid read from the photo."""

    rows: int
    cols: int
    grid: list[list[CellValue]]
    entry: list[list[str]]


def decode_image(data: str) -> bytes:
    """
    Decode a base64 payload, accepting a data-URL prefix.

    Raises:
        KnownError: INVALID_INPUT if the payload is not valid base64
    """
    if data.startswith("data:") and "," in data:
        data = data.split(",", 1)[1]
    try:
        image = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise KnownError(
            kind=FailureKind.INVALID_INPUT,
            message="Image payload is not valid base64.",
            detail=str(e),
        ) from e
    if not image:
        raise KnownError(kind=FailureKind.INVALID_INPUT, message="Image payload is empty.")
    return image


@router.post("", response_model=ScanResponse)
async def scan_card(
    request: ScanRequest,
    adapter: Annotated[ScanAdapter, Depends(get_scan_adapter)],
) -> ScanResponse:
    """
    Read a card grid from a photo.

    Returns 400 if the requested dimensions are out of bounds or the
    image is not a Bingo card, and 502 if the scan service failed. Scan
    failures are safe to retry.
    """
    image = decode_image(request.image)
    dims = request.dimensions
    target = check_dimensions(dims.rows, dims.cols) if dims else None

    result = await adapter.scan(image, target)
    logger.info("Scan returned %dx%d grid", result.rows, result.cols)

    return ScanResponse(
        rows=result.rows,
        cols=result.cols,
        grid=result.grid,
        entry=grid_to_entry(result.grid),
    )
