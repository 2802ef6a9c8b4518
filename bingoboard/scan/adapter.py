"""
Scan adapter contract and response normalization.

A scan adapter turns a card photo (plus optional target dimensions) into
a grid. Model output is untrusted: it may wrap the JSON in prose, return
a bare 2-D array or a {"rows", "cols", "grid"} object, use 0 for free
spaces, or get the shape wrong. Everything is coerced here, at the
boundary, into an exact rows x cols grid before it can reach a Card.

Coercion rules:
- 0, negative numbers and anything not integer-like become FREE
- missing rows/cells are padded with FREE
- extra rows/cells are truncated
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Protocol

from bingoboard.config import settings
from bingoboard.models.card import FREE, CellValue, GridDimensions
from bingoboard.models.failure import FailureKind, ScanError

logger = logging.getLogger(__name__)

NOT_A_CARD_CODE = "not_a_bingo_card"
NOT_A_CARD_MESSAGE = (
    "The image does not look like a valid Bingo card. Please upload a clear photo of a card."
)


@dataclass(frozen=True)
class ScanResult:
    """A validated grid read from a card photo."""

    rows: int
    cols: int
    grid: list[list[CellValue]]


class ScanAdapter(Protocol):
    """Anything that can read a grid off a card photo."""

    async def scan(self, image: bytes, dimensions: GridDimensions | None = None) -> ScanResult:
        """
        Read a card grid from an image.

        If dimensions are omitted the adapter infers the grid size.

        Raises:
            ScanError: If the image is not a card or the scan failed
        """
        ...


def build_prompt(dimensions: GridDimensions | None) -> str:
    """Extraction prompt for a vision model."""
    if dimensions is None:
        return (
            "STRICT INSTRUCTIONS: Analyze the provided image. If it is NOT a Bingo card "
            f'with a visible grid of numbers, return {{"error": "{NOT_A_CARD_CODE}"}}. '
            "If it IS a valid Bingo card, detect the exact grid size (rows and columns), "
            "then extract ALL visible numbers into a JSON object with this EXACT structure: "
            '{"rows": <number>, "cols": <number>, "grid": [[array of integers]]}. '
            "Use 0 for free spaces or empty cells. Return ONLY valid JSON, no additional text."
        )
    return (
        "STRICT INSTRUCTIONS: Extract ALL numbers from this "
        f"{dimensions.rows}x{dimensions.cols} Bingo card grid. Return a JSON array of "
        f"{dimensions.rows} rows, each containing {dimensions.cols} integers. "
        "Use 0 for free spaces or empty cells. If the image is not a valid Bingo card, "
        f'return {{"error": "{NOT_A_CARD_CODE}"}}. Return ONLY valid JSON, no additional text.'
    )


def extract_json(text: str) -> str | None:
    """
    Pull the first JSON object or array out of a model response.

    Returns the text unchanged if it already looks like pure JSON, the
    outermost {...} or [...] block (whichever opens first) otherwise, or
    None if there is no such block.
    """
    text = text.strip()
    if not text:
        return None
    if (text[0] == "{" and text[-1] == "}") or (text[0] == "[" and text[-1] == "]"):
        return text

    first_obj = text.find("{")
    first_arr = text.find("[")
    if first_obj != -1 and (first_arr == -1 or first_obj < first_arr):
        start, end = first_obj, text.rfind("}")
    elif first_arr != -1:
        start, end = first_arr, text.rfind("]")
    else:
        return None

    if end > start:
        return text[start : end + 1]
    return None


def _coerce_cell(value: Any) -> CellValue:
    if isinstance(value, bool):
        return FREE
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return FREE
    if isinstance(value, int) and value > 0:
        return value
    return FREE


def normalize_grid(raw: Any, rows: int, cols: int) -> list[list[CellValue]]:
    """Coerce arbitrary model output into an exact rows x cols grid."""
    source = raw if isinstance(raw, list) else []
    grid: list[list[CellValue]] = []
    for r in range(rows):
        raw_row = source[r] if r < len(source) and isinstance(source[r], list) else []
        row = [_coerce_cell(value) for value in raw_row[:cols]]
        row.extend([FREE] * (cols - len(row)))
        grid.append(row)
    return grid


def _as_size(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        size = int(value)
    except (TypeError, ValueError):
        return None
    return size if size > 0 else None


def _first_row_length(raw_grid: list[Any]) -> int:
    first = raw_grid[0] if raw_grid else None
    return len(first) if isinstance(first, list) else 0


def _clamp_size(size: int, maximum: int) -> int:
    return max(settings.min_grid_size, min(size, maximum))


def parse_scan_payload(text: str, dimensions: GridDimensions | None = None) -> ScanResult:
    """
    Turn raw model text into a validated ScanResult.

    Explicit dimensions always win over whatever size the model reports.
    Inferred sizes are clamped to the configured grid bounds; the grid is
    padded with FREE cells where the model returned fewer.

    Raises:
        ScanError: NOT_A_CARD if the model rejected the image or no grid
            was found, SCAN_FAILED if the response could not be read
    """
    raw = extract_json(text)
    if raw is None:
        raise ScanError("Could not read the scan result.", detail="no JSON found in model response")

    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ScanError("Could not read the scan result.", detail=str(e)) from e

    if isinstance(parsed, dict) and parsed.get("error"):
        error = str(parsed["error"])
        logger.info("Model rejected image: %s", error)
        message = NOT_A_CARD_MESSAGE if error == NOT_A_CARD_CODE else error
        raise ScanError(message, kind=FailureKind.NOT_A_CARD)

    if isinstance(parsed, list):
        raw_grid = parsed
        reported_rows, reported_cols = None, None
    elif isinstance(parsed, dict) and isinstance(parsed.get("grid"), list):
        raw_grid = parsed["grid"]
        reported_rows, reported_cols = _as_size(parsed.get("rows")), _as_size(parsed.get("cols"))
    else:
        logger.warning("Unexpected scan response structure: %.200s", raw)
        raise ScanError(
            "Could not interpret the scan result. Try a clearer photo.",
            detail="unexpected response structure",
        )

    if dimensions is not None:
        rows, cols = dimensions.rows, dimensions.cols
    else:
        rows = reported_rows or len(raw_grid)
        cols = reported_cols or _first_row_length(raw_grid)

    if not raw_grid or rows <= 0 or cols <= 0:
        raise ScanError("No valid grid was detected in the image.", kind=FailureKind.NOT_A_CARD)

    if dimensions is None:
        rows = _clamp_size(rows, settings.max_grid_rows)
        cols = _clamp_size(cols, settings.max_grid_cols)

    return ScanResult(rows=rows, cols=cols, grid=normalize_grid(raw_grid, rows, cols))
