"""
Manual card entry parsing.

Users edit a grid of strings before committing a card. Empty cells,
"FREE", "F" and "0" are free spaces (case-insensitive); everything else
must be a positive whole number.

Example entry for a 3x3 card with the center pre-filled:
    [["4", "11", "7"],
     ["2", "FREE", "9"],
     ["15", "1", "3"]]
"""

import re
from collections.abc import Sequence

from bingoboard.config import FREE_LABEL, FREE_TOKENS
from bingoboard.models.card import FREE, CellValue, GameSettings, Grid
from bingoboard.models.failure import GridEntryError, InvalidGridError, InvalidInputError

EntryGrid = list[list[str]]


def blank_entry(game_settings: GameSettings) -> EntryGrid:
    """Empty entry grid for the configured size, with the center free if enabled."""
    dims = game_settings.dimensions
    center = game_settings.center
    return [
        [FREE_LABEL if (r, c) == center else "" for c in range(dims.cols)]
        for r in range(dims.rows)
    ]


def grid_to_entry(grid: Grid) -> EntryGrid:
    """Render a parsed grid back into editable strings."""
    return [[FREE_LABEL if value is FREE else str(value) for value in row] for row in grid]


# ASCII digits with an optional leading "+", surrounding whitespace allowed
_NUMBER_PATTERN = re.compile(r"\s*\+?[0-9]+\s*")


def _parse_positive_int(text: str) -> int | None:
    if not _NUMBER_PATTERN.fullmatch(text):
        return None
    value = int(text)
    return value if value > 0 else None


def parse_cell(raw: str, row: int, col: int) -> CellValue:
    """
    Parse a single entry cell.

    Args:
        raw: Text typed by the user
        row: 0-based row index (reported 1-based on error)
        col: 0-based column index (reported 1-based on error)

    Raises:
        GridEntryError: If the text is neither a free token nor a positive number
    """
    text = raw.strip().upper()
    if text in FREE_TOKENS:
        return FREE

    value = _parse_positive_int(text)
    if value is None:
        raise GridEntryError(row + 1, col + 1, raw)
    return value


def parse_entry(entry: Sequence[Sequence[str]]) -> list[list[CellValue]]:
    """
    Parse a full entry grid into cell values.

    Raises:
        InvalidGridError: If the entry is empty or has ragged rows
        GridEntryError: On the first cell that cannot be parsed
    """
    if not entry or not entry[0]:
        raise InvalidGridError("entry grid has no cells")

    width = len(entry[0])
    grid: list[list[CellValue]] = []
    for r, row in enumerate(entry):
        if len(row) != width:
            raise InvalidGridError(f"row {r + 1} has {len(row)} cells, expected {width}")
        grid.append([parse_cell(raw, r, c) for c, raw in enumerate(row)])
    return grid


def parse_call_input(raw: str) -> int:
    """
    Parse the number typed into the call box.

    Raises:
        InvalidInputError: If the text is not a positive whole number
    """
    value = _parse_positive_int(raw.strip())
    if value is None:
        raise InvalidInputError(raw)
    return value
