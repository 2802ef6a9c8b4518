from bingoboard.models.card import (
    FREE,
    Card,
    CellValue,
    FrozenGrid,
    GameSettings,
    Grid,
    GridDimensions,
)
from bingoboard.models.failure import (
    FailureDetail,
    FailureKind,
    GridEntryError,
    InvalidDimensionsError,
    InvalidGridError,
    InvalidInputError,
    KnownError,
    ScanError,
)

__all__ = [
    "FREE",
    "Card",
    "CellValue",
    "FailureDetail",
    "FailureKind",
    "FrozenGrid",
    "GameSettings",
    "Grid",
    "GridDimensions",
    "GridEntryError",
    "InvalidDimensionsError",
    "InvalidGridError",
    "InvalidInputError",
    "KnownError",
    "ScanError",
]
