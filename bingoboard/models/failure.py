"""
Failure classification for user-visible errors.

Every error the API reports is a KnownError: the system knows exactly
what went wrong and can tell the user how to fix it. The exception
handler in bingoboard.main renders these as {"failure": FailureDetail}.

Not errors (reported as notices instead):
- Calling a number that was already called
- Undoing when nothing has been called
- Deleting or renaming a card that no longer exists
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"
    INVALID_GRID = "invalid_grid"
    INVALID_DIMENSIONS = "invalid_dimensions"

    # Scan failures
    NOT_A_CARD = "not_a_card"
    SCAN_FAILED = "scan_failed"


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="User-appropriate explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the user",
    )


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_detail(self) -> FailureDetail:
        """Convert to a FailureDetail."""
        return FailureDetail(
            kind=self.kind,
            message=self.message,
            detail=self.detail,
            suggestion=self.suggestion,
        )


class InvalidInputError(KnownError):
    """Raised when a called number cannot be parsed."""

    def __init__(self, raw: str):
        self.raw = raw
        super().__init__(
            kind=FailureKind.INVALID_INPUT,
            message=f"'{raw}' is not a valid number to call.",
            suggestion="Enter a whole number greater than zero.",
        )


class GridEntryError(KnownError):
    """
    Raised when a manually entered cell is not a number or free space.

    Row and column are 1-based, as shown to the user.
    """

    def __init__(self, row: int, col: int, raw: str):
        self.row = row
        self.col = col
        self.raw = raw
        super().__init__(
            kind=FailureKind.INVALID_GRID,
            message=f"Invalid number at Row {row}, Col {col}",
            detail=f"Could not parse {raw!r}",
            suggestion="Type a number, or '0' / 'FREE' for a free space.",
        )


class InvalidGridError(KnownError):
    """Raised when a grid is empty or not rectangular."""

    def __init__(self, reason: str):
        super().__init__(
            kind=FailureKind.INVALID_GRID,
            message="Card grid must have rows of equal length.",
            detail=reason,
        )


class InvalidDimensionsError(KnownError):
    """Raised when configured dimensions fall outside the allowed bounds."""

    def __init__(self, rows: int, cols: int, minimum: int, max_rows: int, max_cols: int):
        super().__init__(
            kind=FailureKind.INVALID_DIMENSIONS,
            message=f"A {rows}x{cols} grid is not supported.",
            detail=f"Rows must be {minimum}-{max_rows}, columns {minimum}-{max_cols}",
            suggestion="Pick a size within the allowed limits.",
        )


class ScanError(KnownError):
    """
    Raised when a card photo could not be turned into a grid.

    NOT_A_CARD means the model looked at the image and decided it is not a
    Bingo card (status 400). SCAN_FAILED covers transport, server and
    unreadable-response failures (status 502). Both are retryable.
    """

    def __init__(
        self,
        message: str,
        kind: FailureKind = FailureKind.SCAN_FAILED,
        detail: str | None = None,
    ):
        super().__init__(
            kind=kind,
            message=message,
            detail=detail,
            suggestion=(
                "Ensure the photo is clear, well-lit, and contains only the Bingo card."
            ),
            status_code=400 if kind == FailureKind.NOT_A_CARD else 502,
        )
