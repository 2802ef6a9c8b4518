"""
Call ledger: the ordered, duplicate-free record of called numbers.

The ledger keeps two views in lockstep:
- a set, for O(1) membership checks during win detection
- a list in call order, for undo and the recent-calls display

Re-announcing a number and undoing past empty are normal game-host
mistakes, so both are reported as outcomes rather than raised.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class CallStatus(str, Enum):
    """Outcome of a ledger mutation."""

    CALLED = "called"
    DUPLICATE = "duplicate"
    UNDONE = "undone"
    EMPTY = "empty"


@dataclass(frozen=True)
class CallResult:
    """Result of call() or undo_last()."""

    status: CallStatus
    number: int | None = None

    @property
    def changed(self) -> bool:
        """Whether the ledger was modified."""
        return self.status in (CallStatus.CALLED, CallStatus.UNDONE)


class CallLedger:
    """Called numbers with call order preserved."""

    def __init__(self) -> None:
        self._order: list[int] = []
        self._members: set[int] = set()

    def __len__(self) -> int:
        return len(self._order)

    def __contains__(self, number: object) -> bool:
        return number in self._members

    def __iter__(self) -> Iterator[int]:
        return iter(self._order)

    @property
    def called(self) -> frozenset[int]:
        """Snapshot of the called numbers as a set."""
        return frozenset(self._members)

    @property
    def history(self) -> tuple[int, ...]:
        """All called numbers, oldest first."""
        return tuple(self._order)

    @property
    def last(self) -> int | None:
        """The most recently called number, if any."""
        return self._order[-1] if self._order else None

    def call(self, number: int) -> CallResult:
        """Record a called number. A repeat call is a no-op."""
        if number in self._members:
            logger.debug("Number %d already called", number)
            return CallResult(CallStatus.DUPLICATE, number)

        self._order.append(number)
        self._members.add(number)
        return CallResult(CallStatus.CALLED, number)

    def undo_last(self) -> CallResult:
        """Remove the most recently called number."""
        if not self._order:
            return CallResult(CallStatus.EMPTY)

        number = self._order.pop()
        self._members.discard(number)
        return CallResult(CallStatus.UNDONE, number)

    def clear(self) -> None:
        """Forget every called number."""
        self._order.clear()
        self._members.clear()

    def recent(self, k: int) -> list[int]:
        """Up to `k` most recent calls, most recent first."""
        if k <= 0:
            return []
        return self._order[::-1][:k]
