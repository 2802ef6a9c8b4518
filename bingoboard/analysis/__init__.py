from bingoboard.analysis.win_detector import (
    LineKind,
    WinningLine,
    count_marked,
    detect_win,
    is_marked,
    winning_lines,
)

__all__ = [
    "LineKind",
    "WinningLine",
    "count_marked",
    "detect_win",
    "is_marked",
    "winning_lines",
]
