"""Tests for win detection."""

import pytest

from bingoboard.analysis.win_detector import (
    LineKind,
    WinningLine,
    count_marked,
    detect_win,
    is_marked,
    winning_lines,
)
from bingoboard.models.card import FREE


class TestIsMarked:
    def test_free_always_marked(self) -> None:
        """Free space is marked even with nothing called."""
        assert is_marked(FREE, set()) is True

    def test_called_number_marked(self) -> None:
        assert is_marked(7, {7}) is True

    def test_uncalled_number_not_marked(self) -> None:
        assert is_marked(7, {8}) is False


class TestDetectWin:
    def test_no_calls_no_win(self, small_grid) -> None:
        assert detect_win(small_grid, set()) is False

    def test_full_row_wins(self, small_grid) -> None:
        assert detect_win(small_grid, {4, 5, 6}) is True

    def test_full_column_wins(self, small_grid) -> None:
        assert detect_win(small_grid, {2, 5, 8}) is True

    def test_main_diagonal_wins_on_square(self, small_grid) -> None:
        assert detect_win(small_grid, {1, 5, 9}) is True

    def test_anti_diagonal_wins_on_square(self, small_grid) -> None:
        assert detect_win(small_grid, {3, 5, 7}) is True

    def test_partial_lines_do_not_win(self, small_grid) -> None:
        """Two cells from every line is not a win."""
        assert detect_win(small_grid, {1, 2, 4, 6, 8, 9}) is False

    def test_center_free_row_scenario(self, center_free_grid) -> None:
        """Middle row with a free center wins after its four numbers."""
        assert detect_win(center_free_grid, {7, 12, 19}) is False
        assert detect_win(center_free_grid, {24, 19, 7, 12}) is True
        assert count_marked(center_free_grid, {7, 12, 19, 24}) == 5

    def test_non_square_never_wins_by_diagonal(self) -> None:
        """3x5 grid: cells on both 'diagonals' marked, no row or column full."""
        grid = [
            [1, 2, 3, 4, 5],
            [6, 7, 8, 9, 10],
            [11, 12, 13, 14, 15],
        ]
        called = {1, 7, 13, 5, 9, 11, 3}
        assert detect_win(grid, called) is False

    def test_non_square_row_still_wins(self) -> None:
        grid = [
            [1, 2, 3, 4, 5],
            [6, 7, 8, 9, 10],
            [11, 12, 13, 14, 15],
        ]
        assert detect_win(grid, {6, 7, 8, 9, 10}) is True

    def test_non_square_column_still_wins(self) -> None:
        grid = [
            [1, 2, 3, 4, 5],
            [6, 7, 8, 9, 10],
            [11, 12, 13, 14, 15],
        ]
        assert detect_win(grid, {4, 9, 14}) is True

    def test_empty_grid_does_not_crash(self) -> None:
        assert detect_win([], {1, 2, 3}) is False

    def test_grid_of_empty_rows_does_not_win(self) -> None:
        assert detect_win([[], []], set()) is False

    def test_all_free_column_wins_with_nothing_called(self) -> None:
        grid = [
            [FREE, 2],
            [FREE, 4],
        ]
        assert detect_win(grid, set()) is True

    @pytest.mark.parametrize(
        "sequence",
        [
            [4, 5, 6, 1, 2, 3, 7, 8, 9],
            [1, 5, 9, 2, 3],
            [9, 8, 7, 6],
        ],
    )
    def test_win_is_monotonic(self, small_grid, sequence) -> None:
        """Once won, calling more numbers never un-wins."""
        called: set[int] = set()
        won = False
        for number in sequence:
            called.add(number)
            now = detect_win(small_grid, called)
            assert not (won and not now)
            won = now


class TestCountMarked:
    def test_counts_free_cells_with_no_calls(self, center_free_grid) -> None:
        assert count_marked(center_free_grid, set()) == 1

    def test_counts_called_cells(self, small_grid) -> None:
        assert count_marked(small_grid, {1, 5, 42}) == 2

    def test_all_called_marks_every_cell(self, center_free_grid) -> None:
        numbers = {value for row in center_free_grid for value in row if value is not FREE}
        assert count_marked(center_free_grid, numbers) == 25

    def test_count_non_decreasing(self, small_grid) -> None:
        called: set[int] = set()
        previous = 0
        for number in [5, 1, 42, 9, 3]:
            called.add(number)
            current = count_marked(small_grid, called)
            assert current >= previous
            previous = current

    def test_empty_grid_counts_zero(self) -> None:
        assert count_marked([], {1}) == 0


class TestWinningLines:
    def test_lists_every_complete_line(self, small_grid) -> None:
        lines = winning_lines(small_grid, {1, 2, 3, 5, 9})

        assert lines == [
            WinningLine(LineKind.ROW, 0),
            WinningLine(LineKind.DIAGONAL),
        ]

    def test_matches_detect_win(self, small_grid) -> None:
        for called in [set(), {1, 2}, {3, 5, 7}, {2, 5, 8}]:
            assert bool(winning_lines(small_grid, called)) == detect_win(small_grid, called)

    def test_column_index_reported(self, small_grid) -> None:
        assert winning_lines(small_grid, {3, 6, 9}) == [WinningLine(LineKind.COLUMN, 2)]
