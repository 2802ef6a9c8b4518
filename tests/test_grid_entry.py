"""Tests for manual grid entry parsing."""

import pytest

from bingoboard.models.card import FREE, GameSettings, GridDimensions
from bingoboard.models.failure import GridEntryError, InvalidGridError, InvalidInputError
from bingoboard.parsers.grid_entry import (
    blank_entry,
    grid_to_entry,
    parse_call_input,
    parse_cell,
    parse_entry,
)


class TestParseCell:
    @pytest.mark.parametrize("raw", ["FREE", "free", "F", "f", "", "   ", "0", " Free "])
    def test_free_tokens(self, raw: str) -> None:
        assert parse_cell(raw, 0, 0) is FREE

    def test_number(self) -> None:
        assert parse_cell(" 17 ", 0, 0) == 17

    @pytest.mark.parametrize("raw", ["x", "12a", "-4", "3.5", "1_0", "\u0663"])
    def test_invalid_reports_one_based_position(self, raw: str) -> None:
        with pytest.raises(GridEntryError) as exc_info:
            parse_cell(raw, 2, 4)

        assert exc_info.value.row == 3
        assert exc_info.value.col == 5
        assert exc_info.value.raw == raw


class TestParseEntry:
    def test_parses_grid(self) -> None:
        grid = parse_entry([["1", "FREE"], ["0", "44"]])

        assert grid == [[1, FREE], [FREE, 44]]

    def test_ragged_entry_rejected(self) -> None:
        with pytest.raises(InvalidGridError):
            parse_entry([["1", "2"], ["3"]])

    def test_empty_entry_rejected(self) -> None:
        with pytest.raises(InvalidGridError):
            parse_entry([])

    def test_stops_at_first_bad_cell(self) -> None:
        with pytest.raises(GridEntryError) as exc_info:
            parse_entry([["1", "2"], ["bad", "worse"]])

        assert (exc_info.value.row, exc_info.value.col) == (2, 1)


class TestBlankEntry:
    def test_center_free_odd_square(self) -> None:
        entry = blank_entry(GameSettings(GridDimensions(3, 3), center_free=True))

        assert entry == [["", "", ""], ["", "FREE", ""], ["", "", ""]]

    def test_center_free_odd_rectangle(self) -> None:
        entry = blank_entry(GameSettings(GridDimensions(3, 5), center_free=True))

        assert entry[1][2] == "FREE"

    def test_center_free_disabled(self) -> None:
        entry = blank_entry(GameSettings(GridDimensions(5, 5), center_free=False))

        assert all(cell == "" for row in entry for cell in row)


class TestGridToEntry:
    def test_renders_free_label(self) -> None:
        assert grid_to_entry([[1, FREE], [FREE, 9]]) == [["1", "FREE"], ["FREE", "9"]]

    def test_round_trips_through_parse(self) -> None:
        grid = [[5, 10, FREE], [15, 20, 25]]

        assert parse_entry(grid_to_entry(grid)) == grid


class TestParseCallInput:
    def test_parses_number(self) -> None:
        assert parse_call_input("  33") == 33
        assert parse_call_input("+12") == 12

    @pytest.mark.parametrize("raw", ["", "  ", "B12", "-1", "0", "1_0", "\uff11\uff12"])
    def test_rejects_invalid(self, raw: str) -> None:
        with pytest.raises(InvalidInputError) as exc_info:
            parse_call_input(raw)

        assert exc_info.value.raw == raw
