from bingoboard.parsers.grid_entry import (
    EntryGrid,
    blank_entry,
    grid_to_entry,
    parse_call_input,
    parse_cell,
    parse_entry,
)

__all__ = [
    "EntryGrid",
    "blank_entry",
    "grid_to_entry",
    "parse_call_input",
    "parse_cell",
    "parse_entry",
]
