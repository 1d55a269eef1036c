r"""
Module used to build border maps from files

Two formats are understood:
    1\ Text: one line per row, '#', '1' or 'X' for borders, '.', '0' or ' ' for empty cells
    2\ JSON: either a list of 0/1 rows, or {"width": w, "height": h, "borders": [[x, y], ...]}
"""

import json
import os
from collections.abc import Sequence

from constants import BORDER_CHARS, EMPTY_CHARS

from .border_map import BorderMap


def parse_rows(rows: Sequence[str]) -> BorderMap:
    """
    Build a map from text rows, all rows must have the same length.
    """
    height = len(rows)
    width = len(rows[0]) if rows else 0

    border_map = BorderMap(width, height)
    for row, line in enumerate(rows):
        if len(line) != width:
            raise ValueError(
                f"Row {row} has length {len(line)}, expected {width}"
            )
        for col, char in enumerate(line):
            if char in BORDER_CHARS:
                border_map.set_border(col, row)
            elif char not in EMPTY_CHARS:
                raise ValueError(f"Unknown cell {char!r} at ({col}, {row})")
    return border_map


def parse_matrix(matrix: Sequence[Sequence[int]]) -> BorderMap:
    """
    Build a map from rows of 0 (empty) and 1 (border) values.
    """
    return parse_rows(["".join(str(int(cell)) for cell in row) for row in matrix])


def parse_json(data: list | dict) -> BorderMap:
    if isinstance(data, list):
        return parse_matrix(data)

    assert isinstance(data, dict), f"Error: unexpected map data {type(data).__name__}"
    border_map = BorderMap(int(data["width"]), int(data["height"]))
    border_map.set_borders((int(x), int(y)) for x, y in data.get("borders", []))
    return border_map


def load_border_map(path: str) -> BorderMap:
    with open(path, "r") as file:
        if os.path.splitext(path)[1].lower() == ".json":
            return parse_json(json.load(file))
        rows = [line.rstrip("\r\n") for line in file]

    # Trailing blank lines are not rows
    while rows and not rows[-1]:
        rows.pop()
    return parse_rows(rows)
