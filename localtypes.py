"""
Type definitions for region counting.

This module contains the custom types shared by the counter, the maps and
the display helpers, organized by their primary use cases.
"""

from __future__ import annotations

from typing import NamedTuple, Protocol, TypeAlias, runtime_checkable

import numpy as np
import numpy.typing as npt


# Coordinate systems
class Coord(NamedTuple):
    col: int
    row: int


class Proportions(NamedTuple):
    width: int
    height: int


# Labels
Label: TypeAlias = int
LabelGrid: TypeAlias = npt.NDArray[np.int32]  # labels[row, col] -> label
Rows: TypeAlias = list[list[int]]  # Plain grid: rows[row][col] -> 0 or 1

# Type aliases for improving code readability
Height = int
Width = int
Row = int
Col = int


@runtime_checkable
class GridSource(Protocol):
    """
    Read access to a border/empty grid.

    Anything exposing its dimensions and a border predicate can be counted,
    regardless of how the cells are stored.
    """

    def get_dimensions(self) -> tuple[Width, Height]: ...

    def is_border(self, x: Col, y: Row) -> bool: ...
