"""
Reference grid source backed by a plain list of rows.
"""

from collections.abc import Iterable

from constants import BORDER, UNVISITED
from localtypes import Col, Coord, Height, Proportions, Row, Rows, Width


class BorderMap:
    """
    Fixed-size map whose cells are either border or empty.

    Cells are stored as rows[row][col], 1 for border and 0 for empty, while
    every public method takes (x, y) = (col, row).
    """

    def __init__(self, width: Width = 0, height: Height = 0) -> None:
        self._rows: Rows = []
        self.set_size(width, height)

    # Constructors
    def set_size(self, width: Width, height: Height) -> None:
        """Allocate an all-empty map, dropping previous contents."""
        if width < 0 or height < 0:
            raise ValueError(
                f"Map dimensions should be non-negative, got: {width}x{height}"
            )
        self._rows = [[UNVISITED for _ in range(width)] for _ in range(height)]
        self._width = width
        self._height = height

    # Dimensions
    @property
    def width(self) -> Width:
        return self._width

    @property
    def height(self) -> Height:
        return self._height

    @property
    def proportions(self) -> Proportions:
        return Proportions(self._width, self._height)

    def get_size(self) -> tuple[Width, Height]:
        return self._width, self._height

    def get_dimensions(self) -> tuple[Width, Height]:
        return self.get_size()

    # Borders
    def _check(self, x: Col, y: Row) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Point ({x}, {y}) lies outside a {self._width}x{self._height} map"
            )

    def set_border(self, x: Col, y: Row) -> None:
        self._check(x, y)
        self._rows[y][x] = BORDER

    def set_borders(self, coords: Iterable[tuple[Col, Row]]) -> None:
        for x, y in coords:
            self.set_border(x, y)

    def clear_border(self, x: Col, y: Row) -> None:
        self._check(x, y)
        if self._rows[y][x] == BORDER:
            self._rows[y][x] = UNVISITED

    def is_border(self, x: Col, y: Row) -> bool:
        self._check(x, y)
        return self._rows[y][x] == BORDER

    def borders(self) -> frozenset[Coord]:
        return frozenset(
            Coord(col, row)
            for row in range(self._height)
            for col in range(self._width)
            if self._rows[row][col] == BORDER
        )

    # Display
    def dump(self) -> str:
        """Rows of 0 (empty) and 1 (border) digits, one line per row."""
        return "\n".join("".join(str(cell) for cell in row) for row in self._rows)

    def show(self) -> None:
        print(self.dump())

    def __repr__(self) -> str:
        return f"BorderMap(width={self._width}, height={self._height})"
