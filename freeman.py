from typing import Final, Literal

from localtypes import Coord

# Directions

# Orthogonal moves only: regions are 4-connected
Tower = Literal[0, 1, 2, 3]

LEFT: Final[Tower] = 0
UP: Final[Tower] = 1
RIGHT: Final[Tower] = 2
DOWN: Final[Tower] = 3

# Order in which a flood fill expands a cell
FILL_ORDER: Final[tuple[Tower, ...]] = (UP, DOWN, LEFT, RIGHT)

DIRECTIONS_FREEMAN: Final[dict[Tower, Coord]] = {
    LEFT: Coord(-1, 0),
    UP: Coord(0, -1),
    RIGHT: Coord(1, 0),
    DOWN: Coord(0, 1),
}
