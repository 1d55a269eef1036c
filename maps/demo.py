"""
Hand-drawn 36x24 map split by five border lines into 6 regions.
"""

from localtypes import Coord, Proportions

from .border_map import BorderMap

DEMO_PROPORTIONS = Proportions(36, 24)

# (x, y) points of each border line, every point 8-adjacent to the next
FIRST_BORDER = (
    (18, 0), (17, 1), (16, 1), (15, 2), (14, 3), (13, 4), (12, 4),
    (11, 5), (10, 6), (9, 7), (8, 7), (7, 8), (6, 9), (5, 9), (5, 10),
    (4, 10), (3, 11), (2, 12), (1, 13), (0, 13),
)  # fmt: skip

SECOND_BORDER = (
    (6, 11), (7, 12), (7, 13), (8, 14), (8, 15), (9, 16), (9, 17),
    (10, 18), (10, 19), (11, 20), (11, 21), (12, 22), (12, 23),
)  # fmt: skip

THIRD_BORDER = (
    (10, 17), (11, 17), (12, 17), (13, 16), (14, 16), (15, 16), (16, 16),
    (17, 15), (18, 15), (19, 15), (20, 15), (21, 14), (22, 14), (23, 14),
    (24, 14), (25, 13), (26, 13), (27, 13), (28, 13),
)  # fmt: skip

FOURTH_BORDER = (
    (29, 13), (28, 12), (28, 11), (27, 10), (27, 9), (27, 8), (26, 7),
    (26, 6), (26, 5), (25, 4), (25, 3), (24, 2), (24, 1), (24, 0),
    (29, 14), (29, 15), (30, 16), (30, 17), (31, 18), (31, 19), (31, 20),
    (32, 21), (32, 22), (33, 23),
)  # fmt: skip

FIFTH_BORDER = (
    (27, 6), (28, 6), (29, 6), (30, 6), (31, 6), (32, 6), (33, 6),
    (34, 6), (35, 5),
)  # fmt: skip

DEMO_BORDERS: tuple[Coord, ...] = tuple(
    Coord(x, y)
    for line in (FIRST_BORDER, SECOND_BORDER, THIRD_BORDER, FOURTH_BORDER, FIFTH_BORDER)
    for x, y in line
)

DEMO_REGION_COUNT = 6


def demo_map() -> BorderMap:
    border_map = BorderMap(*DEMO_PROPORTIONS)
    border_map.set_borders(DEMO_BORDERS)
    return border_map
