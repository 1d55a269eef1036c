"""
Flood fill over a label grid.

A fill starts from a seed cell and writes a region id into every empty cell
reachable through 4-connectivity. Each visited cell is handled according to
its current label:

- UNVISITED: claimed for the region, its neighbours are visited next
- BORDER: hard boundary, nothing happens
- the propagating region id: already claimed, nothing happens
- any other region id: consistency violation

Three traversals are available. They label exactly the same cells; only the
visiting order and the stack usage differ.
"""

from collections import deque
from collections.abc import Callable, Iterator
from enum import Enum
from typing import TypeAlias

from constants import BORDER, FIRST_REGION, UNVISITED
from freeman import DIRECTIONS_FREEMAN, FILL_ORDER
from localtypes import Coord, Label, LabelGrid, Proportions

from .errors import RegionConsistencyError

ViolationHandler: TypeAlias = Callable[[RegionConsistencyError], None]


class FillStrategy(Enum):
    """Available flood fill traversals."""

    DEPTH_FIRST = "depth"  # Explicit stack
    BREADTH_FIRST = "breadth"  # Explicit queue
    RECURSIVE = "recursive"  # Call stack, bounded by sys.getrecursionlimit()


def label_grid_proportions(labels: LabelGrid) -> Proportions:
    height, width = labels.shape
    return Proportions(width, height)


def tower_neighbors(coord: Coord, proportions: Proportions) -> Iterator[Coord]:
    """
    Yield the 4-neighbours of a cell that lie inside the grid.

    Neighbours come in fill order: up, down, left, right. There is no
    wraparound, a cell on an edge simply has fewer neighbours.
    """
    col, row = coord
    width, height = proportions
    for direction in FILL_ORDER:
        delta = DIRECTIONS_FREEMAN[direction]
        neighbor_col, neighbor_row = col + delta.col, row + delta.row
        if 0 <= neighbor_col < width and 0 <= neighbor_row < height:
            yield Coord(neighbor_col, neighbor_row)


def _claim(
    labels: LabelGrid,
    coord: Coord,
    label: Label,
    on_violation: ViolationHandler | None,
) -> bool:
    """
    Visit a single cell, returns True when the cell was newly claimed.
    """
    current = int(labels[coord.row, coord.col])

    if current == UNVISITED:
        labels[coord.row, coord.col] = label
        return True

    if current == BORDER or current == label:
        return False

    violation = RegionConsistencyError(coord, label, current)
    if on_violation is None:
        raise violation
    on_violation(violation)
    return False


def _fill_depth_first(
    labels: LabelGrid,
    seed: Coord,
    label: Label,
    proportions: Proportions,
    on_violation: ViolationHandler | None,
) -> int:
    claimed = 0
    stack = [seed]
    while stack:
        current = stack.pop()
        if not _claim(labels, current, label, on_violation):
            continue
        claimed += 1
        # Reversed so that the first neighbour in fill order is popped first
        stack.extend(reversed(tuple(tower_neighbors(current, proportions))))
    return claimed


def _fill_breadth_first(
    labels: LabelGrid,
    seed: Coord,
    label: Label,
    proportions: Proportions,
    on_violation: ViolationHandler | None,
) -> int:
    claimed = 0
    queue = deque([seed])
    while queue:
        current = queue.popleft()
        if not _claim(labels, current, label, on_violation):
            continue
        claimed += 1
        queue.extend(tower_neighbors(current, proportions))
    return claimed


def _fill_recursive(
    labels: LabelGrid,
    coord: Coord,
    label: Label,
    proportions: Proportions,
    on_violation: ViolationHandler | None,
) -> int:
    if not _claim(labels, coord, label, on_violation):
        return 0
    claimed = 1
    for neighbor in tower_neighbors(coord, proportions):
        claimed += _fill_recursive(labels, neighbor, label, proportions, on_violation)
    return claimed


def flood_fill(
    labels: LabelGrid,
    seed: Coord,
    label: Label,
    strategy: FillStrategy = FillStrategy.DEPTH_FIRST,
    on_violation: ViolationHandler | None = None,
) -> int:
    """
    Propagate a region id from a seed cell, in place.

    Args:
        labels: Label grid indexed as labels[row, col], modified in place.
        seed: Starting cell.
        label: Region id to write, at least FIRST_REGION.
        strategy: Traversal to use.
        on_violation: Called with the error whenever a foreign region id is
                      met. When None, the error is raised instead.

    Returns:
        The number of cells newly labeled.

    Raises:
        RegionConsistencyError: A foreign region id was met and no handler
                                was given.
    """
    if label < FIRST_REGION:
        raise ValueError(
            f"Region ids start at {FIRST_REGION}, got: {label}"
        )

    proportions = label_grid_proportions(labels)
    if not (0 <= seed.col < proportions.width and 0 <= seed.row < proportions.height):
        raise IndexError(
            f"Seed {tuple(seed)} lies outside a {proportions.width}x{proportions.height} grid"
        )

    match strategy:
        case FillStrategy.DEPTH_FIRST:
            return _fill_depth_first(labels, seed, label, proportions, on_violation)
        case FillStrategy.BREADTH_FIRST:
            return _fill_breadth_first(labels, seed, label, proportions, on_violation)
        case FillStrategy.RECURSIVE:
            return _fill_recursive(labels, seed, label, proportions, on_violation)
