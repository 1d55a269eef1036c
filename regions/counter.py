"""
Region counter: counts the enclosed empty regions of a border/empty grid.

The counter takes a snapshot of a grid source into a label grid it owns,
then scans it row by row. Every cell still UNVISITED at scan time is the
first cell of a region nobody has seen yet: it receives the next region id
and a flood fill spreads that id over the whole region.
"""

import logging
from collections import defaultdict
from enum import Enum, auto

import numpy as np

from constants import BORDER, DEFAULT_FILL_STRATEGY, FIRST_REGION, UNVISITED
from localtypes import Coord, GridSource, Label, LabelGrid, Proportions

from .errors import NotIngestedError, NotSolvedError, RegionConsistencyError
from .flood import FillStrategy, flood_fill, label_grid_proportions

logger = logging.getLogger(__name__)


class CounterState(Enum):
    UNINITIALIZED = auto()
    INGESTED = auto()
    SOLVED = auto()
    FAILED = auto()  # A fail-fast solve raised, the label grid is partly relabeled


def _check_dimension(name: str, value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValueError(f"Grid {name} should be an integer, got: {value!r}")
    if value < 0:
        raise ValueError(f"Grid {name} should be non-negative, got: {value}")
    return int(value)


class RegionCounter:
    """
    Counts maximal 4-connected groups of empty cells.

    Lifecycle: UNINITIALIZED -> ingest() -> INGESTED -> solve() -> SOLVED.
    A solve raising RegionConsistencyError leaves the counter FAILED, and
    only a new ingest() makes it solvable again.
    Ingesting again from any state starts over with a fresh label grid.

    Example:
        >>> from maps import parse_rows
        >>> counter = RegionCounter()
        >>> counter.ingest(parse_rows(["0101", "0101"]))
        >>> counter.solve()
        2
    """

    def __init__(self, strategy: FillStrategy | None = None) -> None:
        self.strategy = (
            strategy if strategy is not None else FillStrategy[DEFAULT_FILL_STRATEGY]
        )
        self.state = CounterState.UNINITIALIZED
        self.region_count = 0
        self.violations: list[RegionConsistencyError] = []
        self._labels: LabelGrid = np.zeros((0, 0), dtype=np.int32)

    @property
    def labels(self) -> LabelGrid:
        """Read-only view of the label grid."""
        view = self._labels.view()
        view.flags.writeable = False
        return view

    @property
    def proportions(self) -> Proportions:
        return label_grid_proportions(self._labels)

    def ingest(self, source: GridSource) -> None:
        """
        Snapshot a grid source into a fresh label grid.

        Border cells become BORDER, every other cell UNVISITED. The source
        is only read, and only at in-bounds coordinates.
        """
        raw_width, raw_height = source.get_dimensions()
        width = _check_dimension("width", raw_width)
        height = _check_dimension("height", raw_height)

        labels = np.zeros((height, width), dtype=np.int32)
        for row in range(height):
            for col in range(width):
                if source.is_border(col, row):
                    labels[row, col] = BORDER

        self._labels = labels
        self.region_count = 0
        self.violations = []
        self.state = CounterState.INGESTED

        logger.debug(
            f"Ingested a {width}x{height} grid with {int(np.count_nonzero(labels))} border cells"
        )

    def solve(self, fail_fast: bool = True) -> int:
        """
        Label every region of the ingested grid and return how many there are.

        Args:
            fail_fast: Raise on the first consistency violation. When False,
                       violations are logged, kept in `violations`, and the
                       scan goes on.

        Returns:
            The number of regions, also kept in `region_count`.

        Raises:
            NotIngestedError: No grid was ingested yet, or the previous solve
                              failed and no grid was ingested since.
            RegionConsistencyError: A fill met a foreign region id while
                                    fail_fast is set.
        """
        if self.state is CounterState.UNINITIALIZED:
            raise NotIngestedError("Call ingest() with a grid source before solve()")
        if self.state is CounterState.FAILED:
            raise NotIngestedError(
                "The previous solve failed, call ingest() again before solve()"
            )

        on_violation = None if fail_fast else self._record_violation

        height, width = self._labels.shape
        for row in range(height):
            for col in range(width):
                if self._labels[row, col] == UNVISITED:
                    try:
                        self._discover_region(Coord(col, row), on_violation)
                    except RegionConsistencyError:
                        self.state = CounterState.FAILED
                        raise

        self.state = CounterState.SOLVED
        logger.debug(f"Found {self.region_count} region(s)")
        if self.violations:
            logger.warning(
                f"Solved with {len(self.violations)} consistency violation(s)"
            )
        return self.region_count

    def _discover_region(self, seed: Coord, on_violation) -> None:
        region = FIRST_REGION + self.region_count
        self.region_count += 1
        size = flood_fill(self._labels, seed, region, self.strategy, on_violation)
        logger.debug(f"Region {region} seeded at {tuple(seed)}: {size} cell(s)")

    def _record_violation(self, violation: RegionConsistencyError) -> None:
        # A foreign cell is met once per claimed neighbour, keep the first report
        if any(seen.coord == violation.coord for seen in self.violations):
            return
        logger.warning(str(violation))
        self.violations.append(violation)

    def _require_solved(self) -> None:
        if self.state is not CounterState.SOLVED:
            raise NotSolvedError("Call solve() before inspecting regions")

    def region_sizes(self) -> dict[Label, int]:
        """Number of cells of each region, keyed by region id."""
        self._require_solved()
        ids, counts = np.unique(
            self._labels[self._labels >= FIRST_REGION], return_counts=True
        )
        return {int(region): int(count) for region, count in zip(ids, counts)}

    def region_coords(self) -> dict[Label, frozenset[Coord]]:
        """Cells of each region, keyed by region id."""
        self._require_solved()
        coords_by_region: dict[Label, set[Coord]] = defaultdict(set)
        for row, col in np.argwhere(self._labels >= FIRST_REGION):
            region = int(self._labels[row, col])
            coords_by_region[region].add(Coord(int(col), int(row)))
        return {
            region: frozenset(coords) for region, coords in coords_by_region.items()
        }


def count_regions(source: GridSource, strategy: FillStrategy | None = None) -> int:
    """Ingest a grid source and count its regions in one go."""
    counter = RegionCounter(strategy)
    counter.ingest(source)
    return counter.solve()
