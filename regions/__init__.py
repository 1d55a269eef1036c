"""
Enclosed region counting.

This package partitions the empty cells of a border/empty grid into maximal
4-connected regions and counts them:

**Counter** (counter.py)
    Owns a label grid built from any grid source and labels it region by
    region.
    - RegionCounter.ingest(source): snapshot borders into the label grid
    - RegionCounter.solve() -> number of regions
    - count_regions(source) -> ingest and solve in one call

**Flood fill** (flood.py)
    Region id propagation under 4-connectivity.
    - flood_fill(labels, seed, label, strategy) -> cells labeled
    - FillStrategy: depth-first, breadth-first or recursive traversal

**Errors** (errors.py)
    - RegionConsistencyError: a fill met a cell owned by another region
    - NotIngestedError, NotSolvedError: lifecycle misuse

Grid sources (maps, loaders) live in maps/.
"""

from .counter import (
    CounterState,
    RegionCounter,
    count_regions,
)
from .errors import (
    NotIngestedError,
    NotSolvedError,
    RegionConsistencyError,
    RegionError,
)
from .flood import (
    FillStrategy,
    flood_fill,
    tower_neighbors,
)

__all__ = [
    # Counter
    "CounterState",
    "RegionCounter",
    "count_regions",
    # Flood fill
    "FillStrategy",
    "flood_fill",
    "tower_neighbors",
    # Errors
    "RegionError",
    "RegionConsistencyError",
    "NotIngestedError",
    "NotSolvedError",
]
