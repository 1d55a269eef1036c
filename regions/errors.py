"""
Exceptions raised while counting regions.
"""

from localtypes import Coord, Label


class RegionError(Exception):
    """Base class for every region counting error."""


class RegionConsistencyError(RegionError):
    """
    A flood fill reached a cell already owned by another region.

    Regions separated by an unbroken border can never touch, so meeting a
    foreign region id means the label grid was corrupted between ingestion
    and solving, or the border layout disagrees with 4-connectivity.
    """

    def __init__(self, coord: Coord, expected: Label, found: Label):
        self.coord = coord
        self.expected = expected
        self.found = found
        super().__init__(
            f"Overlapping regions in the map: cell {tuple(coord)} carries region "
            f"{found} while filling region {expected}"
        )


class NotIngestedError(RegionError):
    """Solving was requested before any grid was ingested."""


class NotSolvedError(RegionError):
    """Region inspection was requested before solving."""
