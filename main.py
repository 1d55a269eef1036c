"""
Count the enclosed regions of a border map and print the result.

Without --map, the hand-drawn demo map is used.
"""

import argparse
import logging
import sys

from constants import DEBUG, DEFAULT_FILL_STRATEGY
from maps import BorderMap, load_border_map
from maps.demo import demo_map
from regions import FillStrategy, RegionConsistencyError, RegionCounter
from utils.display import display_labels, render_labels

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format="%(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


def solve_map(
    border_map: BorderMap,
    strategy: FillStrategy = FillStrategy[DEFAULT_FILL_STRATEGY],
    fail_fast: bool = True,
    show_visuals: bool = True,
) -> int:
    """
    Show a map, count its regions, then show the labeled result.
    """
    if show_visuals:
        border_map.show()

    counter = RegionCounter(strategy)
    counter.ingest(border_map)
    region_count = counter.solve(fail_fast=fail_fast)

    logger.info(f"Map {border_map.width}x{border_map.height}: {region_count} region(s)")
    for region, size in counter.region_sizes().items():
        logger.debug(f"  region {region}: {size} cell(s)")

    if show_visuals:
        print()
        display_labels(counter.labels)
        logger.debug("\n" + render_labels(counter.labels))

    return region_count


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Count enclosed regions of a border map")
    parser.add_argument("--map", help="Text or JSON map file, defaults to the demo map")
    parser.add_argument(
        "--strategy",
        choices=[strategy.value for strategy in FillStrategy],
        default=FillStrategy[DEFAULT_FILL_STRATEGY].value,
        help="Flood fill traversal",
    )
    parser.add_argument(
        "--collect",
        action="store_true",
        help="Collect consistency violations instead of stopping at the first one",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--no-visuals", action="store_true", help="Disable visual output"
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    border_map = load_border_map(args.map) if args.map else demo_map()

    try:
        region_count = solve_map(
            border_map,
            strategy=FillStrategy(args.strategy),
            fail_fast=not args.collect,
            show_visuals=not args.no_visuals,
        )
    except RegionConsistencyError as error:
        logger.error(str(error))
        return 1

    print(region_count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
