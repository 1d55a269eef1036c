"""
Global constants used throughout the project
"""

# Label vocabulary of the label grid
UNVISITED = 0  # Empty cell not yet claimed by a region
BORDER = 1  # Impassable cell
FIRST_REGION = 2  # Region ids are FIRST_REGION, FIRST_REGION + 1, ...

# Characters accepted by the map loader
BORDER_CHARS = frozenset("#1Xx")
EMPTY_CHARS = frozenset(".0 ")

# Display colors as RGB, regions cycle through REGION_COLORS
UNVISITED_COLOR = (0, 0, 0)  # Black (#000000)
BORDER_COLOR = (85, 85, 85)  # Grey (#555555)
FRAME_COLOR = (153, 153, 153)  # Gray light (#999999)

REGION_COLORS = (
    (30, 147, 255),  # Blue (#1E93FF)
    (249, 60, 49),  # Red (#F93C31)
    (79, 204, 48),  # Green (#4FCC30)
    (255, 220, 0),  # Yellow (#FFDC00)
    (229, 58, 163),  # Magenta (#E53AA3)
    (255, 133, 27),  # Orange (#FF851B)
    (135, 216, 241),  # Blue light (#87D8F1)
    (146, 18, 49),  # Maroon (#921231)
)

# Name of the FillStrategy member used when none is given
DEFAULT_FILL_STRATEGY = "DEPTH_FIRST"

DEBUG = False
