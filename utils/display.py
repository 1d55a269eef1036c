"""
Terminal rendering of maps and label grids
"""

from constants import (
    BORDER,
    BORDER_COLOR,
    FIRST_REGION,
    FRAME_COLOR,
    REGION_COLORS,
    UNVISITED,
    UNVISITED_COLOR,
)
from localtypes import Label, LabelGrid
from utils.io.tui import RESET, bg_color_24b

# One character per region id, wrapping around past the last one
_REGION_CHARS = "23456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"


def label_char(label: Label) -> str:
    if label == UNVISITED:
        return "."
    if label == BORDER:
        return "#"
    return _REGION_CHARS[(label - FIRST_REGION) % len(_REGION_CHARS)]


def label_color(label: Label) -> str:
    if label == UNVISITED:
        return bg_color_24b(*UNVISITED_COLOR)
    if label == BORDER:
        return bg_color_24b(*BORDER_COLOR)
    return bg_color_24b(*REGION_COLORS[(label - FIRST_REGION) % len(REGION_COLORS)])


def render_labels(labels: LabelGrid) -> str:
    """
    Plain text rendering: '#' for borders, '.' for unvisited cells and one
    character per region id.
    """
    return "\n".join(
        "".join(label_char(int(label)) for label in row) for row in labels
    )


def display_labels(labels: LabelGrid) -> None:
    """
    Print a label grid with one background color per region, framed.
    """
    height, width = labels.shape
    # Escapes depend on the terminal at call time
    frame = bg_color_24b(*FRAME_COLOR)

    print(f"{frame}  " * (width + 2), RESET)
    for row in range(height):
        print(f"{frame}  ", end="")
        for col in range(width):
            print(f"{label_color(int(labels[row, col]))}  ", end="")
        print(f"{frame}  ", RESET)
    print(f"{frame}  " * (width + 2), RESET)
