"""
Grid sources for the region counter.

- BorderMap: fixed-size map with settable and clearable border cells
- parse_rows / parse_matrix / parse_json / load_border_map: map builders
"""

from .border_map import BorderMap
from .loader import load_border_map, parse_json, parse_matrix, parse_rows

__all__ = [
    "BorderMap",
    "load_border_map",
    "parse_json",
    "parse_matrix",
    "parse_rows",
]
