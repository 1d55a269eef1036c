"""
Tests for the maps package: reference border map and loaders.
"""

import json

import pytest

from localtypes import Coord, GridSource, Proportions
from maps import BorderMap, load_border_map, parse_json, parse_matrix, parse_rows


class TestBorderMap:
    def test_new_map_is_empty(self):
        border_map = BorderMap(3, 2)
        assert border_map.get_size() == (3, 2)
        assert border_map.get_dimensions() == (3, 2)
        assert border_map.proportions == Proportions(3, 2)
        assert border_map.borders() == frozenset()

    def test_is_a_grid_source(self):
        assert isinstance(BorderMap(1, 1), GridSource)

    def test_set_and_clear_border(self):
        border_map = BorderMap(3, 2)
        border_map.set_border(2, 1)
        assert border_map.is_border(2, 1)
        assert not border_map.is_border(1, 1)
        border_map.clear_border(2, 1)
        assert not border_map.is_border(2, 1)

    def test_clear_empty_cell_is_noop(self):
        border_map = BorderMap(2, 2)
        border_map.clear_border(0, 0)
        assert border_map.borders() == frozenset()

    def test_x_is_column_y_is_row(self):
        border_map = BorderMap(4, 2)
        border_map.set_border(3, 0)
        assert border_map.dump() == "0001\n0000"

    def test_set_borders(self):
        border_map = BorderMap(3, 3)
        border_map.set_borders([(0, 0), (2, 2)])
        assert border_map.borders() == frozenset({Coord(0, 0), Coord(2, 2)})

    def test_set_size_resets(self):
        border_map = BorderMap(2, 2)
        border_map.set_border(1, 1)
        border_map.set_size(3, 1)
        assert border_map.width == 3
        assert border_map.height == 1
        assert border_map.borders() == frozenset()

    @pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 2)])
    def test_out_of_range(self, x, y):
        border_map = BorderMap(3, 2)
        with pytest.raises(IndexError):
            border_map.is_border(x, y)
        with pytest.raises(IndexError):
            border_map.set_border(x, y)
        with pytest.raises(IndexError):
            border_map.clear_border(x, y)

    def test_negative_size(self):
        with pytest.raises(ValueError):
            BorderMap(-1, 2)

    def test_show(self, capsys):
        border_map = BorderMap(2, 2)
        border_map.set_border(0, 1)
        border_map.show()
        assert capsys.readouterr().out == "00\n10\n"


class TestParsing:
    def test_parse_rows(self):
        border_map = parse_rows(["#..", ".X1", "0 ."])
        assert border_map.get_size() == (3, 3)
        assert border_map.borders() == frozenset(
            {Coord(0, 0), Coord(1, 1), Coord(2, 1)}
        )

    def test_parse_no_rows(self):
        assert parse_rows([]).get_size() == (0, 0)

    def test_ragged_rows(self):
        with pytest.raises(ValueError, match="Row 1"):
            parse_rows(["...", ".."])

    def test_unknown_cell(self):
        with pytest.raises(ValueError, match="Unknown cell"):
            parse_rows(["..?"])

    def test_parse_matrix(self):
        border_map = parse_matrix([[0, 1], [1, 0]])
        assert border_map.borders() == frozenset({Coord(1, 0), Coord(0, 1)})

    def test_parse_json_object(self):
        border_map = parse_json({"width": 4, "height": 2, "borders": [[3, 1]]})
        assert border_map.get_size() == (4, 2)
        assert border_map.borders() == frozenset({Coord(3, 1)})

    def test_parse_json_object_without_borders(self):
        assert parse_json({"width": 2, "height": 2}).borders() == frozenset()


class TestLoading:
    def test_load_text(self, tmp_path):
        path = tmp_path / "ring.txt"
        path.write_text(".....\n.###.\n.#.#.\n.###.\n.....\n\n")
        border_map = load_border_map(str(path))
        assert border_map.get_size() == (5, 5)
        assert len(border_map.borders()) == 8

    def test_load_json_matrix(self, tmp_path):
        path = tmp_path / "row.json"
        path.write_text(json.dumps([[0, 1, 0, 1, 0]]))
        border_map = load_border_map(str(path))
        assert border_map.dump() == "01010"

    def test_load_json_object(self, tmp_path):
        path = tmp_path / "map.JSON"
        path.write_text(json.dumps({"width": 3, "height": 3, "borders": [[1, 1]]}))
        border_map = load_border_map(str(path))
        assert border_map.borders() == frozenset({Coord(1, 1)})
