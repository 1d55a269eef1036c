"""Tests for utils/display.py and utils/io/tui.py"""

import numpy as np

from maps import parse_rows
from regions import RegionCounter
from utils.display import display_labels, label_char, label_color, render_labels
from utils.io.tui import bg_color_24b, rgb_to_8b


def solved_labels(rows: list[str]) -> np.ndarray:
    counter = RegionCounter()
    counter.ingest(parse_rows(rows))
    counter.solve()
    return counter.labels


def test_render_ring():
    labels = solved_labels([".....", ".###.", ".#.#.", ".###.", "....."])
    assert render_labels(labels) == "\n".join(
        ["22222", "2###2", "2#3#2", "2###2", "22222"]
    )


def test_render_unsolved_labels():
    labels = np.array([[0, 1, 0]], dtype=np.int32)
    assert render_labels(labels) == ".#."


def test_label_chars_wrap_around():
    assert label_char(2) == "2"
    assert label_char(11) == "b"
    assert label_char(2 + 60) == "2"


def test_display_labels_is_framed(capsys):
    display_labels(solved_labels(["..#", "#.."]))
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2 + 2


def test_rgb_to_8b():
    assert rgb_to_8b(0, 0, 0) == 16
    assert rgb_to_8b(255, 255, 255) == 231


def test_color_depth_follows_terminal(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")
    assert bg_color_24b(1, 2, 3) == "\033[48;2;1;2;3m"
    monkeypatch.setenv("COLORTERM", "")
    monkeypatch.setenv("TERM", "xterm-256color")
    assert bg_color_24b(255, 0, 0) == "\033[48;5;196m"


def test_label_colors_follow_terminal_at_render_time(monkeypatch):
    monkeypatch.setenv("COLORTERM", "truecolor")
    assert label_color(1) == "\033[48;2;85;85;85m"
    monkeypatch.setenv("COLORTERM", "")
    monkeypatch.setenv("TERM", "xterm-256color")
    assert label_color(1) == "\033[48;5;102m"
    assert label_color(2) == "\033[48;5;75m"
