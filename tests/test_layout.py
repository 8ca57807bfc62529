from __future__ import annotations

from sietor.fonts import VMetrics
from sietor.layout import layout_lines


class TableMetrics:
    widths = {"W": 10.0, "i": 2.0}

    def advance_width(self, char: str, scale: float) -> float:
        return self.widths.get(char, 4.0) * scale

    def pair_kerning(self, left: str, right: str, scale: float) -> float:
        return -1.0 * scale if (left, right) == ("W", "i") else 0.0

    def v_metrics(self, scale: float) -> VMetrics:
        return VMetrics(ascent=8.0 * scale, descent=-2.0 * scale, line_gap=1.0 * scale)


def placements(lines, **kwargs):
    return [
        (glyph.char, glyph.row, glyph.col, glyph.x, glyph.y)
        for glyph in layout_lines(lines, TableMetrics(), 1.0, **kwargs)
    ]


def test_glyphs_advance_with_kerning_and_rows() -> None:
    assert placements(["Wi", "i"]) == [
        ("W", 0, 0, 0.0, 8.0),
        ("i", 0, 1, 9.0, 8.0),
        ("i", 1, 0, 0.0, 19.0),
    ]


def test_glyph_past_max_width_wraps() -> None:
    assert placements(["WWW"], max_width=25.0) == [
        ("W", 0, 0, 0.0, 8.0),
        ("W", 0, 1, 10.0, 8.0),
        ("W", 0, 2, 0.0, 19.0),
    ]


def test_window_of_rows() -> None:
    assert placements(["a", "b", "c"], first_row=1, max_rows=1) == [
        ("b", 1, 0, 0.0, 8.0),
    ]


def test_control_characters_are_skipped() -> None:
    assert placements(["a\tb"]) == [
        ("a", 0, 0, 0.0, 8.0),
        ("b", 0, 2, 4.0, 8.0),
    ]


def test_embedded_line_break_starts_new_visual_line() -> None:
    assert placements(["a\nb"]) == [
        ("a", 0, 0, 0.0, 8.0),
        ("b", 0, 2, 0.0, 19.0),
    ]


def test_empty_lines_still_take_vertical_space() -> None:
    assert placements(["", "a"]) == [("a", 1, 0, 0.0, 19.0)]
