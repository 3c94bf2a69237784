"""Unit tests for the character canvas."""

import pytest

from phylotext.errors import LayoutOverflowError
from phylotext.tree_components import Canvas


class TestCanvas:
    """Test suite for Canvas."""

    def test_starts_blank(self):
        canvas = Canvas(5, 3)
        assert canvas.rows() == ["     "] * 3

    def test_set_writes_one_cell(self):
        canvas = Canvas(5, 3)
        assert canvas.set(2, 1, "x")
        assert canvas.rows()[1] == "  x  "

    def test_lenient_canvas_drops_out_of_range_writes(self):
        canvas = Canvas(4, 2)
        assert not canvas.set(4, 0, "x")
        assert not canvas.set(-1, 0, "x")
        assert not canvas.set(0, 2, "x")
        assert canvas.dropped == 3
        assert canvas.rows() == ["    ", "    "]

    def test_strict_canvas_raises(self):
        canvas = Canvas(4, 2, strict=True)
        with pytest.raises(LayoutOverflowError):
            canvas.set(4, 0, "x")

    def test_write_text_clips_at_edge(self):
        canvas = Canvas(4, 1)
        consumed = canvas.write_text(2, 0, "123")
        assert consumed == 3
        assert canvas.rows() == ["  12"]
        assert canvas.dropped == 1

    def test_wide_glyph_takes_two_cells(self):
        canvas = Canvas(4, 1)
        assert canvas.write_text(0, 0, "中") == 2
        assert canvas.rows() == ["中  "]
        assert canvas.cell_widths[0][:2] == [2, 0]

    def test_markup_only_when_requested(self):
        canvas = Canvas(3, 1)
        canvas.set(1, 0, "-")
        canvas.insert_markup(1, 0, "[red]", position="prefix")
        canvas.insert_markup(1, 0, "[/]", position="suffix")
        assert canvas.rows() == [" - "]
        assert canvas.rows(include_markup=True) == [" [red]-[/] "]

    def test_overwrite_clears_markup(self):
        canvas = Canvas(3, 1)
        canvas.set(0, 0, "-")
        canvas.insert_markup(0, 0, "[red]")
        canvas.set(0, 0, "7")
        assert canvas.rows(include_markup=True) == ["7  "]

    def test_overwriting_half_a_wide_glyph_clears_it(self):
        canvas = Canvas(4, 1)
        canvas.write_text(0, 0, "中")
        canvas.set(1, 0, "x")
        assert canvas.rows() == [" x  "]
