# Tests for Rect arithmetic and the cell buffer

import pytest
from rich.segment import Segment
from rich.style import Style

from policy_picker.ui.bottom_pane.geometry import Buffer, Rect


class TestRect:
    def test_inner_shrinks_every_side(self):
        assert Rect(2, 3, 10, 6).inner() == Rect(3, 4, 8, 4)

    @pytest.mark.parametrize("width,height", [(0, 0), (1, 1), (2, 2)])
    def test_inner_never_negative(self, width, height):
        inner = Rect(0, 0, width, height).inner()
        assert inner.width == 0 and inner.height == 0
        assert inner.is_empty

    def test_split_vertical_clamps_top(self):
        top, rest = Rect(0, 1, 5, 4).split_vertical(10)
        assert top == Rect(0, 1, 5, 4)
        assert rest == Rect(0, 5, 5, 0)

    def test_split_vertical(self):
        top, rest = Rect(1, 1, 5, 6).split_vertical(2)
        assert top == Rect(1, 1, 5, 2)
        assert rest == Rect(1, 3, 5, 4)

    def test_intersection(self):
        assert Rect(0, 0, 10, 10).intersection(Rect(5, 5, 10, 10)) == Rect(5, 5, 5, 5)
        assert Rect(0, 0, 2, 2).intersection(Rect(5, 5, 1, 1)).is_empty


class TestBuffer:
    def test_set_string_clips_to_area(self):
        buf = Buffer.empty(5, 2)
        next_x = buf.set_string(3, 0, "abcdef")
        assert next_x == 9
        assert buf.row_text(0) == "   ab"
        assert buf.row_text(1) == "     "

    def test_set_string_max_width(self):
        buf = Buffer.empty(6, 1)
        buf.set_string(0, 0, "abcdef", max_width=2)
        assert buf.row_text(0) == "ab    "

    def test_get_outside_raises(self):
        with pytest.raises(IndexError):
            Buffer.empty(2, 2).get(2, 0)

    def test_set_segments_keeps_styles(self):
        buf = Buffer.empty(8, 1)
        red = Style(color="red")
        buf.set_segments(0, 0, [Segment("ab"), Segment("cd", red)], max_width=3)
        assert buf.row_text(0) == "abc     "
        assert buf.get(2, 0).style == red
        assert buf.get(3, 0).symbol == " "

    def test_row_segments_merges_runs(self):
        buf = Buffer.empty(4, 1)
        bold = Style(bold=True)
        buf.set_string(0, 0, "xy", bold)
        segments = buf.row_segments(0)
        assert [s.text for s in segments] == ["xy", "  "]
        assert segments[0].style == bold

    def test_reset(self):
        buf = Buffer.empty(3, 1)
        buf.set_string(0, 0, "abc", Style(color="red"))
        buf.reset()
        assert buf.row_text(0) == "   "
        assert buf.get(0, 0).style == Style.null()

    @pytest.mark.parametrize("y", [-1, 2, 5])
    def test_row_text_outside_raises(self, y):
        with pytest.raises(IndexError):
            Buffer.empty(3, 2).row_text(y)
