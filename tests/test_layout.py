"""Tests for tmux layout pane counting."""

import pytest

from tmuxph.exceptions import LayoutParseError, ParsingError
from tmuxph.layout import count_layout_panes, is_valid_layout

NESTED_EIGHT_PANES = (
    "1bd3,211x62,0,0{105x62,0,0[105x31,0,0,15,105x30,0,32,26],"
    "105x62,106,0[105x31,106,0,25,105x15,106,32,27,105x14,106,48"
    "{52x14,106,48,28,26x14,159,48,29,25x14,186,48"
    "[25x7,186,48,30,25x6,186,56,31]}]}"
)


class TestCountLayoutPanes:
    """Test pane counts for layouts produced by tmux."""

    @pytest.mark.parametrize(
        ("layout", "expected"),
        [
            ("5be4,211x62,0,0,15", 1),
            ("f93e,211x62,0,0[211x31,0,0,15,211x30,0,32,24]", 2),
            ("6669,211x62,0,0{105x62,0,0,15,105x62,106,0,25}", 2),
            (
                "dcbe,211x62,0,0{105x62,0,0[105x31,0,0,15,105x30,0,32,26],"
                "105x62,106,0,25}",
                3,
            ),
            (
                "7303,211x62,0,0{105x62,0,0[105x31,0,0,15,105x30,0,32,26],"
                "105x62,106,0[105x31,106,0,25,105x30,106,32,27]}",
                4,
            ),
            (NESTED_EIGHT_PANES, 8),
        ],
    )
    def test_known_layouts(self, layout, expected):
        assert count_layout_panes(layout) == expected

    def test_three_side_by_side(self):
        layout = "a1b2,211x62,0,0{70x62,0,0,1,70x62,71,0,2,69x62,142,0,3}"
        assert count_layout_panes(layout) == 3


class TestMalformedLayouts:
    """Grammar mismatches are reported as errors."""

    def test_empty_layout(self):
        with pytest.raises(LayoutParseError):
            count_layout_panes("")

    def test_blank_layout(self):
        with pytest.raises(LayoutParseError):
            count_layout_panes("   ")

    def test_single_pane_missing_field(self):
        with pytest.raises(LayoutParseError):
            count_layout_panes("5be4,211x62,0,15")

    def test_single_pane_extra_field(self):
        with pytest.raises(LayoutParseError):
            count_layout_panes("5be4,211x62,0,0,15,16")

    def test_top_level_header_without_checksum(self):
        with pytest.raises(LayoutParseError):
            count_layout_panes("211x62,0,0[211x31,0,0,15,211x30,0,32,24]")

    def test_leaf_too_short_before_closing(self):
        with pytest.raises(LayoutParseError):
            count_layout_panes("f93e,211x62,0,0[211x31,0,0,15,211x30,0,24]")

    def test_nested_header_too_long(self):
        with pytest.raises(LayoutParseError):
            count_layout_panes("f93e,211x62,0,0{105x62,0,0,7[105x31,0,0,15,105x30,0,32,26]}")

    def test_layout_error_is_parsing_error(self):
        with pytest.raises(ParsingError):
            count_layout_panes("not a layout")

    def test_error_carries_layout(self):
        with pytest.raises(LayoutParseError) as exc_info:
            count_layout_panes("5be4,211x62")
        assert exc_info.value.context["text"] == "5be4,211x62"


class TestIsValidLayout:
    """Test the validity predicate."""

    def test_valid(self):
        assert is_valid_layout("5be4,211x62,0,0,15") is True

    def test_invalid(self):
        assert is_valid_layout("5be4") is False
