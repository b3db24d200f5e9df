"""Tests for the pane command model."""

import pytest

from tmuxph.exceptions import IndexOutOfRangeError
from tmuxph.pane import PaneSet


class TestPaneSetConstruction:
    """Test building pane sets."""

    def test_single(self):
        panes = PaneSet.single("clear && bash")
        assert panes.count() == 1
        assert panes.focused_command == "clear && bash"
        assert panes.focused_index == 0
        assert panes.others == []

    def test_from_commands_default_focus(self):
        panes = PaneSet.from_commands(["a", "b", "c"])
        assert panes.focused == "a"
        assert panes.others == ["b", "c"]
        assert panes.count() == 3

    def test_from_commands_focus_in_middle(self):
        panes = PaneSet.from_commands(["a", "b", "c"], focused_index=1)
        assert panes.focused == "b"
        assert panes.focused_index == 1
        assert panes.others == ["a", "c"]

    def test_from_commands_empty_list(self):
        with pytest.raises(ValueError):
            PaneSet.from_commands([])

    def test_from_commands_index_out_of_range(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            PaneSet.from_commands(["a", "b"], focused_index=2)
        assert exc_info.value.index == 2
        assert exc_info.value.bound == 2

    def test_invalid_index_rejected_on_init(self):
        with pytest.raises(IndexOutOfRangeError):
            PaneSet(focused="a", focused_index=3, others=["b"])


class TestCommandsView:
    """Test the linear command list."""

    def test_commands_keep_focused_position(self):
        panes = PaneSet(focused="b", focused_index=1, others=["a", "c"])
        assert panes.commands() == ["a", "b", "c"]

    def test_commands_focused_last(self):
        panes = PaneSet(focused="c", focused_index=2, others=["a", "b"])
        assert panes.commands() == ["a", "b", "c"]

    def test_commands_feed_back_into_set_commands(self):
        panes = PaneSet(focused="b", focused_index=1, others=["a", "c"])
        panes.set_commands(panes.commands())
        assert panes.focused_command == "b"
        assert panes.focused_index == 1
        assert panes.others == ["a", "c"]

    def test_commands_returns_copy(self):
        panes = PaneSet.from_commands(["a", "b"])
        panes.commands().append("x")
        assert panes.count() == 2


class TestSetFocus:
    """Test moving the focused role."""

    def test_set_focus_moves_role(self):
        """Focusing pane 2 of [a, b, c] makes c focused and keeps the count."""
        panes = PaneSet.from_commands(["a", "b", "c"])
        panes.set_focus(2)
        assert panes.focused_command == "c"
        assert sorted(panes.others) == ["a", "b"]
        assert panes.count() == 3
        assert panes.focused_index == 2

    def test_set_focus_keeps_linear_order(self):
        panes = PaneSet.from_commands(["a", "b", "c"], focused_index=2)
        panes.set_focus(0)
        assert panes.commands() == ["a", "b", "c"]
        assert panes.focused == "a"
        assert panes.others == ["b", "c"]

    def test_set_focus_same_index_is_noop(self):
        panes = PaneSet.from_commands(["a", "b"], focused_index=1)
        panes.set_focus(1)
        assert panes.focused == "b"
        assert panes.others == ["a"]

    def test_set_focus_out_of_range(self):
        panes = PaneSet.from_commands(["a", "b"])
        with pytest.raises(IndexOutOfRangeError):
            panes.set_focus(2)
        assert panes.focused == "a"

    def test_set_focus_negative(self):
        panes = PaneSet.from_commands(["a", "b"])
        with pytest.raises(IndexOutOfRangeError):
            panes.set_focus(-1)


class TestSetCommands:
    """Test replacing pane commands."""

    def test_focused_index_stays_stable(self):
        panes = PaneSet.from_commands(["a", "b", "c"], focused_index=1)
        panes.set_commands(["x", "y", "z"])
        assert panes.focused_index == 1
        assert panes.focused == "y"
        assert panes.others == ["x", "z"]

    def test_grow(self):
        panes = PaneSet.from_commands(["a", "b"], focused_index=1)
        panes.set_commands(["a", "b", "c", "d"])
        assert panes.count() == 4
        assert panes.focused == "b"
        assert panes.commands() == ["a", "b", "c", "d"]

    def test_shrink_below_focused_index_clamps(self):
        panes = PaneSet.from_commands(["a", "b", "c"], focused_index=2)
        panes.set_commands(["a"])
        assert panes.focused_index == 0
        assert panes.focused == "a"
        assert panes.count() == 1

    def test_empty_commands_rejected(self):
        panes = PaneSet.from_commands(["a", "b"])
        with pytest.raises(ValueError):
            panes.set_commands([])
        assert panes.commands() == ["a", "b"]


class TestAppend:
    """Test adding panes."""

    def test_append_adds_at_end(self):
        panes = PaneSet.from_commands(["a", "b"], focused_index=1)
        panes.append("c")
        assert panes.count() == 3
        assert panes.commands() == ["a", "b", "c"]
        assert panes.focused == "b"
