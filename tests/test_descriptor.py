"""Tests for window descriptor parsing."""

from pathlib import Path

import pytest

from tmuxph.descriptor import (
    WindowDescriptor,
    parse_window_descriptor,
    resolve_directory,
)
from tmuxph.exceptions import IndexOutOfRangeError, ParsingError


class TestParseWindowDescriptor:
    """Test parsing full descriptors into windows."""

    def test_basic_descriptor(self, tmp_path):
        """The documented example parses into a three-pane window."""
        window = parse_window_descriptor(
            f"code:{tmp_path}:off:0:nvim:cargo-watch -c:clear && bash"
        )
        assert window.name == "code"
        assert window.start_directory == tmp_path.resolve()
        assert window.automatic_rename is False
        assert window.panes.focused_index == 0
        assert window.panes.commands() == ["nvim", "cargo-watch -c", "clear && bash"]
        assert window.layout is None
        assert window.focus is False

    def test_autorename_on(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:on:0:bash")
        assert window.automatic_rename is True

    def test_autorename_anything_else_is_off(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:yes:0:bash")
        assert window.automatic_rename is False

    def test_focused_index(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:on:2:a:b:c")
        assert window.panes.focused_command == "c"
        assert window.panes.focused_index == 2
        assert window.panes.others == ["a", "b"]

    def test_layout_on_last_command(self, tmp_path):
        layout = "f93e,211x62,0,0[211x31,0,0,15,211x30,0,32,24]"
        window = parse_window_descriptor(f"w:{tmp_path}:on:0:nvim:{layout}#bash")
        assert window.layout == layout
        assert window.panes.commands() == ["nvim", "bash"]

    def test_layout_split_on_first_tag(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:on:0:5be4,211x62,0,0,15#echo '#1'")
        assert window.layout == "5be4,211x62,0,0,15"
        assert window.panes.commands() == ["echo '#1'"]

    def test_tag_only_checked_on_last_command(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:on:0:echo #x:bash")
        assert window.layout is None
        assert window.panes.commands() == ["echo #x", "bash"]

    def test_escaped_separator(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:on:0:echo a\\:b:bash")
        assert window.panes.commands() == ["echo a:b", "bash"]

    def test_relative_directory_resolved(self, tmp_path, monkeypatch):
        (tmp_path / "src").mkdir()
        monkeypatch.chdir(tmp_path)
        window = parse_window_descriptor("code:./src/:off:0:nvim")
        assert window.start_directory == (tmp_path / "src").resolve()
        assert window.start_directory.is_absolute()

    def test_injected_resolver(self):
        window = parse_window_descriptor(
            "w:anywhere:on:0:bash", resolve=lambda raw: Path("/virtual") / raw
        )
        assert window.start_directory == Path("/virtual/anywhere")


class TestDescriptorErrors:
    """Test malformed descriptors."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ParsingError) as exc_info:
            parse_window_descriptor(f"w:{tmp_path / 'missing'}:on:0:bash")
        assert exc_info.value.context["field"] == "start_directory"

    def test_non_numeric_index(self, tmp_path):
        with pytest.raises(ParsingError) as exc_info:
            parse_window_descriptor(f"w:{tmp_path}:on:x:bash")
        assert exc_info.value.context["field"] == "focused_index"

    def test_negative_index(self, tmp_path):
        with pytest.raises(ParsingError):
            parse_window_descriptor(f"w:{tmp_path}:on:-1:bash")

    def test_index_out_of_range(self, tmp_path):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            parse_window_descriptor(f"w:{tmp_path}:on:3:a:b")
        assert exc_info.value.index == 3
        assert exc_info.value.bound == 2

    def test_missing_fields(self, tmp_path):
        with pytest.raises(ParsingError):
            parse_window_descriptor(f"w:{tmp_path}")

    def test_no_commands(self, tmp_path):
        with pytest.raises(ParsingError) as exc_info:
            parse_window_descriptor(f"w:{tmp_path}:on:0")
        assert exc_info.value.context["field"] == "commands"


class TestEmptyFields:
    """Test empty fields at the edges of the grammar."""

    def test_empty_start_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        with pytest.raises(ParsingError) as exc_info:
            parse_window_descriptor("code::off:0:nvim")
        assert exc_info.value.context["field"] == "start_directory"

    def test_resolve_empty_directory(self):
        with pytest.raises(ParsingError):
            resolve_directory("")

    def test_trailing_separator_adds_empty_command(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:on:0:nvim:")
        assert window.panes.commands() == ["nvim", ""]

    def test_layout_with_empty_final_command(self, tmp_path):
        window = parse_window_descriptor(f"w:{tmp_path}:on:0:nvim:5be4,211x62,0,0,15#")
        assert window.layout == "5be4,211x62,0,0,15"
        assert window.panes.commands() == ["nvim", ""]


class TestWindowDescriptor:
    """Test the intermediate descriptor record."""

    def test_parse_fields(self, tmp_path):
        descriptor = WindowDescriptor.parse(f"w:{tmp_path}:off:1:a:b")
        assert descriptor.name == "w"
        assert descriptor.focused_index == 1
        assert descriptor.commands == ["a", "b"]
        assert descriptor.layout is None

    def test_resolve_directory_expands_home(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        assert resolve_directory("~") == tmp_path.resolve()
