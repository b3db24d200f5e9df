"""Window descriptor parsing.

A window descriptor is the compact shorthand used on the command line to
describe one window::

    NAME:STARTDIR:AUTORENAME:FOCUSED_INDEX:CMD0[:CMD1...][:LAYOUT#CMDn]

Example::

    code:./src/:off:0:nvim:cargo-watch -c:clear && bash

Fields are separated by ``:``; ``\\:`` inside a field is a literal colon.
The last command may be prefixed with a tmux layout string and ``#``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .exceptions import IndexOutOfRangeError, ParsingError
from .pane import PaneSet
from .window import Window

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ":"
ESCAPE = "\\"
LAYOUT_TAG = "#"
AUTORENAME_ON = "on"

PathResolver = Callable[[str], Path]


def resolve_directory(raw: str) -> Path:
    """Resolve a descriptor path to an absolute, canonical path.

    Raises:
        ParsingError: If the path is empty, does not exist or cannot be
            resolved.
    """
    if not raw:
        raise ParsingError(
            "Window description has an empty start directory",
            text=raw,
            field="start_directory",
        )
    try:
        return Path(raw).expanduser().resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise ParsingError(
            "Failed to get path from window description",
            text=raw,
            field="start_directory",
            cause=e,
        ) from e


def _until_separator(text: str) -> tuple[str, str]:
    """Read one field; return ``(remaining_input, field)``.

    A single leading separator is skipped first. The remaining input keeps
    the separator that ended the field, or is empty when the input ran out.
    """
    if text.startswith(FIELD_SEPARATOR):
        text = text[len(FIELD_SEPARATOR):]

    chars: list[str] = []
    i = 0
    while i < len(text):
        char = text[i]
        if char == ESCAPE and text.startswith(FIELD_SEPARATOR, i + 1):
            chars.append(FIELD_SEPARATOR)
            i += 1 + len(FIELD_SEPARATOR)
            continue
        if text.startswith(FIELD_SEPARATOR, i):
            return text[i:], "".join(chars)
        chars.append(char)
        i += 1
    return "", "".join(chars)


def _required_field(text: str, name: str, descriptor: str) -> tuple[str, str]:
    if not text:
        raise ParsingError(
            f"Window description is missing the {name} field",
            text=descriptor,
            field=name,
        )
    return _until_separator(text)


@dataclass
class WindowDescriptor:
    """Parsed fields of a window descriptor string."""

    name: str
    start_directory: Path
    automatic_rename: bool
    focused_index: int
    commands: list[str] = field(default_factory=list)
    layout: str | None = None

    @classmethod
    def parse(cls, text: str, resolve: PathResolver = resolve_directory) -> WindowDescriptor:
        """Parse a descriptor string.

        Args:
            text: The descriptor.
            resolve: Turns the raw start directory into an absolute path.

        Raises:
            ParsingError: On a missing field, an unresolvable start directory
                or a non-numeric focused index.
        """
        rest, name = _required_field(text, "name", text)
        rest, raw_directory = _required_field(rest, "start_directory", text)
        start_directory = resolve(raw_directory)
        rest, autorename = _required_field(rest, "automatic_rename", text)
        rest, raw_index = _required_field(rest, "focused_index", text)
        if not raw_index.isdecimal():
            raise ParsingError(
                f"Focused pane index is not a number: {raw_index!r}",
                text=text,
                field="focused_index",
            )
        if not rest:
            raise ParsingError(
                "Window description has no pane command",
                text=text,
                field="commands",
            )

        layout = None
        commands = []
        while rest:
            rest, command = _until_separator(rest)
            if not rest and LAYOUT_TAG in command:
                layout, command = command.split(LAYOUT_TAG, 1)
            commands.append(command)

        return cls(
            name=name,
            start_directory=start_directory,
            automatic_rename=autorename == AUTORENAME_ON,
            focused_index=int(raw_index),
            commands=commands,
            layout=layout,
        )

    def to_window(self) -> Window:
        """Build the described window (not focused).

        Raises:
            IndexOutOfRangeError: If the focused index has no matching command.
        """
        if self.focused_index >= len(self.commands):
            raise IndexOutOfRangeError(self.focused_index, len(self.commands))
        return Window(
            name=self.name,
            start_directory=self.start_directory,
            panes=PaneSet.from_commands(self.commands, self.focused_index),
            layout=self.layout,
            automatic_rename=self.automatic_rename,
        )


def parse_window_descriptor(text: str, resolve: PathResolver = resolve_directory) -> Window:
    """Parse a descriptor string straight into a ``Window``."""
    window = WindowDescriptor.parse(text, resolve).to_window()
    logger.debug("Parsed window %r with %d panes", window.name, window.pane_count())
    return window
