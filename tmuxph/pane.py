"""Pane commands of a single tmux window.

A window runs one shell command per pane and exactly one of those panes is
focused. The focused role and the position of the focused pane are tracked
separately: ``focused`` holds the command, ``focused_index`` its position in
the linear command list, and ``others`` every remaining command in order.
The two facts are only reconciled when the linear list is rebuilt (see
``commands()``) or when the set is encoded.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from .exceptions import IndexOutOfRangeError


@dataclass
class PaneSet:
    """Ordered shell commands for one window, with one focused pane."""

    focused: str
    focused_index: int = 0
    others: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not 0 <= self.focused_index <= len(self.others):
            raise IndexOutOfRangeError(self.focused_index, len(self.others) + 1)

    @classmethod
    def single(cls, command: str) -> PaneSet:
        """Build a one-pane set."""
        return cls(focused=command)

    @classmethod
    def from_commands(cls, commands: list[str], focused_index: int = 0) -> PaneSet:
        """Build a pane set from a linear command list.

        Args:
            commands: Commands in pane order.
            focused_index: Position of the focused pane.

        Raises:
            ValueError: If ``commands`` is empty.
            IndexOutOfRangeError: If ``focused_index`` is not a valid position.
        """
        if not commands:
            raise ValueError("A window needs at least one pane command")
        if not 0 <= focused_index < len(commands):
            raise IndexOutOfRangeError(focused_index, len(commands))
        others = [cmd for n, cmd in enumerate(commands) if n != focused_index]
        return cls(
            focused=commands[focused_index],
            focused_index=focused_index,
            others=others,
        )

    @property
    def focused_command(self) -> str:
        return self.focused

    def count(self) -> int:
        """Total number of panes."""
        return len(self.others) + 1

    def commands(self) -> list[str]:
        """Full linear command list, focused command at ``focused_index``.

        Positional order, not focused-first, so that ``set_commands`` can take
        this list back unchanged (see DESIGN.md).
        """
        linear = list(self.others)
        linear.insert(self.focused_index, self.focused)
        return linear

    def set_commands(self, commands: list[str]) -> None:
        """Replace every pane command, keeping the focused position stable.

        The focused role stays at ``focused_index`` and takes whatever command
        now sits at that position. The remaining commands refill ``others``
        positionally; no attempt is made to match old commands by content.
        When the new list is too short for the current index, focus moves to
        the last pane.

        Raises:
            ValueError: If ``commands`` is empty.
        """
        if not commands:
            raise ValueError("A window needs at least one pane command")
        index = min(self.focused_index, len(commands) - 1)
        self.focused = commands[index]
        self.focused_index = index
        self.others = [cmd for n, cmd in enumerate(commands) if n != index]

    def set_focus(self, new_index: int) -> None:
        """Move the focused role to the pane at ``new_index``.

        Raises:
            IndexOutOfRangeError: If ``new_index`` is not a valid pane position.
        """
        if not 0 <= new_index < self.count():
            raise IndexOutOfRangeError(new_index, self.count())
        if new_index == self.focused_index:
            return
        linear = self.commands()
        self.focused = linear.pop(new_index)
        self.focused_index = new_index
        self.others = linear

    def append(self, command: str) -> None:
        """Add a pane at the end of the list."""
        self.others.append(command)
