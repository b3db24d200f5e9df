"""Window model of a tmuxp session document."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING

from .exceptions import IndexOutOfRangeError, LayoutMismatchError
from .layout import count_layout_panes
from .pane import PaneSet

if TYPE_CHECKING:
    from .prompts import LayoutPrompter

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_NAME = "bash"
DEFAULT_COMMAND = "clear && bash"


@dataclass
class Window:
    """A tmux window: a named tiling of panes anchored at a directory."""

    name: str
    start_directory: Path
    panes: PaneSet = field(default_factory=lambda: PaneSet.single(DEFAULT_COMMAND))
    layout: str | None = None  # tmux layout string, copied verbatim
    focus: bool = False
    automatic_rename: bool = True

    @classmethod
    def default(
        cls,
        start_directory: Path,
        name: str = DEFAULT_WINDOW_NAME,
        command: str = DEFAULT_COMMAND,
        automatic_rename: bool = True,
    ) -> Window:
        """Single-pane window running ``command``."""
        return cls(
            name=name,
            start_directory=start_directory,
            panes=PaneSet.single(command),
            automatic_rename=automatic_rename,
        )

    def pane_count(self) -> int:
        return self.panes.count()

    def layout_matches(self) -> bool:
        """Check that the layout (if any) tiles exactly this window's panes."""
        if self.layout is None:
            return True
        return count_layout_panes(self.layout) == self.pane_count()

    def rename(self, name: str) -> None:
        logger.debug("Renaming window %r to %r", self.name, name)
        self.name = name

    def set_start_directory(self, start_directory: Path) -> None:
        self.start_directory = start_directory

    def focus_pane(self, index: int) -> None:
        self.panes.set_focus(index)

    def set_pane_commands(self, commands: list[str]) -> None:
        """Replace the pane commands, keeping the focused position stable.

        Raises:
            LayoutMismatchError: If a layout is set and ``commands`` does not
                have the number of panes it tiles.
        """
        if self.layout is not None:
            expected = count_layout_panes(self.layout)
            if expected != len(commands):
                raise LayoutMismatchError(self.layout, expected, len(commands))
        self.panes.set_commands(commands)

    # -------------------------------------------------------------------------
    # Layout application
    # -------------------------------------------------------------------------

    def set_layout(self, layout: str, prompter: LayoutPrompter) -> None:
        """Apply a new layout, resizing the pane list to match it.

        Surplus panes are dropped one at a time and missing panes added one at
        a time, each choice coming from ``prompter``. The window is only
        modified once every choice succeeded.

        Args:
            layout: tmux layout string.
            prompter: Supplies which command to drop / which command to add.

        Raises:
            LayoutParseError: If the layout string is malformed.
            IndexOutOfRangeError: If the prompter picks a non-existent pane.
            PromptExhaustedError: If a non-interactive prompter runs out.
        """
        target = count_layout_panes(layout)
        current = self.pane_count()

        if target < current:
            commands = self.drop_commands(current - target, prompter)
        elif target > current:
            commands = self.new_commands(target - current, prompter)
        else:
            commands = self.panes.commands()

        logger.info("Setting %d pane commands on window %r", len(commands), self.name)
        self.panes.set_commands(commands)
        self.layout = layout

    def drop_commands(self, ndrop: int, prompter: LayoutPrompter) -> list[str]:
        """Return the command list with ``ndrop`` prompter-chosen commands removed."""
        commands = self.panes.commands()
        for _ in range(ndrop):
            dropped = prompter.choose_command_to_drop(list(commands))
            if not 0 <= dropped < len(commands):
                raise IndexOutOfRangeError(dropped, len(commands))
            logger.info("Dropping command %r", commands.pop(dropped))
        return commands

    def new_commands(self, nnew: int, prompter: LayoutPrompter) -> list[str]:
        """Return the command list extended with ``nnew`` prompter-supplied commands."""
        commands = self.panes.commands()
        logger.debug("Asking for %d new commands", nnew)
        for _ in range(nnew):
            commands.append(prompter.ask_new_command(list(commands)))
            logger.info("Added command %r", commands[-1])
        return commands
