"""Prompting for pane commands when a layout changes the pane count.

Applying a layout may require dropping or adding pane commands. The choice
is delegated to a ``LayoutPrompter`` so the window model itself never does
terminal I/O:

- ``ConsolePrompter`` asks interactively on the terminal (rich).
- ``PresetPrompter`` replays answers given up front (CLI flags, tests).
"""

from __future__ import annotations

from collections import deque
from typing import Protocol, runtime_checkable

from rich.console import Console
from rich.prompt import IntPrompt, Prompt
from rich.table import Table

from .exceptions import PromptExhaustedError


@runtime_checkable
class LayoutPrompter(Protocol):
    """Protocol for choosing pane commands during a layout change."""

    def choose_command_to_drop(self, commands: list[str]) -> int:
        """Return the index of the command to remove from ``commands``."""
        ...

    def ask_new_command(self, commands: list[str]) -> str:
        """Return a command to append after ``commands``."""
        ...


class ConsolePrompter:
    """Interactive prompter that lists the current commands before each question."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def _show_commands(self, commands: list[str]) -> None:
        table = Table(title="Commands in panes", show_header=True, header_style="bold")
        table.add_column("#", justify="right")
        table.add_column("Command")
        for n, command in enumerate(commands):
            table.add_row(str(n), command)
        self.console.print(table)

    def choose_command_to_drop(self, commands: list[str]) -> int:
        self._show_commands(commands)
        return IntPrompt.ask(
            "Enter the number of the command to drop",
            console=self.console,
            choices=[str(n) for n in range(len(commands))],
            show_choices=False,
        )

    def ask_new_command(self, commands: list[str]) -> str:
        self._show_commands(commands)
        return Prompt.ask("Enter a new command", console=self.console)


class PresetPrompter:
    """Non-interactive prompter fed with answers in advance.

    Args:
        drops: Indices to drop, consumed in order.
        additions: Commands to add, consumed in order.
    """

    def __init__(
        self,
        drops: list[int] | None = None,
        additions: list[str] | None = None,
    ) -> None:
        self._drops: deque[int] = deque(drops or [])
        self._additions: deque[str] = deque(additions or [])
        self._ndrops = len(self._drops)
        self._nadditions = len(self._additions)

    @property
    def remaining_drops(self) -> int:
        return len(self._drops)

    @property
    def remaining_additions(self) -> int:
        return len(self._additions)

    def choose_command_to_drop(self, commands: list[str]) -> int:
        if not self._drops:
            raise PromptExhaustedError("command to drop", self._ndrops)
        return self._drops.popleft()

    def ask_new_command(self, commands: list[str]) -> str:
        if not self._additions:
            raise PromptExhaustedError("new command", self._nadditions)
        return self._additions.popleft()
