"""Create and edit workflows behind the CLI.

Both workflows are pure with respect to storage: they return a session and
leave persisting it to the caller, so a failure never leaves a partially
written document behind.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .descriptor import PathResolver, resolve_directory
from .exceptions import ArgValidationError
from .layout import count_layout_panes
from .models import DefaultWindowConfig
from .prompts import LayoutPrompter
from .session import CreationRequest, Session

logger = logging.getLogger(__name__)


def create_session(
    request: CreationRequest,
    resolve: PathResolver = resolve_directory,
) -> Session:
    """Build a new session from a creation request.

    Raises:
        ArgValidationError: If the start directory is not a directory.
        ParsingError: If a window descriptor is malformed.
        IndexOutOfRangeError: If a focus index does not exist.
    """
    if not Path(request.start_directory).is_dir():
        raise ArgValidationError("start directory", value=request.start_directory)

    session = Session.from_creation_request(request, resolve)
    for n, window in enumerate(session.windows):
        if not window.layout_matches():
            logger.warning(
                "Window %d (%r) has %d panes but its layout tiles %d",
                n,
                window.name,
                window.pane_count(),
                count_layout_panes(window.layout),  # type: ignore[arg-type]
            )
    return session


@dataclass
class EditRequest:
    """Changes to apply to one window of an existing session.

    ``None`` (or an empty list) leaves the corresponding property untouched.
    """

    window_index: int
    layout: str | None = None
    window_name: str | None = None
    start_directory: Path | None = None
    focus_window: bool = False
    focused_pane: int | None = None
    commands: list[str] = field(default_factory=list)


def edit_session(
    session: Session,
    request: EditRequest,
    prompter: LayoutPrompter,
    default_window: DefaultWindowConfig | None = None,
) -> Session:
    """Apply an edit request to a copy of ``session``.

    The window at ``request.window_index`` is edited, or a default window is
    appended when the session has no such window. Changes are applied in
    order: name, start directory, commands, layout, focused pane, window
    focus.

    Returns:
        The edited copy; ``session`` itself is never modified.

    Raises:
        ArgValidationError: If the new start directory is not a directory.
        LayoutParseError: If the layout string is malformed.
        LayoutMismatchError: If new commands do not fit the current layout.
        IndexOutOfRangeError: If a pane index or a drop choice is invalid.
        PromptExhaustedError: If a preset prompter runs out of answers.
    """
    defaults = default_window or DefaultWindowConfig()
    edited = copy.deepcopy(session)
    window = edited.get_or_create_window(
        request.window_index,
        name=defaults.name,
        command=defaults.command,
        automatic_rename=defaults.automatic_rename,
    )
    index = next(n for n, w in enumerate(edited.windows) if w is window)
    logger.info("Editing window %d (%r) of session %r", index, window.name, edited.name)

    if request.window_name is not None:
        window.rename(request.window_name)

    if request.start_directory is not None:
        if not Path(request.start_directory).is_dir():
            raise ArgValidationError("start directory", value=request.start_directory)
        window.set_start_directory(Path(request.start_directory).resolve())

    if request.commands:
        if request.layout is not None:
            # The new layout decides the pane count; check it after resizing.
            window.panes.set_commands(request.commands)
        else:
            window.set_pane_commands(request.commands)

    if request.layout is not None:
        window.set_layout(request.layout, prompter)

    if request.focused_pane is not None:
        window.focus_pane(request.focused_pane)

    if request.focus_window:
        edited.focus_window(index)

    return edited
