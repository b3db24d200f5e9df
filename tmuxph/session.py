"""Session model: an ordered collection of windows plus a name and a directory."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .descriptor import PathResolver, parse_window_descriptor, resolve_directory
from .exceptions import IndexOutOfRangeError, WindowNotFoundError
from .window import DEFAULT_COMMAND, DEFAULT_WINDOW_NAME, Window

logger = logging.getLogger(__name__)


def document_stem(session_name: str) -> str:
    """File stem of a session document: the name with spaces as underscores."""
    return session_name.replace(" ", "_")


@dataclass
class CreationRequest:
    """Everything needed to build a new session from the command line."""

    session_name: str
    start_directory: Path
    focus: int = 0  # Index of the window to focus
    window_descriptors: list[str] = field(default_factory=list)
    use_defaults: bool = False  # Single default "bash" window
    default_window_name: str = DEFAULT_WINDOW_NAME
    default_command: str = DEFAULT_COMMAND
    default_automatic_rename: bool = True


@dataclass
class Session:
    """A tmuxp session document.

    At most one window is focused. ``windows`` is never empty for a
    session built by ``from_creation_request``.
    """

    name: str
    start_directory: Path
    windows: list[Window] = field(default_factory=list)

    @classmethod
    def from_creation_request(
        cls,
        request: CreationRequest,
        resolve: PathResolver = resolve_directory,
    ) -> Session:
        """Build a session from a creation request.

        With ``use_defaults`` the session gets exactly one default window.
        Otherwise every descriptor is parsed into a window, an empty
        descriptor standing for a default window at the session directory.

        Raises:
            ParsingError: If a descriptor is malformed.
            IndexOutOfRangeError: If a descriptor's focused pane or the
                requested focused window does not exist.
        """
        session = cls(name=request.session_name, start_directory=request.start_directory)

        def default_window() -> Window:
            return Window.default(
                request.start_directory,
                name=request.default_window_name,
                command=request.default_command,
                automatic_rename=request.default_automatic_rename,
            )

        if request.use_defaults:
            session.add_window(default_window())
        else:
            for descriptor in request.window_descriptors or [""]:
                if descriptor:
                    session.add_window(parse_window_descriptor(descriptor, resolve))
                else:
                    session.add_window(default_window())

        session.focus_window(request.focus)
        logger.info(
            "Created session %r with %d windows", session.name, len(session.windows)
        )
        return session

    @property
    def document_name(self) -> str:
        """File stem of the session document."""
        return document_stem(self.name)

    @property
    def focused_window(self) -> Window | None:
        for window in self.windows:
            if window.focus:
                return window
        return None

    def add_window(self, window: Window) -> Window:
        self.windows.append(window)
        return window

    def focus_window(self, index: int) -> None:
        """Focus the window at ``index`` and unfocus every other window.

        Raises:
            IndexOutOfRangeError: If ``index`` is not a valid window position.
        """
        if not 0 <= index < len(self.windows):
            raise IndexOutOfRangeError(index, len(self.windows), what="window")
        for n, window in enumerate(self.windows):
            window.focus = n == index

    def window_at(self, index: int) -> Window:
        """Return the window at ``index``.

        Raises:
            WindowNotFoundError: If the session has no such window.
        """
        if not 0 <= index < len(self.windows):
            raise WindowNotFoundError(index, len(self.windows))
        return self.windows[index]

    def get_or_create_window(
        self,
        index: int,
        name: str = DEFAULT_WINDOW_NAME,
        command: str = DEFAULT_COMMAND,
        automatic_rename: bool = True,
    ) -> Window:
        """Return the window at ``index``, appending a default window if missing.

        The new window is appended at the end of the list, so its position is
        ``len(windows) - 1`` rather than ``index`` when ``index`` is further
        out.
        """
        try:
            return self.window_at(index)
        except WindowNotFoundError as e:
            logger.info("%s, creating a new window", e.message)
            return self.add_window(
                Window.default(
                    self.start_directory,
                    name=name,
                    command=command,
                    automatic_rename=automatic_rename,
                )
            )
