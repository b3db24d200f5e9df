"""tmuxph: manages tmuxp JSON session files.

Builds tmux session documents from compact window descriptors, edits them
(rename, directories, focus, layouts) and reads/writes the tmuxp JSON
dialect.

Public API Usage:
    from pathlib import Path
    from tmuxph import CreationRequest, SessionStore, create_session

    session = create_session(CreationRequest(
        session_name="work",
        start_directory=Path("/home/me/proj"),
        window_descriptors=["code:.:off:0:nvim:clear && bash"],
    ))
    SessionStore().save(session)
"""

__version__ = "0.1.0"

from tmuxph.codec import (
    decode_session,
    dumps_session,
    encode_session,
    loads_session,
)
from tmuxph.descriptor import WindowDescriptor, parse_window_descriptor
from tmuxph.exceptions import (
    ArgValidationError,
    EnvError,
    IndexOutOfRangeError,
    JsonError,
    LayoutMismatchError,
    LayoutParseError,
    OptionNotFoundError,
    ParsingError,
    TmuxphError,
    WindowNotFoundError,
)
from tmuxph.layout import count_layout_panes
from tmuxph.pane import PaneSet
from tmuxph.prompts import ConsolePrompter, LayoutPrompter, PresetPrompter
from tmuxph.session import CreationRequest, Session
from tmuxph.store import SessionStore
from tmuxph.window import Window
from tmuxph.workflows import EditRequest, create_session, edit_session

__all__ = [
    "__version__",
    # Models
    "PaneSet",
    "Window",
    "Session",
    "CreationRequest",
    "EditRequest",
    # Parsing
    "WindowDescriptor",
    "parse_window_descriptor",
    "count_layout_panes",
    # Codec and storage
    "encode_session",
    "decode_session",
    "dumps_session",
    "loads_session",
    "SessionStore",
    # Workflows
    "create_session",
    "edit_session",
    # Prompting
    "LayoutPrompter",
    "ConsolePrompter",
    "PresetPrompter",
    # Errors
    "TmuxphError",
    "ParsingError",
    "LayoutParseError",
    "IndexOutOfRangeError",
    "WindowNotFoundError",
    "JsonError",
    "OptionNotFoundError",
    "EnvError",
    "ArgValidationError",
    "LayoutMismatchError",
]
