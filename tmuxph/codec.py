"""Encoding and decoding of tmuxp JSON session documents.

The tmuxp dialect stores a window's panes as a flat array in which every
pane is a bare command string, except the focused one which is an object::

    "panes": ["nvim", {"shell_command": "cargo watch", "focus": "true"}, "bash"]

The focused flag is the *string* ``"true"``, both on panes and on windows.

Decoding uses two disciplines:

- Map scans over the session and window objects are tolerant: unknown keys
  are logged and skipped so documents written by newer tools still load.
- Nested scans (``panes``, the focused pane object, ``options``) are strict:
  anything unexpected is an error.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .exceptions import JsonError, OptionNotFoundError
from .pane import PaneSet
from .session import Session
from .window import Window

logger = logging.getLogger(__name__)

FOCUS_TRUE = "true"
OPTION_ON = "on"
OPTION_OFF = "off"
AUTOMATIC_RENAME = "automatic-rename"


# =============================================================================
# Encoding
# =============================================================================


def encode_panes(panes: PaneSet) -> list[str | dict[str, str]]:
    """Encode panes as a flat array with the focused pane inlined by index."""
    encoded: list[str | dict[str, str]] = list(panes.others)
    encoded.insert(
        panes.focused_index,
        {"shell_command": panes.focused, "focus": FOCUS_TRUE},
    )
    return encoded


def encode_window(window: Window) -> dict[str, Any]:
    data: dict[str, Any] = {"window_name": window.name}
    if window.layout is not None:
        data["layout"] = window.layout
    data["start_directory"] = str(window.start_directory)
    if window.focus:
        data["focus"] = FOCUS_TRUE
    data["panes"] = encode_panes(window.panes)
    data["options"] = {
        AUTOMATIC_RENAME: OPTION_ON if window.automatic_rename else OPTION_OFF,
    }
    return data


def encode_session(session: Session) -> dict[str, Any]:
    return {
        "session_name": session.name,
        "start_directory": str(session.start_directory),
        "windows": [encode_window(window) for window in session.windows],
    }


def dumps_session(session: Session, indent: int | None = 2) -> str:
    """Serialize a session to pretty-printed tmuxp JSON."""
    return json.dumps(encode_session(session), indent=indent)


# =============================================================================
# Decoding: strict nested scans
# =============================================================================


def _as_string(value: Any, key: str) -> str:
    if not isinstance(value, str):
        raise JsonError(
            f"Expected a string for {key!r}, got {type(value).__name__}",
            key=key,
        )
    return value


def decode_focused_pane(value: dict[str, Any]) -> str:
    """Decode the focused pane object and return its command.

    Raises:
        JsonError: On a key other than ``shell_command``/``focus``, a
            non-string value or a missing ``shell_command``.
    """
    command = None
    for key, item in value.items():
        if key == "shell_command":
            command = _as_string(item, key)
        elif key == "focus":
            _as_string(item, key)
        else:
            raise JsonError(f"Unexpected key {key!r} in focused pane", key=key)
    if command is None:
        raise JsonError("Focused pane has no shell_command", key="shell_command")
    return command


def decode_panes(value: Any) -> PaneSet:
    """Decode a ``panes`` array.

    Bare strings are unfocused panes; the single object is the focused pane
    and its position becomes ``focused_index``.

    Raises:
        JsonError: If ``value`` is not an array, holds anything other than
            strings and objects, or does not hold exactly one object.
    """
    if not isinstance(value, list):
        raise JsonError("Window panes must be an array", key="panes")

    others: list[str] = []
    focused: str | None = None
    focused_index = 0
    for n, pane in enumerate(value):
        if isinstance(pane, str):
            others.append(pane)
        elif isinstance(pane, dict):
            if focused is not None:
                raise JsonError("Window has more than one focused pane", key="panes")
            focused = decode_focused_pane(pane)
            focused_index = n
        else:
            raise JsonError(
                f"Pane entries must be strings or objects, got {type(pane).__name__}",
                key="panes",
            )

    if focused is None:
        raise JsonError("Missing focused pane in window panes", key="panes")
    return PaneSet(focused=focused, focused_index=focused_index, others=others)


def decode_options(value: Any) -> dict[str, bool]:
    """Decode the window ``options`` object.

    Raises:
        JsonError: If ``value`` is not an object or holds a non-string value.
        OptionNotFoundError: On an option tmuxph does not manage.
    """
    if not isinstance(value, dict):
        raise JsonError("Window options must be an object", key="options")
    options: dict[str, bool] = {}
    for key, item in value.items():
        if key == AUTOMATIC_RENAME:
            options["automatic_rename"] = _as_string(item, key) == OPTION_ON
        else:
            raise OptionNotFoundError(key)
    return options


# =============================================================================
# Decoding: tolerant map scans
# =============================================================================


def decode_window(value: Any, start_directory: Path) -> Window:
    """Decode one window object; unknown keys are logged and skipped.

    Missing keys keep the values of a default window anchored at
    ``start_directory``.
    """
    if not isinstance(value, dict):
        raise JsonError("Window must be an object", key="windows")

    window = Window.default(start_directory)
    for key, item in value.items():
        if key == "window_name":
            window.name = _as_string(item, key)
        elif key == "layout":
            window.layout = _as_string(item, key)
        elif key == "start_directory":
            window.start_directory = Path(_as_string(item, key))
        elif key == "focus":
            window.focus = _as_string(item, key) == FOCUS_TRUE
        elif key == "panes":
            window.panes = decode_panes(item)
        elif key == "options":
            window.automatic_rename = decode_options(item).get(
                "automatic_rename", window.automatic_rename
            )
        else:
            logger.warning("Unknown JSON key %r for window loading, skipped", key)
    return window


def decode_session(value: Any) -> Session:
    """Decode a session document; unknown top-level keys are logged and skipped.

    Raises:
        JsonError: If the document is not an object, misses ``session_name``,
            ``start_directory`` or ``windows``, or holds a malformed window.
    """
    if not isinstance(value, dict):
        raise JsonError("Session document must be an object")

    fields: dict[str, Any] = {}
    for key, item in value.items():
        if key in ("session_name", "start_directory"):
            fields[key] = _as_string(item, key)
        elif key == "windows":
            if not isinstance(item, list):
                raise JsonError("Session windows must be an array", key=key)
            fields[key] = item
        else:
            logger.warning("Unknown JSON key %r for session loading, skipped", key)

    for required in ("session_name", "start_directory", "windows"):
        if required not in fields:
            raise JsonError(f"Session document has no {required!r}", key=required)

    start_directory = Path(fields["start_directory"])
    windows = [decode_window(item, start_directory) for item in fields["windows"]]

    # At most one focused window; the first one wins.
    focused = [n for n, window in enumerate(windows) if window.focus]
    for n in focused[1:]:
        logger.warning(
            "Window %d (%r) is also marked focused, keeping window %d",
            n,
            windows[n].name,
            focused[0],
        )
        windows[n].focus = False

    return Session(
        name=fields["session_name"],
        start_directory=start_directory,
        windows=windows,
    )


def loads_session(text: str) -> Session:
    """Parse tmuxp JSON text into a session.

    Raises:
        JsonError: If the text is not valid JSON or not a valid document.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise JsonError(
            f"Invalid JSON at line {e.lineno}",
            context={"line": e.lineno, "column": e.colno},
            cause=e,
        ) from e
    return decode_session(data)
