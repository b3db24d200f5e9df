"""Session document storage.

tmuxp reads one JSON file per session from ``~/.tmuxp``; the file stem is
the session name with spaces replaced by ``_``. Saving always overwrites the
whole document.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .codec import dumps_session, loads_session
from .exceptions import (
    DocumentNotFoundError,
    DocumentReadError,
    DocumentWriteError,
    EnvError,
    record_error,
)
from .session import Session, document_stem

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENTS_DIR = "~/.tmuxp"
DOCUMENT_SUFFIX = ".json"


def resolve_documents_dir(documents_dir: str | Path = DEFAULT_DOCUMENTS_DIR) -> Path:
    """Expand ``~`` in the documents directory.

    Raises:
        EnvError: If the home directory cannot be determined.
    """
    try:
        resolved = Path(documents_dir).expanduser()
    except RuntimeError as e:
        raise EnvError(
            "Cannot resolve home directory for session documents",
            context={"documents_dir": str(documents_dir)},
            cause=e,
        ) from e
    if str(resolved).startswith("~"):
        raise EnvError(
            "Cannot resolve home directory for session documents",
            context={"documents_dir": str(documents_dir)},
        )
    return resolved


class SessionStore:
    """Reads and writes session documents in a documents directory."""

    def __init__(self, documents_dir: str | Path = DEFAULT_DOCUMENTS_DIR, indent: int = 2):
        """Initialize SessionStore.

        Args:
            documents_dir: Directory holding the tmuxp JSON files.
            indent: JSON indentation used when writing.

        Raises:
            EnvError: If ``documents_dir`` needs a home directory that
                cannot be determined.
        """
        self.documents_dir = resolve_documents_dir(documents_dir)
        self.indent = indent

    def path_for(self, session_name: str) -> Path:
        """Return the document path for a session name."""
        return self.documents_dir / f"{document_stem(session_name)}{DOCUMENT_SUFFIX}"

    def exists(self, session_name: str) -> bool:
        return self.path_for(session_name).is_file()

    def load(self, session_name: str) -> Session:
        """Load and decode a session document.

        Raises:
            DocumentNotFoundError: If there is no document for the session.
            DocumentReadError: If the file cannot be read.
            JsonError: If the content is not a valid session document.
        """
        path = self.path_for(session_name)
        if not path.exists():
            raise DocumentNotFoundError(session_name, file_path=str(path))

        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Failed to read session document: %s", e)
            record_error(e)
            raise DocumentReadError(file_path=str(path), cause=e) from e

        session = loads_session(text)
        logger.debug("Loaded session %r from %s", session.name, path)
        return session

    def save(self, session: Session) -> Path:
        """Encode and write a session document, replacing any previous one.

        Returns:
            The path written.

        Raises:
            DocumentWriteError: If the file cannot be written.
        """
        path = self.path_for(session.name)
        text = dumps_session(session, indent=self.indent)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            logger.error("Failed to write session document: %s", e)
            record_error(e)
            raise DocumentWriteError(file_path=str(path), cause=e) from e
        logger.info("Saved session %r to %s", session.name, path)
        return path

    def dump(self, session: Session, stream: TextIO | None = None) -> None:
        """Write the encoded session to a stream (stdout by default)."""
        out = sys.stdout if stream is None else stream
        out.write(dumps_session(session, indent=self.indent) + "\n")
