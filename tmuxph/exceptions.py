"""Exception hierarchy for tmuxph.

Every error raised by the package derives from ``TmuxphError`` and carries a
``context`` dict (offending index, field, key or file path) that is shown in
``str(error)``. The CLI catches ``TmuxphError`` at the top level, records it
in ``error_stats`` and exits with status 1.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any


class TmuxphError(Exception):
    """Base exception for all tmuxph errors.

    Attributes:
        message: Human-readable error description.
        context: Additional context for debugging.
        timestamp: When the error occurred.
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        self.timestamp = datetime.now()
        self.cause = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Parsing Errors
# =============================================================================


class ParsingError(TmuxphError):
    """Raised when a window descriptor or a layout string is malformed."""

    def __init__(
        self,
        message: str = "Failed to parse input",
        *,
        text: str | None = None,
        field: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if text is not None:
            ctx["text"] = text[:100]  # Truncate long values
        if field:
            ctx["field"] = field
        super().__init__(message, context=ctx, cause=cause)


class LayoutParseError(ParsingError):
    """Raised when a tmux layout string does not follow the checksum grammar."""

    def __init__(
        self,
        message: str = "Unparseable layout",
        *,
        layout: str | None = None,
        position: int | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if position is not None:
            ctx["field_number"] = position
        super().__init__(message, text=layout, context=ctx, cause=cause)


# =============================================================================
# Index Errors
# =============================================================================


class IndexOutOfRangeError(TmuxphError):
    """Raised when a pane or window index is outside the valid range."""

    def __init__(
        self,
        index: int,
        bound: int,
        *,
        what: str = "pane",
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.index = index
        self.bound = bound
        ctx = context or {}
        ctx["index"] = index
        ctx["bound"] = bound
        super().__init__(
            f"{what.capitalize()} index {index} out of range (0..{bound - 1})"
            if bound > 0
            else f"{what.capitalize()} index {index} out of range (no {what}s)",
            context=ctx,
            cause=cause,
        )


class WindowNotFoundError(IndexOutOfRangeError):
    """Raised when a session has no window at the requested index."""

    def __init__(self, index: int, total: int) -> None:
        super().__init__(index, total, what="window")
        self.total = total


# =============================================================================
# Document Errors
# =============================================================================


class JsonError(TmuxphError):
    """Raised when a session document does not match the tmuxp schema."""

    def __init__(
        self,
        message: str = "Invalid session document",
        *,
        key: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        super().__init__(message, context=ctx, cause=cause)


class OptionNotFoundError(JsonError):
    """Raised when a window carries an option key tmuxph does not know."""

    def __init__(self, option: str) -> None:
        self.option = option
        super().__init__(f"Unknown window option: {option}", key=option)


class FileAccessError(TmuxphError):
    """Base class for errors tied to a file on disk.

    Subclasses only set ``default_message``; ``file_path`` lands in the
    context.
    """

    default_message = "File access failed"

    def __init__(
        self,
        message: str | None = None,
        *,
        file_path: str | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message or self.default_message, context=ctx, cause=cause)


class DocumentError(FileAccessError):
    """Base class for session document I/O errors."""

    default_message = "Session document error"


class DocumentNotFoundError(DocumentError):
    """Raised when no document exists for the requested session."""

    def __init__(self, session_name: str, *, file_path: str | None = None) -> None:
        super().__init__(
            f"No session document for {session_name!r}",
            file_path=file_path,
            context={"session_name": session_name},
        )


class DocumentReadError(DocumentError):
    default_message = "Failed to read session document"


class DocumentWriteError(DocumentError):
    default_message = "Failed to write session document"


# =============================================================================
# Model Errors
# =============================================================================


class LayoutMismatchError(TmuxphError):
    """Raised when a pane count does not match the window's layout."""

    def __init__(self, layout: str, expected: int, actual: int) -> None:
        super().__init__(
            f"Layout requires {expected} panes, got {actual}",
            context={"layout": layout[:100], "expected": expected, "actual": actual},
        )


class PromptExhaustedError(TmuxphError):
    """Raised when a non-interactive prompter runs out of answers."""

    def __init__(self, question: str, supplied: int) -> None:
        super().__init__(
            f"Not enough answers supplied for: {question}",
            context={"supplied": supplied},
        )


# =============================================================================
# Environment and Argument Errors
# =============================================================================


class EnvError(TmuxphError):
    """Raised when a required path cannot be resolved from the environment."""

    def __init__(
        self,
        message: str = "Cannot resolve home directory",
        *,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, context=context, cause=cause)


class ArgValidationError(TmuxphError):
    """Raised when a command-line argument fails validation."""

    def __init__(self, argument: str, *, value: Any = None) -> None:
        ctx: dict[str, Any] = {"argument": argument}
        if value is not None:
            ctx["value"] = str(value)[:100]
        super().__init__(f"Invalid argument: {argument}", context=ctx)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(FileAccessError):
    """Base class for configuration-related errors."""

    default_message = "Configuration error"


class ConfigLoadError(ConfigError):
    default_message = "Failed to load configuration"


class ConfigValidationError(ConfigError):
    """Raised when the config file does not match the ``AppConfig`` schema."""

    default_message = "Configuration validation failed"


class ConfigSaveError(ConfigError):
    default_message = "Failed to save configuration"


# =============================================================================
# Error Registry for Categorization
# =============================================================================


@dataclass
class ErrorStats:
    """Track error statistics for diagnostics."""

    total_count: int = 0
    by_type: dict[str, int] = field(default_factory=dict)
    recent_errors: list[tuple[datetime, str, str]] = field(default_factory=list)
    max_recent: int = 100

    def record(self, error: Exception) -> None:
        """Record an error occurrence."""
        self.total_count += 1
        type_name = type(error).__name__
        self.by_type[type_name] = self.by_type.get(type_name, 0) + 1

        self.recent_errors.append((datetime.now(), type_name, str(error)[:200]))
        if len(self.recent_errors) > self.max_recent:
            self.recent_errors.pop(0)


# Global error stats tracker
error_stats = ErrorStats()


def record_error(error: Exception) -> None:
    """Record an error to global stats."""
    error_stats.record(error)
