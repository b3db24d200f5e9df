"""Logging setup for tmuxph.

All package loggers live under the ``tmuxph`` namespace. ``setup_logging``
attaches handlers to that namespace only, so importing tmuxph as a library
never touches the application's root logger. By default the CLI logs to a
rotating file under ``~/.config/tmuxph/logs`` and stays silent on the
terminal unless ``--debug`` is given.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

DEFAULT_LOG_LEVEL = logging.INFO
DEFAULT_LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
DEFAULT_MAX_BYTES = 1024 * 1024  # 1 MB
DEFAULT_BACKUP_COUNT = 3

ROOT_LOGGER_NAME = "tmuxph"
LOG_DIR = Path.home() / ".config" / "tmuxph" / "logs"


def get_log_file_path() -> Path:
    """Default log file, creating its directory if needed."""
    LOG_DIR.mkdir(parents=True, exist_ok=True)
    return LOG_DIR / "tmuxph.log"


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    return getattr(logging, level.upper(), DEFAULT_LOG_LEVEL)


def _attach(logger: logging.Logger, handler: logging.Handler, level: int) -> None:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(DEFAULT_LOG_FORMAT, DEFAULT_DATE_FORMAT))
    logger.addHandler(handler)


def setup_logging(
    *,
    level: int | str = DEFAULT_LOG_LEVEL,
    log_to_file: bool = True,
    log_file: Path | None = None,
    log_to_console: bool = False,
    console_stream: TextIO | None = None,
    max_bytes: int = DEFAULT_MAX_BYTES,
    backup_count: int = DEFAULT_BACKUP_COUNT,
) -> None:
    """Configure the ``tmuxph`` logger, replacing any handlers set earlier.

    Args:
        level: Level name or number; unknown names fall back to INFO.
        log_to_file: Write to a rotating log file.
        log_file: File to write to instead of ``get_log_file_path()``.
        log_to_console: Also write to ``console_stream`` (stderr by default).
        console_stream: Stream for console output.
        max_bytes: Size at which the log file is rotated.
        backup_count: Rotated files to keep.
    """
    resolved = _resolve_level(level)
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    package_logger.setLevel(resolved)
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()

    if log_to_file:
        path = log_file if log_file is not None else get_log_file_path()
        path.parent.mkdir(parents=True, exist_ok=True)
        _attach(
            package_logger,
            RotatingFileHandler(
                path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8"
            ),
            resolved,
        )

    if log_to_console:
        stream = sys.stderr if console_stream is None else console_stream
        _attach(package_logger, logging.StreamHandler(stream), resolved)


def get_logger(name: str) -> logging.Logger:
    """Logger in the tmuxph namespace; ``name`` is prefixed when needed."""
    if name == ROOT_LOGGER_NAME or name.startswith(f"{ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log_exception(
    logger: logging.Logger,
    exc: Exception,
    message: str = "An error occurred",
    *,
    level: int = logging.ERROR,
    include_traceback: bool = True,
) -> None:
    """Log ``exc`` under ``message``, with the traceback or just its type."""
    if include_traceback:
        logger.log(level, "%s: %s", message, exc, exc_info=True)
    else:
        logger.log(level, "%s: %s (%s)", message, exc, type(exc).__name__)
