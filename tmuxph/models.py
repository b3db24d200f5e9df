"""Configuration dataclasses.

All models are designed for JSON serialization using dacite.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field

import dacite

from .window import DEFAULT_COMMAND, DEFAULT_WINDOW_NAME


@dataclass
class DefaultWindowConfig:
    """Window created when no descriptor is given or a window is missing."""

    name: str = DEFAULT_WINDOW_NAME
    command: str = DEFAULT_COMMAND
    automatic_rename: bool = True


@dataclass
class AppConfig:
    """Complete application configuration."""

    documents_dir: str = "~/.tmuxp"  # Where tmuxp looks for session files
    json_indent: int = 2
    default_window: DefaultWindowConfig = field(default_factory=DefaultWindowConfig)


def model_to_dict(obj: object) -> dict:
    """Convert a dataclass model to a dictionary for JSON serialization."""
    return asdict(obj)  # type: ignore[arg-type]


def load_config_from_dict(data: dict) -> AppConfig:
    """Load AppConfig from a dictionary (parsed JSON)."""
    return dacite.from_dict(
        data_class=AppConfig,
        data=data,
        config=dacite.Config(strict=True),
    )
