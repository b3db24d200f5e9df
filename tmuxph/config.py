"""Config loading and saving.

The configuration lives in ``~/.config/tmuxph/config.json``. A missing file
means defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import dacite

from .exceptions import (
    ConfigLoadError,
    ConfigSaveError,
    ConfigValidationError,
    record_error,
)
from .models import AppConfig, load_config_from_dict, model_to_dict

logger = logging.getLogger(__name__)

# Configuration file locations
CONFIG_DIR = Path.home() / ".config" / "tmuxph"
CONFIG_PATH = CONFIG_DIR / "config.json"


def get_config_path() -> Path:
    """Return the path to the config file."""
    return CONFIG_PATH


def load_config(path: Path | None = None) -> AppConfig:
    """
    Load application configuration.

    Args:
        path: Config file to read; defaults to ``CONFIG_PATH``.

    Returns:
        AppConfig instance, with defaults when the file does not exist.

    Raises:
        ConfigLoadError: If the config file exists but cannot be parsed.
        ConfigValidationError: If the config does not match the schema.
    """
    config_path = path or CONFIG_PATH
    if not config_path.exists():
        logger.debug("No config found at %s, using defaults", config_path)
        return AppConfig()

    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
        logger.debug("Loaded config from %s", config_path)
    except json.JSONDecodeError as e:
        logger.error("Invalid JSON in config file: %s", e)
        record_error(e)
        raise ConfigLoadError(
            f"Invalid JSON in config file at line {e.lineno}",
            file_path=str(config_path),
            context={"line": e.lineno, "column": e.colno},
            cause=e,
        ) from e
    except OSError as e:
        logger.error("Failed to read config file: %s", e)
        record_error(e)
        raise ConfigLoadError(
            "Failed to read config file",
            file_path=str(config_path),
            cause=e,
        ) from e

    if not isinstance(data, dict):
        raise ConfigValidationError(
            "Config file must contain a JSON object",
            file_path=str(config_path),
        )

    try:
        return load_config_from_dict(data)
    except dacite.DaciteError as e:
        logger.error("Config schema validation failed: %s", e)
        record_error(e)
        raise ConfigValidationError(
            f"Config schema validation failed: {e}",
            file_path=str(config_path),
            cause=e,
        ) from e


def save_config(config: AppConfig, path: Path | None = None) -> None:
    """
    Save application configuration, creating the directory if needed.

    Raises:
        ConfigSaveError: If the config cannot be saved.
    """
    config_path = path or CONFIG_PATH
    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(model_to_dict(config), f, indent=2)
        logger.debug("Saved config to %s", config_path)
    except OSError as e:
        logger.error("Failed to write config file: %s", e)
        record_error(e)
        raise ConfigSaveError(
            "Failed to write config file",
            file_path=str(config_path),
            cause=e,
        ) from e
