"""
Configuration loader for commit_predictor.

The tool reads an optional JSON configuration file named
``config.json`` from the ``~/.commitpredict/`` directory in the user's
home directory. Every key is optional; missing keys take their default
values and a missing file simply means "use the defaults".

If the file exists but is malformed, is not a JSON object, or holds a
value of the wrong type, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings or logging errors in
# environments where the root logger may be closed. When the CLI configures
# logging, explicit configuration overrides this behaviour.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CONFIG_FILENAME = "config.json"

DEFAULTS: Dict[str, int] = {
    "recent_window_minutes": 30,
    "max_recent_files": 10,
    "max_subject_length": 72,
}


class ConfigError(Exception):
    """Raised when the configuration file is malformed or invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the directory holding the user-level configuration."""
    return Path.home() / ".commitpredict"


def load_config() -> Dict[str, Any]:
    """Load the configuration and return it with defaults applied.

    Returns:
        A dictionary with the keys:
        - recent_window_minutes (int): recency window for the file-system fallback
        - max_recent_files (int): cap on files listed by the fallback
        - max_subject_length (int): first-line limit used by the validator

    Raises:
        ConfigError: If the file exists but is malformed or invalid.
    """
    config_path = _get_config_directory() / CONFIG_FILENAME
    config: Dict[str, Any] = dict(DEFAULTS)

    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return config

    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    for key in DEFAULTS:
        if key not in data:
            continue
        value = data[key]
        # bool is an int subclass; reject it explicitly
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            raise ConfigError(f"'{key}' must be a positive integer")
        config[key] = value

    logger.debug("Loaded configuration from: %s", config_path)
    return config
