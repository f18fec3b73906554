"""
Configuration loader for numkit.

Reads numkit.json from a config directory into a NumericConfig and keeps
track of the active process-wide configuration.
"""

import json
import os
import threading
from pathlib import Path
from typing import Dict, Any, Optional

from .models import NumericConfig
from ..output.debug_logger import LogLevel, get_logger
from ..utils.validators import (
    ValidationError,
    validate_bound,
    validate_in_set,
)


CONFIG_FILENAME = "numkit.json"
CONFIG_DIR_ENV = "NUMKIT_CONFIG_DIR"


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""

    def __init__(self, message: str, file: Optional[str] = None,
                 path: Optional[str] = None):
        self.message = message
        self.file = file
        self.path = path

        full_msg = message
        if file:
            full_msg = f"[{file}] {full_msg}"
        if path:
            full_msg = f"{full_msg} (at {path})"

        super().__init__(full_msg)


def validate_config(config: NumericConfig, file: Optional[str] = None) -> NumericConfig:
    """
    Check a NumericConfig for out-of-range values.

    Raises:
        ConfigError: If any field is invalid
    """
    for name in ("epsilon", "sinc_threshold"):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigError(f"must be a number, got {value!r}",
                              file=file, path=name)

    try:
        validate_bound(config.epsilon, "epsilon")
        validate_bound(config.sinc_threshold, "sinc_threshold")
        validate_in_set(config.log_level, {level.name for level in LogLevel},
                        "log_level")
    except ValidationError as e:
        raise ConfigError(e.message, file=file, path=e.field) from e

    seed = config.default_seed
    if isinstance(seed, bool) or not isinstance(seed, int) or seed < 0:
        raise ConfigError(f"must be a non-negative integer, got {seed!r}",
                          file=file, path="default_seed")
    return config


class ConfigLoader:
    """
    Loads numkit.json from a directory.

    Usage:
        loader = ConfigLoader("./config")
        config = loader.load()
    """

    def __init__(self, config_dir: str):
        """
        Initialize the config loader.

        Args:
            config_dir: Path to directory containing numkit.json
        """
        self.config_dir = Path(config_dir)

        if not self.config_dir.exists():
            raise ConfigError(f"Config directory not found: {config_dir}")

    def _load_json(self, filename: str) -> Dict[str, Any]:
        """Load a JSON file from the config directory."""
        filepath = self.config_dir / filename

        if not filepath.exists():
            raise ConfigError(f"Config file not found: {filepath}", file=filename)

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON: {e}", file=filename)

        if not isinstance(data, dict):
            raise ConfigError("Top level must be an object", file=filename)
        return data

    def load(self) -> NumericConfig:
        """Load and validate numkit.json."""
        data = self._load_json(CONFIG_FILENAME)
        defaults = NumericConfig()

        unknown = set(data) - set(defaults.to_dict())
        if unknown:
            raise ConfigError(f"Unknown fields: {', '.join(sorted(unknown))}",
                              file=CONFIG_FILENAME)

        config = NumericConfig(
            epsilon=data.get("epsilon", defaults.epsilon),
            sinc_threshold=data.get("sinc_threshold", defaults.sinc_threshold),
            default_seed=data.get("default_seed", defaults.default_seed),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
        )
        validate_config(config, file=CONFIG_FILENAME)

        get_logger().log_config_loaded(str(self.config_dir / CONFIG_FILENAME),
                                       **config.to_dict())
        return config


def load_config(config_dir: Optional[str] = None) -> NumericConfig:
    """
    Load configuration, falling back to defaults.

    Args:
        config_dir: Directory holding numkit.json. If None, the
            NUMKIT_CONFIG_DIR environment variable is used; if that is
            unset too, the built-in defaults are returned.

    Returns:
        Validated NumericConfig
    """
    if config_dir is None:
        config_dir = os.environ.get(CONFIG_DIR_ENV)
    if not config_dir:
        return NumericConfig()
    return ConfigLoader(config_dir).load()


_active: Optional[NumericConfig] = None
_active_lock = threading.RLock()


def get_config() -> NumericConfig:
    """Return the active configuration, loading it on first use."""
    with _active_lock:
        if _active is None:
            set_config(load_config())
        return _active


def set_config(config: NumericConfig) -> NumericConfig:
    """Validate and activate a configuration; applies its log level."""
    global _active
    with _active_lock:
        _active = validate_config(config)
        get_logger().set_level(LogLevel[config.log_level])
        return _active


def reset_config() -> None:
    """Drop the active configuration so the next get_config() reloads it."""
    global _active
    with _active_lock:
        _active = None
