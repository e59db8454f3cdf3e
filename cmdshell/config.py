"""
Configuration management for cmdshell.
Handles loading, saving, and accessing configuration from JSON files and environment variables.
"""
import json
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Optional

from .constants import CONFIG_FILE, NO_BANNER_ENV_VAR, PREFIX_ENV_VAR


class ConfigError(Exception):
    """Raised when a configuration file cannot be used."""


@dataclass
class ShellConfig:
    """Host-side shell configuration."""
    prefix: Optional[str] = None
    show_banner: bool = True


class ConfigManager:
    """
    Manages shell configuration with support for JSON files and environment variables.

    Environment variables take precedence over config file values.
    """

    def __init__(self, config_file: Optional[Path] = None) -> None:
        self._config_file = Path(config_file) if config_file is not None else CONFIG_FILE
        self._config = ShellConfig()
        self._load_config()
        self._load_env_vars()

    def _load_config(self) -> None:
        """Load configuration from JSON file."""
        if not self._config_file.exists():
            return

        try:
            with open(self._config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"Cannot read {self._config_file}: {e}") from e
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in {self._config_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"{self._config_file} must contain a JSON object")

        known = {f.name for f in fields(ShellConfig)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown config keys in {self._config_file}: {', '.join(unknown)}")

        if data.get("prefix") is not None and not isinstance(data["prefix"], str):
            raise ConfigError("'prefix' must be a string or null")
        if not isinstance(data.get("show_banner", True), bool):
            raise ConfigError("'show_banner' must be a boolean")

        self._config = ShellConfig(**data)

    def _load_env_vars(self) -> None:
        """Apply overrides from environment variables."""
        prefix = os.environ.get(PREFIX_ENV_VAR)
        if prefix is not None:
            self._config.prefix = prefix

        no_banner = os.environ.get(NO_BANNER_ENV_VAR, "").strip().lower()
        if no_banner in ("1", "true", "yes", "on"):
            self._config.show_banner = False

    def save(self) -> None:
        """Save current configuration to JSON file."""
        self._config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self._config_file, 'w', encoding='utf-8') as f:
            json.dump(asdict(self._config), f, indent=2)

    def update(self, **kwargs: Any) -> None:
        """Update configuration values."""
        for key, value in kwargs.items():
            if not hasattr(self._config, key):
                raise ConfigError(f"Unknown config key: {key}")
            setattr(self._config, key, value)

    @property
    def config(self) -> ShellConfig:
        """Get the current configuration."""
        return self._config


_config_manager: Optional[ConfigManager] = None


def get_config(config_file: Optional[Path] = None) -> ConfigManager:
    """Get the global config manager instance."""
    global _config_manager
    if _config_manager is None or config_file is not None:
        _config_manager = ConfigManager(config_file)
    return _config_manager
