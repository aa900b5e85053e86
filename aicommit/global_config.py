"""Global configuration management for ai-commit.

Handles user-level configuration stored in ~/.ai-commit/config.yaml:
API key, diff size limit, history depth, commit templates, color flag,
and the model settings used for generation.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import ValidationError

from aicommit.config import API_KEY_ENV_VAR, Config, ConfigError, validate_config

logger = logging.getLogger(__name__)

_CONFIG_DIR = Path.home() / ".ai-commit"


def get_global_config_dir() -> Path:
    """Get the global ai-commit configuration directory.

    Returns:
        Path to ~/.ai-commit/
    """
    return _CONFIG_DIR


def get_config_file_path() -> Path:
    """Get path to config.yaml file.

    Returns:
        Path to ~/.ai-commit/config.yaml
    """
    return get_global_config_dir() / "config.yaml"


def default_config() -> Config:
    """Build the default configuration, seeding the API key from the environment."""
    return Config(api_key=os.environ.get(API_KEY_ENV_VAR, ""))


class ConfigStore:
    """Loads, validates and persists the user's configuration file."""

    def __init__(self, path: Optional[Path] = None):
        """Initialize the store with defaults.

        Args:
            path: Location of the YAML file. Defaults to ~/.ai-commit/config.yaml.
        """
        self.path = path or get_config_file_path()
        self.config = default_config()
        self.created = False

    def _read_file(self) -> Dict[str, Any]:
        try:
            with open(self.path, "r") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"failed to parse config file: {e}")
        except OSError as e:
            raise ConfigError(f"failed to read config file: {e}")

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"failed to parse config file: expected a mapping in {self.path}")
        return data

    def _merge(self, data: Dict[str, Any]) -> Config:
        """Overlay file values on the current in-memory config."""
        merged = self.config.model_dump()
        for key, value in data.items():
            # An empty key in the file must not hide API_KEY from the environment
            if key == "api_key" and not value:
                continue
            # A bare `templates:` key means no templates
            if key == "templates" and value is None:
                value = []
            merged[key] = value

        try:
            return Config(**merged)
        except ValidationError as e:
            raise ConfigError(f"failed to parse config file: {e}")

    def load(self) -> Config:
        """Load the configuration file, creating it with defaults if absent.

        Returns:
            The loaded configuration.

        Raises:
            ConfigError: If the file cannot be read, parsed, or validated.
        """
        if not self.path.exists():
            self.save_default()
            self.created = True
            return self.config

        self.config = self._merge(self._read_file())
        validate_config(self.config)
        logger.debug("Loaded config from %s", self.path)
        return self.config

    def load_unvalidated(self) -> Config:
        """Overlay an existing config file without validating it.

        Used by the init flow so manual customizations survive re-initialization.
        Missing files leave the defaults in place.
        """
        if self.path.exists():
            self.config = self._merge(self._read_file())
        return self.config

    def update_api_key(self, api_key: str) -> None:
        """Replace the in-memory API key."""
        self.config = self.config.model_copy(update={"api_key": api_key})

    def save_default(self) -> None:
        """Serialize the in-memory configuration to disk.

        Raises:
            ConfigError: If the directory or file cannot be written.
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigError(f"failed to create config directory: {e}")

        try:
            with open(self.path, "w") as f:
                yaml.dump(self.config.model_dump(), f, default_flow_style=False, sort_keys=False)
        except OSError as e:
            raise ConfigError(f"failed to write config file: {e}")

        logger.debug("Wrote config to %s", self.path)
