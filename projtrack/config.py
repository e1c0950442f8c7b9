"""
Config loader for the projtrack CLI application.

Loads values from the JSON config file at runtime, falling back to the
defaults in projtrack.constants.
"""
import json
import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from projtrack.constants import default_config_path
from projtrack.exceptions import ConfigurationError
from projtrack.models.files import ConfigFile

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manages loading configuration from a config file with fallback to defaults.

    Usage:
        # With default path (~/.projtrack.config.json)
        config = ConfigManager()
        urgent_days = config.settings.urgent_days

        # With custom path
        config = ConfigManager(config_path=Path("/custom/path/config.json"))
    """

    def __init__(self, config_path: Optional[Path] = None) -> None:
        """
        Initialize ConfigManager.

        Args:
            config_path: Path to the config file. Defaults to ~/.projtrack.config.json.
        """
        self._config: Optional[ConfigFile] = None
        self._config_path = config_path if config_path else default_config_path()

    def _load_config(self) -> ConfigFile:
        """Load and validate the config file, or return defaults if absent."""
        if self._config is not None:
            return self._config

        if not self._config_path.exists():
            logger.debug("No config file at %s, using defaults", self._config_path)
            self._config = ConfigFile()
            return self._config

        try:
            with open(self._config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            self._config = ConfigFile.model_validate(data)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            raise ConfigurationError(f"Invalid config file {self._config_path}: {e}")
        except OSError as e:
            raise ConfigurationError(f"Failed to read config file {self._config_path}: {e}")

        logger.debug("Loaded config from %s", self._config_path)
        return self._config

    @property
    def settings(self) -> ConfigFile:
        """Get the validated settings."""
        return self._load_config()

    def reload(self) -> ConfigFile:
        """Force reload of config from disk."""
        self._config = None
        return self._load_config()

    @property
    def config_path(self) -> Path:
        """Get the config file path."""
        return self._config_path
