"""Configuration storage for termescape."""

import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from termescape.models.config import Config
from termescape.utils.logging import get_logger

logger = get_logger(__name__)

CONFIG_ENV_VAR = "TERMESCAPE_CONFIG"
DEFAULT_CONFIG_FILE = Path.home() / ".config" / "termescape" / "config.yaml"


def default_config_path() -> Path:
    """Return the config path from TERMESCAPE_CONFIG, else the user default."""
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override).expanduser() if override else DEFAULT_CONFIG_FILE


class ConfigStorage:
    """Reads and writes the theme configuration as YAML."""

    def __init__(self, config_path: Path | None = None):
        """Initialize config storage.

        Args:
            config_path: Custom config file path.
        """
        self.config_path = config_path or default_config_path()
        self._config: Config | None = None

    def load(self) -> Config:
        """Load configuration from file.

        A missing file gives the defaults. So does a broken one, with a
        warning naming the file.

        Returns:
            Config object.
        """
        if self._config is not None:
            return self._config

        if not self.config_path.exists():
            self._config = Config()
            return self._config

        try:
            with open(self.config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            self._config = Config(**data)
        except (yaml.YAMLError, ValidationError, TypeError) as e:
            logger.warning(f"Invalid config {self.config_path}, using defaults: {e}")
            self._config = Config()

        return self._config

    def save(self, config: Config) -> None:
        """Write a config, creating the directory if needed."""
        self.config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_path, "w", encoding="utf-8") as f:
            yaml.safe_dump(
                config.model_dump(mode="json"),
                f,
                default_flow_style=False,
                sort_keys=False,
                allow_unicode=True,
            )
        self._config = config


_storage: ConfigStorage | None = None


def get_config() -> Config:
    """Load the config from the default location once per process."""
    global _storage
    if _storage is None:
        _storage = ConfigStorage()
    return _storage.load()
