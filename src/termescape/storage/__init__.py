"""Storage module for termescape."""

from termescape.storage.config import ConfigStorage, default_config_path, get_config

__all__ = [
    "ConfigStorage",
    "default_config_path",
    "get_config",
]
