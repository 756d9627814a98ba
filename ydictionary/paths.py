"""Default paths and addresses."""

import os
from pathlib import Path

SERVICE_URL: str = "https://dictionary.yandex.net/api/v1/dicservice.json"
"""Base URL of the JSON interface of the service."""

CONFIG_DIRECTORY_NAME: str = "ydictionary"
CONFIG_FILE_NAME: str = "config.toml"


def get_config_directory() -> Path:
    """Get per-user configuration directory.

    Uses `$XDG_CONFIG_HOME` if set, `~/.config` otherwise.
    """
    if xdg_config_home := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_config_home) / CONFIG_DIRECTORY_NAME
    return Path.home() / ".config" / CONFIG_DIRECTORY_NAME


def get_default_config_path() -> Path:
    """Get path to the default configuration file."""
    return get_config_directory() / CONFIG_FILE_NAME
