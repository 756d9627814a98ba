"""Configuration file.

Example of `~/.config/ydictionary/config.toml`:

    key = "dict.1.1.20230101T000000Z.0123456789abcdef.0123..."
    ui = "en"
"""

import logging
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError

from ydictionary.errors import ConfigError


class Config(BaseModel):
    """Configuration of the dictionary client."""

    model_config = ConfigDict(extra="forbid")

    key: str | None = None
    """API key, used if the key is not given in the command line."""

    url: str | None = None
    """Base URL of the service, the Yandex Dictionary JSON interface if not
    set."""

    ui: str | None = None
    """Default interface language for names of parts of speech."""


def read_config(path: Path) -> Config:
    """Read the configuration file.

    :param path: path to the configuration file; if the file doesn't exist,
        the default configuration is returned
    :raises ConfigError: if the file can't be read or is malformed
    """
    try:
        with path.open("rb") as config_file:
            data: dict = tomllib.load(config_file)
    except FileNotFoundError:
        logging.debug("No config at `%s`.", path)
        return Config()
    except OSError as error:
        raise ConfigError(str(path), str(error)) from error
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as error:
        raise ConfigError(str(path), f"invalid TOML, {error}") from error

    try:
        return Config.model_validate(data)
    except ValidationError as error:
        raise ConfigError(str(path), str(error)) from error
