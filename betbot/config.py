"""Reading the bot's configuration from its JSON file."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path
from typing import Any

CONFIG_PATH = "config.json"
BOT_TOKEN_KEY = "BotToken"
CHANNEL_ID_KEY = "ChannelId"
SAVE_FILE_PATH_KEY = "SaveFile"
NEW_MATCHES_FOLDER_KEY = "NewMatchesFolder"
NEW_RESULTS_FOLDER_KEY = "NewResultsFolder"
DELAY_BETWEEN_CHECKS_KEY = "DelayBetweenChecks"
SAVE_FILE_EXTENSION = ".json"

_REQUIRED_KEYS = (
    BOT_TOKEN_KEY,
    CHANNEL_ID_KEY,
    SAVE_FILE_PATH_KEY,
    NEW_MATCHES_FOLDER_KEY,
    NEW_RESULTS_FOLDER_KEY,
    DELAY_BETWEEN_CHECKS_KEY,
)

_LEADING_NUMBER = re.compile(r"\s*([+-]?\d+)")


class ConfigError(Exception):
    """The configuration cannot be used."""


class MissingConfigKeyError(ConfigError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(
            f"Your config file does not follow the expected layout. It misses the key: {key}"
        )


class EmptyConfigValueError(ConfigError):
    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"No value for the key: {key}")


@dataclass(frozen=True)
class BotConfig:
    """Settings of the bot; the watched folders are used only when all three are set."""

    bot_token: str
    channel_id: int
    save_file_path: str
    new_matches_folder: str | None = None
    new_results_folder: str | None = None
    delay_between_checks: timedelta | None = None


def _text(config: dict[str, Any], key: str) -> str:
    value = config[key]
    if not isinstance(value, str):
        raise ConfigError(f"The value of the key {key} must be a string.")
    return value


def _required_text(config: dict[str, Any], key: str) -> str:
    value = _text(config, key)
    if not value:
        raise EmptyConfigValueError(key)
    return value


def _channel_id(config: dict[str, Any]) -> int:
    value = _required_text(config, CHANNEL_ID_KEY)
    if not value.isdigit():
        raise ConfigError(f"The channel id [{value}] is not a number.")
    return int(value)


def _save_file_path(config: dict[str, Any]) -> str:
    value = _required_text(config, SAVE_FILE_PATH_KEY)
    dot = value.rfind(".")
    if dot < 0 or value[dot:] != SAVE_FILE_EXTENSION:
        raise ConfigError("Given save file path has the wrong extension. It should be .json")
    return value


def _folder(config: dict[str, Any], key: str) -> str | None:
    value = _text(config, key)
    if value and Path(value).is_dir():
        return value
    return None


def _delay(config: dict[str, Any]) -> timedelta | None:
    value = _text(config, DELAY_BETWEEN_CHECKS_KEY)
    if not value:
        return None
    number = _LEADING_NUMBER.match(value)
    if number is None:
        raise ConfigError(f"The delay between checks [{value}] is not a number of minutes.")
    return timedelta(minutes=int(number.group(1)))


def read_config(path: str | Path = CONFIG_PATH) -> BotConfig:
    """Read and check the configuration file."""
    try:
        with Path(path).open(encoding="utf-8") as stream:
            config = json.load(stream)
    except OSError as error:
        raise ConfigError(
            'Could not find the config file. It has to be named "config.json" '
            "and placed next to the program."
        ) from error

    if not isinstance(config, dict):
        raise ConfigError("The config file must hold a JSON object.")
    for key in _REQUIRED_KEYS:
        if key not in config:
            raise MissingConfigKeyError(key)

    return BotConfig(
        bot_token=_required_text(config, BOT_TOKEN_KEY),
        channel_id=_channel_id(config),
        save_file_path=_save_file_path(config),
        new_matches_folder=_folder(config, NEW_MATCHES_FOLDER_KEY),
        new_results_folder=_folder(config, NEW_RESULTS_FOLDER_KEY),
        delay_between_checks=_delay(config),
    )