"""Layered settings for the EPM command line."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

import tomllib

from .paths import UserDirs

PROJECT_CONFIG_NAME = "epm.toml"
USER_CONFIG_NAME = "config.toml"

_DEFAULTS: dict[str, str] = {
    "manifest": "package.yml",
    "log_level": "WARNING",
}
_ENV_KEY_MAP: dict[str, str] = {
    "manifest": "EPM_MANIFEST",
    "log_level": "EPM_LOG_LEVEL",
}


def default_config_path(user_dirs: UserDirs | None = None) -> Path:
    """Return the platform-specific user config path."""

    return (user_dirs or UserDirs()).config_dir() / USER_CONFIG_NAME


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError):
        return {}
    return {key: str(value) for key, value in data.items() if not isinstance(value, dict)}


@dataclass
class Settings:
    """Resolve settings from CLI, env, project file, user file, then defaults."""

    start_dir: Path | None = None
    user_dirs: UserDirs | None = None
    cli_overrides: Mapping[str, str | None] | None = None
    env: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.user_dirs = self.user_dirs or UserDirs()
        self.cli_overrides = dict(self.cli_overrides or {})
        self.env = os.environ if self.env is None else self.env

    def get(self, key: str) -> str | None:
        if value := self.cli_overrides.get(key):
            return value
        if (alias := _ENV_KEY_MAP.get(key)) and (value := self.env.get(alias)):
            return value
        if value := self._project_layer().get(key):
            return value
        if value := self._user_layer().get(key):
            return value
        return _DEFAULTS.get(key)

    @property
    def manifest(self) -> str:
        return self.get("manifest") or _DEFAULTS["manifest"]

    @property
    def log_level(self) -> str:
        return (self.get("log_level") or _DEFAULTS["log_level"]).upper()

    def _project_layer(self) -> dict[str, str]:
        start = (Path(self.start_dir) if self.start_dir else Path.cwd()).resolve()
        return _load_config_from_file(start / PROJECT_CONFIG_NAME)

    def _user_layer(self) -> dict[str, str]:
        return _load_config_from_file(default_config_path(self.user_dirs))
