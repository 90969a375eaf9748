"""Persisted user configuration (``config.json``).

The record holds the API key and the run defaults. Commands only read it;
``auth`` subcommands are the only writers.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ..constants import CONFIG_DIR_MODE, CONFIG_FILE_MODE, Engine, get_config_path
from ..errors import ConfigError


class UserConfig(BaseModel):
    """Persisted CLI configuration."""

    model_config = ConfigDict(extra="ignore")

    api_key: str = ""
    default_engine: Engine | None = None
    default_language: str | None = None
    default_copies: int | None = Field(default=None)

    @field_validator("default_engine", "default_language", mode="before")
    @classmethod
    def _empty_as_unset(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    @field_validator("api_key", mode="before")
    @classmethod
    def _null_key_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    def to_json(self) -> str:
        """Serialize for disk, leaving out unset fields."""
        data = self.model_dump(mode="json", exclude_none=True)
        if not data.get("default_copies"):
            data.pop("default_copies", None)
        return json.dumps(data, indent=2) + "\n"


def load_config(path: Path | None = None) -> UserConfig:
    """Read the config file.

    Args:
        path: Config file path (defaults to the per-user location)

    Returns:
        The parsed config, or an empty one if the file does not exist.

    Raises:
        ConfigError: If the file exists but cannot be read or parsed.
    """
    path = path or get_config_path()

    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return UserConfig()
    except OSError as e:
        raise ConfigError(f"read config: {e}") from e

    try:
        return UserConfig.model_validate_json(raw)
    except ValidationError as e:
        raise ConfigError(f"parse config {path}: {e.errors()[0]['msg']}") from e


def save_config(config: UserConfig, path: Path | None = None) -> Path:
    """Write the config with owner-only permissions.

    Returns:
        Path the config was written to.
    """
    path = path or get_config_path()

    try:
        path.parent.mkdir(mode=CONFIG_DIR_MODE, parents=True, exist_ok=True)
        # mkdir mode is ignored when the directory already exists
        os.chmod(path.parent, CONFIG_DIR_MODE)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, CONFIG_FILE_MODE)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(config.to_json())
        # Same for O_CREAT on an existing file
        os.chmod(path, CONFIG_FILE_MODE)
    except OSError as e:
        raise ConfigError(f"save config: {e}") from e

    return path


def clear_config(path: Path | None = None) -> bool:
    """Remove the config file.

    Returns:
        True if a file was removed, False if there was nothing to remove.
    """
    path = path or get_config_path()

    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise ConfigError(f"clear config: {e}") from e
    return True
