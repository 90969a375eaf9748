"""Stateless service for auth operations - the only writers of config.json."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from ...config import KeySource, UserConfig, clear_config, find_api_key, load_config, save_config
from ...constants import Engine, get_config_path
from ...errors import ConfigError


@dataclass
class AuthStatus:
    """Snapshot of the stored credentials and defaults."""

    config_path: Path
    config: UserConfig
    key_source: Optional[KeySource] = None


def _load_or_empty(path: Path | None) -> UserConfig:
    """Load the config, starting over if the stored file is unusable."""
    try:
        return load_config(path)
    except ConfigError:
        return UserConfig()


def set_api_key(key: str, path: Path | None = None) -> Path:
    """Store the API key, keeping any persisted defaults.

    Returns:
        Path the config was written to.
    """
    config = _load_or_empty(path)
    config.api_key = key
    return save_config(config, path)


def update_defaults(
    engine: Optional[Engine] = None,
    language: Optional[str] = None,
    copies: Optional[int] = None,
    path: Path | None = None,
) -> bool:
    """Persist new run defaults.

    Copies below 1 are ignored.

    Returns:
        True if anything changed and the config was saved.
    """
    config = _load_or_empty(path)

    changed = False
    if engine:
        config.default_engine = Engine(engine)
        changed = True
    if language:
        config.default_language = language
        changed = True
    if copies is not None and copies > 0:
        config.default_copies = copies
        changed = True

    if changed:
        save_config(config, path)
    return changed


def remove_config(path: Path | None = None) -> bool:
    """Delete the stored config. Returns False if nothing was stored."""
    return clear_config(path)


def get_auth_status(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> AuthStatus:
    """Collect credential and default info for display.

    Raises:
        ConfigError: If the stored config cannot be read.
    """
    config = load_config(path)
    return AuthStatus(
        config_path=path or get_config_path(),
        config=config,
        key_source=find_api_key(config, environ),
    )
