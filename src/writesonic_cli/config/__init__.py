"""Configuration: persisted record, API key resolution, run defaults."""

from .credentials import (
    KeySource,
    find_api_key,
    mask_key,
    require_api_key,
    resolve_api_key,
)
from .defaults import RunDefaults, resolve_defaults
from .settings import ClientSettings
from .store import UserConfig, clear_config, load_config, save_config

__all__ = [
    "ClientSettings",
    "KeySource",
    "RunDefaults",
    "UserConfig",
    "clear_config",
    "find_api_key",
    "load_config",
    "mask_key",
    "require_api_key",
    "resolve_api_key",
    "resolve_defaults",
    "save_config",
]
