"""Path-related constants for the Writesonic CLI.

Config layout:
  <user config dir>/writesonic/config.json
  <user config dir>/writesonic/logs/api_calls.log

The user config dir follows the platform convention (APPDATA on Windows,
Application Support on macOS, XDG_CONFIG_HOME or ~/.config elsewhere).
"""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Final

APP_DIR_NAME: Final[str] = "writesonic"
"""Directory name under the user config dir."""

CONFIG_FILENAME: Final[str] = "config.json"
"""Persisted configuration file name."""

LOGS_DIR_NAME: Final[str] = "logs"
"""Name of the logs directory inside the app config dir."""

API_LOG_FILENAME: Final[str] = "api_calls.log"
"""Log file for API request/response summaries."""

CONFIG_DIR_MODE: Final[int] = 0o700
"""Permissions for the app config directory."""

CONFIG_FILE_MODE: Final[int] = 0o600
"""Permissions for the config file (owner read/write only)."""


def get_user_config_dir() -> Path:
    """Get the per-user base configuration directory for this platform."""
    if sys.platform.startswith("win"):
        return Path(os.environ.get("APPDATA", str(Path.home())))
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"

    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg)
    return Path.home() / ".config"


def get_app_config_dir() -> Path:
    """Get the writesonic config directory."""
    return get_user_config_dir() / APP_DIR_NAME


def get_config_path() -> Path:
    """Get the path to the persisted config file."""
    return get_app_config_dir() / CONFIG_FILENAME


def get_log_dir() -> Path:
    """Get the directory API logs are written to."""
    return get_app_config_dir() / LOGS_DIR_NAME
