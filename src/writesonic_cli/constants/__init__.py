"""Global constants package for the Writesonic CLI.

PACKAGE STRUCTURE:
-----------------
- api.py    : Endpoint, headers, API key env vars, run default fallbacks
- paths.py  : Config and log locations
- types.py  : Engine and result-kind enums

USAGE EXAMPLES:
--------------
    from writesonic_cli.constants import BASE_URL, Engine
    from writesonic_cli.constants import get_config_path
"""

from .api import (
    API_KEY_ENV_VARS,
    API_KEY_HEADER,
    BASE_URL,
    FALLBACK_COPIES,
    FALLBACK_ENGINE,
    FALLBACK_LANGUAGE,
    JSON_CONTENT_TYPE,
    MAX_SUGGESTED_COPIES,
)
from .paths import (
    API_LOG_FILENAME,
    CONFIG_DIR_MODE,
    CONFIG_FILE_MODE,
    get_app_config_dir,
    get_config_path,
    get_log_dir,
    get_user_config_dir,
)
from .types import Engine, ResultKind

__all__ = [
    # API
    "API_KEY_ENV_VARS",
    "API_KEY_HEADER",
    "BASE_URL",
    "FALLBACK_COPIES",
    "FALLBACK_ENGINE",
    "FALLBACK_LANGUAGE",
    "JSON_CONTENT_TYPE",
    "MAX_SUGGESTED_COPIES",
    # Paths
    "API_LOG_FILENAME",
    "CONFIG_DIR_MODE",
    "CONFIG_FILE_MODE",
    "get_app_config_dir",
    "get_config_path",
    "get_log_dir",
    "get_user_config_dir",
    # Types
    "Engine",
    "ResultKind",
]
