"""Auth feature - stored API key and run defaults."""

from .commands import app
from .service import AuthStatus, get_auth_status, remove_config, set_api_key, update_defaults

__all__ = [
    "AuthStatus",
    "app",
    "get_auth_status",
    "remove_config",
    "set_api_key",
    "update_defaults",
]
