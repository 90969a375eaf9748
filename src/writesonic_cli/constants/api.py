"""API constants for the Writesonic CLI.

This module contains everything fixed by the remote API contract:
- Base endpoint
- Request headers
- Accepted API key environment variables
- Fallback values for run defaults

MODIFICATION GUIDE:
------------------
- API_KEY_ENV_VARS order matters: the first non-empty variable wins
- FALLBACK_* values apply only when neither a flag nor the config file
  provides a value
"""

from typing import Final

from .types import Engine

# =============================================================================
# ENDPOINT
# =============================================================================

BASE_URL: Final[str] = "https://api.writesonic.com/v2/business/content"
"""Base URL every operation path is appended to."""

API_KEY_HEADER: Final[str] = "X-API-Key"
"""Header carrying the API key."""

JSON_CONTENT_TYPE: Final[str] = "application/json"
"""Content-Type and Accept value for every request."""


# =============================================================================
# CREDENTIALS
# =============================================================================

API_KEY_ENV_VARS: Final[tuple[str, ...]] = (
    "WRITESONIC_API_KEY",
    "WRITESONIC_KEY",
    "WRITESONIC_API",
    "API_KEY_WRITESONIC",
    "API_WRITESONIC",
    "WRITESONIC_PK",
    "WRITESONIC_PUBLIC",
    "WRITESONIC_API_SECRET",
    "WRITESONIC_SECRET_KEY",
    "WRITESONIC_API_SECRET_KEY",
    "WRITESONIC_SECRET",
    "SECRET_WRITESONIC",
    "API_SECRET_WRITESONIC",
    "SK_WRITESONIC",
    "WRITESONIC_SK",
)
"""Environment variables checked for the API key, in priority order."""


# =============================================================================
# RUN DEFAULTS
# =============================================================================

FALLBACK_ENGINE: Final[Engine] = Engine.GOOD
"""Engine used when neither --engine nor the config sets one."""

FALLBACK_LANGUAGE: Final[str] = "en"
"""Language used when neither --lang nor the config sets one."""

FALLBACK_COPIES: Final[int] = 1
"""Copy count used when neither --copies nor the config sets one."""

MAX_SUGGESTED_COPIES: Final[int] = 5
"""Upper bound shown in help text. The API enforces it, not the client."""
