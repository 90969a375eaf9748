"""API key resolution.

Environment variables win over the config file. Within the environment the
first non-empty name in ``API_KEY_ENV_VARS`` wins.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from ..constants import API_KEY_ENV_VARS
from ..errors import CredentialError
from .store import UserConfig

MISSING_KEY_MESSAGE = (
    "no API key found - run: writesonic auth set-key <your-key>\n"
    "Or set the WRITESONIC_API_KEY environment variable"
)


@dataclass(frozen=True)
class KeySource:
    """Where a resolved API key came from."""

    key: str
    origin: str  # "env" or "config"
    env_var: Optional[str] = None

    def describe(self) -> str:
        if self.origin == "env":
            return f"environment variable {self.env_var}"
        return "config file"


def resolve_env(names: tuple[str, ...], environ: Mapping[str, str] | None = None) -> tuple[str, str] | None:
    """Return ``(name, value)`` for the first non-empty variable in ``names``."""
    environ = os.environ if environ is None else environ
    for name in names:
        value = environ.get(name)
        if value:
            return name, value
    return None


def find_api_key(
    config: UserConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> KeySource | None:
    """Locate the API key and remember its source.

    Args:
        config: Persisted config, consulted only when no env var is set
        environ: Environment mapping (defaults to os.environ)

    Returns:
        KeySource, or None when no source provides a key.
    """
    found = resolve_env(API_KEY_ENV_VARS, environ)
    if found is not None:
        name, value = found
        return KeySource(key=value, origin="env", env_var=name)

    if config is not None and config.api_key:
        return KeySource(key=config.api_key, origin="config")

    return None


def resolve_api_key(
    config: UserConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> str | None:
    """Resolve the API key for this run, or None if absent."""
    source = find_api_key(config, environ)
    return source.key if source else None


def require_api_key(
    config: UserConfig | None = None,
    environ: Mapping[str, str] | None = None,
) -> str:
    """Resolve the API key or fail before any request is made.

    Raises:
        CredentialError: If no source provides a key.
    """
    key = resolve_api_key(config, environ)
    if not key:
        raise CredentialError(MISSING_KEY_MESSAGE)
    return key


def mask_key(key: str) -> str:
    """Mask an API key for display."""
    if len(key) <= 8:
        return "****"
    return f"{key[:4]}...{key[-4:]}"
