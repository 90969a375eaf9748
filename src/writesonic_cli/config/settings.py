"""Transport settings read from the environment.

Only connection details live here; the API key and run defaults are handled
by ``credentials`` and ``defaults``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import BASE_URL


class ClientSettings(BaseSettings):
    """HTTP client settings (``WRITESONIC_BASE_URL``, ``WRITESONIC_TIMEOUT_SECONDS``)."""

    model_config = SettingsConfigDict(
        env_prefix="WRITESONIC_",
        extra="ignore",
        case_sensitive=False,
    )

    base_url: str = Field(
        default=BASE_URL,
        min_length=8,
        description="Base URL operation paths are appended to.",
    )
    timeout_seconds: float | None = Field(
        default=None,
        gt=0,
        description="Request timeout in seconds. Unset means wait indefinitely.",
    )
