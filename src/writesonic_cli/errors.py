"""Exception hierarchy for the Writesonic CLI.

Every error is fatal for the current invocation: the command layer prints
the message to stderr and exits non-zero. Nothing here is retried.
"""

from __future__ import annotations

from typing import Any


class WritesonicError(Exception):
    """Base exception for all CLI errors."""

    pass


class ConfigError(WritesonicError):
    """Persisted configuration could not be read or parsed."""

    pass


class CredentialError(WritesonicError):
    """No API key could be resolved from the environment or config file."""

    pass


class TransportError(WritesonicError):
    """The API could not be reached (connection refused, DNS, timeout)."""

    pass


class DecodeError(WritesonicError):
    """Response body did not match the shape expected for the operation."""

    def __init__(self, message: str):
        super().__init__(f"unexpected response: {message}")


class ApiError(WritesonicError):
    """The API answered with a non-200 status."""

    def __init__(self, message: str, status_code: int, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class ApiValidationError(ApiError):
    """HTTP 422 with a structured ``detail`` list.

    The first entry's ``msg`` is the canonical summary and the exception
    message.
    """

    def __init__(self, details: list[dict[str, Any]], body: str = ""):
        self.details = details
        super().__init__(self.summary, status_code=422, body=body)

    @property
    def summary(self) -> str:
        if not self.details:
            return "validation error"
        return str(self.details[0].get("msg", ""))

    @property
    def messages(self) -> list[str]:
        """All field-level messages, in the order the API reported them."""
        return [str(d.get("msg", "")) for d in self.details]
