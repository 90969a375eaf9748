"""Shared test fixtures and configuration.

Every test runs against an isolated per-user config directory and a clean
environment, so nothing reads or writes the real ``config.json`` or picks up
a developer's API key.
"""

from __future__ import annotations

import json
import logging
from io import StringIO
from pathlib import Path
from typing import Any, Callable

import httpx
import pytest
from rich.console import Console

from writesonic_cli.api.client import WritesonicClient
from writesonic_cli.config import RunDefaults
from writesonic_cli.constants import API_KEY_ENV_VARS, Engine

TEST_API_KEY = "ws-test-key-1234567890"


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the per-user config dir at a temp directory and clear API env vars.

    Returns:
        The base config dir; the app dir is ``<base>/writesonic``.
    """
    config_base = tmp_path / "user-config"
    monkeypatch.setattr(
        "writesonic_cli.constants.paths.get_user_config_dir",
        lambda: config_base,
    )
    for name in API_KEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.delenv("WRITESONIC_BASE_URL", raising=False)
    monkeypatch.delenv("WRITESONIC_TIMEOUT_SECONDS", raising=False)
    return config_base


@pytest.fixture(autouse=True)
def reset_api_logger():
    """Undo handler and propagation changes made by setup_logging."""
    root_level = logging.getLogger().level
    yield
    logger = logging.getLogger("writesonic_api")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def config_path(isolated_config_dir: Path) -> Path:
    """Path of the isolated config file."""
    return isolated_config_dir / "writesonic" / "config.json"


@pytest.fixture
def mock_console() -> Console:
    """Create a Console that captures output without ANSI codes."""
    return Console(file=StringIO(), force_terminal=False, no_color=True, width=120)


@pytest.fixture
def run_defaults() -> RunDefaults:
    """Fallback run defaults."""
    return RunDefaults(engine=Engine.GOOD, language="en", copies=1)


class RecordingHandler:
    """MockTransport handler that records requests and replays one response."""

    def __init__(self, status_code: int = 200, body: Any = None, raw: bytes | None = None):
        self.status_code = status_code
        self.body = body
        self.raw = raw
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.raw is not None:
            return httpx.Response(self.status_code, content=self.raw)
        return httpx.Response(self.status_code, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def make_client() -> Callable[..., tuple[WritesonicClient, RecordingHandler]]:
    """Factory for a WritesonicClient backed by httpx.MockTransport.

    Usage:
        client, handler = make_client(200, [{"text": "hi"}])
    """

    def _make(
        status_code: int = 200,
        body: Any = None,
        raw: bytes | None = None,
        api_key: str = TEST_API_KEY,
    ) -> tuple[WritesonicClient, RecordingHandler]:
        handler = RecordingHandler(status_code, body, raw)
        http_client = httpx.Client(transport=httpx.MockTransport(handler))
        return WritesonicClient(api_key, http_client=http_client), handler

    return _make
