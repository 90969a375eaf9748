"""Unit tests for API key resolution."""

from __future__ import annotations

import pytest

from writesonic_cli.config import (
    UserConfig,
    find_api_key,
    mask_key,
    require_api_key,
    resolve_api_key,
)
from writesonic_cli.config.credentials import resolve_env
from writesonic_cli.constants import API_KEY_ENV_VARS
from writesonic_cli.errors import CredentialError


class TestResolveApiKey:
    """Tests for resolve_api_key precedence."""

    def test_env_beats_config(self):
        """An environment variable wins over the stored key."""
        config = UserConfig(api_key="from-config")
        assert resolve_api_key(config, {"WRITESONIC_API_KEY": "from-env"}) == "from-env"

    def test_config_used_when_env_empty(self):
        """The stored key is used when no variable is set."""
        config = UserConfig(api_key="from-config")
        assert resolve_api_key(config, {}) == "from-config"

    def test_first_alias_in_order_wins(self):
        """When several aliases are set, the earliest in the list wins."""
        environ = {
            "WRITESONIC_SK": "last",
            "WRITESONIC_KEY": "second",
            "WRITESONIC_API_KEY": "first",
        }
        assert resolve_api_key(None, environ) == "first"

    def test_empty_variable_is_skipped(self):
        """Empty values do not count as set."""
        environ = {"WRITESONIC_API_KEY": "", "WRITESONIC_KEY": "second"}
        assert resolve_api_key(None, environ) == "second"

    @pytest.mark.parametrize("name", API_KEY_ENV_VARS)
    def test_every_alias_is_recognized(self, name: str):
        """Each supported alias resolves on its own."""
        assert resolve_api_key(None, {name: "k"}) == "k"

    def test_unknown_variable_ignored(self):
        """Variables outside the alias list are not consulted."""
        assert resolve_api_key(None, {"OPENAI_API_KEY": "nope"}) is None

    def test_nothing_found(self):
        """Returns None when neither env nor config has a key."""
        assert resolve_api_key(UserConfig(), {}) is None

    def test_defaults_to_os_environ(self, monkeypatch: pytest.MonkeyPatch):
        """Without an explicit mapping the process environment is read."""
        monkeypatch.setenv("WRITESONIC_SECRET", "from-os")
        assert resolve_api_key() == "from-os"


class TestFindApiKey:
    """Tests for key source reporting."""

    def test_env_source(self):
        source = find_api_key(UserConfig(api_key="cfg"), {"WRITESONIC_KEY": "env"})
        assert source is not None
        assert source.origin == "env"
        assert source.env_var == "WRITESONIC_KEY"
        assert source.describe() == "environment variable WRITESONIC_KEY"

    def test_config_source(self):
        source = find_api_key(UserConfig(api_key="cfg"), {})
        assert source is not None
        assert source.origin == "config"
        assert source.env_var is None
        assert source.describe() == "config file"

    def test_none(self):
        assert find_api_key(None, {}) is None


class TestRequireApiKey:
    """Tests for require_api_key."""

    def test_returns_key(self):
        assert require_api_key(None, {"WRITESONIC_API_KEY": "k"}) == "k"

    def test_missing_key_raises(self):
        """Missing key fails with guidance on how to set one."""
        with pytest.raises(CredentialError) as exc_info:
            require_api_key(UserConfig(), {})
        message = str(exc_info.value)
        assert "no API key found" in message
        assert "writesonic auth set-key" in message
        assert "WRITESONIC_API_KEY" in message


class TestResolveEnv:
    """Tests for resolve_env."""

    def test_returns_name_and_value(self):
        assert resolve_env(("A", "B"), {"B": "x"}) == ("B", "x")

    def test_returns_none(self):
        assert resolve_env(("A", "B"), {}) is None


class TestMaskKey:
    """Tests for mask_key."""

    def test_long_key(self):
        assert mask_key("abcd1234efgh5678") == "abcd...5678"

    def test_nine_chars(self):
        assert mask_key("123456789") == "1234...6789"

    def test_short_key(self):
        assert mask_key("12345678") == "****"
        assert mask_key("abc") == "****"
        assert mask_key("") == "****"
