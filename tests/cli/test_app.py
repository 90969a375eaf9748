"""Tests for app wiring and logging setup."""

from __future__ import annotations

import logging
import stat
import sys
from pathlib import Path

import pytest
from typer.testing import CliRunner

from writesonic_cli.cli import app
from writesonic_cli.cli.app import setup_logging

runner = CliRunner()


class TestRegistration:
    """Tests for command registration."""

    def test_root_help_lists_groups(self):
        result = runner.invoke(app, ["--help"])

        assert result.exit_code == 0
        for name in ["blog-ideas", "copy", "landing", "rewrite", "write", "article", "auth"]:
            assert name in result.output

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "Usage" in result.output

    def test_group_help(self):
        result = runner.invoke(app, ["rewrite", "--help"])

        assert result.exit_code == 0
        for name in ["rephrase", "shorten", "tone", "keywords"]:
            assert name in result.output


class TestSetupLogging:
    """Tests for setup_logging."""

    @pytest.mark.skipif(sys.platform.startswith("win"), reason="POSIX permissions")
    def test_app_dir_created_owner_only(self, isolated_config_dir: Path):
        setup_logging()
        app_dir = isolated_config_dir / "writesonic"
        assert stat.S_IMODE(app_dir.stat().st_mode) == 0o700

    def test_file_handler(self, isolated_config_dir: Path):
        setup_logging()

        logger = logging.getLogger("writesonic_api")
        assert logger.propagate is False
        file_handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
        assert len(file_handlers) == 1
        assert Path(file_handlers[0].baseFilename) == (
            isolated_config_dir / "writesonic" / "logs" / "api_calls.log"
        )

    def test_verbose_adds_stderr_handler(self):
        setup_logging(verbose=True)

        logger = logging.getLogger("writesonic_api")
        stream_handlers = [
            h for h in logger.handlers
            if type(h) is logging.StreamHandler
        ]
        assert len(stream_handlers) == 1

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(verbose=True)
        setup_logging(verbose=True)
        assert len(logging.getLogger("writesonic_api").handlers) == 2

    def test_messages_written_to_file(self, isolated_config_dir: Path):
        setup_logging()
        logging.getLogger("writesonic_api").info("POST /blog-ideas -> 200")
        for handler in logging.getLogger("writesonic_api").handlers:
            handler.flush()

        log_file = isolated_config_dir / "writesonic" / "logs" / "api_calls.log"
        content = log_file.read_text(encoding="utf-8")
        assert "| INFO | POST /blog-ideas -> 200" in content

    def test_unwritable_log_dir(self, isolated_config_dir: Path):
        """A file where the config dir should be disables file logging only."""
        isolated_config_dir.parent.mkdir(parents=True, exist_ok=True)
        isolated_config_dir.write_text("not a directory", encoding="utf-8")

        setup_logging()
        logger = logging.getLogger("writesonic_api")
        assert not any(isinstance(h, logging.FileHandler) for h in logger.handlers)

    def test_http_libraries_quieted(self):
        setup_logging()
        assert logging.getLogger("httpx").level == logging.WARNING
        assert logging.getLogger("httpcore").level == logging.WARNING
