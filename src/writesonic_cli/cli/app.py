"""Typer app configuration and logging setup."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer
from dotenv import load_dotenv

from ..constants import (
    API_LOG_FILENAME,
    CONFIG_DIR_MODE,
    MAX_SUGGESTED_COPIES,
    Engine,
    get_app_config_dir,
    get_log_dir,
)
from .core.console import print_warning
from .core.context import GlobalOptions

_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"

# Create Typer app
app = typer.Typer(
    name="writesonic",
    help="Writesonic AI content generation from the command line.",
    add_completion=False,
    no_args_is_help=True,
)


@app.callback()
def root(
    ctx: typer.Context,
    json_flag: bool = typer.Option(False, "--json", help="Force JSON output"),
    pretty: bool = typer.Option(False, "--pretty", help="Force pretty-printed JSON output (implies --json)"),
    engine: Optional[Engine] = typer.Option(None, "--engine", help="AI engine to use", case_sensitive=False),
    lang: Optional[str] = typer.Option(None, "--lang", help="Language code (e.g. en, fr, de, es)"),
    copies: Optional[int] = typer.Option(None, "--copies", help="Number of copies to generate (1-5)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log API calls to stderr"),
) -> None:
    """Generate blog ideas, marketing copy, landing pages and articles with Writesonic.

    Output is text in a terminal and compact JSON when piped.
    """
    setup_logging(verbose)
    if copies is not None and copies > MAX_SUGGESTED_COPIES:
        print_warning(f"--copies {copies} is above {MAX_SUGGESTED_COPIES}; the API may reject it")
    ctx.obj = GlobalOptions(
        json_flag=json_flag,
        pretty_flag=pretty,
        engine=engine,
        language=lang or None,
        copies=copies,
        verbose=verbose,
    )


def register_commands() -> None:
    """Register all commands from feature modules."""
    # Import and register content commands
    from .content.article import app as article_app
    from .content.blog import blog_ideas
    from .content.copy import app as copy_app
    from .content.landing import app as landing_app
    from .content.rewrite import app as rewrite_app
    from .content.write import app as write_app

    app.command(name="blog-ideas")(blog_ideas)
    app.add_typer(copy_app, name="copy")
    app.add_typer(landing_app, name="landing")
    app.add_typer(rewrite_app, name="rewrite")
    app.add_typer(write_app, name="write")
    app.add_typer(article_app, name="article")

    # Import and register auth commands
    from .auth.commands import app as auth_app

    app.add_typer(auth_app, name="auth")


def _reset_handlers(logger: logging.Logger) -> None:
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for CLI.

    - Suppresses console output from libraries
    - Sets up file logging for API calls
    - Mirrors API call logging to stderr when verbose
    """
    # Remove any default console handlers from root logger
    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.setLevel(logging.CRITICAL)

    # Suppress loggers that might print to console
    for logger_name in ["httpx", "httpcore"]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.WARNING)
        logger.propagate = False

    api_logger = logging.getLogger("writesonic_api")
    api_logger.setLevel(logging.DEBUG)
    api_logger.propagate = False
    _reset_handlers(api_logger)

    formatter = logging.Formatter(_LOG_FORMAT)

    try:
        get_app_config_dir().mkdir(mode=CONFIG_DIR_MODE, parents=True, exist_ok=True)
        log_dir = get_log_dir()
        log_dir.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_dir / API_LOG_FILENAME, encoding="utf-8")
    except OSError:
        # Unwritable log dir: run without file logging
        file_handler = None

    if file_handler is not None:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        api_logger.addHandler(file_handler)

    if verbose:
        stream_handler = logging.StreamHandler(sys.stderr)
        stream_handler.setLevel(logging.DEBUG)
        stream_handler.setFormatter(formatter)
        api_logger.addHandler(stream_handler)


# Register all commands
register_commands()


def main() -> None:
    """CLI entry point."""
    # Load environment variables from .env file
    load_dotenv()
    app()
