"""Auth CLI commands - API key and persisted defaults."""

from __future__ import annotations

from typing import Optional

import typer

from ...constants import Engine
from ...errors import WritesonicError
from ..core.console import console, print_error, print_info, print_success
from .display import show_auth_status, show_config_hint, show_key_saved
from .service import get_auth_status, remove_config, set_api_key, update_defaults

app = typer.Typer(
    name="auth",
    help="Manage Writesonic API authentication.",
    no_args_is_help=True,
)


@app.command(name="set-key")
def set_key(
    api_key: str = typer.Argument(..., help="Your Writesonic API key"),
) -> None:
    """Save your Writesonic API key."""
    try:
        path = set_api_key(api_key)
    except WritesonicError as e:
        print_error(str(e))
        raise typer.Exit(1)

    show_key_saved(console, path)


@app.command(name="status")
def status() -> None:
    """Show current authentication status."""
    try:
        auth_status = get_auth_status()
    except WritesonicError as e:
        print_error(str(e))
        raise typer.Exit(1)

    show_auth_status(console, auth_status)


@app.command(name="logout")
def logout() -> None:
    """Remove the stored API key and defaults."""
    try:
        removed = remove_config()
    except WritesonicError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if removed:
        print_success("API key removed. Set a new key with: writesonic auth set-key <key>")
    else:
        print_info("No stored config to remove.")


@app.command(name="config")
def config(
    engine: Optional[Engine] = typer.Option(None, "--engine", help="Default engine", case_sensitive=False),
    language: Optional[str] = typer.Option(None, "--language", help="Default language code (e.g. en, fr, de)"),
    copies: Optional[int] = typer.Option(None, "--copies", help="Default number of copies (1-5)"),
) -> None:
    """Set default engine, language, and copies.

    Example:
      writesonic auth config --engine premium --language fr --copies 3
    """
    try:
        changed = update_defaults(engine=engine, language=language, copies=copies)
    except WritesonicError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if changed:
        print_success("Defaults updated.")
    else:
        show_config_hint(console)
