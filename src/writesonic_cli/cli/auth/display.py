"""Display functions for auth commands - pure functions for Rich output."""

from __future__ import annotations

from pathlib import Path
from typing import List

from rich.console import Console
from rich.markup import escape

from ...config import mask_key
from ...constants import FALLBACK_COPIES, FALLBACK_ENGINE, FALLBACK_LANGUAGE
from ..core.output import render_key_value
from .service import AuthStatus


def status_rows(status: AuthStatus) -> List[tuple[str, str]]:
    """Label/value pairs for ``auth status``."""
    rows = [("Config file:", str(status.config_path))]

    source = status.key_source
    if source is None:
        rows.append(("API key:", "not set"))
        return rows

    rows.append(("API key:", f"{mask_key(source.key)} ({source.describe()})"))

    config = status.config
    engine = config.default_engine.value if config.default_engine else f"{FALLBACK_ENGINE.value} (default)"
    language = config.default_language or f"{FALLBACK_LANGUAGE} (default)"
    copies = str(config.default_copies) if config.default_copies else f"{FALLBACK_COPIES} (default)"

    rows.extend([
        ("Default engine:", engine),
        ("Default language:", language),
        ("Default copies:", copies),
    ])
    return rows


def show_auth_status(console: Console, status: AuthStatus) -> None:
    """Display the current authentication status."""
    render_key_value(console, status_rows(status))

    if status.key_source is None:
        console.out("", highlight=False)
        console.out("Run: writesonic auth set-key <your-key>", highlight=False)
        console.out("Or:  export WRITESONIC_API_KEY=<your-key>", highlight=False)


def show_key_saved(console: Console, path: Path) -> None:
    """Display set-key result."""
    console.print(f"[green]API key saved to[/green] {escape(str(path))}", highlight=False, soft_wrap=True)
    console.print('[dim]You can now run: writesonic blog-ideas --topic "AI in 2025"[/dim]')


def show_config_hint(console: Console) -> None:
    """Explain how to use `auth config` when no flag was given."""
    console.print("[yellow]No changes.[/yellow] Use --engine, --language, or --copies flags.")
    console.print("[dim]Example: writesonic auth config --engine premium --language fr --copies 3[/dim]")
