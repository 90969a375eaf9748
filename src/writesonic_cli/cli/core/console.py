"""Rich console singletons for CLI output.

Results go to ``console`` (stdout). Errors, warnings and status messages go
to ``err_console`` (stderr) so piped output stays machine-readable.
"""

import sys

from rich.console import Console
from rich.markup import escape

# Windows cp1252 encoding doesn't support Unicode box drawing characters
_safe_box = sys.platform == "win32"

console = Console(safe_box=_safe_box)
err_console = Console(stderr=True, safe_box=_safe_box)


def print_error(message: str) -> None:
    """Print an error message to stderr.

    Args:
        message: Error message (printed verbatim, API bodies included)
    """
    err_console.print(f"[red]Error:[/red] {escape(message)}", highlight=False, soft_wrap=True)


def print_warning(message: str) -> None:
    """Print a warning message to stderr."""
    err_console.print(f"[yellow]Warning: {escape(message)}[/yellow]")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{escape(message)}[/green]")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[cyan]{escape(message)}[/cyan]")
