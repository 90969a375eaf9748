"""Shared runner for content commands - build context, call service, display."""

from __future__ import annotations

import typer

from ...api.requests import ContentRequest
from ...errors import WritesonicError
from ..core.console import console, print_error
from ..core.context import build_run_context, get_global_options
from .display import show_result
from .service import generate_content


def run_operation(ctx: typer.Context, request: ContentRequest) -> None:
    """Execute one API operation and print its result.

    Any failure prints a message to stderr and exits with status 1 before
    anything is written to stdout.
    """
    try:
        run = build_run_context(get_global_options(ctx))
        result = generate_content(run, request)
    except WritesonicError as e:
        print_error(str(e))
        raise typer.Exit(1)

    show_result(console, result, run.output)
