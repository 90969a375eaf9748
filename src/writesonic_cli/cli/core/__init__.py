"""Core utilities for CLI - console, run context and output rendering."""

from .console import console, err_console, print_error, print_info, print_success, print_warning
from .context import GlobalOptions, RunContext, build_run_context, get_global_options
from .output import (
    OutputOptions,
    format_json,
    render_json,
    render_key_value,
    render_text,
    should_emit_json,
    stdout_is_interactive,
)

__all__ = [
    # Console
    "console",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    # Context
    "GlobalOptions",
    "RunContext",
    "build_run_context",
    "get_global_options",
    # Output
    "OutputOptions",
    "format_json",
    "render_json",
    "render_key_value",
    "render_text",
    "should_emit_json",
    "stdout_is_interactive",
]
