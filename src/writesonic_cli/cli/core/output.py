"""Output rendering: JSON for pipelines, plain text for terminals.

JSON is chosen whenever stdout is not an interactive terminal, or when
--json/--pretty is given. Text output is written verbatim: no markup,
highlighting or wrapping is applied to generated content.
"""

from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from typing import Any, Iterable, Sequence, TextIO

from pydantic import BaseModel
from rich.console import Console

# Values treated as "no data" in key/value output
_PLACEHOLDER_VALUES = ("", "-")


def stdout_is_interactive(stream: TextIO | None = None) -> bool:
    """Check whether the output stream is attached to a terminal."""
    stream = stream if stream is not None else sys.stdout
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed streams raise instead of answering
        return False


def should_emit_json(json_flag: bool, pretty_flag: bool, is_interactive: bool) -> bool:
    """Decide between JSON and text output.

    Non-interactive output is always JSON. On a terminal, either flag
    switches to JSON.
    """
    if not is_interactive:
        return True
    return json_flag or pretty_flag


@dataclass(frozen=True)
class OutputOptions:
    """Output flags plus the terminal check, fixed once per run."""

    json_flag: bool = False
    pretty_flag: bool = False
    interactive: bool = True

    @property
    def emit_json(self) -> bool:
        return should_emit_json(self.json_flag, self.pretty_flag, self.interactive)


def to_jsonable(value: Any) -> Any:
    """Convert pydantic models (and lists of them) to plain JSON data."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item) for item in value]
    return value


def format_json(value: Any, pretty: bool = False) -> str:
    """Serialize to compact single-line JSON, or two-space indented JSON."""
    data = to_jsonable(value)
    if pretty:
        return json.dumps(data, indent=2, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def render_json(console: Console, value: Any, pretty: bool = False) -> None:
    """Write ``value`` as JSON followed by a newline."""
    console.out(format_json(value, pretty), highlight=False)


def render_text(console: Console, items: Sequence[str]) -> None:
    """Write text results.

    A single item is printed bare. Several items each get a
    ``--- Result N ---`` header, with a blank line between blocks.
    """
    numbered = len(items) > 1
    for i, text in enumerate(items):
        if numbered:
            console.out(f"--- Result {i + 1} ---", highlight=False)
        console.out(text, highlight=False)
        if i < len(items) - 1:
            console.out("", highlight=False)


def render_key_value(console: Console, rows: Iterable[tuple[str, str]]) -> None:
    """Write two aligned columns, skipping rows with empty or "-" values."""
    visible = [(key, value) for key, value in rows if value not in _PLACEHOLDER_VALUES]
    if not visible:
        return

    width = max(len(key) for key, _ in visible) + 2
    for key, value in visible:
        console.out(key.ljust(width) + value, highlight=False)
