"""Blog CLI commands."""

from __future__ import annotations

from typing import Optional

import typer

from ...api.requests import BlogIdeasRequest
from .commands import run_operation


def blog_ideas(
    ctx: typer.Context,
    topic: str = typer.Option(..., "--topic", help="Topic to generate ideas for"),
    keyword: Optional[str] = typer.Option(None, "--keyword", help="Primary keyword to focus on"),
) -> None:
    """Generate blog post ideas for a topic.

    Examples:
      writesonic blog-ideas --topic "sustainable fashion"
      writesonic --copies 3 --engine premium blog-ideas --topic "AI tools"
    """
    run_operation(ctx, BlogIdeasRequest(topic=topic, primary_keyword=keyword or None))
