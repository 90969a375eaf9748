"""Writing utility CLI commands: paragraph, meta, conclusion."""

from __future__ import annotations

from typing import Optional

import typer

from ...api.requests import ConclusionWriterRequest, MetaBlogRequest, ParagraphWriterRequest
from .commands import run_operation

app = typer.Typer(
    name="write",
    help="Write specific content pieces (paragraphs, meta tags, conclusions).",
    no_args_is_help=True,
)


@app.command(name="paragraph")
def paragraph(
    ctx: typer.Context,
    topic: str = typer.Option(..., "--topic", help="Topic to write about"),
    instructions: Optional[str] = typer.Option(None, "--instructions", help="Additional instructions"),
) -> None:
    """Write a structured, persuasive paragraph."""
    run_operation(ctx, ParagraphWriterRequest(topic=topic, instructions=instructions or None))


@app.command(name="meta")
def meta(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Blog post title"),
    desc: str = typer.Option(..., "--desc", help="Blog post description"),
) -> None:
    """Generate SEO meta title and description for a blog post."""
    run_operation(ctx, MetaBlogRequest(blog_title=title, blog_description=desc))


@app.command(name="conclusion")
def conclusion(
    ctx: typer.Context,
    topic: str = typer.Option(..., "--topic", help="Article topic to conclude"),
) -> None:
    """Write a compelling conclusion for an article."""
    run_operation(ctx, ConclusionWriterRequest(topic=topic))
