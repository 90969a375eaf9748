"""Content transformation CLI commands: rephrase, shorten, tone, keywords."""

from __future__ import annotations

from typing import Optional

import typer

from ...api.requests import (
    ContentRephraseRequest,
    ContentShortenRequest,
    RewriteWithKeywordsRequest,
    ToneChangerRequest,
)
from .commands import run_operation

app = typer.Typer(
    name="rewrite",
    help="Transform existing content (rephrase, shorten, tone, keywords).",
    no_args_is_help=True,
)


@app.command(name="rephrase")
def rephrase(
    ctx: typer.Context,
    content: str = typer.Option(..., "--content", help="Content to rephrase (20-1000 chars)"),
    tone: Optional[str] = typer.Option(None, "--tone", help="Desired tone of voice"),
) -> None:
    """Rephrase content in a different style."""
    run_operation(ctx, ContentRephraseRequest(content_to_rephrase=content, tone_of_voice=tone or None))


@app.command(name="shorten")
def shorten(
    ctx: typer.Context,
    content: str = typer.Option(..., "--content", help="Content to shorten (20-1000 chars)"),
    tone: Optional[str] = typer.Option(None, "--tone", help="Desired tone of voice"),
) -> None:
    """Shorten content while keeping the message."""
    run_operation(ctx, ContentShortenRequest(content_to_shorten=content, tone_of_voice=tone or None))


@app.command(name="tone")
def tone(
    ctx: typer.Context,
    content: str = typer.Option(..., "--content", help="Content to transform"),
    tone: str = typer.Option(..., "--tone", help="Target tone (e.g. formal, casual, professional)"),
) -> None:
    """Change the tone of existing content."""
    run_operation(ctx, ToneChangerRequest(content_to_change=content, tone=tone))


@app.command(name="keywords")
def keywords(
    ctx: typer.Context,
    content: str = typer.Option(..., "--content", help="Content to rewrite"),
    keywords: str = typer.Option(..., "--keywords", help="Comma-separated target keywords"),
) -> None:
    """Rewrite content with target SEO keywords."""
    run_operation(ctx, RewriteWithKeywordsRequest(content=content, keywords=keywords))
