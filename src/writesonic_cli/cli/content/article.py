"""Article CLI commands."""

from __future__ import annotations

import typer

from ...api.requests import ArticleWriterRequest, InstantArticleRequest
from .commands import run_operation

app = typer.Typer(
    name="article",
    help="Generate full articles.",
    no_args_is_help=True,
)


@app.command(name="write")
def write(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Article title"),
    intro: str = typer.Option(..., "--intro", help="Article introduction"),
    sections: str = typer.Option(..., "--sections", help="Comma-separated section titles"),
) -> None:
    """Generate a long-form SEO article (AI Article Writer v3).

    Example:
      writesonic article write --title "10 AI Tools in 2025" \\
        --intro "AI is transforming..." --sections "Tools,Use cases,Future"
    """
    run_operation(
        ctx,
        ArticleWriterRequest(
            article_title=title,
            article_intro=intro,
            article_sections=sections,
        ),
    )


@app.command(name="instant")
def instant(
    ctx: typer.Context,
    title: str = typer.Option(..., "--title", help="Article title"),
) -> None:
    """Generate a 1500-word article instantly."""
    run_operation(ctx, InstantArticleRequest(article_title=title))
