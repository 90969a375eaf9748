"""Landing page CLI commands."""

from __future__ import annotations

import typer

from ...api.requests import LandingPageHeadlinesRequest, LandingPageRequest
from .commands import run_operation

app = typer.Typer(
    name="landing",
    help="Generate landing page copy.",
    no_args_is_help=True,
)


@app.command(name="page")
def page(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Product or service name"),
    desc: str = typer.Option(..., "--desc", help="Product description"),
    f1: str = typer.Option(..., "--f1", help="Feature 1"),
    f2: str = typer.Option(..., "--f2", help="Feature 2"),
    f3: str = typer.Option(..., "--f3", help="Feature 3"),
) -> None:
    """Generate full landing page copy with features and CTAs.

    Example:
      writesonic landing page --name "Acme SaaS" --desc "Project management tool" \\
        --f1 "Task tracking" --f2 "Team collaboration" --f3 "Analytics"
    """
    run_operation(
        ctx,
        LandingPageRequest(
            product_name=name,
            product_description=desc,
            feature_1=f1,
            feature_2=f2,
            feature_3=f3,
        ),
    )


@app.command(name="headline")
def headline(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Product or service name"),
    desc: str = typer.Option(..., "--desc", help="Product description"),
) -> None:
    """Generate catchy landing page headlines."""
    run_operation(ctx, LandingPageHeadlinesRequest(product_name=name, product_description=desc))
