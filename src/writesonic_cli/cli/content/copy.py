"""Marketing copy CLI commands: PAS, AIDA, CTA and bullet-point answers."""

from __future__ import annotations

import typer

from ...api.requests import (
    AidaRequest,
    BulletPointAnswersRequest,
    CallToActionRequest,
    PasRequest,
)
from .commands import run_operation

app = typer.Typer(
    name="copy",
    help="Generate marketing copy (PAS, AIDA, CTA, bullets).",
    no_args_is_help=True,
)


@app.command(name="pas")
def pas(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Product or service name"),
    desc: str = typer.Option(..., "--desc", help="Product description"),
) -> None:
    """Pain-Agitate-Solution framework copy.

    Example:
      writesonic copy pas --name "Acme" --desc "Project management software for remote teams"
    """
    run_operation(ctx, PasRequest(product_name=name, product_description=desc))


@app.command(name="aida")
def aida(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Product or service name"),
    desc: str = typer.Option(..., "--desc", help="Product description"),
) -> None:
    """Attention-Interest-Desire-Action framework copy.

    Example:
      writesonic copy aida --name "CloudStore" --desc "Cloud storage for businesses"
    """
    run_operation(ctx, AidaRequest(product_name=name, product_description=desc))


@app.command(name="cta")
def cta(
    ctx: typer.Context,
    name: str = typer.Option(..., "--name", help="Product or service name"),
) -> None:
    """Generate eye-catching calls to action."""
    run_operation(ctx, CallToActionRequest(product_name=name))


@app.command(name="bullets")
def bullets(
    ctx: typer.Context,
    question: str = typer.Option(..., "--question", help="Question or topic to answer"),
) -> None:
    """Generate bullet-point answers."""
    run_operation(ctx, BulletPointAnswersRequest(question=question))
