"""Display functions for content results - pure functions over a Console."""

from __future__ import annotations

from typing import List

from rich.console import Console

from ...api.models import GenerationResult, LandingPage, LandingPageResults, TextResults
from ..core.output import OutputOptions, render_json, render_key_value, render_text

# Display label for each landing page field, in display order
LANDING_PAGE_LABELS: List[tuple[str, str]] = [
    ("Title", "title"),
    ("Subtitle", "subtitle"),
    ("Main Feature Title", "main_feature_title"),
    ("Main Feature Subtitle", "main_feature_subtitle"),
    ("Feature 1 Title", "feature_1_title"),
    ("Feature 1 Subtitle", "feature_1_subtitle"),
    ("Feature 2 Title", "feature_2_title"),
    ("Feature 2 Subtitle", "feature_2_subtitle"),
    ("Feature 3 Title", "feature_3_title"),
    ("Feature 3 Subtitle", "feature_3_subtitle"),
    ("CTA", "cta"),
    ("Button", "button"),
]


def landing_page_rows(page: LandingPage) -> List[tuple[str, str]]:
    """Label/value pairs for one landing page, in display order."""
    return [(label, getattr(page, field)) for label, field in LANDING_PAGE_LABELS]


def show_landing_pages(console: Console, pages: List[LandingPage]) -> None:
    """Display landing pages as key/value blocks."""
    for i, page in enumerate(pages):
        if len(pages) > 1:
            console.out(f"--- Result {i + 1} ---", highlight=False)
            console.out("", highlight=False)
        render_key_value(console, landing_page_rows(page))
        if i < len(pages) - 1:
            console.out("", highlight=False)


def show_result(console: Console, result: GenerationResult, options: OutputOptions) -> None:
    """Display a generation result as JSON or text, depending on options."""
    if isinstance(result, LandingPageResults):
        if options.emit_json:
            render_json(console, result.pages, pretty=options.pretty_flag)
        else:
            show_landing_pages(console, result.pages)
    elif isinstance(result, TextResults):
        if options.emit_json:
            render_json(console, result.items, pretty=options.pretty_flag)
        else:
            render_text(console, result.texts)
    else:
        raise TypeError(f"Unsupported result type: {type(result).__name__}")
