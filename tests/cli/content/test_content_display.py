"""Unit tests for content result display."""

from __future__ import annotations

import json
from io import StringIO

import pytest
from rich.console import Console

from writesonic_cli.api.models import ContentResult, LandingPage, LandingPageResults, TextResults
from writesonic_cli.cli.content.display import (
    LANDING_PAGE_LABELS,
    landing_page_rows,
    show_landing_pages,
    show_result,
)
from writesonic_cli.cli.core.output import OutputOptions

TERMINAL = OutputOptions(interactive=True)
PIPED = OutputOptions(interactive=False)


def _lines(console: Console) -> list[str]:
    return [line.rstrip() for line in console.file.getvalue().splitlines()]


@pytest.fixture
def full_page() -> LandingPage:
    """Landing page with every field set."""
    return LandingPage(**{field: f"{field} value" for _, field in LANDING_PAGE_LABELS})


class TestLandingPageRows:
    """Tests for landing page label mapping."""

    def test_all_twelve_in_order(self, full_page: LandingPage):
        rows = landing_page_rows(full_page)
        assert [label for label, _ in rows] == [
            "Title",
            "Subtitle",
            "Main Feature Title",
            "Main Feature Subtitle",
            "Feature 1 Title",
            "Feature 1 Subtitle",
            "Feature 2 Title",
            "Feature 2 Subtitle",
            "Feature 3 Title",
            "Feature 3 Subtitle",
            "CTA",
            "Button",
        ]
        assert rows[0] == ("Title", "title value")
        assert rows[-1] == ("Button", "button value")


class TestShowLandingPages:
    """Tests for landing page text output."""

    def test_single_page_without_header(self, mock_console: Console, full_page: LandingPage):
        show_landing_pages(mock_console, [full_page])
        lines = _lines(mock_console)
        assert len(lines) == 12
        assert lines[0].startswith("Title ")
        assert lines[0].endswith("title value")
        assert lines[11].startswith("Button ")
        assert "--- Result" not in mock_console.file.getvalue()

    def test_empty_fields_omitted(self, mock_console: Console):
        show_landing_pages(mock_console, [LandingPage(title="Hello", cta="Sign up")])
        lines = _lines(mock_console)
        assert len(lines) == 2
        assert lines[0].startswith("Title") and lines[0].endswith("Hello")
        assert lines[1].startswith("CTA") and lines[1].endswith("Sign up")

    def test_multiple_pages_get_headers(self, mock_console: Console):
        show_landing_pages(mock_console, [LandingPage(title="One"), LandingPage(title="Two")])
        assert _lines(mock_console) == [
            "--- Result 1 ---",
            "",
            "Title  One",
            "",
            "--- Result 2 ---",
            "",
            "Title  Two",
        ]


    def test_long_value_kept_whole_on_narrow_terminal(self):
        narrow = Console(file=StringIO(), force_terminal=True, no_color=True, width=80)
        page = LandingPage(title="T", subtitle="x" * 150, cta="Go")
        show_landing_pages(narrow, [page])
        assert narrow.file.getvalue() == (
            "Title     T\n"
            f"Subtitle  {'x' * 150}\n"
            "CTA       Go\n"
        )


class TestShowResult:
    """Tests for show_result dispatch."""

    def test_text_on_terminal(self, mock_console: Console):
        result = TextResults(items=[ContentResult(text="Idea A"), ContentResult(text="Idea B")])
        show_result(mock_console, result, TERMINAL)
        assert mock_console.file.getvalue() == (
            "--- Result 1 ---\nIdea A\n\n--- Result 2 ---\nIdea B\n"
        )

    def test_text_piped(self, mock_console: Console):
        result = TextResults(items=[ContentResult(text="Idea A"), ContentResult(text="Idea B")])
        show_result(mock_console, result, PIPED)
        assert mock_console.file.getvalue() == '[{"text":"Idea A"},{"text":"Idea B"}]\n'

    def test_text_pretty(self, mock_console: Console):
        result = TextResults(items=[ContentResult(text="A")])
        show_result(mock_console, result, OutputOptions(pretty_flag=True, interactive=True))
        output = mock_console.file.getvalue()
        assert output.startswith("[\n  {")
        assert json.loads(output) == [{"text": "A"}]

    def test_landing_pages_as_json(self, mock_console: Console):
        result = LandingPageResults(pages=[LandingPage(title="T")])
        show_result(mock_console, result, PIPED)
        data = json.loads(mock_console.file.getvalue())
        assert data[0]["title"] == "T"
        assert len(data[0]) == 12

    def test_landing_pages_as_text(self, mock_console: Console):
        result = LandingPageResults(pages=[LandingPage(title="T")])
        show_result(mock_console, result, TERMINAL)
        assert _lines(mock_console) == ["Title  T"]

    def test_unsupported_result(self, mock_console: Console):
        with pytest.raises(TypeError):
            show_result(mock_console, ["raw"], TERMINAL)
