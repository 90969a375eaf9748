"""Enums shared across the Writesonic CLI."""

from enum import Enum


class Engine(str, Enum):
    """Quality tier used by the remote generation endpoints."""

    ECONOMY = "economy"
    AVERAGE = "average"
    GOOD = "good"
    PREMIUM = "premium"


class ResultKind(str, Enum):
    """Shape of the payload an operation returns."""

    TEXT = "text"
    """List of ``{"text": ...}`` objects."""

    LANDING_PAGE = "landing_page"
    """List of landing page objects with twelve string fields."""
