"""Writesonic API access: client, request bodies and response models."""

from .client import WritesonicClient
from .models import (
    ContentResult,
    GenerationResult,
    LandingPage,
    LandingPageResults,
    TextResults,
    decode_landing_pages,
    decode_text_results,
)
from .requests import ContentRequest

__all__ = [
    "ContentRequest",
    "ContentResult",
    "GenerationResult",
    "LandingPage",
    "LandingPageResults",
    "TextResults",
    "WritesonicClient",
    "decode_landing_pages",
    "decode_text_results",
]
