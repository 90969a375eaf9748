"""Response models and decoders for the Writesonic API.

Two payload shapes exist. Which one applies is decided by the operation that
was called, never by looking at the payload:
- ``[{"text": ...}, ...]`` for almost every endpoint
- ``[{title, subtitle, ...}, ...]`` for ``/landing-pages``
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from pydantic import BaseModel, ConfigDict, TypeAdapter, ValidationError

from ..errors import DecodeError


class ContentResult(BaseModel):
    """A single generated text."""

    model_config = ConfigDict(extra="ignore")

    text: str = ""


class LandingPage(BaseModel):
    """Landing page copy returned by ``/landing-pages``."""

    model_config = ConfigDict(extra="ignore")

    title: str = ""
    subtitle: str = ""
    main_feature_title: str = ""
    main_feature_subtitle: str = ""
    feature_1_title: str = ""
    feature_1_subtitle: str = ""
    feature_2_title: str = ""
    feature_2_subtitle: str = ""
    feature_3_title: str = ""
    feature_3_subtitle: str = ""
    cta: str = ""
    button: str = ""


class ValidationDetail(BaseModel):
    """One entry of a 422 ``detail`` array."""

    model_config = ConfigDict(extra="ignore")

    loc: list[Union[str, int]] = []
    msg: str
    type: str = ""


class ValidationErrorBody(BaseModel):
    """Body of an HTTP 422 response."""

    detail: list[ValidationDetail]


# =============================================================================
# RESULT VARIANTS
# =============================================================================


@dataclass(frozen=True)
class TextResults:
    """Plain text results, in the order the API returned them."""

    items: list[ContentResult] = field(default_factory=list)

    @property
    def texts(self) -> list[str]:
        return [item.text for item in self.items]


@dataclass(frozen=True)
class LandingPageResults:
    """Landing page results, in the order the API returned them."""

    pages: list[LandingPage] = field(default_factory=list)


GenerationResult = Union[TextResults, LandingPageResults]
"""Either result variant. Renderers dispatch on the concrete type."""


# =============================================================================
# DECODERS
# =============================================================================

_text_results_adapter = TypeAdapter(list[ContentResult])
_landing_pages_adapter = TypeAdapter(list[LandingPage])


def decode_text_results(raw: bytes) -> list[ContentResult]:
    """Decode a ``[{"text": ...}]`` payload.

    Raises:
        DecodeError: If the payload is not a JSON array of objects.
    """
    try:
        return _text_results_adapter.validate_json(raw)
    except ValidationError as e:
        raise DecodeError(_describe(e)) from e


def decode_landing_pages(raw: bytes) -> list[LandingPage]:
    """Decode a ``/landing-pages`` payload.

    Raises:
        DecodeError: If the payload is not a JSON array of objects.
    """
    try:
        return _landing_pages_adapter.validate_json(raw)
    except ValidationError as e:
        raise DecodeError(_describe(e)) from e


def decode_validation_error(raw: bytes) -> ValidationErrorBody | None:
    """Parse a 422 body, returning None when it is not the expected shape."""
    try:
        return ValidationErrorBody.model_validate_json(raw)
    except ValidationError:
        return None


def _describe(error: ValidationError) -> str:
    first = error.errors()[0]
    loc = ".".join(str(part) for part in first.get("loc", ()))
    if loc:
        return f"{first['msg']} at {loc}"
    return first["msg"]
