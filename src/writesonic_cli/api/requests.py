"""Typed request bodies, one model per API operation.

Each model declares the path it is sent to and the shape of the payload it
gets back. Unset optional fields are dropped from the JSON body.
"""

from __future__ import annotations

from typing import Any, ClassVar, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from ..constants import ResultKind


class ContentRequest(BaseModel):
    """Base class for operation request bodies."""

    model_config = ConfigDict(frozen=True)

    path: ClassVar[str]
    result_kind: ClassVar[ResultKind] = ResultKind.TEXT

    def to_body(self) -> dict[str, Any]:
        """JSON body for the request, without unset optional fields."""
        return self.model_dump(mode="json", exclude_none=True)


def split_csv(value: str) -> list[str]:
    """Split a comma-separated flag value, trimming items and dropping empties."""
    return [part.strip() for part in value.split(",") if part.strip()]


# =============================================================================
# BLOG
# =============================================================================


class BlogIdeasRequest(ContentRequest):
    path: ClassVar[str] = "/blog-ideas"

    topic: str
    primary_keyword: Optional[str] = None


# =============================================================================
# MARKETING COPY
# =============================================================================


class PasRequest(ContentRequest):
    path: ClassVar[str] = "/pas"

    product_name: str
    product_description: str


class AidaRequest(ContentRequest):
    path: ClassVar[str] = "/aida"

    product_name: str
    product_description: str


class CallToActionRequest(ContentRequest):
    path: ClassVar[str] = "/call-to-action"

    product_name: str


class BulletPointAnswersRequest(ContentRequest):
    path: ClassVar[str] = "/bulletpoint-answers"

    question: str


# =============================================================================
# LANDING PAGES
# =============================================================================


class LandingPageRequest(ContentRequest):
    """Full landing page copy. The only operation returning landing pages."""

    path: ClassVar[str] = "/landing-pages"
    result_kind: ClassVar[ResultKind] = ResultKind.LANDING_PAGE

    product_name: str
    product_description: str
    feature_1: str
    feature_2: str
    feature_3: str


class LandingPageHeadlinesRequest(ContentRequest):
    path: ClassVar[str] = "/landing-page-headlines"

    product_name: str
    product_description: str


# =============================================================================
# REWRITING
# =============================================================================


class ContentRephraseRequest(ContentRequest):
    path: ClassVar[str] = "/content-rephrase"

    content_to_rephrase: str
    tone_of_voice: Optional[str] = None


class ContentShortenRequest(ContentRequest):
    path: ClassVar[str] = "/content-shorten"

    content_to_shorten: str
    tone_of_voice: Optional[str] = None


class ToneChangerRequest(ContentRequest):
    path: ClassVar[str] = "/tone-changer"

    content_to_change: str
    tone: str


class RewriteWithKeywordsRequest(ContentRequest):
    path: ClassVar[str] = "/rewrite-with-keywords"

    content: str
    keywords: str


# =============================================================================
# WRITING
# =============================================================================


class ParagraphWriterRequest(ContentRequest):
    path: ClassVar[str] = "/paragraph-writer"

    topic: str
    instructions: Optional[str] = None


class MetaBlogRequest(ContentRequest):
    path: ClassVar[str] = "/meta-blog"

    blog_title: str
    blog_description: str


class ConclusionWriterRequest(ContentRequest):
    path: ClassVar[str] = "/conclusion-writer"

    topic: str


# =============================================================================
# ARTICLES
# =============================================================================


class ArticleWriterRequest(ContentRequest):
    """AI Article Writer v3. ``article_sections`` accepts a comma-separated string."""

    path: ClassVar[str] = "/ai-article-writer-v3"

    article_title: str
    article_intro: str
    article_sections: list[str]

    @field_validator("article_sections", mode="before")
    @classmethod
    def _split_sections(cls, value: Any) -> Any:
        if isinstance(value, str):
            return split_csv(value)
        return value


class InstantArticleRequest(ContentRequest):
    path: ClassVar[str] = "/instant-article-writer"

    article_title: str
