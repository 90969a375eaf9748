"""Stateless service for content generation operations."""

from __future__ import annotations

from ...api.models import GenerationResult
from ...api.requests import ContentRequest
from ..core.context import RunContext


def generate_content(run: RunContext, request: ContentRequest) -> GenerationResult:
    """Send a single operation and return its decoded result.

    The client is closed afterwards; one request is made per invocation.
    """
    with run.client as client:
        return client.generate(request, run.defaults)
