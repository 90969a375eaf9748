"""Writesonic API client.

One authenticated POST per call, no retries. Responses are classified by
status code only:
- 200: raw body returned to the caller for decoding
- 422: structured validation error when the body has a usable ``detail``
- anything else: generic API error carrying status and body
"""

from __future__ import annotations

import json
import logging
import time
from typing import Any, Mapping

import httpx
from pydantic import ValidationError

from ..config.defaults import RunDefaults
from ..config.settings import ClientSettings
from ..constants import API_KEY_HEADER, BASE_URL, JSON_CONTENT_TYPE, ResultKind
from ..errors import ApiError, ApiValidationError, ConfigError, TransportError
from .models import (
    GenerationResult,
    LandingPageResults,
    TextResults,
    decode_landing_pages,
    decode_text_results,
    decode_validation_error,
)
from .requests import ContentRequest

_logger = logging.getLogger("writesonic_api")


class WritesonicClient:
    """Authenticated client for the Writesonic content endpoints.

    Usage:
        with WritesonicClient(api_key) as client:
            result = client.generate(BlogIdeasRequest(topic="AI"), defaults)
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float | None = None,
        http_client: httpx.Client | None = None,
    ):
        """Initialize the client.

        Args:
            api_key: Writesonic API key, sent as ``X-API-Key``.
            base_url: Endpoint prefix operation paths are appended to.
            timeout: Request timeout in seconds. None waits indefinitely.
            http_client: Pre-built httpx client (tests inject a MockTransport).
        """
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")
        self._owns_client = http_client is None
        self._http = http_client or httpx.Client(timeout=httpx.Timeout(timeout))

    @classmethod
    def from_settings(cls, api_key: str, settings: ClientSettings | None = None) -> "WritesonicClient":
        """Build a client from environment-driven settings.

        Raises:
            ConfigError: If a WRITESONIC_* setting has an invalid value.
        """
        if settings is None:
            try:
                settings = ClientSettings()
            except ValidationError as e:
                first = e.errors()[0]
                name = f"WRITESONIC_{str(first['loc'][0]).upper()}"
                raise ConfigError(f"invalid setting {name}: {first['msg']}") from e
        return cls(api_key, base_url=settings.base_url, timeout=settings.timeout_seconds)

    def __enter__(self) -> "WritesonicClient":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            self._http.close()

    # -------------------------------------------------------------------------
    # Raw transport
    # -------------------------------------------------------------------------

    def post(
        self,
        path: str,
        query_params: Mapping[str, str],
        body: Mapping[str, Any] | None = None,
    ) -> bytes:
        """Send one POST request and return the raw success body.

        Args:
            path: Operation path, e.g. ``/blog-ideas``.
            query_params: Query parameters (engine, language, num_copies).
            body: JSON body, or None to send no payload.

        Returns:
            Raw response bytes of a 200 response.

        Raises:
            TransportError: If the request never got a response.
            ApiValidationError: On 422 with a well-formed ``detail`` list.
            ApiError: On any other non-200 response.
        """
        url = self._base_url + path
        headers = {
            API_KEY_HEADER: self._api_key,
            "Content-Type": JSON_CONTENT_TYPE,
            "Accept": JSON_CONTENT_TYPE,
        }
        content = json.dumps(body).encode("utf-8") if body is not None else None

        _logger.info(f"POST {path} params={dict(query_params)}")
        started = time.monotonic()

        try:
            response = self._http.post(
                url,
                params=dict(query_params),
                headers=headers,
                content=content,
            )
        except httpx.RequestError as e:
            _logger.error(f"POST {path} failed: {e!r}")
            raise TransportError(f"execute request: {e}") from e

        elapsed = time.monotonic() - started
        _logger.info(f"POST {path} -> {response.status_code} ({elapsed:.2f}s)")

        return self._check_response(response)

    def _check_response(self, response: httpx.Response) -> bytes:
        data = response.content

        if response.status_code == 200:
            return data

        text = response.text
        _logger.debug(f"Error body: {text}")

        if response.status_code == 422:
            parsed = decode_validation_error(data)
            if parsed is not None and parsed.detail:
                raise ApiValidationError(
                    [d.model_dump() for d in parsed.detail],
                    body=text,
                )
            raise ApiError(f"validation error (422): {text}", status_code=422, body=text)

        raise ApiError(
            f"API error {response.status_code}: {text}",
            status_code=response.status_code,
            body=text,
        )

    # -------------------------------------------------------------------------
    # Typed operations
    # -------------------------------------------------------------------------

    def post_results(self, request: ContentRequest, defaults: RunDefaults) -> TextResults:
        """Send a text-returning operation and decode its results."""
        data = self.post(request.path, defaults.query_params(), request.to_body())
        return TextResults(items=decode_text_results(data))

    def post_landing_pages(self, request: ContentRequest, defaults: RunDefaults) -> LandingPageResults:
        """Send the landing page operation and decode its results."""
        data = self.post(request.path, defaults.query_params(), request.to_body())
        return LandingPageResults(pages=decode_landing_pages(data))

    def generate(self, request: ContentRequest, defaults: RunDefaults) -> GenerationResult:
        """Send any operation, decoding according to its declared result kind."""
        if request.result_kind is ResultKind.LANDING_PAGE:
            return self.post_landing_pages(request, defaults)
        return self.post_results(request, defaults)
