from __future__ import annotations

import logging
from typing import Dict, Optional
from urllib.parse import urlencode, urlsplit

import httpx
import requests
from pydantic import ValidationError

from quick_news.config.settings import DEFAULT_BASE_URL
from quick_news.kit.errors import (
    BadRequest,
    ParseError,
    ResponseReadError,
    TransportError,
    UrlBuildError,
)
from quick_news.newsapi.models import Country, Endpoint, NewsApiResponse

logger = logging.getLogger(__name__)

USER_AGENT = "clinews"
UNKNOWN_ERROR = "Unknown error"

# NewsAPI error code -> message shown to the user
ERROR_MESSAGES: Dict[str, str] = {
    "apiKeyDisabled": "Your API key has been disabled",
}


def map_response_err(code: Optional[str]) -> BadRequest:
    """Translate a NewsAPI ``code`` into a :class:`BadRequest`.

    Unknown or missing codes map to a generic message.
    """
    return BadRequest(ERROR_MESSAGES.get(code or "", UNKNOWN_ERROR))


class NewsAPI:
    """Client for a single NewsAPI query.

    Configure with the fluent ``endpoint()`` / ``country()`` setters, then call
    :meth:`fetch` (blocking) or :meth:`fetch_async` (coroutine). Both share URL
    building and response interpretation; only the byte transfer differs.

    Instances are not meant to be shared between concurrent requests.
    """

    def __init__(self, api_key: str, base_url: str = DEFAULT_BASE_URL):
        self.api_key = api_key
        self.base_url = base_url
        self._endpoint = Endpoint.TOP_HEADLINES
        self._country = Country.IN

    def endpoint(self, endpoint: Endpoint) -> "NewsAPI":
        self._endpoint = Endpoint(endpoint)
        return self

    def country(self, country: Country) -> "NewsAPI":
        self._country = Country(country)
        return self

    def prepare_url(self) -> str:
        """Return ``<base>/<endpoint>?country=<code>``."""
        try:
            parts = urlsplit(self.base_url)
        except ValueError as exc:
            raise UrlBuildError(f"Url Parsing Failed: {self.base_url!r}") from exc
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise UrlBuildError(f"Url Parsing Failed: {self.base_url!r}")

        base = self.base_url.rstrip("/")
        query = urlencode({"country": self._country.value})
        return f"{base}/{self._endpoint.value}?{query}"

    def _headers(self) -> Dict[str, str]:
        # header values go out as ASCII
        if not self.api_key.isascii():
            raise TransportError("Failed fetching articles: API key must be ASCII")
        return {"Authorization": self.api_key, "User-Agent": USER_AGENT}

    def fetch(self) -> NewsApiResponse:
        url = self.prepare_url()
        headers = self._headers()
        logger.info("GET %s", url)
        try:
            resp = requests.get(url, headers=headers)
        except requests.RequestException as exc:
            raise TransportError(f"Failed fetching articles: {exc}") from exc
        return self._interpret(resp.status_code, resp.content)

    async def fetch_async(self) -> NewsApiResponse:
        url = self.prepare_url()
        headers = self._headers()
        logger.info("GET %s (async)", url)
        async with httpx.AsyncClient() as client:
            try:
                resp = await client.get(url, headers=headers)
            except httpx.HTTPError as exc:
                raise TransportError(f"Failed fetching articles: {exc}") from exc
        return self._interpret(resp.status_code, resp.content)

    def _interpret(self, status_code: int, body: bytes) -> NewsApiResponse:
        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ResponseReadError() from exc

        try:
            response = NewsApiResponse.model_validate_json(text)
        except ValidationError as exc:
            if status_code >= 400:
                raise TransportError(f"Failed fetching articles: HTTP {status_code}") from exc
            raise ParseError(f"Article Parsing Failed: {exc.error_count()} error(s)") from exc

        if not response.ok:
            logger.warning(
                "NewsAPI status=%s code=%s message=%s",
                response.status, response.error_code, response.message,
            )
            raise map_response_err(response.error_code)

        logger.info("Fetched %d article(s) (total %s)", len(response.articles), response.total_results)
        return response
