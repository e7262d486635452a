"""Client for the newsapi.org REST API.

Both fetch paths (blocking requests and cooperative aiohttp) build the same
URL and headers and funnel the decoded body through :func:`parse_response`,
so callers see one error taxonomy regardless of transport.

Updates: v0.1 - 2026-10-18 - Introduced top headlines client and error hierarchy.
"""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Any, Dict, List, Optional
from urllib.parse import quote, urlencode

import aiohttp
import requests

from .config import DEFAULT_COUNTRY, NEWSAPI_BASE_URL, REQUEST_TIMEOUT_SECONDS
from .http_client import get_http_session
from .models import Article, NewsApiResponse

logger = logging.getLogger(__name__)


class NewsApiError(Exception):
    """Base class for failures while fetching headlines."""


class NetworkError(NewsApiError):
    """The HTTP transport failed before a body could be read."""


class ParseError(NewsApiError):
    """The response body was not JSON or did not match the expected shape."""


class ApiError(NewsApiError):
    """The API answered with a well-formed error response."""

    def __init__(self, message: str, code: Optional[str] = None) -> None:
        super().__init__(message)
        self.code = code

    @classmethod
    def from_code(cls, code: Optional[str]) -> "ApiError":
        message = _ERROR_MESSAGES.get(code or "", UNKNOWN_ERROR_MESSAGE)
        return cls(message, code)


UNKNOWN_ERROR_MESSAGE = "unknown error"

_ERROR_MESSAGES: Dict[str, str] = {
    "apiKeyDisabled": "API key disabled",
    "apiKeyInvalid": "API key invalid",
    "apiKeyMissing": "API key missing",
    "rateLimited": "rate limited",
}


class Endpoint(str, Enum):
    TOP_HEADLINES = "top-headlines"


class Country(str, Enum):
    US = "us"
    GB = "gb"
    CA = "ca"
    AU = "au"
    IN = "in"
    DE = "de"
    FR = "fr"

    @classmethod
    def coerce(cls, value: str) -> "Country":
        try:
            return cls(value.lower())
        except ValueError:
            logger.warning("Unsupported country code %r; using %s", value, cls.US.value)
            return cls.US


def parse_response(payload: Any) -> NewsApiResponse:
    """Validate a decoded JSON body and return the typed response.

    Raises ``ParseError`` for shape mismatches and ``ApiError`` when the
    ``status`` field is anything other than ``"ok"``.
    """

    if not isinstance(payload, dict):
        raise ParseError("Response body is not a JSON object")
    status = payload.get("status")
    if not isinstance(status, str):
        raise ParseError("Response is missing a 'status' field")
    code = payload.get("code") if isinstance(payload.get("code"), str) else None
    if status != "ok":
        raise ApiError.from_code(code)

    articles_data = payload.get("articles")
    if not isinstance(articles_data, list):
        raise ParseError("Response is missing an 'articles' list")
    articles: List[Article] = []
    for index, entry in enumerate(articles_data):
        article = Article.from_dict(entry)
        if article is None:
            raise ParseError(f"Article #{index} has an unexpected shape")
        articles.append(article)
    return NewsApiResponse(status=status, articles=articles, code=code)


class NewsAPI:
    """Build and issue a top-headlines request for one API key."""

    def __init__(
        self,
        api_key: str,
        *,
        endpoint: Endpoint = Endpoint.TOP_HEADLINES,
        country: Optional[Country] = None,
        base_url: str = NEWSAPI_BASE_URL,
        timeout: Optional[float] = REQUEST_TIMEOUT_SECONDS,
    ) -> None:
        self.api_key = api_key
        self._endpoint = endpoint
        self._country = country or Country.coerce(DEFAULT_COUNTRY)
        self.base_url = base_url
        self.timeout = timeout

    def with_endpoint(self, endpoint: Endpoint) -> "NewsAPI":
        self._endpoint = endpoint
        return self

    def with_country(self, country: Country) -> "NewsAPI":
        self._country = country
        return self

    def prepare_url(self) -> str:
        path = quote(self._endpoint.value)
        query = urlencode({"country": self._country.value})
        return f"{self.base_url.rstrip('/')}/{path}?{query}"

    def headers(self) -> Dict[str, str]:
        return {"Authorization": self.api_key}

    def fetch(self, session: Optional[requests.Session] = None) -> NewsApiResponse:
        """Issue a blocking GET and return the parsed response."""

        url = self.prepare_url()
        http = session or get_http_session()
        logger.debug("GET %s", url)
        try:
            response = http.get(url, headers=self.headers(), timeout=self.timeout)
        except (requests.RequestException, UnicodeError) as exc:
            # http.client encodes header values as latin-1.
            raise NetworkError(f"Failed fetching articles: {exc}") from exc
        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError(f"Failed parsing response into JSON: {exc}") from exc
        return parse_response(payload)

    async def fetch_async(self, session: aiohttp.ClientSession) -> NewsApiResponse:
        """Cooperative twin of :meth:`fetch` for an asyncio event loop."""

        url = self.prepare_url()
        timeout = aiohttp.ClientTimeout(total=self.timeout)
        logger.debug("GET %s (async)", url)
        try:
            async with session.get(url, headers=self.headers(), timeout=timeout) as response:
                try:
                    payload = await response.json(content_type=None)
                except ValueError as exc:
                    raise ParseError(
                        f"Failed parsing response into JSON: {exc}"
                    ) from exc
        except (aiohttp.ClientError, asyncio.TimeoutError, UnicodeError) as exc:
            raise NetworkError(f"Failed fetching articles: {exc}") from exc
        return parse_response(payload)


__all__ = [
    "ApiError",
    "Country",
    "Endpoint",
    "NetworkError",
    "NewsAPI",
    "NewsApiError",
    "ParseError",
    "UNKNOWN_ERROR_MESSAGE",
    "parse_response",
]
