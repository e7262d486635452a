"""Pytest configuration and shared fakes for the Headlines test suite.

- Prepend project root to sys.path so 'headlines' is importable with testpaths.
- Provide fake HTTP responses/sessions and a fake News API client so no test
  touches the network.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional


def _ensure_project_root_on_syspath() -> None:
    """Prepend repository root to sys.path for package imports."""
    tests_dir = Path(__file__).resolve().parent
    project_root = tests_dir.parent
    root_str = str(project_root)
    if root_str not in sys.path:
        sys.path.insert(0, root_str)


_ensure_project_root_on_syspath()

import pytest  # noqa: E402

from headlines.models import NewsApiResponse  # noqa: E402
from headlines.newsapi import parse_response  # noqa: E402


class FakeResponse:
    """Minimal stand-in for ``requests.Response``."""

    def __init__(self, payload: Any = None, *, json_error: Optional[Exception] = None) -> None:
        self._payload = payload
        self._json_error = json_error

    def json(self) -> Any:
        if self._json_error is not None:
            raise self._json_error
        return self._payload


class FakeSession:
    """Record GET calls and return a canned response or raise an error."""

    def __init__(self, response: Any = None, *, error: Optional[Exception] = None) -> None:
        self.response = response
        self.error = error
        self.calls: List[Dict[str, Any]] = []

    def get(self, url: str, **kwargs: Any) -> Any:
        self.calls.append({"url": url, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


class HeaderEncodingSession(FakeSession):
    """FakeSession that encodes header values as latin-1, like ``http.client``."""

    def get(self, url: str, **kwargs: Any) -> Any:
        for value in (kwargs.get("headers") or {}).values():
            value.encode("latin-1")
        return super().get(url, **kwargs)


class FakeClient:
    """News API client double returning a payload parsed like the real one."""

    def __init__(self, api_key: str, payload: Any = None, error: Optional[Exception] = None) -> None:
        self.api_key = api_key
        self.payload = payload
        self.error = error

    def _result(self) -> NewsApiResponse:
        if self.error is not None:
            raise self.error
        return parse_response(self.payload)

    def fetch(self, session: Any = None) -> NewsApiResponse:
        return self._result()

    async def fetch_async(self, session: Any) -> NewsApiResponse:
        return self._result()


class FakeClientFactory:
    """Callable replacing ``NewsAPI``; remembers every key it was asked for."""

    def __init__(self, payload: Any = None, error: Optional[Exception] = None) -> None:
        self.payload = payload
        self.error = error
        self.api_keys: List[str] = []

    def __call__(self, api_key: str) -> FakeClient:
        self.api_keys.append(api_key)
        return FakeClient(api_key, self.payload, self.error)


def make_payload(count: int, *, with_description: bool = True) -> Dict[str, Any]:
    """Build an ``ok`` response body with ``count`` articles."""
    articles = []
    for index in range(count):
        article: Dict[str, Any] = {
            "title": f"Headline {index}",
            "url": f"https://example.com/{index}",
        }
        if with_description:
            article["description"] = f"Description {index}"
        articles.append(article)
    return {"status": "ok", "totalResults": count, "articles": articles}


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    """Path to a settings file inside a temporary config directory."""
    return tmp_path / "config" / "headlines_settings.json"
