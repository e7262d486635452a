"""Domain models backing the Headlines application.

The dataclasses here are deliberately free of Tk imports so the fetch worker,
the channels and the UI state machine can share them from any thread.

Updates: v0.1 - 2026-10-18 - Added API, display record, command and config models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Union

from .config import DEFAULT_SETTINGS, DESCRIPTION_PLACEHOLDER


@dataclass(frozen=True)
class AppMetadata:
    name: str
    version: str
    author: str
    description: str


@dataclass(frozen=True)
class Article:
    title: str
    url: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: Any) -> Optional["Article"]:
        if not isinstance(payload, Mapping):
            return None
        title = payload.get("title")
        url = payload.get("url")
        if not isinstance(title, str) or not isinstance(url, str):
            return None
        description = payload.get("description")
        if description is not None and not isinstance(description, str):
            return None
        return cls(title=title, url=url, description=description)


@dataclass(frozen=True)
class NewsApiResponse:
    status: str
    articles: List[Article] = field(default_factory=list)
    code: Optional[str] = None


@dataclass(frozen=True)
class DisplayRecord:
    """One article prepared for rendering in the headline list."""

    title: str
    description: str
    url: str

    @classmethod
    def from_article(cls, article: Article) -> "DisplayRecord":
        return cls(
            title=article.title,
            description=(
                DESCRIPTION_PLACEHOLDER
                if article.description is None
                else article.description
            ),
            url=article.url,
        )


@dataclass(frozen=True)
class SetApiKey:
    api_key: str


@dataclass(frozen=True)
class Refresh:
    api_key: str


@dataclass(frozen=True)
class ToggleTheme:
    pass


Command = Union[SetApiKey, Refresh, ToggleTheme]


@dataclass
class HeadlinesConfig:
    """User preferences persisted between sessions."""

    dark_mode: bool = bool(DEFAULT_SETTINGS["dark_mode"])
    api_key: str = str(DEFAULT_SETTINGS["api_key"])

    def as_dict(self) -> Dict[str, Any]:
        return {"dark_mode": self.dark_mode, "api_key": self.api_key}

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "HeadlinesConfig":
        dark_mode = payload.get("dark_mode")
        if not isinstance(dark_mode, bool):
            dark_mode = bool(DEFAULT_SETTINGS["dark_mode"])
        api_key = payload.get("api_key", DEFAULT_SETTINGS["api_key"])
        return cls(
            dark_mode=dark_mode,
            api_key=api_key.strip() if isinstance(api_key, str) else "",
        )


__all__ = [
    "AppMetadata",
    "Article",
    "Command",
    "DisplayRecord",
    "HeadlinesConfig",
    "NewsApiResponse",
    "Refresh",
    "SetApiKey",
    "ToggleTheme",
]
