"""UI-side state for the Headlines window.

The Tk application owns exactly one ``HeadlinesState`` and mutates it only
from the main thread; the worker sees nothing but the commands sent through
the channel.

Updates: v0.1 - 2026-10-18 - Introduced the two-mode state machine.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from ..channels import ArticleQueue, CommandChannel
from ..models import DisplayRecord, HeadlinesConfig, Refresh, SetApiKey

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    AWAITING_API_KEY = "awaiting_api_key"
    LOADED = "loaded"


@dataclass
class HeadlinesState:
    config: HeadlinesConfig
    articles: List[DisplayRecord] = field(default_factory=list)
    api_key_initialized: bool = False
    # Bumped whenever the list is cleared so renderers can tell a refill from an append.
    generation: int = 0

    @classmethod
    def from_config(cls, config: HeadlinesConfig) -> "HeadlinesState":
        return cls(config=config, api_key_initialized=bool(config.api_key))

    @property
    def mode(self) -> ViewMode:
        if self.api_key_initialized:
            return ViewMode.LOADED
        return ViewMode.AWAITING_API_KEY

    def commit_api_key(self, value: str, commands: CommandChannel) -> bool:
        """Store a submitted key and ask the worker to fetch with it.

        Blank input keeps the state in ``AWAITING_API_KEY``.
        """
        api_key = value.strip()
        if not api_key:
            logger.info("Ignoring empty API key submission.")
            return False
        self.config.api_key = api_key
        self.api_key_initialized = True
        commands.send(SetApiKey(api_key))
        return True

    def refresh(self, commands: CommandChannel) -> None:
        """Clear the list and request a fresh fetch with the current key."""
        self.articles.clear()
        self.generation += 1
        commands.send(Refresh(self.config.api_key))

    def toggle_theme(self) -> bool:
        self.config.dark_mode = not self.config.dark_mode
        return self.config.dark_mode

    def preload_articles(self, articles: ArticleQueue) -> List[DisplayRecord]:
        """Append every record the worker has delivered since the last frame."""
        drained = articles.drain()
        self.articles.extend(drained)
        return drained


__all__ = ["HeadlinesState", "ViewMode"]
