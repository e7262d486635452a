"""Controller package re-exports.

Updates: v0.1 - 2026-10-18 - Grouped fetch worker and UI controllers.
"""
from __future__ import annotations

from .fetch_worker import (
    AsyncFetchWorker,
    FetchWorker,
    create_fetch_worker,
    fetch_news,
    fetch_news_async,
)
from .refresh_controller import RefreshController
from .settings_controller import SettingsController

__all__ = [
    "AsyncFetchWorker",
    "FetchWorker",
    "RefreshController",
    "SettingsController",
    "create_fetch_worker",
    "fetch_news",
    "fetch_news_async",
]
