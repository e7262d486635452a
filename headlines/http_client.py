"""Shared HTTP session management for Headlines network requests.

Updates: v0.1 - 2026-10-18 - Adapted pooled session helpers for the News API client.
"""

from __future__ import annotations

import atexit
import threading
from typing import Sequence, Set

import requests
from requests import Session
from requests.adapters import HTTPAdapter
from urllib3.util import Retry

USER_AGENT = "Headlines/0.1 (+https://newsapi.org)"

_HTTP_THREAD_LOCAL = threading.local()
_HTTP_SESSION_LOCK = threading.Lock()
_HTTP_SESSIONS: Set[Session] = set()


def _build_retry() -> Retry:
    # One attempt per fetch; a failed refresh is retried by the user.
    return Retry(total=0, raise_on_status=False)


def get_http_session() -> Session:
    """Return a thread-local shared requests session."""

    session = getattr(_HTTP_THREAD_LOCAL, "session", None)
    if session is not None:
        return session
    session = requests.Session()
    session.headers.update({"User-Agent": USER_AGENT})
    adapter = HTTPAdapter(pool_connections=2, pool_maxsize=4, max_retries=_build_retry())
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    with _HTTP_SESSION_LOCK:
        _HTTP_SESSIONS.add(session)
    _HTTP_THREAD_LOCAL.session = session
    return session


def close_all_sessions() -> None:
    """Close pooled HTTP sessions at shutdown."""

    with _HTTP_SESSION_LOCK:
        sessions: Sequence[Session] = tuple(_HTTP_SESSIONS)
        _HTTP_SESSIONS.clear()
    for session in sessions:
        session.close()


atexit.register(close_all_sessions)


__all__ = ["USER_AGENT", "get_http_session", "close_all_sessions"]
