"""Tests for the shared HTTP session helpers."""

from __future__ import annotations

import threading

from headlines.http_client import USER_AGENT, close_all_sessions, get_http_session


def test_session_is_reused_within_a_thread() -> None:
    """The same thread always gets the same pooled session."""
    assert get_http_session() is get_http_session()


def test_session_is_per_thread() -> None:
    """Worker threads get their own session."""
    sessions = []
    thread = threading.Thread(target=lambda: sessions.append(get_http_session()))
    thread.start()
    thread.join()
    assert sessions and sessions[0] is not get_http_session()


def test_session_makes_a_single_attempt() -> None:
    """Mounted adapters never retry a failed request."""
    session = get_http_session()
    adapter = session.get_adapter("https://newsapi.org/v2/top-headlines")
    assert adapter.max_retries.total == 0
    assert session.headers["User-Agent"] == USER_AGENT


def test_close_all_sessions_is_safe_to_repeat() -> None:
    """Closing twice does not raise."""
    get_http_session()
    close_all_sessions()
    close_all_sessions()
