"""Fetch worker: runs News API calls off the Tk thread.

Two variants share one contract. ``FetchWorker`` blocks on the command
channel in a daemon thread and uses the pooled requests session;
``AsyncFetchWorker`` runs an asyncio loop in its own thread, polls the
channel cooperatively and fetches through aiohttp. The application picks one
with :func:`create_fetch_worker` and only ever calls ``start``/``stop``.

Updates: v0.1 - 2026-10-18 - Extracted fetch loop from the refresh workflow
into dedicated worker variants.
"""

from __future__ import annotations

import asyncio
import logging
import threading
from typing import Callable, Optional

import aiohttp

from ...channels import ArticleQueue, ChannelClosed, CommandChannel
from ...config import ASYNC_POLL_INTERVAL_SECONDS, FETCH_MODE_ASYNC, FETCH_MODE_THREAD
from ...models import Command, DisplayRecord, NewsApiResponse, Refresh, SetApiKey, ToggleTheme
from ...newsapi import NewsAPI, NewsApiError

logger = logging.getLogger(__name__)

ClientFactory = Callable[[str], NewsAPI]


def _publish(response: NewsApiResponse, articles: ArticleQueue) -> int:
    for article in response.articles:
        articles.push(DisplayRecord.from_article(article))
    return len(response.articles)


def fetch_news(
    api_key: str,
    articles: ArticleQueue,
    client_factory: ClientFactory = NewsAPI,
) -> int:
    """Fetch headlines for ``api_key`` and push one record per article.

    Errors are logged and swallowed; the return value is the number of
    records pushed.
    """
    try:
        response = client_factory(api_key).fetch()
    except NewsApiError as exc:
        logger.error("Failed fetching headlines: %s", exc)
        return 0
    except Exception:
        logger.exception("Unexpected error while fetching headlines")
        return 0
    count = _publish(response, articles)
    logger.info("Fetched %d headline(s)", count)
    return count


async def fetch_news_async(
    api_key: str,
    articles: ArticleQueue,
    session: aiohttp.ClientSession,
    client_factory: ClientFactory = NewsAPI,
) -> int:
    """Cooperative variant of :func:`fetch_news`."""
    try:
        response = await client_factory(api_key).fetch_async(session)
    except NewsApiError as exc:
        logger.error("Failed fetching headlines: %s", exc)
        return 0
    except Exception:
        logger.exception("Unexpected error while fetching headlines")
        return 0
    count = _publish(response, articles)
    logger.info("Fetched %d headline(s)", count)
    return count


def _command_api_key(command: Command) -> Optional[str]:
    """Return the key a command asks to fetch with, ``None`` for no fetch."""
    if isinstance(command, (SetApiKey, Refresh)):
        return command.api_key
    if isinstance(command, ToggleTheme):
        logger.debug("Theme toggle needs no fetch; ignoring.")
        return None
    logger.warning("Ignoring unknown command: %r", command)
    return None


class FetchWorker:
    """Thread-backed worker processing one command at a time."""

    def __init__(
        self,
        commands: CommandChannel,
        articles: ArticleQueue,
        *,
        client_factory: ClientFactory = NewsAPI,
    ) -> None:
        self.commands = commands
        self.articles = articles
        self.client_factory = client_factory
        self._thread: Optional[threading.Thread] = None

    def start(self, initial_api_key: str = "") -> None:
        """Spawn the worker thread; fetch immediately when a key is known."""
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=self.run,
            args=(initial_api_key,),
            name="headlines-fetch",
            daemon=True,
        )
        self._thread.start()

    def run(self, initial_api_key: str = "") -> None:
        if initial_api_key:
            fetch_news(initial_api_key, self.articles, self.client_factory)
        while True:
            try:
                command = self.commands.recv()
            except ChannelClosed:
                logger.info("Command channel closed; fetch worker exiting.")
                return
            self.handle_command(command)

    def handle_command(self, command: Command) -> int:
        api_key = _command_api_key(command)
        if api_key is None:
            return 0
        logger.info("Processing %s", type(command).__name__)
        return fetch_news(api_key, self.articles, self.client_factory)

    def stop(self, timeout: float = 1.0) -> None:
        """Disconnect the command channel; an in-flight fetch is not cancelled."""
        self.commands.close()
        if self._thread is not None:
            self._thread.join(timeout)


class AsyncFetchWorker:
    """asyncio-backed worker that polls the command channel cooperatively."""

    def __init__(
        self,
        commands: CommandChannel,
        articles: ArticleQueue,
        *,
        client_factory: ClientFactory = NewsAPI,
        session_factory: Callable[[], aiohttp.ClientSession] = aiohttp.ClientSession,
        poll_interval: float = ASYNC_POLL_INTERVAL_SECONDS,
    ) -> None:
        self.commands = commands
        self.articles = articles
        self.client_factory = client_factory
        self.session_factory = session_factory
        self.poll_interval = poll_interval
        self._thread: Optional[threading.Thread] = None

    def start(self, initial_api_key: str = "") -> None:
        if self._thread is not None:
            return
        self._thread = threading.Thread(
            target=asyncio.run,
            args=(self.run(initial_api_key),),
            name="headlines-fetch-async",
            daemon=True,
        )
        self._thread.start()

    async def run(self, initial_api_key: str = "") -> None:
        async with self.session_factory() as session:
            if initial_api_key:
                await fetch_news_async(
                    initial_api_key, self.articles, session, self.client_factory
                )
            while True:
                try:
                    command = self.commands.try_recv()
                except ChannelClosed:
                    logger.info("Command channel closed; async fetch worker exiting.")
                    return
                if command is None:
                    await asyncio.sleep(self.poll_interval)
                    continue
                await self.handle_command(session, command)

    async def handle_command(
        self, session: aiohttp.ClientSession, command: Command
    ) -> int:
        api_key = _command_api_key(command)
        if api_key is None:
            return 0
        logger.info("Processing %s", type(command).__name__)
        return await fetch_news_async(
            api_key, self.articles, session, self.client_factory
        )

    def stop(self, timeout: float = 1.0) -> None:
        self.commands.close()
        if self._thread is not None:
            self._thread.join(timeout)


def create_fetch_worker(
    mode: str,
    commands: CommandChannel,
    articles: ArticleQueue,
    *,
    client_factory: ClientFactory = NewsAPI,
):
    """Return the worker variant named by ``mode`` (thread or async)."""
    if mode == FETCH_MODE_ASYNC:
        return AsyncFetchWorker(commands, articles, client_factory=client_factory)
    if mode != FETCH_MODE_THREAD:
        logger.warning("Unknown fetch mode %r; using %s", mode, FETCH_MODE_THREAD)
    return FetchWorker(commands, articles, client_factory=client_factory)


__all__ = [
    "AsyncFetchWorker",
    "FetchWorker",
    "create_fetch_worker",
    "fetch_news",
    "fetch_news_async",
]
