"""Message channels connecting the Tk thread with the fetch worker.

``CommandChannel`` carries user commands towards the worker and holds at
most one pending command; ``ArticleQueue`` carries display records back to
the UI and is drained without blocking once per frame.

Updates: v0.1 - 2026-10-18 - Introduced command channel and article queue.
"""

from __future__ import annotations

import logging
import queue
import threading
from typing import List, Optional

from .models import Command, DisplayRecord

logger = logging.getLogger(__name__)

_CLOSED = object()


class ChannelClosed(Exception):
    """Raised by the receiving side once the command channel is disconnected."""


class CommandChannel:
    """Single-slot queue where the most recent command wins."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=1)
        self._closed = threading.Event()

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def send(self, command: Command) -> bool:
        """Queue ``command`` without blocking, replacing any pending one.

        Returns False when the channel has already been closed.
        """
        if self._closed.is_set():
            logger.warning("Dropping %s; command channel is closed.", type(command).__name__)
            return False
        while True:
            try:
                self._queue.put_nowait(command)
                return True
            except queue.Full:
                try:
                    stale = self._queue.get_nowait()
                except queue.Empty:
                    continue
                logger.debug(
                    "Replacing pending %s with %s",
                    type(stale).__name__,
                    type(command).__name__,
                )

    def recv(self, timeout: Optional[float] = None) -> Command:
        """Block until a command arrives.

        Raises ``ChannelClosed`` after :meth:`close` once nothing is pending
        and ``queue.Empty`` when ``timeout`` elapses.
        """
        if self._closed.is_set() and self._queue.empty():
            raise ChannelClosed()
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            raise ChannelClosed()
        return item  # type: ignore[return-value]

    def try_recv(self) -> Optional[Command]:
        """Return the pending command, ``None`` when there is none."""
        if self._closed.is_set() and self._queue.empty():
            raise ChannelClosed()
        try:
            item = self._queue.get_nowait()
        except queue.Empty:
            return None
        if item is _CLOSED:
            raise ChannelClosed()
        return item  # type: ignore[return-value]

    def close(self) -> None:
        """Disconnect the channel and wake a receiver blocked in :meth:`recv`."""
        if self._closed.is_set():
            return
        self._closed.set()
        try:
            self._queue.put_nowait(_CLOSED)
        except queue.Full:
            # A pending command is delivered first; the next recv sees the close.
            pass


class ArticleQueue:
    """Unbounded queue of display records produced by the fetch worker."""

    def __init__(self) -> None:
        self._queue: "queue.Queue[DisplayRecord]" = queue.Queue()

    def push(self, record: DisplayRecord) -> None:
        self._queue.put_nowait(record)

    def drain(self, max_items: Optional[int] = None) -> List[DisplayRecord]:
        """Return every record available right now without blocking."""

        drained: List[DisplayRecord] = []
        while max_items is None or len(drained) < max_items:
            try:
                drained.append(self._queue.get_nowait())
            except queue.Empty:
                break
        return drained

    def __len__(self) -> int:
        return self._queue.qsize()


__all__ = ["ArticleQueue", "ChannelClosed", "CommandChannel"]
