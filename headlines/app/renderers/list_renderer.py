"""ListRenderer centralizes headline card rendering and tag management.

Updates: v0.1 - 2026-10-18 - Adapted row rendering to title/description/link
cards with incremental appends and theme-driven tag colours.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional, Sequence, TYPE_CHECKING

from ...models import DisplayRecord
from ..views.links import open_url

if TYPE_CHECKING:
    # Forward declaration to avoid runtime circular import
    from ...application import HeadlinesApp


logger = logging.getLogger(__name__)

LOADING_TEXT = "Loading ⌛"
HEADER_TEXT = "headlines"
SEPARATOR_TEXT = "─" * 32


class ListRenderer:
    """Keep the list widget in step with the application's article list.

    New records are appended as they arrive; the widget is only rebuilt
    when the list was cleared by a refresh.
    """

    def __init__(self, app: "HeadlinesApp") -> None:
        """Bind the renderer to the Tk app orchestrator instance."""
        self.app = app
        self._rendered_count = 0
        self._rendered_generation: Optional[int] = None
        self._loading_shown = False

    @property
    def rendered_count(self) -> int:
        return self._rendered_count

    def render(self, articles: Sequence[DisplayRecord], generation: int) -> None:
        """Bring the widget up to date with ``articles``."""
        if not articles:
            if not self._loading_shown:
                self._clear()
                self.append_message_line(LOADING_TEXT)
                self._loading_shown = True
            self._rendered_generation = generation
            return

        if self._loading_shown or generation != self._rendered_generation:
            self._clear()
            self.append_header()
            self._rendered_generation = generation

        for index in range(self._rendered_count, len(articles)):
            self.append_card(index, articles[index])
        self._rendered_count = len(articles)

    def apply_palette(self, palette: Dict[str, str]) -> None:
        """Recolour the widget and every tag for the active theme."""
        listbox = self.app.listbox
        listbox.configure(
            bg=palette["background"],
            fg=palette["text"],
            insertbackground=palette["title"],
        )
        listbox.tag_configure("header", foreground=palette["title"])
        listbox.tag_configure("title", foreground=palette["title"])
        listbox.tag_configure("description", foreground=palette["text"])
        listbox.tag_configure("link", foreground=palette["link"])
        listbox.tag_configure("separator", foreground=palette["separator"])
        listbox.tag_configure("message", foreground=palette["title"])

    def append_header(self) -> None:
        self._insert((HEADER_TEXT + "\n", ("header",)), (SEPARATOR_TEXT + "\n", ("separator",)))

    def append_card(self, index: int, record: DisplayRecord) -> None:
        """Append one card: title, description, right-aligned link, separator."""
        link_tag = f"link_{index}"
        listbox = self.app.listbox
        listbox.tag_bind(link_tag, "<Button-1>", lambda _event, url=record.url: open_url(url))
        listbox.tag_bind(link_tag, "<Enter>", lambda _event: listbox.configure(cursor="hand2"))
        listbox.tag_bind(link_tag, "<Leave>", lambda _event: listbox.configure(cursor="arrow"))
        self._insert(
            (f"▶ {record.title}\n", ("title",)),
            (f"{record.description}\n", ("description",)),
            ("read more ⤴\n", ("link", link_tag)),
            (SEPARATOR_TEXT + "\n", ("separator",)),
        )

    def append_message_line(self, text: str) -> None:
        """Append a single centred message line (loading text)."""
        self._insert((text + "\n", ("message",)))

    def _insert(self, *segments: tuple) -> None:
        listbox = self.app.listbox
        listbox.configure(state="normal")
        try:
            for text, tags in segments:
                listbox.insert("end", text, tags)
        finally:
            listbox.configure(state="disabled")

    def _clear(self) -> None:
        listbox = self.app.listbox
        listbox.configure(state="normal")
        try:
            listbox.delete("1.0", "end")
            for tag in listbox.tag_names():
                if tag.startswith("link_"):
                    listbox.tag_delete(tag)
        finally:
            listbox.configure(state="disabled")
        listbox.yview_moveto(0.0)
        self._rendered_count = 0
        self._loading_shown = False
        logger.debug("Cleared headline list widget")


__all__ = ["ListRenderer"]
