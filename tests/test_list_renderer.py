"""Tests for incremental headline rendering with a recording text widget."""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

import pytest

pytest.importorskip("tkinter", reason="Tkinter not available; skipping renderer tests.")

from headlines.app.renderers.list_renderer import HEADER_TEXT, LOADING_TEXT, ListRenderer
from headlines.config import theme_palette
from headlines.models import DisplayRecord


class RecordingText:
    """Records what the renderer writes instead of drawing it."""

    def __init__(self) -> None:
        self.segments: List[Tuple[str, Tuple[str, ...]]] = []
        self.tag_colors: Dict[str, Dict[str, Any]] = {}
        self.bindings: Dict[Tuple[str, str], Any] = {}
        self.options: Dict[str, Any] = {}

    def configure(self, **options: Any) -> None:
        self.options.update(options)

    def insert(self, _index: str, text: str, tags: Tuple[str, ...]) -> None:
        self.segments.append((text, tags))

    def delete(self, _start: str, _end: str) -> None:
        self.segments.clear()

    def tag_names(self) -> Tuple[str, ...]:
        return tuple({tag for tag, _sequence in self.bindings})

    def tag_delete(self, tag: str) -> None:
        for key in [key for key in self.bindings if key[0] == tag]:
            del self.bindings[key]

    def tag_bind(self, tag: str, sequence: str, callback: Any) -> None:
        self.bindings[(tag, sequence)] = callback

    def tag_configure(self, tag: str, **options: Any) -> None:
        self.tag_colors.setdefault(tag, {}).update(options)

    def yview_moveto(self, _fraction: float) -> None:
        pass

    def titles(self) -> List[str]:
        return [text.strip() for text, tags in self.segments if "title" in tags]


class FakeApp:
    def __init__(self) -> None:
        self.listbox = RecordingText()


def _records(prefix: str, count: int) -> List[DisplayRecord]:
    return [DisplayRecord(f"{prefix}{i}", f"desc {i}", f"https://{prefix}/{i}") for i in range(count)]


def test_empty_list_shows_loading_once() -> None:
    """An empty list renders a single loading message."""
    app = FakeApp()
    renderer = ListRenderer(app)
    renderer.render([], 0)
    renderer.render([], 0)
    assert app.listbox.segments == [(LOADING_TEXT + "\n", ("message",))]


def test_cards_render_title_description_and_link() -> None:
    """Each card carries the arrow-prefixed title, description and a link tag."""
    app = FakeApp()
    renderer = ListRenderer(app)
    renderer.render(_records("a", 1), 0)
    texts = [text for text, _tags in app.listbox.segments]
    assert texts[0] == HEADER_TEXT + "\n"
    assert "▶ a0\n" in texts
    assert "desc 0\n" in texts
    assert ("read more ⤴\n", ("link", "link_0")) in app.listbox.segments
    assert ("link_0", "<Button-1>") in app.listbox.bindings


def test_new_records_are_appended_incrementally() -> None:
    """Later frames only append the records not yet shown."""
    app = FakeApp()
    renderer = ListRenderer(app)
    articles = _records("a", 2)
    renderer.render(articles, 0)
    articles.extend(_records("b", 1))
    renderer.render(articles, 0)
    assert app.listbox.titles() == ["▶ a0", "▶ a1", "▶ b0"]
    assert renderer.rendered_count == 3


def test_refresh_generation_replaces_old_cards() -> None:
    """A refill after refresh never merges with the previous cards."""
    app = FakeApp()
    renderer = ListRenderer(app)
    renderer.render(_records("old", 5), 0)
    renderer.render(_records("new", 5), 1)
    assert app.listbox.titles() == [f"▶ new{i}" for i in range(5)]


def test_palette_sets_theme_colours() -> None:
    """Dark mode paints white titles and cyan links; light mode black and red."""
    app = FakeApp()
    renderer = ListRenderer(app)
    renderer.apply_palette(theme_palette(True))
    assert app.listbox.tag_colors["title"]["foreground"] == "#FFFFFF"
    assert app.listbox.tag_colors["link"]["foreground"] == "#00FFFF"
    renderer.apply_palette(theme_palette(False))
    assert app.listbox.tag_colors["title"]["foreground"] == "#000000"
    assert app.listbox.tag_colors["link"]["foreground"] == "#FF0000"
