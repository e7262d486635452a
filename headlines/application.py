"""Tkinter application controller for Headlines.

``HeadlinesApp`` owns the UI state, both channels and the fetch worker. A
frame callback rescheduled with ``after()`` drains the article queue and
renders; it never waits on the network.

Updates: v0.1 - 2026-10-18 - Adapted the Tk orchestrator to the command
channel / article queue pipeline.
"""

from __future__ import annotations

import logging
import tkinter as tk
from pathlib import Path
from typing import Callable, Dict, List, Optional

from .app.controller import RefreshController, SettingsController, create_fetch_worker
from .app.renderers import ListRenderer
from .app.state import HeadlinesState, ViewMode
from .app.views import (
    build_config_panel,
    build_footer,
    build_list_view,
    build_top_panel,
    theme_button_label,
)
from .channels import ArticleQueue, CommandChannel
from .config import FETCH_MODE, FRAME_INTERVAL_MS, WINDOW_GEOMETRY, theme_palette
from .main import APP_METADATA
from .newsapi import NewsAPI
from .settings_store import load_settings

logger = logging.getLogger(__name__)


class HeadlinesApp(tk.Tk):
    """Main window hosting the API key prompt and the headline list."""

    def __init__(
        self,
        *,
        settings_path: Optional[Path] = None,
        fetch_mode: str = FETCH_MODE,
        client_factory: Callable[[str], NewsAPI] = NewsAPI,
    ) -> None:
        super().__init__()
        self.title(APP_METADATA.name)
        self.geometry(WINDOW_GEOMETRY)
        self.protocol("WM_DELETE_WINDOW", self.on_close)

        self.model = HeadlinesState.from_config(load_settings(settings_path))
        self.command_channel = CommandChannel()
        self.article_queue = ArticleQueue()
        self.worker = create_fetch_worker(
            fetch_mode,
            self.command_channel,
            self.article_queue,
            client_factory=client_factory,
        )

        self.refresh_controller = RefreshController(self)
        self.settings_controller = SettingsController(self, settings_path)

        self.panel_frames: List[tk.Frame] = []
        self.link_widgets: List[tk.Widget] = []
        self._frame_job: Optional[str] = None
        self._visible_mode: Optional[ViewMode] = None
        self._painted_dark_mode: Optional[bool] = None

        build_top_panel(self)
        build_config_panel(self)
        build_footer(self)
        build_list_view(self)
        self.list_renderer = ListRenderer(self)

        initial_api_key = self.model.config.api_key if self.model.api_key_initialized else ""
        self.worker.start(initial_api_key)
        self.settings_controller.schedule_autosave()
        self._frame_job = self.after(0, self._on_frame)
        logger.debug("Headlines window initialised (fetch mode: %s)", fetch_mode)

    def _on_frame(self) -> None:
        self._frame_job = None
        self._apply_theme()
        mode = self.model.mode
        if mode is not self._visible_mode:
            self._show_mode(mode)
        if mode is ViewMode.LOADED:
            drained = self.model.preload_articles(self.article_queue)
            if drained:
                logger.debug("Received %d headline(s) from worker", len(drained))
            self.list_renderer.render(self.model.articles, self.model.generation)
        self._frame_job = self.after(FRAME_INTERVAL_MS, self._on_frame)

    def _show_mode(self, mode: ViewMode) -> None:
        for widget in (self.config_panel, self.top_panel, self.footer, self.list_frame):
            widget.pack_forget()
        if mode is ViewMode.AWAITING_API_KEY:
            self.config_panel.pack(fill="both", expand=True)
            self.api_key_entry.focus_set()
        else:
            self.top_panel.pack(side="top", fill="x")
            self.footer.pack(side="bottom", fill="x")
            self.list_frame.pack(fill="both", expand=True)
        self._visible_mode = mode

    def _apply_theme(self) -> None:
        dark_mode = self.model.config.dark_mode
        if dark_mode == self._painted_dark_mode:
            return
        palette = theme_palette(dark_mode)
        self.configure(bg=palette["background"])
        self._paint_children(self, palette["background"], palette)
        self.theme_btn.configure(text=theme_button_label(dark_mode))
        self.list_renderer.apply_palette(palette)
        self._painted_dark_mode = dark_mode

    def _paint_children(self, widget: tk.Misc, background: str, palette: Dict[str, str]) -> None:
        for child in widget.winfo_children():
            if isinstance(child, tk.Frame):
                child_bg = palette["panel"] if child in self.panel_frames else background
                child.configure(bg=child_bg)
                self._paint_children(child, child_bg, palette)
            elif isinstance(child, tk.Entry):
                child.configure(
                    bg=palette["panel"],
                    fg=palette["title"],
                    insertbackground=palette["title"],
                )
            elif isinstance(child, tk.Button):
                child.configure(
                    bg=palette["button"],
                    fg=palette["title"],
                    activebackground=palette["panel"],
                    activeforeground=palette["title"],
                )
            elif isinstance(child, tk.Label):
                foreground = palette["link"] if child in self.link_widgets else palette["title"]
                child.configure(bg=background, fg=foreground)

    def on_close(self) -> None:
        if self._frame_job is not None:
            self.after_cancel(self._frame_job)
            self._frame_job = None
        self.settings_controller.cancel_autosave()
        self.settings_controller.save_settings()
        self.worker.stop(timeout=0.5)
        self.destroy()


__all__ = ["HeadlinesApp"]
