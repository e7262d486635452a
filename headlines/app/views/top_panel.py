"""Top panel builder: logo, theme toggle, refresh and close buttons.

Updates: v0.1 - 2026-10-18 - Adapted the action bar builder to the headline menu.
"""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

from ...config import BODY_FONT, HEADING_FONT, PADDING_LARGE

if TYPE_CHECKING:  # Avoid circular import at runtime
    from ...application import HeadlinesApp


def theme_button_label(dark_mode: bool) -> str:
    """Return the glyph offering the opposite theme."""
    return "🔆" if dark_mode else "🌙"


def build_top_panel(app: "HeadlinesApp") -> tk.Frame:
    """Create and wire the top menu bar.

    The frame is not packed here; the application shows it once an API key
    is configured. Widgets are attached back on the app so the theme pass
    can update the toggle glyph.
    """
    top_panel = tk.Frame(app, pady=PADDING_LARGE)
    app.top_panel = top_panel
    app.panel_frames.append(top_panel)

    app.logo_label = tk.Label(top_panel, text="📚", font=HEADING_FONT)
    app.logo_label.pack(side="left", padx=(PADDING_LARGE, 0))

    app.close_btn = tk.Button(
        top_panel, text="❌", font=BODY_FONT, relief="flat", command=app.on_close
    )
    app.close_btn.pack(side="right", padx=(0, PADDING_LARGE))

    app.refresh_btn = tk.Button(
        top_panel,
        text="⟳",
        font=BODY_FONT,
        relief="flat",
        command=app.refresh_controller.refresh,
    )
    app.refresh_btn.pack(side="right", padx=(0, PADDING_LARGE))

    app.theme_btn = tk.Button(
        top_panel,
        text=theme_button_label(app.model.config.dark_mode),
        font=BODY_FONT,
        relief="flat",
        command=app.refresh_controller.toggle_theme,
    )
    app.theme_btn.pack(side="right", padx=(0, PADDING_LARGE))

    return top_panel


__all__ = ["build_top_panel", "theme_button_label"]
