"""Configuration panel shown until an API key has been committed."""

from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING

from ...config import BODY_FONT, DESCRIPTION_FONT, NEWSAPI_SIGNUP_URL, PADDING_LARGE
from .links import build_link_label

if TYPE_CHECKING:
    from ...application import HeadlinesApp


def build_config_panel(app: "HeadlinesApp") -> tk.Frame:
    """Build the API key prompt.

    Pressing Return moves focus off the entry and then commits the key,
    switching the window to the headline list.
    """
    panel = tk.Frame(app, padx=PADDING_LARGE * 2, pady=PADDING_LARGE * 2)

    prompt = tk.Label(panel, text="Enter your API_KEY for newsapi.org", font=BODY_FONT)
    prompt.pack(anchor="w")

    app.api_key_var = tk.StringVar(value=app.model.config.api_key)
    entry = tk.Entry(panel, textvariable=app.api_key_var, width=36, font=BODY_FONT)
    entry.pack(fill="x", pady=PADDING_LARGE)

    def _commit(_event: tk.Event) -> str:
        app.focus_set()
        app.refresh_controller.submit_api_key(app.api_key_var.get())
        return "break"

    entry.bind("<Return>", _commit)
    entry.bind("<KP_Enter>", _commit)
    app.api_key_entry = entry

    hint = tk.Label(
        panel,
        text="If you haven't registered for the API_KEY, head over to",
        font=DESCRIPTION_FONT,
    )
    hint.pack(anchor="w")
    build_link_label(app, panel, NEWSAPI_SIGNUP_URL, NEWSAPI_SIGNUP_URL, DESCRIPTION_FONT).pack(
        anchor="w"
    )

    app.config_panel = panel
    return panel


__all__ = ["build_config_panel"]
