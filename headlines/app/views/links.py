"""Hyperlink helpers shared by the views and the list renderer."""

from __future__ import annotations

import logging
import tkinter as tk
import webbrowser
from typing import TYPE_CHECKING, Tuple

if TYPE_CHECKING:
    from ...application import HeadlinesApp

logger = logging.getLogger(__name__)


def open_url(url: str) -> None:
    """Open ``url`` in the default browser."""
    logger.info("Opening %s", url)
    if not webbrowser.open(url, new=2):
        logger.warning("No browser available to open %s", url)


def build_link_label(
    app: "HeadlinesApp",
    parent: tk.Misc,
    text: str,
    url: str,
    font: Tuple[object, ...],
) -> tk.Label:
    """Create a clickable label; the app recolours it with the theme link colour."""
    label = tk.Label(parent, text=text, font=font, cursor="hand2")
    label.bind("<Button-1>", lambda _event: open_url(url))
    app.link_widgets.append(label)
    return label


__all__ = ["build_link_label", "open_url"]
