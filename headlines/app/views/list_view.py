from __future__ import annotations

import tkinter as tk
from typing import TYPE_CHECKING, Tuple

from ...config import (
    BODY_FONT,
    DESCRIPTION_FONT,
    HEADING_FONT,
    MONOSPACE_FONT,
    PADDING_LARGE,
    PADDING_SMALL,
)
from .links import build_link_label

if TYPE_CHECKING:
    from ...application import HeadlinesApp

TKINTER_DOCS_URL = "https://docs.python.org/3/library/tkinter.html"


def build_list_view(app: "HeadlinesApp") -> Tuple[tk.Frame, tk.Text]:
    """Build the scrollable headline list (frame, scrollbar, text) and attach to app.

    Text tags carry the fonts and layout of each card segment; their colours
    are set later by the renderer's palette pass.

    Returns:
        Tuple[tk.Frame, tk.Text]: (list_frame, listbox) created widgets.
    """
    list_frame = tk.Frame(app, name="list")

    scrollbar = tk.Scrollbar(list_frame)
    scrollbar.pack(side="right", fill="y")

    listbox = tk.Text(
        list_frame,
        wrap="word",
        height=0,
        state="disabled",
        relief="flat",
        padx=PADDING_LARGE,
        pady=PADDING_SMALL,
    )
    listbox.pack(fill="both", expand=True)
    listbox.configure(yscrollcommand=scrollbar.set, cursor="arrow")
    scrollbar.config(command=listbox.yview)

    listbox.tag_configure("header", font=HEADING_FONT, justify="center", spacing3=PADDING_SMALL)
    listbox.tag_configure("title", font=BODY_FONT, spacing1=PADDING_SMALL, spacing3=PADDING_SMALL)
    listbox.tag_configure("description", font=DESCRIPTION_FONT, spacing3=PADDING_SMALL)
    listbox.tag_configure("link", font=DESCRIPTION_FONT, justify="right", underline=True)
    listbox.tag_configure("separator", justify="center", spacing1=PADDING_SMALL)
    listbox.tag_configure("message", font=HEADING_FONT, justify="center", spacing1=PADDING_LARGE)

    app.list_frame = list_frame
    app.listbox = listbox
    return list_frame, listbox


def build_footer(app: "HeadlinesApp") -> tk.Frame:
    """Build the footer crediting the API source."""
    footer = tk.Frame(app, pady=PADDING_LARGE)
    app.panel_frames.append(footer)

    tk.Label(footer, text="API Source: newsapi.org", font=MONOSPACE_FONT).pack()
    build_link_label(app, footer, "Made with Tkinter", TKINTER_DOCS_URL, MONOSPACE_FONT).pack()

    app.footer = footer
    return footer


__all__ = ["build_footer", "build_list_view"]
