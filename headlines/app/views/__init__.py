"""View builders for the Headlines main window.

Updates: v0.1 - 2026-10-18 - Re-exported panel builders for stable imports.
"""

from __future__ import annotations

from .config_panel import build_config_panel
from .links import build_link_label, open_url
from .list_view import build_footer, build_list_view
from .top_panel import build_top_panel, theme_button_label

__all__ = [
    "build_config_panel",
    "build_footer",
    "build_link_label",
    "build_list_view",
    "build_top_panel",
    "open_url",
    "theme_button_label",
]
