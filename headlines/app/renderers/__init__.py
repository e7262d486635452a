from __future__ import annotations

from .list_renderer import ListRenderer

__all__ = ["ListRenderer"]
