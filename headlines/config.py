"""Configuration primitives and static data for Headlines.

This module centralises application constants, default settings, theme
palettes, and the settings path so other layers can import them without
pulling in Tk.

Updates: v0.1 - 2026-10-18 - Collected API, theme and persistence defaults.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from .utils import read_bool_env, read_float_env, read_optional_env

load_dotenv()

# --- News API -----------------------------------------------------------------------------------

NEWSAPI_BASE_URL = "https://newsapi.org/v2"
NEWSAPI_SIGNUP_URL = "https://newsapi.org"
ENV_API_KEY = read_optional_env("NEWSAPI_KEY")
DEFAULT_COUNTRY = (read_optional_env("HEADLINES_COUNTRY") or "us").lower()

# ``None`` keeps requests waiting indefinitely, which is the historical behaviour.
REQUEST_TIMEOUT_SECONDS = read_float_env("HEADLINES_REQUEST_TIMEOUT")

DESCRIPTION_PLACEHOLDER = "..."


# --- Fetch worker -------------------------------------------------------------------------------

FETCH_MODE_THREAD = "thread"
FETCH_MODE_ASYNC = "async"
FETCH_MODE = (read_optional_env("HEADLINES_FETCH_MODE") or FETCH_MODE_THREAD).lower()
ASYNC_POLL_INTERVAL_SECONDS = 0.5


# --- Render loop and persistence timing ---------------------------------------------------------

FRAME_INTERVAL_MS = 50
AUTO_SAVE_INTERVAL_MS = 3_000

DEBUG_LOGGING = read_bool_env("HEADLINES_DEBUG")


# --- Layout and fonts ---------------------------------------------------------------------------

SCALE_FACTOR = 1.25
PADDING_SMALL = round(5 / SCALE_FACTOR)
PADDING_LARGE = round(10 / SCALE_FACTOR)
WINDOW_GEOMETRY = f"{round(540 / SCALE_FACTOR)}x{round(720 / SCALE_FACTOR)}"

FONT_FAMILY = "Segoe UI"
HEADING_FONT = (FONT_FAMILY, round(35 / SCALE_FACTOR), "bold")
BODY_FONT = (FONT_FAMILY, round(20 / SCALE_FACTOR))
DESCRIPTION_FONT = (FONT_FAMILY, round(16 / SCALE_FACTOR))
MONOSPACE_FONT = ("Consolas", round(14 / SCALE_FACTOR))


# --- Theme palettes -----------------------------------------------------------------------------

THEME_PALETTES: Dict[str, Dict[str, str]] = {
    "light": {
        "background": "#F8F8F8",
        "panel": "#E6E6E6",
        "title": "#000000",
        "text": "#3C3C3C",
        "link": "#FF0000",
        "separator": "#BDBDBD",
        "button": "#DADADA",
    },
    "dark": {
        "background": "#1B1B1B",
        "panel": "#0F0F0F",
        "title": "#FFFFFF",
        "text": "#BFBFBF",
        "link": "#00FFFF",
        "separator": "#3C3C3C",
        "button": "#2F2F2F",
    },
}


def theme_palette(dark_mode: bool) -> Dict[str, str]:
    """Return the colour profile for the requested theme."""

    return THEME_PALETTES["dark" if dark_mode else "light"]


# --- Settings persistence -----------------------------------------------------------------------

_LOCAL_APPDATA = os.getenv("LOCALAPPDATA")
_XDG_CONFIG_HOME = os.getenv("XDG_CONFIG_HOME")

if os.name == "nt":
    base_dir = (
        Path(_LOCAL_APPDATA)
        if _LOCAL_APPDATA
        else Path.home() / "AppData" / "Local"
    )
else:
    base_dir = (
        Path(_XDG_CONFIG_HOME)
        if _XDG_CONFIG_HOME
        else Path.home() / ".config"
    )
_DEFAULT_SETTINGS_FILE = base_dir / "Headlines" / "headlines_settings.json"

SETTINGS_PATH = Path(os.getenv("HEADLINES_SETTINGS", str(_DEFAULT_SETTINGS_FILE)))

DEFAULT_SETTINGS: Dict[str, Any] = {
    "dark_mode": False,
    "api_key": "",
}


__all__ = [
    "ASYNC_POLL_INTERVAL_SECONDS",
    "AUTO_SAVE_INTERVAL_MS",
    "BODY_FONT",
    "DEBUG_LOGGING",
    "DEFAULT_COUNTRY",
    "DEFAULT_SETTINGS",
    "DESCRIPTION_FONT",
    "DESCRIPTION_PLACEHOLDER",
    "ENV_API_KEY",
    "FETCH_MODE",
    "FETCH_MODE_ASYNC",
    "FETCH_MODE_THREAD",
    "FRAME_INTERVAL_MS",
    "HEADING_FONT",
    "MONOSPACE_FONT",
    "NEWSAPI_BASE_URL",
    "NEWSAPI_SIGNUP_URL",
    "PADDING_LARGE",
    "PADDING_SMALL",
    "REQUEST_TIMEOUT_SECONDS",
    "SCALE_FACTOR",
    "SETTINGS_PATH",
    "THEME_PALETTES",
    "WINDOW_GEOMETRY",
    "theme_palette",
]
