"""Persistent settings helpers for the Headlines application.

Updates: v0.1 - 2026-10-18 - Adapted JSON settings persistence for the
dark-mode flag and API key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

from .config import ENV_API_KEY, SETTINGS_PATH
from .models import HeadlinesConfig

logger = logging.getLogger(__name__)


class ConfigLoadError(Exception):
    """Persisted settings exist but cannot be read or decoded."""


def read_settings(path: Optional[Path] = None) -> HeadlinesConfig:
    """Read settings strictly, raising ``ConfigLoadError`` on bad data.

    A missing file is not an error and yields defaults.
    """

    target = path or SETTINGS_PATH
    if not target.exists():
        return HeadlinesConfig()
    try:
        with target.open("r", encoding="utf-8") as handle:
            data = json.load(handle)
    except (OSError, ValueError) as exc:
        raise ConfigLoadError(f"Unable to read {target}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigLoadError(f"Settings in {target} are not a JSON object")
    return HeadlinesConfig.from_dict(data)


def load_settings(path: Optional[Path] = None) -> HeadlinesConfig:
    """Load application settings from disk, falling back to defaults."""

    try:
        config = read_settings(path)
    except ConfigLoadError as exc:
        logger.warning("Unable to load settings: %s", exc)
        config = HeadlinesConfig()
    if not config.api_key and ENV_API_KEY:
        logger.info("Using API key from NEWSAPI_KEY environment variable.")
        config.api_key = ENV_API_KEY
    return config


def save_settings(config: HeadlinesConfig, path: Optional[Path] = None) -> bool:
    """Persist application settings to disk; returns False on failure."""

    target = path or SETTINGS_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8") as handle:
            json.dump(config.as_dict(), handle, indent=2)
    except OSError as exc:
        logger.warning("Unable to save settings: %s", exc)
        return False
    return True


__all__ = ["ConfigLoadError", "load_settings", "read_settings", "save_settings"]
