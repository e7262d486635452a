"""SettingsController persists configuration on commit, on a timer and at exit.

Updates: v0.1 - 2026-10-18 - Reduced settings workflow to periodic autosave
of the dark-mode flag and API key.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, TYPE_CHECKING

from ...config import AUTO_SAVE_INTERVAL_MS
from ...settings_store import save_settings

if TYPE_CHECKING:
    from ...application import HeadlinesApp


logger = logging.getLogger(__name__)


class SettingsController:
    """Own the autosave timer and the settings file location."""

    def __init__(
        self,
        app: "HeadlinesApp",
        settings_path: Optional[Path] = None,
        interval_ms: int = AUTO_SAVE_INTERVAL_MS,
    ) -> None:
        self.app = app
        self.settings_path = settings_path
        self.interval_ms = interval_ms
        self._autosave_job: Optional[str] = None

    def save_settings(self) -> bool:
        return save_settings(self.app.model.config, self.settings_path)

    def schedule_autosave(self) -> None:
        self._autosave_job = self.app.after(self.interval_ms, self._autosave_tick)

    def cancel_autosave(self) -> None:
        if self._autosave_job is None:
            return
        self.app.after_cancel(self._autosave_job)
        self._autosave_job = None

    def _autosave_tick(self) -> None:
        self._autosave_job = None
        logger.debug("Autosaving settings")
        self.save_settings()
        self.schedule_autosave()


__all__ = ["SettingsController"]
