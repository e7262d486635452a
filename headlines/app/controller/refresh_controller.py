"""Refresh controller: turns user actions into fetch worker commands.

Updates: v0.1 - 2026-10-18 - Adapted the refresh workflow to the command
channel; API key commits and theme toggles route through here too.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ...utils import mask_secret

if TYPE_CHECKING:
    # Forward-declare to avoid circular import at runtime.
    from ...application import HeadlinesApp

logger = logging.getLogger(__name__)


class RefreshController:
    """Handle refresh, API key and theme actions raised by the views.

    Network work never happens here: the controller only mutates the UI
    state and sends commands, leaving the worker to repopulate the list.
    """

    def __init__(self, app: "HeadlinesApp") -> None:
        """Initialize the controller with a reference to the root app."""
        self.app = app

    def refresh(self) -> None:
        """Clear the visible list and ask the worker for fresh headlines."""
        logger.info("Refreshing headlines")
        self.app.model.refresh(self.app.command_channel)

    def submit_api_key(self, value: str) -> bool:
        """Commit the API key typed into the configuration panel."""
        if not self.app.model.commit_api_key(value, self.app.command_channel):
            return False
        logger.info("API key set (%s)", mask_secret(self.app.model.config.api_key))
        self.app.settings_controller.save_settings()
        return True

    def toggle_theme(self) -> None:
        dark_mode = self.app.model.toggle_theme()
        logger.info("Dark mode %s", "enabled" if dark_mode else "disabled")


__all__ = ["RefreshController"]
