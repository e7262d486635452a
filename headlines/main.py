"""Application entrypoint wiring for Headlines.

Updates: v0.1 - 2026-10-18 - Added metadata, logging setup and main routine.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .config import DEBUG_LOGGING
from .models import AppMetadata
from .utils import sanitize_env_value

logger = logging.getLogger(__name__)

APP_VERSION = "0.1"
APP_METADATA = AppMetadata(
    name="Headlines",
    version=f"v{APP_VERSION}",
    author="https://newsapi.org",
    description=(
        "Tkinter desktop reader for newsapi.org top headlines with a light/dark "
        "theme toggle."
    ),
)

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(debug: bool = DEBUG_LOGGING) -> logging.Handler:
    """Install the console handler on the root logger and return it."""

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_headlines_console", False):
            root_logger.removeHandler(handler)
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler._headlines_console = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)
    # urllib3 logs every connection at DEBUG.
    logging.getLogger("urllib3").setLevel(logging.INFO)
    return console_handler


def log_environment_overrides() -> None:
    """Log recognised environment overrides with secrets masked."""

    overrides = {
        name: sanitize_env_value(name, value)
        for name, value in sorted(os.environ.items())
        if name.startswith("HEADLINES_") or name == "NEWSAPI_KEY"
    }
    if overrides:
        logger.info("Startup environment overrides: %s", overrides)


def main(settings_path: Optional[str] = None) -> None:
    """Launch the Headlines Tk application."""

    configure_logging()
    log_environment_overrides()
    logger.debug("Bootstrapping Headlines main loop")

    from .application import HeadlinesApp

    app = HeadlinesApp(settings_path=Path(settings_path) if settings_path else None)
    app.mainloop()


__all__ = ["APP_METADATA", "APP_VERSION", "configure_logging", "log_environment_overrides", "main"]
