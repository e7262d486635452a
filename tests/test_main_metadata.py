"""Smoke tests for application metadata, logging setup and entrypoint wiring.

Validates:
- APP_METADATA presence and basic field values
- APP_VERSION formatting
- configure_logging installs a single console handler
- Availability of callable main() and __main__._run() (without invoking GUI)
"""

from __future__ import annotations

import logging

from headlines.__main__ import _run
from headlines.main import APP_METADATA, APP_VERSION, LOG_FORMAT, configure_logging, main
from headlines.models import AppMetadata


def test_app_metadata_instance_type() -> None:
    """APP_METADATA should be an AppMetadata dataclass."""
    assert isinstance(APP_METADATA, AppMetadata)


def test_app_metadata_basic_fields() -> None:
    """Validate core APP_METADATA field values."""
    assert APP_METADATA.name == "Headlines"
    assert APP_METADATA.version == f"v{APP_VERSION}"
    assert "newsapi.org" in APP_METADATA.description


def test_configure_logging_is_idempotent() -> None:
    """Repeated setup replaces rather than stacks the console handler."""
    root_logger = logging.getLogger()
    first = configure_logging(debug=False)
    second = configure_logging(debug=True)
    try:
        assert first not in root_logger.handlers
        assert second in root_logger.handlers
        assert second.level == logging.DEBUG
        assert second.formatter is not None and second.formatter._fmt == LOG_FORMAT
    finally:
        root_logger.removeHandler(second)


def test_main_callable_without_invocation() -> None:
    """Ensure main is importable and callable (do not invoke to avoid Tk mainloop)."""
    assert callable(main)


def test_run_wrapper_callable_without_invocation() -> None:
    """Ensure __main__._run exists and is callable (do not invoke)."""
    assert callable(_run)
