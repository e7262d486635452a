"""Tests for persisted configuration in headlines.settings_store."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from headlines import settings_store
from headlines.models import HeadlinesConfig
from headlines.settings_store import ConfigLoadError, load_settings, read_settings, save_settings


@pytest.fixture(autouse=True)
def _no_env_api_key(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings_store, "ENV_API_KEY", None)


def test_round_trip_preserves_values(settings_file: Path) -> None:
    """Saving then loading yields the same dark_mode and api_key."""
    original = HeadlinesConfig(dark_mode=True, api_key="abc123")
    assert save_settings(original, settings_file)
    assert load_settings(settings_file) == original


def test_missing_file_yields_defaults(settings_file: Path) -> None:
    """A fresh install starts in light mode with no API key."""
    assert load_settings(settings_file) == HeadlinesConfig(dark_mode=False, api_key="")


def test_corrupt_file_raises_in_strict_read(settings_file: Path) -> None:
    """read_settings surfaces corrupt JSON as ConfigLoadError."""
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("{not json", encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        read_settings(settings_file)


def test_corrupt_file_falls_back_to_defaults(
    settings_file: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """load_settings logs the problem and recovers with defaults."""
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text(json.dumps(["not", "a", "dict"]), encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        config = load_settings(settings_file)
    assert config == HeadlinesConfig()
    assert "Unable to load settings" in caplog.text


def test_unknown_keys_ignored_and_types_coerced(settings_file: Path) -> None:
    """Extra keys are dropped; a non-string key becomes empty."""
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text(
        json.dumps({"dark_mode": True, "api_key": 42, "ticker_speed": 3}), encoding="utf-8"
    )
    assert load_settings(settings_file) == HeadlinesConfig(dark_mode=True, api_key="")


@pytest.mark.parametrize("stored", ["false", "true", 1, 0, None, [True]])
def test_non_boolean_dark_mode_falls_back_to_default(stored: object) -> None:
    """Only real booleans are trusted for dark_mode; anything else uses the default."""
    config = HeadlinesConfig.from_dict({"dark_mode": stored, "api_key": "k"})
    assert config.dark_mode is False
    assert config.api_key == "k"


@pytest.mark.parametrize("stored", [True, False])
def test_boolean_dark_mode_is_kept(stored: bool) -> None:
    """Boolean dark_mode values load unchanged."""
    assert HeadlinesConfig.from_dict({"dark_mode": stored}).dark_mode is stored


def test_env_api_key_seeds_empty_config(
    settings_file: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """NEWSAPI_KEY fills in a missing stored key but never overrides one."""
    monkeypatch.setattr(settings_store, "ENV_API_KEY", "from-env")
    assert load_settings(settings_file).api_key == "from-env"
    save_settings(HeadlinesConfig(api_key="stored"), settings_file)
    assert load_settings(settings_file).api_key == "stored"


def test_save_failure_is_logged_not_raised(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Writing where a directory is expected returns False and logs a warning."""
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        assert save_settings(HeadlinesConfig(), blocker / "settings.json") is False
    assert "Unable to save settings" in caplog.text
