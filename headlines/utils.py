"""Utility helpers shared across Headlines modules.

Updates: v0.1 - 2026-10-18 - Seeded module with environment and masking helpers.
"""

from __future__ import annotations

import os
import re
from typing import Optional

_SENSITIVE_ENV_PATTERN = re.compile(
    r"(KEY|TOKEN|SECRET|PASSWORD|API_KEY)$", re.IGNORECASE
)
_TRUTHY = {"1", "true", "yes", "on"}


def read_optional_env(name: str) -> Optional[str]:
    """Return trimmed environment variable or ``None`` when unset/blank."""

    value = os.getenv(name)
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None


def read_bool_env(name: str, default: bool = False) -> bool:
    """Interpret an environment flag such as ``HEADLINES_DEBUG=1``."""

    value = read_optional_env(name)
    if value is None:
        return default
    return value.lower() in _TRUTHY


def read_float_env(name: str) -> Optional[float]:
    """Return a positive float from the environment or ``None``."""

    value = read_optional_env(name)
    if value is None:
        return None
    try:
        number = float(value)
    except ValueError:
        return None
    return number if number > 0 else None


def mask_secret(value: Optional[str]) -> str:
    """Mask an API key for logging, keeping the last four characters."""

    if not value:
        return "<empty>"
    if len(value) <= 4:
        return "***"
    return f"***{value[-4:]}"


def sanitize_env_value(name: str, value: Optional[str]) -> Optional[str]:
    """Mask sensitive environment variable values for safe logging."""
    if value is None:
        return None
    if _SENSITIVE_ENV_PATTERN.search(name):
        return "***" if value else None
    if len(value) > 80:
        return value[:77] + "..."
    return value


__all__ = [
    "read_optional_env",
    "read_bool_env",
    "read_float_env",
    "mask_secret",
    "sanitize_env_value",
]
