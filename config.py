"""Centralized configuration for environment variables.

This module is the single source of truth for configuration used across the
application. Import constants from here rather than calling os.getenv directly
in multiple places.

The ``get_*`` accessors read the environment on every call, falling back to
the module-level defaults, so request handlers pick up overrides without a
restart and a malformed value never breaks the import.
"""

from __future__ import annotations

import os
from typing import Final

from dotenv import load_dotenv

# Load environment variables from .env if present
load_dotenv()


# --- Statistics defaults ---
DEFAULT_TANK_CAPACITY_LITERS: Final[float] = 45.0
RECENT_WINDOW_SIZE: Final[int] = 5


def get_default_tank_capacity() -> float:
    """Return the tank capacity (liters) used when a caller does not pass one.

    Raises:
        RuntimeError: If the environment value is not a positive number.
    """
    raw = os.getenv("DEFAULT_TANK_CAPACITY_LITERS", "").strip()
    if not raw:
        return DEFAULT_TANK_CAPACITY_LITERS
    try:
        value = float(raw)
    except ValueError as exc:
        msg = f"DEFAULT_TANK_CAPACITY_LITERS must be a number, got {raw!r}"
        raise RuntimeError(msg) from exc
    if not value > 0 or value == float("inf"):
        msg = f"DEFAULT_TANK_CAPACITY_LITERS must be positive, got {raw!r}"
        raise RuntimeError(msg)
    return value


def get_recent_window_size() -> int:
    """Return how many recent samples feed the rolling averages.

    Raises:
        RuntimeError: If the environment value is not a positive integer.
    """
    raw = os.getenv("RECENT_WINDOW_SIZE", "").strip()
    if not raw:
        return RECENT_WINDOW_SIZE
    try:
        value = int(raw)
    except ValueError as exc:
        msg = f"RECENT_WINDOW_SIZE must be an integer, got {raw!r}"
        raise RuntimeError(msg) from exc
    if value <= 0:
        msg = f"RECENT_WINDOW_SIZE must be positive, got {raw!r}"
        raise RuntimeError(msg)
    return value


def get_cors_allowed_origins() -> list[str]:
    """Return the comma-separated CORS origins from the environment."""
    raw = os.getenv("CORS_ALLOWED_ORIGINS", "")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


# --- Logging ---
LOG_LEVEL: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()


__all__ = [
    "DEFAULT_TANK_CAPACITY_LITERS",
    "LOG_LEVEL",
    "RECENT_WINDOW_SIZE",
    "get_cors_allowed_origins",
    "get_default_tank_capacity",
    "get_recent_window_size",
]
