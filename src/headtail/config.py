"""Environment switches read once at import time."""

from __future__ import annotations

import logging
import os

__all__ = ["env_disabled", "env_int", "env_log_level"]


def env_disabled(name: str) -> bool:
    return os.environ.get(name, "0") == "1"


def env_int(name: str, default: int, *, minimum: int = 1) -> int:
    """Integer setting clamped to ``minimum``; unparsable values fall back to ``default``."""
    raw = os.environ.get(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logging.getLogger("headtail").warning("ignoring %s=%r: not an integer", name, raw)
        return default
    return max(minimum, value)


def env_log_level(name: str = "HEADTAIL_LOG_LEVEL", default: int = logging.WARNING) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    level = logging.getLevelName(raw.strip().upper())
    return level if isinstance(level, int) else default
