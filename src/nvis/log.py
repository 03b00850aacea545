# nvis/log.py

from __future__ import annotations

import logging
import os

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
LEVEL_ENV = "NVIS_LOG_LEVEL"
DEBUG_ENV = "NVIS_DEBUG"


def coerce_level(value: str | None, fallback: int) -> int:
    """Turn "DEBUG", "debug" or "10" into a logging level, else ``fallback``."""
    text = (value or "").strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper()) if text else None
    return level if isinstance(level, int) else fallback


def env_level() -> int | None:
    """Level forced by NVIS_LOG_LEVEL, or DEBUG when NVIS_DEBUG is truthy."""
    value = os.getenv(LEVEL_ENV)
    if value:
        return coerce_level(value, logging.WARNING)
    if os.getenv(DEBUG_ENV, "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_root(default_level: int | str = logging.WARNING) -> int:
    """Install the compact root format once and return the effective level."""
    level = env_level()
    if level is None:
        level = coerce_level(str(default_level), logging.WARNING)
    logging.basicConfig(format=LOG_FORMAT, datefmt="%H:%M:%S")
    logging.getLogger().setLevel(level)
    return level
