from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional

_DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DEFAULT_DATEFMT = "%H:%M:%S"
_LEVEL_ENV_VARS = ("CLICKER_LOG_LEVEL", "CLICKER_GUI_LOG_LEVEL")
_DEBUG_FLAGS = ("CLICKER_DEBUG_LOGGING", "CLICKER_DEBUG")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class LevelChoice:
    """Effective root level and where it came from (env var name or "default")."""

    level: int
    source: str = "default"

    @property
    def name(self) -> str:
        return logging.getLevelName(self.level)


def parse_level(value: object, fallback: int = logging.INFO) -> int:
    """Turn a level name or number into a logging level, else ``fallback``."""
    if isinstance(value, int):
        return value
    text = str(value or "").strip()
    if not text:
        return fallback
    try:
        return int(text)
    except ValueError:
        pass
    candidate = getattr(logging, text.upper(), None)
    return candidate if isinstance(candidate, int) else fallback


def resolve_level(default_level: int | str = logging.INFO) -> LevelChoice:
    """
    Pick the root level for the click counter.

    Lookup order:
      - CLICKER_LOG_LEVEL / CLICKER_GUI_LOG_LEVEL: explicit name or number
      - CLICKER_DEBUG_LOGGING / CLICKER_DEBUG: truthy -> DEBUG
      - ``default_level``
    """
    for var in _LEVEL_ENV_VARS:
        value = os.getenv(var)
        if value:
            return LevelChoice(parse_level(value), var)
    for flag in _DEBUG_FLAGS:
        if (os.getenv(flag) or "").strip().lower() in _TRUTHY:
            return LevelChoice(logging.DEBUG, flag)
    return LevelChoice(parse_level(default_level))


def configure_root(default_level: int | str = logging.INFO) -> LevelChoice:
    """Install the compact root handler once and apply the resolved level."""
    choice = resolve_level(default_level)
    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=choice.level, format=_DEFAULT_FORMAT, datefmt=_DEFAULT_DATEFMT)
    root.setLevel(choice.level)
    return choice
