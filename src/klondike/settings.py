# settings.py - engine options and their JSON persistence
from __future__ import annotations

import json
import logging
import os
from dataclasses import asdict, dataclass, replace
from typing import Optional

logger = logging.getLogger(__name__)

DIFFICULTY_LABELS = [
    "Easy (Unlimited stock cycles)",
    "Medium (2 stock cycles)",
    "Hard (1 stock cycle)",
]

STOCK_CYCLE_LIMITS = [None, 2, 1]


@dataclass(frozen=True)
class Settings:
    """Rule options for one engine. The defaults play the classic one-card game."""

    draw_count: int = 1
    stock_cycles: Optional[int] = None
    king_on_empty: bool = False
    foundation_moves: bool = True

    def __post_init__(self):
        if self.draw_count not in (1, 3):
            raise ValueError(f"draw_count must be 1 or 3, got {self.draw_count!r}")
        if self.stock_cycles is not None and self.stock_cycles < 0:
            raise ValueError(f"stock_cycles must be None or >= 0, got {self.stock_cycles!r}")

    @classmethod
    def for_difficulty(cls, index: int, **overrides) -> "Settings":
        return cls(stock_cycles=STOCK_CYCLE_LIMITS[index], **overrides)


DEFAULT_SETTINGS = Settings()


def _settings_dir() -> str:
    # Prefer %APPDATA% on Windows, else ~/.klondike_engine
    base = os.environ.get("APPDATA")
    if base:
        return os.path.join(base, "KlondikeEngine")
    return os.path.join(os.path.expanduser("~"), ".klondike_engine")


def settings_path() -> str:
    return os.path.join(_settings_dir(), "settings.json")


def load_settings(path: Optional[str] = None) -> Settings:
    """Read settings from JSON, merged onto the defaults. Bad files give the defaults."""
    path = path or settings_path()
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return DEFAULT_SETTINGS
    except (OSError, ValueError) as exc:
        logger.warning(f"Ignoring unreadable settings file {path}: {exc}")
        return DEFAULT_SETTINGS
    if not isinstance(data, dict):
        logger.warning(f"Ignoring settings file {path}: expected an object")
        return DEFAULT_SETTINGS
    known = {k: data[k] for k in asdict(DEFAULT_SETTINGS) if k in data}
    try:
        return replace(DEFAULT_SETTINGS, **known)
    except (TypeError, ValueError) as exc:
        logger.warning(f"Ignoring invalid settings in {path}: {exc}")
        return DEFAULT_SETTINGS


def save_settings(settings: Settings, path: Optional[str] = None) -> str:
    path = path or settings_path()
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(asdict(settings), f, indent=2)
    return path
