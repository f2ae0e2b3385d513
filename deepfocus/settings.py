"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/DeepFocus/settings.json

Mode durations are not settings; they live in the database
(see ``deepfocus.database.durations``).

Usage::

    settings = load_settings()
    settings.sound_volume = 50
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields

from .paths import APP_SUPPORT_DIR
from .timer.engine import AUTO_RESUME_DELAY


logger = logging.getLogger(__name__)

SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    auto_resume_delay: float = AUTO_RESUME_DELAY   # seconds

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                         # 0-100

    # ── notifications ─────────────────────────────────────────────────
    notifications_enabled: bool = True

    # ── window ────────────────────────────────────────────────────────
    always_on_top: bool = False
    window_width: int = 420
    window_height: int = 640


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults."""
    try:
        if SETTINGS_PATH.exists():
            data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass, with usable values
            defaults = Settings()
            filtered = {}
            for f in fields(Settings):
                if f.name not in data:
                    continue
                value = _coerce(data[f.name], getattr(defaults, f.name))
                if value is None:
                    logger.warning("ignoring bad %s in settings", f.name)
                    continue
                filtered[f.name] = value
            return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError):
        logger.warning("unreadable settings at %s, using defaults", SETTINGS_PATH)
    return Settings()


def _coerce(value, default):
    """*value* as the type of *default*, or None when it does not fit."""
    if isinstance(default, bool):
        return value if isinstance(value, bool) else None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(default, int):
        return int(value) if float(value).is_integer() else None
    return float(value)


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    SETTINGS_PATH.parent.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
