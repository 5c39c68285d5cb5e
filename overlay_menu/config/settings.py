"""Settings storage for overlay appearance and key bindings."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


SETTINGS_PATH = Path(
    os.environ.get(
        "OVERLAY_MENU_SETTINGS_PATH",
        Path.home() / ".config" / "overlay-menu" / "settings.json",
    )
)

# Default values - use these constants instead of hardcoding values elsewhere
DEFAULT_TEXT_COLOR = (255, 255, 255)
DEFAULT_LOCATION = (10, 100)
DEFAULT_LINE_SPACING = 5

DEFAULT_KEY_BINDINGS: dict[str, str] = {
    "up": "UP",
    "down": "DOWN",
    "right": "INCREMENT",
    "left": "DECREMENT",
    "enter": "ACTIVATE",
    "return": "ACTIVATE",
    "-": "MIN",
    "=": "MAX",
    ",": "DECREMENT_MEDIUM",
    ".": "INCREMENT_MEDIUM",
    "<": "DECREMENT_SMALL",
    ">": "INCREMENT_SMALL",
    "/": "ROUND",
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "text_color": list(DEFAULT_TEXT_COLOR),
    "inverse_color": None,
    "location": list(DEFAULT_LOCATION),
    "line_spacing": DEFAULT_LINE_SPACING,
    "key_bindings": dict(DEFAULT_KEY_BINDINGS),
}


@dataclass
class SettingsStore:
    values: dict[str, Any] = field(default_factory=dict)


settings_store = SettingsStore()


def load_settings() -> None:
    settings_store.values = json.loads(json.dumps(DEFAULT_SETTINGS))
    if not SETTINGS_PATH.exists():
        return
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError):
        return
    if isinstance(data, dict):
        settings_store.values.update(data)


def get_setting(key: str, default: Any | None = None) -> Any:
    return settings_store.values.get(key, default)


def set_setting(key: str, value: Any) -> None:
    # In-memory only: the menu never writes its configuration back.
    settings_store.values[key] = value


def get_int(key: str, default: int = 0) -> int:
    try:
        return int(get_setting(key, default))
    except (TypeError, ValueError):
        return default


def get_color(key: str, default: tuple[int, int, int] | None = None):
    """Return an RGB triple from settings, or ``default`` if unset or malformed."""
    value = get_setting(key)
    if value is None:
        return default
    try:
        red, green, blue = (int(channel) for channel in value)
    except (TypeError, ValueError):
        return default
    return (
        max(0, min(255, red)),
        max(0, min(255, green)),
        max(0, min(255, blue)),
    )


def get_location(key: str = "location", default: tuple[float, float] = DEFAULT_LOCATION):
    """Return an (x, y) pair from settings, or ``default`` if unset or malformed."""
    value = get_setting(key)
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        return default
    if any(isinstance(coord, bool) or not isinstance(coord, (int, float)) for coord in value):
        return default
    return value[0], value[1]


load_settings()
