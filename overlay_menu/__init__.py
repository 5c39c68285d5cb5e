"""Keyboard-driven text menu overlay for interactive graphics applications."""

from overlay_menu.__version__ import __version__
from overlay_menu.menu import (
    ColorMode,
    ColorOption,
    DoubleOption,
    EnumeratedOption,
    IntegerOption,
    KeyAction,
    KeyBindings,
    KeyEvent,
    MenuItem,
    StringItem,
    Submenu,
    TextMenu,
    ToggleOption,
)

__all__ = [
    "ColorMode",
    "ColorOption",
    "DoubleOption",
    "EnumeratedOption",
    "IntegerOption",
    "KeyAction",
    "KeyBindings",
    "KeyEvent",
    "MenuItem",
    "StringItem",
    "Submenu",
    "TextMenu",
    "ToggleOption",
    "__version__",
]
