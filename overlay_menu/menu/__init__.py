from overlay_menu.menu.color import ColorCodec, ColorMode, ColorOption, PillowColorCodec
from overlay_menu.menu.keys import KeyAction, KeyBindings, KeyEvent
from overlay_menu.menu.model import BackButton, MenuItem, StringItem, Submenu
from overlay_menu.menu.navigator import TextMenu
from overlay_menu.menu.options import (
    DoubleOption,
    EnumeratedOption,
    IntegerOption,
    ToggleOption,
)

__all__ = [
    "BackButton",
    "ColorCodec",
    "ColorMode",
    "ColorOption",
    "DoubleOption",
    "EnumeratedOption",
    "IntegerOption",
    "KeyAction",
    "KeyBindings",
    "KeyEvent",
    "MenuItem",
    "PillowColorCodec",
    "StringItem",
    "Submenu",
    "TextMenu",
    "ToggleOption",
]
