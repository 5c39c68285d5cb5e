"""
Pytest configuration and shared fixtures for overlay-menu tests.

This module provides common fixtures and utilities used across all test modules.
"""

import pytest

from overlay_menu.config import settings
from overlay_menu.menu.model import Submenu
from overlay_menu.menu.navigator import TextMenu
from overlay_menu.menu.options import IntegerOption


@pytest.fixture(autouse=True)
def default_settings(tmp_path, monkeypatch):
    """Isolate every test from any settings file in the user's home."""
    monkeypatch.setattr(
        "overlay_menu.config.settings.SETTINGS_PATH", tmp_path / "settings.json"
    )
    settings.load_settings()
    yield
    settings.load_settings()


@pytest.fixture
def menu():
    """A visible menu that accepts key input, with an empty top level."""
    text_menu = TextMenu(x=0, y=100, color=(255, 255, 255))
    text_menu.show(True)
    return text_menu


@pytest.fixture
def nested_menu(menu):
    """
    Menu with the tree: top -> A -> B -> X.

    A and B are wired before A is attached, so the menu reference must be
    propagated down when A is added.
    """
    level_a = Submenu("A")
    level_b = Submenu("B")
    item_x = IntegerOption("X", 3, 0, 9)
    level_b.add(item_x)
    level_a.add(level_b)
    menu.add(level_a)
    return menu, level_a, level_b, item_x
