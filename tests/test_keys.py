"""Tests for key actions and raw key bindings."""

import pytest

from overlay_menu.config import settings
from overlay_menu.menu.exceptions import InvalidArgumentError
from overlay_menu.menu.keys import (
    ASCEND_ACTIONS,
    DESCEND_ACTIONS,
    KeyAction,
    KeyBindings,
    KeyEvent,
    parse_action,
)


class TestParseAction:
    def test_accepts_names_in_any_case(self):
        assert parse_action("INCREMENT") is KeyAction.INCREMENT
        assert parse_action("decrement_small") is KeyAction.DECREMENT_SMALL

    def test_passes_actions_through(self):
        assert parse_action(KeyAction.ROUND) is KeyAction.ROUND

    def test_unknown_name(self):
        with pytest.raises(InvalidArgumentError, match="Unknown key action"):
            parse_action("JUMP")


class TestKeyBindings:
    """Tests for resolving raw keys."""

    def test_default_layout(self):
        bindings = KeyBindings.default()
        expected = {
            "up": KeyAction.UP,
            "down": KeyAction.DOWN,
            "right": KeyAction.INCREMENT,
            "left": KeyAction.DECREMENT,
            "enter": KeyAction.ACTIVATE,
            "return": KeyAction.ACTIVATE,
            "-": KeyAction.MIN,
            "=": KeyAction.MAX,
            ",": KeyAction.DECREMENT_MEDIUM,
            ".": KeyAction.INCREMENT_MEDIUM,
            "<": KeyAction.DECREMENT_SMALL,
            ">": KeyAction.INCREMENT_SMALL,
            "/": KeyAction.ROUND,
        }
        assert bindings.as_dict() == expected
        assert len(bindings) == len(expected)

    def test_named_keys_are_case_insensitive(self):
        bindings = KeyBindings.default()
        assert bindings.resolve("UP") is KeyAction.UP
        assert bindings.resolve("Enter") is KeyAction.ACTIVATE

    def test_single_characters_are_exact(self):
        bindings = KeyBindings({"a": KeyAction.MIN})
        assert bindings.resolve("a") is KeyAction.MIN
        assert bindings.resolve("A") is None

    def test_unbound_key(self):
        assert KeyBindings.default().resolve("F12") is None

    def test_bind_and_unbind(self):
        bindings = KeyBindings()
        bindings.bind("Space", "activate")
        assert "space" in bindings
        assert bindings.resolve("SPACE") is KeyAction.ACTIVATE
        bindings.unbind("space")
        assert "space" not in bindings
        bindings.unbind("space")

    def test_from_mapping_rejects_unknown_action(self):
        with pytest.raises(InvalidArgumentError):
            KeyBindings.from_mapping({"x": "FLY"})

    def test_default_reads_settings(self, monkeypatch):
        monkeypatch.setitem(
            settings.settings_store.values, "key_bindings", {"k": "UP", "j": "DOWN"}
        )
        bindings = KeyBindings.default()
        assert bindings.as_dict() == {"k": KeyAction.UP, "j": KeyAction.DOWN}

    def test_default_falls_back_on_malformed_settings(self, monkeypatch):
        monkeypatch.setitem(settings.settings_store.values, "key_bindings", ["up"])
        assert KeyBindings.default().resolve("up") is KeyAction.UP


class TestActionGroups:
    def test_descend_and_ascend(self):
        assert DESCEND_ACTIONS == {KeyAction.ACTIVATE, KeyAction.INCREMENT}
        assert ASCEND_ACTIONS == {KeyAction.ACTIVATE, KeyAction.DECREMENT}


class TestKeyEvent:
    def test_defaults_to_press(self):
        assert KeyEvent("up").pressed is True
        assert KeyEvent("up", pressed=False).pressed is False
