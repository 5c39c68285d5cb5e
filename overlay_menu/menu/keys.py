"""Abstract key actions and the raw-key adaptation layer.

Hosts deliver raw key names ("up", "enter", "=", ...). Menu items never see
those: they receive a :class:`KeyAction`, resolved through a
:class:`KeyBindings` table that defaults to the layout in
``overlay_menu.config.settings.DEFAULT_KEY_BINDINGS``:

    up / down        move the selection
    right / left     increment / decrement, descend / ascend
    enter / return   activate (enter a level, toggle, reset to default)
    - / =            set to minimum / maximum
    , / .            medium step down / up
    < / >            small step down / up
    /                round to nearest integer
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from overlay_menu.config import settings
from overlay_menu.logging import LoggerFactory
from overlay_menu.menu.exceptions import InvalidArgumentError

log = LoggerFactory.for_input()


class KeyAction(Enum):
    UP = "up"
    DOWN = "down"
    INCREMENT = "increment"
    DECREMENT = "decrement"
    INCREMENT_MEDIUM = "increment_medium"
    DECREMENT_MEDIUM = "decrement_medium"
    INCREMENT_SMALL = "increment_small"
    DECREMENT_SMALL = "decrement_small"
    ACTIVATE = "activate"
    MIN = "min"
    MAX = "max"
    ROUND = "round"


# Actions that enter a level (submenu rows and color rows)
DESCEND_ACTIONS = frozenset({KeyAction.ACTIVATE, KeyAction.INCREMENT})
# Actions that leave a level (back buttons)
ASCEND_ACTIONS = frozenset({KeyAction.ACTIVATE, KeyAction.DECREMENT})


@dataclass(frozen=True)
class KeyEvent:
    """A raw key event as delivered by the host."""

    key: str
    pressed: bool = True


def _normalize(raw_key: str) -> str:
    # Named keys are case-insensitive; single characters are matched exactly.
    if len(raw_key) > 1:
        return raw_key.lower()
    return raw_key


def parse_action(name) -> KeyAction:
    """Coerce an action name ("INCREMENT", "increment") or KeyAction."""
    if isinstance(name, KeyAction):
        return name
    try:
        return KeyAction[str(name).upper()]
    except KeyError:
        raise InvalidArgumentError(f"Unknown key action: {name!r}") from None


class KeyBindings:
    """Maps raw host key names to :class:`KeyAction` values."""

    def __init__(self, bindings: Optional[Mapping[str, KeyAction]] = None) -> None:
        self._bindings: dict[str, KeyAction] = {}
        for raw_key, action in (bindings or {}).items():
            self.bind(raw_key, action)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "KeyBindings":
        return cls({raw_key: parse_action(name) for raw_key, name in mapping.items()})

    @classmethod
    def default(cls) -> "KeyBindings":
        """Bindings from configuration, falling back to the built-in layout."""
        mapping = settings.get_setting("key_bindings")
        if not isinstance(mapping, dict):
            mapping = settings.DEFAULT_KEY_BINDINGS
        return cls.from_mapping(mapping)

    def bind(self, raw_key: str, action) -> None:
        self._bindings[_normalize(raw_key)] = parse_action(action)

    def unbind(self, raw_key: str) -> None:
        self._bindings.pop(_normalize(raw_key), None)

    def resolve(self, raw_key: str) -> Optional[KeyAction]:
        action = self._bindings.get(_normalize(raw_key))
        if action is None:
            log.trace(f"Key {raw_key!r} has no binding")
        return action

    def __contains__(self, raw_key: str) -> bool:
        return _normalize(raw_key) in self._bindings

    def __len__(self) -> int:
        return len(self._bindings)

    def as_dict(self) -> dict[str, KeyAction]:
        return dict(self._bindings)
