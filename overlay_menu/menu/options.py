"""Editable value items: integers, floats, booleans and enumerations.

Every option follows the same contract:

- ``get()`` returns the current value.
- ``set(value)`` stores a clamped or validated value and returns True iff the
  stored value changed.
- ``handle_key(action)`` applies one key binding and returns True iff it
  changed something.

Bounds are validated once, at construction. After that ``set`` and
``handle_key`` never raise for numeric options; they clamp.
"""

from __future__ import annotations

import math
import struct
from typing import Sequence, Tuple

from overlay_menu.logging import LoggerFactory
from overlay_menu.menu.exceptions import (
    InitialValueError,
    InvalidBoundsError,
    InvalidIndexError,
)
from overlay_menu.menu.keys import KeyAction
from overlay_menu.menu.model import MenuItem

log = LoggerFactory.for_menu()


def _validate_bounds(name: str, value, minimum, maximum) -> None:
    if maximum < minimum:
        log.warning(f"Rejected option {name!r}: max {maximum} < min {minimum}")
        raise InvalidBoundsError(name, minimum, maximum)
    if value < minimum or value > maximum:
        log.warning(f"Rejected option {name!r}: {value} outside [{minimum}, {maximum}]")
        raise InitialValueError(name, value, minimum, maximum)


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


class IntegerOption(MenuItem):
    """An integer restricted to ``[minimum, maximum]``.

    Keys: right/left step by one, enter resets to the initial value,
    ``-`` and ``=`` jump to the minimum and maximum.
    """

    def __init__(self, name: str, value: int, minimum: int, maximum: int):
        super().__init__(name)
        _validate_bounds(name, value, minimum, maximum)
        self._value = int(value)
        self._default = int(value)
        self._min = int(minimum)
        self._max = int(maximum)

    @property
    def minimum(self) -> int:
        return self._min

    @property
    def maximum(self) -> int:
        return self._max

    @property
    def default(self) -> int:
        return self._default

    def display(self) -> str:
        return f"{self.name} = {self._value}"

    def handle_key(self, action: KeyAction) -> bool:
        if action is KeyAction.INCREMENT:
            return self.add(1)
        if action is KeyAction.DECREMENT:
            return self.add(-1)
        if action is KeyAction.ACTIVATE:
            return self.set(self._default)
        if action is KeyAction.MIN:
            return self.set(self._min)
        if action is KeyAction.MAX:
            return self.set(self._max)
        return False

    def get(self) -> int:
        return self._value

    def set(self, value: int) -> bool:
        old_value = self._value
        self._value = max(min(int(value), self._max), self._min)
        if self._value != old_value:
            log.debug(f"{self.name}: {old_value} -> {self._value}")
        return self._value != old_value

    def add(self, delta: int) -> bool:
        return self.set(self._value + delta)


class DoubleOption(MenuItem):
    """A float restricted to ``[minimum, maximum]``, edited at three step sizes."""

    STEP_LARGE = 1.0
    STEP_MEDIUM = 0.1
    STEP_SMALL = 0.01

    def __init__(self, name: str, value: float, minimum: float, maximum: float):
        super().__init__(name)
        _validate_bounds(name, value, minimum, maximum)
        self._value = float(value)
        self._default = float(value)
        self._min = float(minimum)
        self._max = float(maximum)

    @property
    def minimum(self) -> float:
        return self._min

    @property
    def maximum(self) -> float:
        return self._max

    @property
    def default(self) -> float:
        return self._default

    def display(self) -> str:
        return f"{self.name} = {self._value:.2f}"

    def handle_key(self, action: KeyAction) -> bool:
        steps = {
            KeyAction.INCREMENT: self.STEP_LARGE,
            KeyAction.DECREMENT: -self.STEP_LARGE,
            KeyAction.INCREMENT_MEDIUM: self.STEP_MEDIUM,
            KeyAction.DECREMENT_MEDIUM: -self.STEP_MEDIUM,
            KeyAction.INCREMENT_SMALL: self.STEP_SMALL,
            KeyAction.DECREMENT_SMALL: -self.STEP_SMALL,
        }
        if action in steps:
            return self.add(steps[action])
        if action is KeyAction.ACTIVATE:
            return self.set(self._default)
        if action is KeyAction.MIN:
            return self.set(self._min)
        if action is KeyAction.MAX:
            return self.set(self._max)
        if action is KeyAction.ROUND:
            return self.round_value()
        return False

    def get(self) -> float:
        return self._value

    def set(self, value: float) -> bool:
        old_value = self._value
        self._value = max(min(float(value), self._max), self._min)
        if self._value != old_value:
            log.debug(f"{self.name}: {old_value:.2f} -> {self._value:.2f}")
        return self._value != old_value

    def add(self, delta: float) -> bool:
        return self.set(self._value + delta)

    def round_value(self) -> bool:
        """Round to the nearest integer, halves toward positive infinity.

        The value is narrowed to single precision first, so 2.4999999999
        rounds to 3 just like it would in a 32-bit float pipeline.
        """
        return self.set(float(math.floor(_to_float32(self._value) + 0.5)))


class ToggleOption(MenuItem):
    """A boolean flipped by enter, left or right."""

    def __init__(self, name: str, value: bool = False):
        super().__init__(name)
        self._value = bool(value)

    def display(self) -> str:
        return f"{self.name} = {str(self._value).lower()}"

    def handle_key(self, action: KeyAction) -> bool:
        if action in (KeyAction.INCREMENT, KeyAction.DECREMENT, KeyAction.ACTIVATE):
            return self.toggle()
        return False

    def get(self) -> bool:
        return self._value

    def set(self, value: bool) -> bool:
        old_value = self._value
        self._value = bool(value)
        if self._value != old_value:
            log.debug(f"{self.name}: {old_value} -> {self._value}")
        return self._value != old_value

    def toggle(self) -> bool:
        return self.set(not self._value)


class EnumeratedOption(MenuItem):
    """One value out of a fixed list of strings.

    Left moves to the following entry and right to the preceding one, both
    wrapping around the ends. Enter resets to the initial entry; ``-`` and
    ``=`` jump to the first and last entry.
    """

    def __init__(self, name: str, options: Sequence[str], index: int = 0):
        super().__init__(name)
        self._options: Tuple[str, ...] = tuple(options)
        if not 0 <= index < len(self._options):
            log.warning(f"Rejected option {name!r}: initial index {index} out of range")
            raise InvalidIndexError(name, index, len(self._options))
        self._selected = index
        self._default = index

    @property
    def options(self) -> Tuple[str, ...]:
        return self._options

    @property
    def default(self) -> int:
        return self._default

    @property
    def selected_option(self) -> str:
        return self._options[self._selected]

    def display(self) -> str:
        return f"{self.name} = {self.selected_option}"

    def handle_key(self, action: KeyAction) -> bool:
        if action is KeyAction.DECREMENT:
            return self.previous()
        if action is KeyAction.INCREMENT:
            return self.next()
        if action is KeyAction.ACTIVATE:
            return self.set(self._default)
        if action is KeyAction.MIN:
            return self.set(0)
        if action is KeyAction.MAX:
            return self.set(len(self._options) - 1)
        return False

    def previous(self) -> bool:
        self._selected = (self._selected + 1) % len(self._options)
        return True

    def next(self) -> bool:
        self._selected -= 1
        if self._selected < 0:
            self._selected = len(self._options) - 1
        return True

    def get(self) -> int:
        return self._selected

    def set(self, index: int) -> bool:
        if not 0 <= index < len(self._options):
            raise InvalidIndexError(self.name, index, len(self._options))
        changed = self._selected != index
        self._selected = index
        if changed:
            log.debug(f"{self.name}: -> {self.selected_option!r}")
        return changed
