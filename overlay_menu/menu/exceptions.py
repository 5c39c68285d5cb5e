"""Custom exceptions for menu construction and navigation.

Exception Hierarchy:
    MenuError (base)
        ├── InvalidArgumentError (also ValueError)
        │   ├── InvalidBoundsError
        │   ├── InitialValueError
        │   ├── InvalidIndexError
        │   ├── InvalidColorModeError
        │   └── ComponentIndexError
        └── MenuInvariantError (also AssertionError)
            └── MissingParentError

Construction errors are raised from ``__init__`` and never clamp silently.
Usage errors are raised before any state is touched. Invariant errors signal
a programming mistake in the host and are not meant to be recovered from.

Usage:
    from overlay_menu.menu.exceptions import InvalidBoundsError

    if maximum < minimum:
        raise InvalidBoundsError(name, minimum, maximum)
"""

from __future__ import annotations

from typing import Any


class MenuError(Exception):
    """Base exception for all menu errors."""


class InvalidArgumentError(MenuError, ValueError):
    """An argument was rejected before any state changed."""


class InvalidBoundsError(InvalidArgumentError):
    """Maximum is smaller than minimum."""

    def __init__(self, name: str, minimum: Any, maximum: Any):
        self.name = name
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Max cannot be smaller than min for {name!r}: {maximum} < {minimum}"
        )


class InitialValueError(InvalidArgumentError):
    """Initial value is outside the option's bounds."""

    def __init__(self, name: str, value: Any, minimum: Any, maximum: Any):
        self.name = name
        self.value = value
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Initial value {value} for {name!r} not in range [{minimum}, {maximum}]"
        )


class InvalidIndexError(InvalidArgumentError):
    """Index into an enumerated option's values is out of range."""

    def __init__(self, name: str, index: int, length: int):
        self.name = name
        self.index = index
        self.length = length
        super().__init__(
            f"Invalid index {index} for {name!r}: must be in [0, {length - 1}]"
        )


class InvalidColorModeError(InvalidArgumentError):
    """Color mode is neither RGB nor HSB."""

    def __init__(self, mode: Any):
        self.mode = mode
        super().__init__(f"Invalid color mode: {mode!r}")


class ComponentIndexError(InvalidArgumentError):
    """Color component index is not 0, 1 or 2."""

    def __init__(self, component: Any):
        self.component = component
        super().__init__(
            f"Component argument must be 0, 1, or 2. Given: {component!r}"
        )


class MenuInvariantError(MenuError, AssertionError):
    """The menu tree is wired inconsistently."""


class MissingParentError(MenuInvariantError):
    """A back button was activated in a submenu with no parent or menu."""

    def __init__(self, submenu_name: str, missing: str = "parent"):
        self.submenu_name = submenu_name
        self.missing = missing
        super().__init__(
            f"Back button of {submenu_name!r} activated without a {missing}"
        )
