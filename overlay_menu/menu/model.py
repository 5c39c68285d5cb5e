from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator, List, Optional

from overlay_menu.logging import LoggerFactory
from overlay_menu.menu.exceptions import MissingParentError
from overlay_menu.menu.keys import ASCEND_ACTIONS, DESCEND_ACTIONS, KeyAction

if TYPE_CHECKING:
    from overlay_menu.menu.navigator import TextMenu

log = LoggerFactory.for_menu()

ENTER_MARKER = "> "
BACK_LABEL = "< back"


class MenuItem(ABC):
    """Anything that can be placed in a menu level.

    An item renders as a single line of text and may react to key actions
    while it is selected. ``UP`` and ``DOWN`` are reserved for the menu
    itself and never reach an item.
    """

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def display(self) -> str:
        """Text shown for this item. Should be short and contain no newlines."""

    @abstractmethod
    def handle_key(self, action: KeyAction) -> bool:
        """React to ``action``; return True iff something happened."""

    def on_attached(self, container: "Submenu", menu: Optional["TextMenu"]) -> None:
        """Called by ``container`` right after this item was added to it."""

    def bind_menu(self, menu: Optional["TextMenu"]) -> None:
        """Propagate the owning menu to any levels this item owns."""

    def __str__(self) -> str:
        return self.display()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class StringItem(MenuItem):
    """A label that only displays text. Useful to separate groups of options."""

    def __init__(self, text: Optional[str] = None):
        if text is None:
            text = ""
        super().__init__(text)
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def display(self) -> str:
        return self._text

    def handle_key(self, action: KeyAction) -> bool:
        return False


class Submenu(MenuItem):
    """One level of the menu tree, and the row that enters it.

    Items are kept in insertion order; index 0 is drawn at the bottom. Every
    new submenu starts with a back button at index 0. ``parent`` and ``menu``
    are weak references so a tree never keeps its containers alive.
    """

    def __init__(self, name: str):
        super().__init__(name)
        self._items: List[MenuItem] = [BackButton(self)]
        self._parent_ref: Optional[weakref.ReferenceType[Submenu]] = None
        self._menu_ref: Optional[weakref.ReferenceType[TextMenu]] = None

    @property
    def parent(self) -> Optional["Submenu"]:
        return self._parent_ref() if self._parent_ref is not None else None

    @property
    def menu(self) -> Optional["TextMenu"]:
        return self._menu_ref() if self._menu_ref is not None else None

    def add(self, *items: MenuItem) -> bool:
        """Append items in argument order. Leftmost ends up closest to the bottom."""
        added = True
        for item in items:
            before = len(self._items)
            self._items.append(item)
            added = added and len(self._items) == before + 1
            item.on_attached(self, self.menu)
        return added

    def on_attached(self, container: "Submenu", menu: Optional["TextMenu"]) -> None:
        self._parent_ref = weakref.ref(container)
        self.bind_menu(menu)

    def bind_menu(self, menu: Optional["TextMenu"]) -> None:
        self._menu_ref = weakref.ref(menu) if menu is not None else None
        for item in self._items:
            item.bind_menu(menu)

    def is_empty(self) -> bool:
        return not self._items

    def size(self) -> int:
        return len(self._items)

    def get(self, index: int) -> MenuItem:
        return self._items[index]

    def remove(self, index: int) -> MenuItem:
        # Descendants keep their links; detaching them is up to the caller.
        return self._items.pop(index)

    def clear(self) -> None:
        self._items.clear()

    def strip_back_button(self) -> None:
        """Drop the back button. Only the top level of a menu should lack one."""
        if self._items and isinstance(self._items[0], BackButton):
            self._items.pop(0)

    def has_back_button(self) -> bool:
        return bool(self._items) and isinstance(self._items[0], BackButton)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[MenuItem]:
        return iter(list(self._items))

    def display(self) -> str:
        return ENTER_MARKER + self.name

    def handle_key(self, action: KeyAction) -> bool:
        if action not in DESCEND_ACTIONS:
            return False
        menu = self.menu
        if menu is None:
            log.debug(f"Submenu {self.name!r} is not attached to a menu")
            return False
        menu.set_active(self)
        return True


class BackButton(MenuItem):
    """The row at the bottom of every non-root level that returns to the parent."""

    def __init__(self, owner: Submenu):
        super().__init__(f"{owner.name} back")
        self._owner_ref = weakref.ref(owner)

    @property
    def owner(self) -> Optional[Submenu]:
        return self._owner_ref()

    def display(self) -> str:
        return BACK_LABEL

    def handle_key(self, action: KeyAction) -> bool:
        if action not in ASCEND_ACTIONS:
            return False
        owner = self.owner
        if owner is None:
            raise MissingParentError(self.name, "submenu")
        parent = owner.parent
        if parent is None:
            log.error(f"Back button activated in {owner.name!r} with no parent")
            raise MissingParentError(owner.name)
        menu = owner.menu
        if menu is None:
            log.error(f"Back button activated in {owner.name!r} with no menu")
            raise MissingParentError(owner.name, "menu")
        menu.set_active(parent)
        return True
