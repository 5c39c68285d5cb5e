from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple, Union

from overlay_menu.config import settings
from overlay_menu.logging import LoggerFactory
from overlay_menu.menu.keys import KeyAction, KeyBindings, KeyEvent
from overlay_menu.menu.model import MenuItem, Submenu
from overlay_menu.ui.renderer import render_menu

if TYPE_CHECKING:
    from PIL import ImageDraw, ImageFont

log = LoggerFactory.for_menu()

Color = Tuple[int, int, int]

ROOT_NAME = "top"


def inverse_color(color: Color) -> Color:
    """RGB complement, used for text drawn over the highlight box."""
    return tuple(255 - channel for channel in color)  # type: ignore[return-value]


class TextMenu:
    """A text menu overlay that can be shown, hidden and driven by keys.

    The menu owns the top level, tracks which level is active and which row
    of it is selected, and forwards keys to the selected item. Row 0 is the
    bottom row, so ``UP`` moves to a higher index.
    """

    def __init__(
        self,
        x: Optional[float] = None,
        y: Optional[float] = None,
        color: Optional[Color] = None,
        *,
        bindings: Optional[KeyBindings] = None,
    ) -> None:
        default_x, default_y = settings.get_location()
        self._x = default_x if x is None else x
        self._y = default_y if y is None else y
        self.line_spacing = settings.get_int("line_spacing", settings.DEFAULT_LINE_SPACING)
        if color is None:
            color = settings.get_color("text_color", settings.DEFAULT_TEXT_COLOR)
        self.set_color(color, settings.get_color("inverse_color"))
        self.bindings = bindings or KeyBindings.default()

        self._showing = False
        self._accept_keys = False

        self._root = Submenu(ROOT_NAME)
        self._root.strip_back_button()
        self._root.bind_menu(self)
        self._active = self._root
        self._selected_index = 0

    @property
    def root(self) -> Submenu:
        return self._root

    @property
    def active(self) -> Submenu:
        return self._active

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def highlighted_index(self) -> int:
        """Row that receives the next key, kept inside the active level."""
        return self._clamped_selection()

    @property
    def selected_item(self) -> Optional[MenuItem]:
        if self._active.is_empty():
            return None
        return self._active.get(self._clamped_selection())

    @property
    def is_showing(self) -> bool:
        return self._showing

    @property
    def accepts_input(self) -> bool:
        return self._accept_keys

    @property
    def location(self) -> Tuple[float, float]:
        return self._x, self._y

    def set_location(self, x: float, y: float) -> None:
        """Move the menu's bottom-left corner."""
        self._x = x
        self._y = y

    def set_color(self, color: Color, inverse: Optional[Color] = None) -> None:
        """Set the text color; highlighted text uses ``inverse`` or the RGB complement."""
        self.text_color: Color = tuple(color)  # type: ignore[assignment]
        self.inverse_color: Color = (
            tuple(inverse) if inverse is not None else inverse_color(self.text_color)  # type: ignore[assignment]
        )

    def add(self, *items: MenuItem) -> bool:
        return self._root.add(*items)

    def remove(self, index: int) -> MenuItem:
        return self._root.remove(index)

    def clear(self) -> None:
        self._root.clear()

    def show(self, accept_input: bool = True) -> None:
        self._showing = True
        self._accept_keys = accept_input
        log.info(f"Menu shown (input {'on' if accept_input else 'off'})")

    def hide(self) -> None:
        self._showing = False
        self._accept_keys = False
        log.info("Menu hidden")

    def set_active(self, submenu: Submenu) -> None:
        """Switch the displayed level. Called by submenus and back buttons."""
        log.debug(f"Active level: {self._active.name!r} -> {submenu.name!r}")
        self._active = submenu
        self._selected_index = 0

    def key_event(self, event: Union[KeyEvent, str]) -> bool:
        """Entry point for raw host keys. Releases and unbound keys are ignored."""
        if isinstance(event, str):
            event = KeyEvent(event)
        if not event.pressed or not self._accept_keys:
            return False
        action = self.bindings.resolve(event.key)
        if action is None:
            return False
        return self.on_key(action)

    def on_key(self, action: KeyAction) -> bool:
        """Apply one key action; return True iff something was performed."""
        if not (self._showing and self._accept_keys):
            return False
        log.trace(f"Key press {action.name} on {self._active.name!r}[{self._selected_index}]")
        if action is KeyAction.UP:
            self._selected_index = max(
                min(self._selected_index + 1, self._active.size() - 1), 0
            )
        elif action is KeyAction.DOWN:
            self._selected_index = max(self._selected_index - 1, 0)
        elif not self._active.is_empty():
            self._selected_index = self._clamped_selection()
            return self._active.get(self._selected_index).handle_key(action)
        return True

    def _clamped_selection(self) -> int:
        return max(min(self._selected_index, self._active.size() - 1), 0)

    def draw(self, draw: "ImageDraw.ImageDraw", font: Optional["ImageFont.ImageFont"] = None) -> bool:
        """Draw the active level if showing. Returns whether the menu is showing."""
        if self._showing:
            render_menu(self, draw, font=font)
        return self._showing
