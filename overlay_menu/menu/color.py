"""Color option: three bounded components behind their own submenu.

Packing and unpacking go through a :class:`ColorCodec` instead of any
shared color-mode state, so reading a color never changes how the host
interprets other colors.

Packed colors are opaque ARGB integers (``0xFFRRGGBB``). In HSB mode every
component, hue included, uses the 0-255 range.
"""

from __future__ import annotations

import colorsys
from enum import Enum
from typing import TYPE_CHECKING, Optional, Protocol, Tuple

from PIL import ImageColor

from overlay_menu.logging import LoggerFactory
from overlay_menu.menu.exceptions import ComponentIndexError, InvalidColorModeError
from overlay_menu.menu.keys import KeyAction
from overlay_menu.menu.model import ENTER_MARKER, MenuItem, Submenu
from overlay_menu.menu.options import IntegerOption

if TYPE_CHECKING:
    from overlay_menu.menu.navigator import TextMenu

log = LoggerFactory.for_menu()

COMPONENT_MIN = 0
COMPONENT_MAX = 255
OPAQUE_ALPHA = 0xFF000000

Components = Tuple[int, int, int]


class ColorMode(Enum):
    RGB = "RGB"
    HSB = "HSB"

    @classmethod
    def coerce(cls, mode) -> "ColorMode":
        if isinstance(mode, cls):
            return mode
        if isinstance(mode, str):
            try:
                return cls(mode.upper())
            except ValueError:
                pass
        raise InvalidColorModeError(mode)

    @property
    def labels(self) -> Tuple[str, str, str]:
        return tuple(self.value)  # type: ignore[return-value]


class ColorCodec(Protocol):
    def pack(self, c1: int, c2: int, c3: int, mode: ColorMode) -> int:
        ...

    def unpack(self, packed: int, mode: ColorMode) -> Components:
        ...


def pack_rgb(red: int, green: int, blue: int) -> int:
    return OPAQUE_ALPHA | (red << 16) | (green << 8) | blue


def unpack_rgb(packed: int) -> Components:
    return (packed >> 16) & 0xFF, (packed >> 8) & 0xFF, packed & 0xFF


class PillowColorCodec:
    """Default codec. HSB packing goes through Pillow's color parser and
    unpacking rounds each channel to the nearest step.
    """

    def pack(self, c1: int, c2: int, c3: int, mode: ColorMode) -> int:
        if mode is ColorMode.RGB:
            return pack_rgb(c1, c2, c3)
        hue = c1 * 360 / COMPONENT_MAX
        saturation = c2 * 100 / COMPONENT_MAX
        brightness = c3 * 100 / COMPONENT_MAX
        red, green, blue = ImageColor.getrgb(
            f"hsb({hue}, {saturation}%, {brightness}%)"
        )[:3]
        return pack_rgb(red, green, blue)

    def unpack(self, packed: int, mode: ColorMode) -> Components:
        rgb = unpack_rgb(packed)
        if mode is ColorMode.RGB:
            return rgb
        hue, saturation, brightness = colorsys.rgb_to_hsv(
            *(channel / COMPONENT_MAX for channel in rgb)
        )
        return (
            round(hue * COMPONENT_MAX),
            round(saturation * COMPONENT_MAX),
            round(brightness * COMPONENT_MAX),
        )


DEFAULT_CODEC = PillowColorCodec()


class ColorOption(MenuItem):
    """A color made of three components, each editable in a nested level.

    Entering the row (enter or right) opens a submenu with one integer
    option per component and a back button. With RGB the components are
    red, green and blue; with HSB they are hue, saturation and brightness.
    """

    def __init__(
        self,
        name: str,
        mode,
        c1: int,
        c2: int,
        c3: int,
        codec: Optional[ColorCodec] = None,
    ):
        super().__init__(name)
        try:
            self._mode = ColorMode.coerce(mode)
        except InvalidColorModeError:
            log.warning(f"Rejected color {name!r}: invalid mode {mode!r}")
            raise
        self._codec = codec or DEFAULT_CODEC
        first, second, third = self._mode.labels
        self._components = (
            IntegerOption(first, c1, COMPONENT_MIN, COMPONENT_MAX),
            IntegerOption(second, c2, COMPONENT_MIN, COMPONENT_MAX),
            IntegerOption(third, c3, COMPONENT_MIN, COMPONENT_MAX),
        )
        self._color_menu = Submenu(f"{name} menu")
        self._color_menu.add(*reversed(self._components))

    @property
    def mode(self) -> ColorMode:
        return self._mode

    @property
    def color_menu(self) -> Submenu:
        return self._color_menu

    @property
    def components(self) -> Components:
        return tuple(component.get() for component in self._components)  # type: ignore[return-value]

    def get(self) -> int:
        return self._codec.pack(*self.components, self._mode)

    def set(self, packed: int) -> bool:
        """Set all components from a packed color. Returns whether any changed.

        Components that already pack to ``packed`` are kept as they are, so
        several HSB triples naming the same RGB color never drift into
        one another.
        """
        if packed == self.get():
            return False
        values = self._codec.unpack(packed, self._mode)
        changed = [
            component.set(round(value))
            for component, value in zip(self._components, values)
        ]
        return any(changed)

    def get_component(self, component: int) -> int:
        return self._component(component).get()

    def set_component(self, value: int, component: int) -> bool:
        return self._component(component).set(value)

    def _component(self, component: int) -> IntegerOption:
        if (
            not isinstance(component, int)
            or isinstance(component, bool)
            or not 0 <= component <= 2
        ):
            raise ComponentIndexError(component)
        return self._components[component]

    def display(self) -> str:
        return ENTER_MARKER + self.name

    def handle_key(self, action: KeyAction) -> bool:
        return self._color_menu.handle_key(action)

    def on_attached(self, container: Submenu, menu: Optional["TextMenu"]) -> None:
        self._color_menu.on_attached(container, menu)

    def bind_menu(self, menu: Optional["TextMenu"]) -> None:
        self._color_menu.bind_menu(menu)
