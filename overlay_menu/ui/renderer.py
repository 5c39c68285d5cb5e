from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Callable, List, Optional, Sequence, Tuple

from PIL import ImageFont

if TYPE_CHECKING:
    from PIL import ImageDraw

    from overlay_menu.menu.navigator import TextMenu

Box = Tuple[float, float, float, float]


@dataclass(frozen=True)
class MenuLine:
    text: str
    highlighted: bool = False


@dataclass(frozen=True)
class LinePlacement:
    line: MenuLine
    origin: Tuple[float, float]
    baseline: float
    highlight_box: Optional[Box] = None


@lru_cache(maxsize=1)
def _default_font():
    return ImageFont.load_default()


def _get_font_metrics(font, min_height=8) -> Tuple[int, int]:
    """Return (ascent, descent) for FreeType and bitmap fonts alike."""
    try:
        ascent, descent = font.getmetrics()
        return ascent, descent
    except AttributeError:
        pass
    try:
        bbox = font.getbbox("Ag")
        return max(bbox[3] - bbox[1], min_height), 0
    except AttributeError:
        return min_height, 0


def _measure_text_width(font, text: str) -> int:
    try:
        return int(font.getlength(text))
    except AttributeError:
        bbox = font.getbbox(text)
        return bbox[2] - bbox[0]


def build_lines(menu: "TextMenu") -> List[MenuLine]:
    """Display lines of the active level in index order (index 0 is the bottom)."""
    selected = menu.highlighted_index
    return [
        MenuLine(item.display(), index == selected)
        for index, item in enumerate(menu.active)
    ]


def layout_lines(
    lines: Sequence[MenuLine],
    x: float,
    y: float,
    ascent: float,
    descent: float,
    spacing: float,
    measure: Callable[[str], float],
) -> List[LinePlacement]:
    """Stack lines upward from the baseline at ``y``."""
    placements = []
    for index, line in enumerate(lines):
        baseline = y - index * (ascent + spacing)
        box = None
        if line.highlighted:
            box = (x, baseline - ascent, x + measure(line.text), baseline + descent)
        placements.append(LinePlacement(line, (x, baseline - ascent), baseline, box))
    return placements


def render_menu(menu: "TextMenu", draw: "ImageDraw.ImageDraw", font=None) -> None:
    """Draw the active level of ``menu``. Reads menu state only."""
    font = font or _default_font()
    ascent, descent = _get_font_metrics(font)
    x, y = menu.location
    placements = layout_lines(
        build_lines(menu),
        x,
        y,
        ascent,
        descent,
        menu.line_spacing,
        lambda text: _measure_text_width(font, text),
    )
    for placement in placements:
        text_color = menu.text_color
        if placement.highlight_box is not None:
            draw.rectangle(placement.highlight_box, fill=menu.text_color)
            text_color = menu.inverse_color
        draw.text(placement.origin, placement.line.text, font=font, fill=text_color)
