"""Tests for UI renderer module."""

from unittest.mock import Mock

import pytest
from PIL import Image, ImageDraw, ImageFont

from overlay_menu.menu.keys import KeyAction
from overlay_menu.menu.model import StringItem, Submenu
from overlay_menu.menu.navigator import TextMenu
from overlay_menu.menu.options import IntegerOption
from overlay_menu.ui import renderer
from overlay_menu.ui.renderer import MenuLine


def _fake_font(ascent=10, descent=2, char_width=6):
    font = Mock()
    font.getmetrics.return_value = (ascent, descent)
    font.getlength.side_effect = lambda text: len(text) * char_width
    return font


# ==============================================================================
# Helper Function Tests
# ==============================================================================


class TestHelperFunctions:
    """Test standalone helper functions in renderer.py."""

    def test_font_metrics(self):
        assert renderer._get_font_metrics(_fake_font(11, 3)) == (11, 3)

    def test_font_metrics_bbox_fallback(self):
        font = Mock()
        del font.getmetrics
        font.getbbox.return_value = (0, 1, 10, 13)
        assert renderer._get_font_metrics(font) == (12, 0)

    def test_font_metrics_min_height(self):
        font = Mock()
        del font.getmetrics
        del font.getbbox
        assert renderer._get_font_metrics(font, min_height=9) == (9, 0)

    def test_measure_text_width_getlength(self):
        font = Mock()
        font.getlength.return_value = 42.5
        assert renderer._measure_text_width(font, "test") == 42

    def test_measure_text_width_bbox(self):
        font = Mock()
        del font.getlength
        font.getbbox.return_value = (0, 0, 42, 10)
        assert renderer._measure_text_width(font, "test") == 42


# ==============================================================================
# Line Building and Layout
# ==============================================================================


class TestBuildLines:
    def test_lines_follow_index_order(self, menu):
        menu.add(StringItem("a"), IntegerOption("count", 5, 0, 10))
        menu.on_key(KeyAction.UP)
        assert renderer.build_lines(menu) == [
            MenuLine("a", False),
            MenuLine("count = 5", True),
        ]

    def test_active_level_only(self, menu):
        level = Submenu("level")
        level.add(StringItem("inside"))
        menu.add(level)
        assert renderer.build_lines(menu) == [MenuLine("> level", True)]
        menu.on_key(KeyAction.ACTIVATE)
        assert renderer.build_lines(menu) == [
            MenuLine("< back", True),
            MenuLine("inside", False),
        ]

    def test_empty_level(self, menu):
        assert renderer.build_lines(menu) == []

    def test_highlight_follows_selection_after_removal(self, menu):
        menu.add(StringItem("a"), StringItem("b"), StringItem("c"))
        menu.on_key(KeyAction.UP)
        menu.on_key(KeyAction.UP)
        menu.remove(2)

        lines = renderer.build_lines(menu)

        assert [line.highlighted for line in lines] == [False, True]
        assert menu.selected_item is menu.active.get(1)


class TestLayoutLines:
    def test_lines_stack_upward(self):
        lines = [MenuLine("a"), MenuLine("bb", True), MenuLine("ccc")]
        placements = renderer.layout_lines(
            lines, x=5, y=100, ascent=10, descent=2, spacing=5, measure=len
        )
        assert [p.baseline for p in placements] == [100, 85, 70]
        assert [p.origin for p in placements] == [(5, 90), (5, 75), (5, 60)]

    def test_only_highlighted_line_has_box(self):
        lines = [MenuLine("a"), MenuLine("bb", True)]
        placements = renderer.layout_lines(
            lines, x=5, y=100, ascent=10, descent=2, spacing=5, measure=len
        )
        assert placements[0].highlight_box is None
        assert placements[1].highlight_box == (5, 75, 7, 87)


# ==============================================================================
# Drawing
# ==============================================================================


class TestRenderMenu:
    def test_draw_calls(self, menu):
        menu.set_location(0, 50)
        menu.set_color((255, 255, 255))
        menu.add(StringItem("ab"), StringItem("cde"))
        draw = Mock()
        font = _fake_font()

        assert menu.draw(draw, font=font) is True

        draw.rectangle.assert_called_once_with((0, 40, 12, 52), fill=(255, 255, 255))
        assert draw.text.call_count == 2
        first, second = draw.text.call_args_list
        assert first.args == ((0, 40), "ab")
        assert first.kwargs["fill"] == (0, 0, 0)
        assert second.args == ((0, 25), "cde")
        assert second.kwargs["fill"] == (255, 255, 255)

    def test_render_does_not_mutate_state(self, menu):
        menu.add(StringItem("a"), StringItem("b"))
        menu.on_key(KeyAction.UP)
        renderer.render_menu(menu, Mock(), font=_fake_font())
        assert menu.selected_index == 1
        assert menu.active is menu.root

    def test_render_to_image(self, menu):
        menu.set_location(4, 60)
        menu.add(StringItem("hello"), IntegerOption("count", 5, 0, 10))
        image = Image.new("RGB", (128, 64), (0, 0, 0))

        menu.draw(ImageDraw.Draw(image), font=ImageFont.load_default())

        assert image.getbbox() is not None

    @pytest.mark.parametrize("showing", [True, False])
    def test_draw_returns_visibility(self, showing):
        text_menu = TextMenu()
        if showing:
            text_menu.show(False)
        draw = Mock()
        assert text_menu.draw(draw, font=_fake_font()) is showing

    def test_default_font_is_loaded_once(self):
        assert renderer._default_font() is renderer._default_font()

    def test_draw_without_font_uses_default(self, menu):
        menu.add(StringItem("a"))
        draw = Mock()
        menu.draw(draw)
        assert draw.text.call_args.kwargs["font"] is renderer._default_font()
