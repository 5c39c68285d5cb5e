from overlay_menu.ui.renderer import MenuLine, build_lines, layout_lines, render_menu

__all__ = [
    "MenuLine",
    "build_lines",
    "layout_lines",
    "render_menu",
]
