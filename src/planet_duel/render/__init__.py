"""Rendering helpers for the planet duel."""

from .assets import (
    clear_text_cache,
    get_text_surface,
    load_font,
)
from .draw import (
    downsample_points,
    draw_missile_path,
    draw_planet,
    draw_scene,
    draw_ship,
    rotated_rect,
)
from .ui import (
    build_text_panel,
    hud_lines,
)

__all__ = [
    "build_text_panel",
    "clear_text_cache",
    "downsample_points",
    "draw_missile_path",
    "draw_planet",
    "draw_scene",
    "draw_ship",
    "get_text_surface",
    "hud_lines",
    "load_font",
    "rotated_rect",
]
