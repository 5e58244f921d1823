from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

import pygame

from planet_duel.core.model import Ship
from .assets import Color, get_text_surface

if TYPE_CHECKING:  # pragma: no cover
    from planet_duel.core.controls import Shot


def hud_lines(ships: Sequence[Ship], last_shot: Shot | None) -> list[str]:
    """Text shown in the HUD: each ship's aim plus the last result."""

    lines = [
        f"Ship {index + 1}: {math.degrees(ship.angle):7.1f} deg"
        for index, ship in enumerate(ships)
    ]
    if last_shot is None:
        lines.append("No missile fired")
    else:
        trajectory = last_shot.trajectory
        lines.append(
            f"Ship {last_shot.shooter + 1} missile: {trajectory.reason} "
            f"({len(trajectory.path)} steps)"
        )
    return lines


def build_text_panel(
    font: pygame.font.Font,
    lines: Sequence[tuple[str, tuple[int, int, int]]],
    *,
    background_color: Color,
    padding: tuple[int, int] = (12, 10),
) -> pygame.Surface:
    if not lines:
        raise ValueError("lines must not be empty")
    padding_x, padding_y = padding
    line_height = font.get_linesize()
    width = max(font.size(text)[0] for text, _ in lines) + padding_x * 2
    height = line_height * len(lines) + padding_y * 2
    panel_surface = pygame.Surface((width, height), pygame.SRCALPHA)
    pygame.draw.rect(
        panel_surface,
        background_color,
        panel_surface.get_rect(),
        border_radius=8,
    )
    for idx, (text, color) in enumerate(lines):
        if not text:
            continue
        text_surf = get_text_surface(font, text, color)
        panel_surface.blit(text_surf, (padding_x, padding_y + idx * line_height))
    return panel_surface
