from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

import pygame

from planet_duel.core.model import Planet, Ship
from planet_duel.core.vector import Vector2

if TYPE_CHECKING:  # pragma: no cover
    from planet_duel.core.config import RenderCfg


def _to_screen(point: Vector2) -> tuple[int, int]:
    return int(round(point.x)), int(round(point.y))


def rotated_rect(
    center: Vector2,
    half_width: float,
    half_height: float,
    angle: float,
) -> list[tuple[int, int]]:
    """Corners of a rectangle centred on ``center`` and rotated by ``angle``."""

    corners = (
        Vector2(-half_width, -half_height),
        Vector2(half_width, -half_height),
        Vector2(half_width, half_height),
        Vector2(-half_width, half_height),
    )
    return [_to_screen(center + corner.rotate(angle)) for corner in corners]


def draw_planet(
    surface: pygame.Surface,
    planet: Planet,
    *,
    color: tuple[int, int, int],
) -> None:
    radius = int(round(planet.radius))
    if radius <= 0:
        return
    pygame.draw.circle(surface, color, _to_screen(planet.position), radius)


def draw_ship(surface: pygame.Surface, ship: Ship, *, body_size: int) -> None:
    # Barrel
    bar = rotated_rect(ship.position, abs(ship.x_size) / 2.0, abs(ship.y_size) / 2.0, ship.angle)
    pygame.draw.polygon(surface, ship.color, bar)
    # Hull
    half = body_size / 2.0
    hull = rotated_rect(ship.position, half, half, ship.angle)
    pygame.draw.polygon(surface, ship.color, hull)


def downsample_points(
    points: Sequence[tuple[float, float]], max_points: int
) -> list[tuple[float, float]]:
    if len(points) <= max_points:
        return list(points)
    step = max(1, math.ceil(len(points) / max_points))
    sampled = list(points[::step])
    if sampled[-1] != points[-1]:
        sampled.append(points[-1])
    return sampled


def draw_missile_path(
    surface: pygame.Surface,
    path: Sequence[Vector2],
    *,
    color: tuple[int, int, int],
    width: int,
    max_points: int,
) -> None:
    if len(path) < 2:
        return
    points = downsample_points([p.as_tuple() for p in path], max_points)
    if width <= 1:
        pygame.draw.aalines(surface, color, False, points)
    else:
        pygame.draw.lines(surface, color, False, points, width)
        pygame.draw.aalines(surface, color, False, points)


def draw_scene(
    surface: pygame.Surface,
    planets: Sequence[Planet],
    ships: Sequence[Ship],
    *,
    render_cfg: RenderCfg,
    path: Sequence[Vector2] | None = None,
) -> None:
    """Clear ``surface`` and draw planets, ships and the last missile path."""

    surface.fill(render_cfg.background_color)
    for planet in planets:
        draw_planet(surface, planet, color=render_cfg.planet_color)
    for ship in ships:
        draw_ship(surface, ship, body_size=render_cfg.ship_body_size)
    if path:
        draw_missile_path(
            surface,
            path,
            color=render_cfg.missile_path_color,
            width=render_cfg.missile_path_width,
            max_points=render_cfg.max_rendered_path_points,
        )
