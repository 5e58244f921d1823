"""Missile trajectory simulation.

A missile leaves the firing ship at a fixed speed and is pulled by every
planet. Each planet accelerates the missile by

    a = G * m_planet / r^2

toward its centre, where ``m_planet`` is the volume of a sphere of the
planet's radius (unit density). Positions are advanced before velocities, so
the first sample after the start always lies on the launch direction.

After every step the stop conditions are checked in a fixed order: fuel,
field bounds, planets (in iteration order), enemy.
"""
from __future__ import annotations

import math
from typing import Iterable, Sequence

from .config import PHYSICS_CFG, PhysicsCfg
from .model import FieldBounds, Planet, TerminationReason, Trajectory
from .vector import Vector2


def direction_from_angle(angle: float) -> Vector2:
    """Unit launch direction; angle 0 points along +x."""

    return Vector2(1.0, 0.0).rotate(angle)


def planet_mass(planet: Planet) -> float:
    return (4.0 / 3.0) * math.pi * planet.radius**3


def gravitational_acceleration(
    position: Vector2,
    planets: Iterable[Planet],
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> Vector2:
    """Summed pull of ``planets`` on a missile at ``position``."""

    ax = 0.0
    ay = 0.0
    for planet in planets:
        r_squared = planet.position.distance_squared(position)
        if r_squared == 0.0:
            # Direction is undefined at the centre.
            continue
        magnitude = cfg.gravitational_constant * planet_mass(planet) / r_squared
        direction = (planet.position - position).normalize()
        ax += direction.x * magnitude
        ay += direction.y * magnitude
    return Vector2(ax, ay)


def check_stop_reason(
    position: Vector2,
    enemy_position: Vector2,
    planets: Sequence[Planet],
    bounds: FieldBounds,
    path_length: int,
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> TerminationReason | None:
    """Return the highest-priority stop condition that holds, if any."""

    if path_length >= cfg.max_path_length:
        return TerminationReason.OUT_OF_FUEL

    if (
        position.x <= 0.0
        or position.y <= 0.0
        or position.x >= bounds.width
        or position.y >= bounds.height
    ):
        return TerminationReason.OUT_OF_RANGE

    for planet in planets:
        if position.distance(planet.position) <= planet.radius:
            return TerminationReason.HIT_PLANET

    # The enemy ship is approximated as a circle.
    if position.distance(enemy_position) <= cfg.enemy_collision_radius:
        return TerminationReason.HIT_ENEMY

    return None


def simulate(
    start_position: Vector2,
    launch_angle: float,
    enemy_position: Vector2,
    field_bounds: FieldBounds,
    planets: Iterable[Planet],
    cfg: PhysicsCfg = PHYSICS_CFG,
) -> Trajectory:
    """Integrate a missile path until it stops.

    Args:
        start_position: Spawn point, normally the firing ship's position.
        launch_angle: Launch direction in radians, see :func:`direction_from_angle`.
        enemy_position: Centre of the target ship.
        field_bounds: Playable rectangle; leaving it ends the run.
        planets: Gravitating bodies. Order only matters for which planet is
            reported first when several are hit in the same step.
        cfg: Physics constants.

    Returns:
        ``Trajectory(path, reason)``. ``path`` starts with ``start_position``
        and holds at most ``cfg.max_path_length`` points.
    """

    planets = tuple(planets)
    dt = cfg.dt

    position = start_position
    velocity = direction_from_angle(launch_angle) * cfg.initial_speed
    path = [position]

    while True:
        position = position + velocity * dt
        path.append(position)

        velocity = velocity + gravitational_acceleration(position, planets, cfg) * dt

        reason = check_stop_reason(
            position, enemy_position, planets, field_bounds, len(path), cfg
        )
        if reason is not None:
            return Trajectory(tuple(path), reason)


__all__ = [
    "check_stop_reason",
    "direction_from_angle",
    "gravitational_acceleration",
    "planet_mass",
    "simulate",
]
