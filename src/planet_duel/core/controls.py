"""Keyboard handling: ship aiming and missile launches."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import CONTROLS_CFG, PHYSICS_CFG, ControlsCfg, PhysicsCfg
from .model import Scene, Trajectory
from .physics import simulate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Shot:
    shooter: int
    trajectory: Trajectory


def fire(scene: Scene, shooter: int, physics_cfg: PhysicsCfg = PHYSICS_CFG) -> Shot:
    """Launch a missile from ``scene.ships[shooter]`` at the other ship."""

    launch = scene.ships[shooter].launch_state()
    enemy = scene.opponent_of(shooter)
    trajectory = simulate(
        launch.position,
        launch.angle,
        enemy.position,
        scene.bounds,
        scene.planets,
        physics_cfg,
    )
    logger.debug(
        "Missile result for ship %d: %s after %d points",
        shooter,
        trajectory.reason,
        len(trajectory.path),
    )
    return Shot(shooter=shooter, trajectory=trajectory)


def rotation_for_key(key: str, cfg: ControlsCfg = CONTROLS_CFG) -> tuple[int, float] | None:
    """Return ``(ship_index, angle_delta)`` for an aiming key."""

    step = cfg.angle_increment
    bindings = {
        cfg.ship0_increase: (0, step),
        cfg.ship0_decrease: (0, -step),
        cfg.ship1_decrease: (1, -step),
        cfg.ship1_increase: (1, step),
    }
    return bindings.get(key)


def handle_key(
    scene: Scene,
    key: str,
    controls_cfg: ControlsCfg = CONTROLS_CFG,
    physics_cfg: PhysicsCfg = PHYSICS_CFG,
) -> Shot | None:
    """Apply one key press to ``scene``; returns the shot for fire keys."""

    logger.debug("Received key press: %r", key)

    rotation = rotation_for_key(key, controls_cfg)
    if rotation is not None:
        index, delta = rotation
        scene.ships[index].rotate(delta)
        return None

    if key == controls_cfg.ship0_fire:
        return fire(scene, 0, physics_cfg)
    if key == controls_cfg.ship1_fire:
        return fire(scene, 1, physics_cfg)
    return None


__all__ = ["Shot", "fire", "handle_key", "rotation_for_key"]
