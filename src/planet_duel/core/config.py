"""Configuration dataclasses for the planet duel."""
from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PhysicsCfg:
    initial_speed: float = 4.0
    gravitational_constant: float = 0.01
    dt: float = 0.5
    max_path_length: int = 300
    enemy_collision_radius: float = 16.0

    @property
    def step_length(self) -> float:
        """Distance covered by one step when no planet pulls on the missile."""

        return self.initial_speed * self.dt


@dataclass(frozen=True)
class RenderCfg:
    background_color: tuple[int, int, int] = (255, 255, 255)
    planet_color: tuple[int, int, int] = (0, 0, 0)
    missile_path_color: tuple[int, int, int] = (120, 30, 50)
    missile_path_width: int = 2
    max_rendered_path_points: int = 400
    ship_body_size: int = 16
    hud_font_names: tuple[str, ...] = ("consolas", "dejavusansmono", "couriernew")
    hud_font_size: int = 16
    hud_text_color: tuple[int, int, int] = (30, 30, 40)
    hud_background_color: tuple[int, int, int, int] = (230, 234, 242, 200)
    hud_margin: int = 10
    fps: int = 60


@dataclass(frozen=True)
class ControlsCfg:
    angle_increment: float = 0.01 * math.pi
    ship0_increase: str = "w"
    ship0_decrease: str = "s"
    ship1_decrease: str = "o"
    ship1_increase: str = "l"
    ship0_fire: str = "x"
    ship1_fire: str = "."


PHYSICS_CFG = PhysicsCfg()
RENDER_CFG = RenderCfg()
CONTROLS_CFG = ControlsCfg()


__all__ = [
    "CONTROLS_CFG",
    "PHYSICS_CFG",
    "RENDER_CFG",
    "ControlsCfg",
    "PhysicsCfg",
    "RenderCfg",
]
