"""Scenario definitions for preset duel layouts."""
from __future__ import annotations

import math
from dataclasses import dataclass

from planet_duel.core.model import FieldBounds, Planet, Scene, Ship
from planet_duel.core.vector import Vector2

FIELD_SIZE: tuple[float, float] = (1000.0, 700.0)

SHIP0_COLOR = (255, 0, 0)
SHIP1_COLOR = (0, 0, 255)


@dataclass(frozen=True)
class Scenario:
    key: str
    name: str
    planets: tuple[tuple[float, float, float], ...]
    ship_positions: tuple[tuple[float, float], tuple[float, float]]
    description: str
    field_size: tuple[float, float] = FIELD_SIZE

    def build_scene(self) -> Scene:
        """Return a fresh scene; ship 0 faces +x, ship 1 faces -x."""

        (x0, y0), (x1, y1) = self.ship_positions
        ships = [
            Ship(
                position=Vector2(x0, y0),
                angle=0.0,
                x_size=-30.0,
                y_size=2.0,
                color=SHIP0_COLOR,
                min_angle=-math.pi,
                max_angle=math.pi,
            ),
            Ship(
                position=Vector2(x1, y1),
                angle=math.pi,
                x_size=30.0,
                y_size=2.0,
                color=SHIP1_COLOR,
                min_angle=0.0,
                max_angle=2.0 * math.pi,
            ),
        ]
        planets = tuple(
            Planet(position=Vector2(x, y), radius=radius) for x, y, radius in self.planets
        )
        return Scene(bounds=FieldBounds(*self.field_size), planets=planets, ships=ships)


SCENARIO_DEFINITIONS: tuple[Scenario, ...] = (
    Scenario(
        key="classic",
        name="Classic",
        planets=((150.0, 340.0, 50.0), (170.0, 500.0, 45.0)),
        ship_positions=((40.0, 400.0), (250.0, 400.0)),
        description="Two planets between two close ships.",
    ),
    Scenario(
        key="wide",
        name="Wide",
        planets=((420.0, 300.0, 60.0), (600.0, 430.0, 40.0)),
        ship_positions=((80.0, 350.0), (920.0, 350.0)),
        description="Ships on opposite edges with the planets mid-field.",
    ),
    Scenario(
        key="gauntlet",
        name="Gauntlet",
        planets=((350.0, 200.0, 35.0), (500.0, 350.0, 55.0), (650.0, 500.0, 35.0)),
        ship_positions=((100.0, 600.0), (900.0, 100.0)),
        description="Three planets on the diagonal between the ships.",
    ),
)

SCENARIOS: dict[str, Scenario] = {scenario.key: scenario for scenario in SCENARIO_DEFINITIONS}
SCENARIO_DISPLAY_ORDER: list[str] = [scenario.key for scenario in SCENARIO_DEFINITIONS]
DEFAULT_SCENARIO_KEY = SCENARIO_DISPLAY_ORDER[0]


def get_scenario(key: str) -> Scenario:
    try:
        return SCENARIOS[key]
    except KeyError:
        raise KeyError(
            f"unknown scenario {key!r}; choose from {', '.join(SCENARIO_DISPLAY_ORDER)}"
        ) from None


__all__ = [
    "DEFAULT_SCENARIO_KEY",
    "FIELD_SIZE",
    "SCENARIO_DEFINITIONS",
    "SCENARIO_DISPLAY_ORDER",
    "SCENARIOS",
    "Scenario",
    "get_scenario",
]
