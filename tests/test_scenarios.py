from __future__ import annotations

import math

import pytest

from planet_duel.core.model import FieldBounds, Planet, Scene, Ship, TerminationReason
from planet_duel.core.vector import Vector2
from planet_duel.data.scenarios import (
    DEFAULT_SCENARIO_KEY,
    SCENARIO_DISPLAY_ORDER,
    SCENARIOS,
    get_scenario,
)


def test_classic_layout():
    scene = get_scenario("classic").build_scene()

    assert scene.bounds == FieldBounds(1000.0, 700.0)
    assert scene.planets == (
        Planet(Vector2(150.0, 340.0), 50.0),
        Planet(Vector2(170.0, 500.0), 45.0),
    )
    red, blue = scene.ships
    assert red.position == Vector2(40.0, 400.0)
    assert red.angle == 0.0
    assert (red.min_angle, red.max_angle) == (-math.pi, math.pi)
    assert blue.position == Vector2(250.0, 400.0)
    assert blue.angle == math.pi
    assert (blue.min_angle, blue.max_angle) == (0.0, 2.0 * math.pi)


def test_default_scenario_is_classic():
    assert DEFAULT_SCENARIO_KEY == "classic"
    assert SCENARIO_DISPLAY_ORDER[0] == "classic"


@pytest.mark.parametrize("key", sorted(SCENARIOS))
def test_every_scenario_fits_its_field(key):
    scene = get_scenario(key).build_scene()

    assert len(scene.ships) == 2
    for ship in scene.ships:
        assert scene.bounds.contains(ship.position)
        for planet in scene.planets:
            assert ship.position.distance(planet.position) > planet.radius


def test_build_scene_returns_fresh_state():
    scenario = get_scenario("classic")
    first = scenario.build_scene()
    first.ships[0].rotate(0.5)

    assert scenario.build_scene().ships[0].angle == 0.0


def test_unknown_scenario():
    with pytest.raises(KeyError, match="classic"):
        get_scenario("nope")


def test_ship_rotation_is_clamped():
    ship = Ship(Vector2(0.0, 0.0), 3.0, 30.0, 2.0, (0, 0, 0), min_angle=-math.pi, max_angle=math.pi)
    ship.rotate(1.0)
    assert ship.angle == math.pi
    ship.rotate(-10.0)
    assert ship.angle == -math.pi


def test_launch_state_is_a_snapshot():
    ship = Ship(Vector2(5.0, 6.0), 0.25, 30.0, 2.0, (0, 0, 0))
    launch = ship.launch_state()
    ship.rotate(0.5)

    assert launch.angle == 0.25
    assert launch.position == Vector2(5.0, 6.0)


def test_opponent_of():
    scene = get_scenario("classic").build_scene()
    assert scene.opponent_of(0) is scene.ships[1]
    assert scene.opponent_of(1) is scene.ships[0]
    with pytest.raises(IndexError):
        scene.opponent_of(2)


def test_opponent_of_requires_two_ships():
    scene = Scene(bounds=FieldBounds(10.0, 10.0), planets=())
    with pytest.raises(ValueError):
        scene.opponent_of(0)


def test_bounds_contains_is_exclusive():
    bounds = FieldBounds(10.0, 10.0)
    assert bounds.contains(Vector2(5.0, 5.0))
    assert not bounds.contains(Vector2(0.0, 5.0))
    assert not bounds.contains(Vector2(5.0, 10.0))
    assert bounds.size() == (10, 10)


def test_termination_reason_text():
    assert str(TerminationReason.HIT_ENEMY) == "hit enemy"
