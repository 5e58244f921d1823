from __future__ import annotations

import logging

import pygame
import pytest

from planet_duel import app
from planet_duel.core.config import RENDER_CFG
from planet_duel.core.controls import fire
from planet_duel.data.scenarios import get_scenario


def _scripted_events(monkeypatch, batches):
    batches = list(batches)

    def fake_get():
        return batches.pop(0) if batches else [pygame.event.Event(pygame.QUIT)]

    monkeypatch.setattr(pygame.event, "get", fake_get)


def test_parser_defaults():
    args = app.build_parser().parse_args([])
    assert args.scenario == "classic"
    assert args.log_level == "INFO"
    assert args.fps == RENDER_CFG.fps


def test_parser_rejects_unknown_scenario():
    with pytest.raises(SystemExit):
        app.build_parser().parse_args(["--scenario", "moon"])


def test_render_frame_draws_hud():
    pygame.font.init()
    scene = get_scenario("classic").build_scene()
    screen = pygame.Surface(scene.bounds.size())
    font = pygame.font.Font(None, 16)

    app.render_frame(screen, scene, fire(scene, 0), font)

    margin = RENDER_CFG.hud_margin
    # Inside the panel, past its rounded corner and above the first text line.
    assert tuple(screen.get_at((margin + 10, margin + 4)))[:3] != RENDER_CFG.background_color


def test_run_fires_and_quits(monkeypatch, caplog):
    scene = get_scenario("classic").build_scene()
    _scripted_events(
        monkeypatch,
        [
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_w, unicode="w")],
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_x, unicode="x")],
            [pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE, unicode="\x1b")],
        ],
    )
    pygame.init()
    try:
        with caplog.at_level(logging.INFO, logger="planet_duel.app"):
            app.run(scene, fps=1000)
    finally:
        pygame.quit()

    assert scene.ships[0].angle > 0.0
    assert "Ship 1 fired" in caplog.text


def test_main_returns_zero(monkeypatch):
    _scripted_events(monkeypatch, [])
    assert app.main(["--scenario", "gauntlet", "--fps", "1000", "--log-level", "WARNING"]) == 0
