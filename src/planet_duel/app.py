"""
Planet Duel
===========

Two ships, two planets, one missile at a time. Aim with the keys below and
watch gravity bend the shot.

    ship 1 (red):  w / s aim, x fire
    ship 2 (blue): o / l aim, . fire
    Esc quits.
"""
from __future__ import annotations

import argparse
import logging
from typing import Sequence

import pygame

from planet_duel.core.config import CONTROLS_CFG, PHYSICS_CFG, RENDER_CFG, RenderCfg
from planet_duel.core.controls import Shot, handle_key
from planet_duel.core.logging_utils import LOG_LEVELS, configure_logging
from planet_duel.core.model import Scene
from planet_duel.data.scenarios import DEFAULT_SCENARIO_KEY, SCENARIO_DISPLAY_ORDER, get_scenario
from planet_duel.render import build_text_panel, draw_scene, hud_lines, load_font

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Planet Duel"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Two-player gravity artillery duel.")
    parser.add_argument(
        "--scenario",
        choices=SCENARIO_DISPLAY_ORDER,
        default=DEFAULT_SCENARIO_KEY,
        help="Scene layout to play (default: %(default)s).",
    )
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="INFO",
        help="Logging verbosity (default: %(default)s).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=RENDER_CFG.fps,
        help="Frame rate cap (default: %(default)s).",
    )
    return parser


def render_frame(
    screen: pygame.Surface,
    scene: Scene,
    last_shot: Shot | None,
    font: pygame.font.Font,
    render_cfg: RenderCfg = RENDER_CFG,
) -> None:
    draw_scene(
        screen,
        scene.planets,
        scene.ships,
        render_cfg=render_cfg,
        path=last_shot.trajectory.path if last_shot is not None else None,
    )
    lines = [(text, render_cfg.hud_text_color) for text in hud_lines(scene.ships, last_shot)]
    panel = build_text_panel(font, lines, background_color=render_cfg.hud_background_color)
    screen.blit(panel, (render_cfg.hud_margin, render_cfg.hud_margin))


def run(scene: Scene, fps: int, render_cfg: RenderCfg = RENDER_CFG) -> None:
    """Open the window and run the event loop until the player quits."""

    width, height = scene.bounds.size()
    screen = pygame.display.set_mode((width, height))
    pygame.display.set_caption(WINDOW_TITLE)
    logger.debug("Set window size to %dx%d", width, height)

    font = load_font(render_cfg.hud_font_names, render_cfg.hud_font_size)
    clock = pygame.time.Clock()
    last_shot: Shot | None = None

    running = True
    while running:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                    continue
                shot = handle_key(scene, event.unicode, CONTROLS_CFG, PHYSICS_CFG)
                if shot is not None:
                    last_shot = shot
                    logger.info(
                        "Ship %d fired: %s", shot.shooter + 1, shot.trajectory.reason
                    )

        render_frame(screen, scene, last_shot, font, render_cfg)
        pygame.display.flip()
        clock.tick(fps)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    scenario = get_scenario(args.scenario)
    logger.info("Starting scenario %r: %s", scenario.key, scenario.description)

    pygame.init()
    try:
        run(scenario.build_scene(), max(1, args.fps))
    finally:
        pygame.quit()
    logger.info("Bye")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
