"""Launch-angle sweep: fire one ship at every angle in a range and plot the outcome."""
from __future__ import annotations

import argparse
import logging
import math
from concurrent.futures import ProcessPoolExecutor
from functools import partial
from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap

from planet_duel.core.config import PHYSICS_CFG, PhysicsCfg
from planet_duel.core.logging_utils import LOG_LEVELS, configure_logging
from planet_duel.core.model import FieldBounds, Planet, Scene, TerminationReason
from planet_duel.core.physics import simulate
from planet_duel.core.vector import Vector2
from planet_duel.data.scenarios import DEFAULT_SCENARIO_KEY, SCENARIO_DISPLAY_ORDER, get_scenario

logger = logging.getLogger(__name__)

# Integer codes used in the result arrays.
REASON_ORDER: tuple[TerminationReason, ...] = (
    TerminationReason.HIT_ENEMY,
    TerminationReason.HIT_PLANET,
    TerminationReason.OUT_OF_RANGE,
    TerminationReason.OUT_OF_FUEL,
)
REASON_CODES: dict[TerminationReason, int] = {reason: code for code, reason in enumerate(REASON_ORDER)}
REASON_COLORS = ["#2f9e44", "#495057", "#f03e3e", "#ffd43b"]

DEFAULT_POINTS = 360
DEFAULT_OUTPUT = Path("figures") / "angle_sweep.png"


def _run_single(
    angle: float,
    *,
    start: Vector2,
    enemy: Vector2,
    bounds: FieldBounds,
    planets: tuple[Planet, ...],
    cfg: PhysicsCfg,
) -> tuple[int, int]:
    trajectory = simulate(start, angle, enemy, bounds, planets, cfg)
    return REASON_CODES[trajectory.reason], len(trajectory.path)


def sweep_angles(
    scene: Scene,
    shooter: int,
    angles: Sequence[float] | np.ndarray,
    cfg: PhysicsCfg = PHYSICS_CFG,
    *,
    workers: int = 1,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Simulate one shot per angle from ``scene.ships[shooter]``.

    Returns ``(angles, reason_codes, path_lengths)``; codes index
    :data:`REASON_ORDER`. Runs are independent, so ``workers > 1`` spreads
    them over a process pool without changing the result.
    """

    if workers < 1:
        raise ValueError(f"workers must be >= 1, got {workers}")
    if shooter not in (0, 1):
        raise ValueError(f"shooter must be 0 or 1, got {shooter}")

    angles = np.asarray(angles, dtype=float)
    run = partial(
        _run_single,
        start=scene.ships[shooter].position,
        enemy=scene.opponent_of(shooter).position,
        bounds=scene.bounds,
        planets=tuple(scene.planets),
        cfg=cfg,
    )
    values = [float(angle) for angle in angles]

    if workers == 1:
        results = [run(angle) for angle in values]
    else:
        chunksize = max(1, len(values) // (workers * 4))
        with ProcessPoolExecutor(max_workers=workers) as pool:
            results = list(pool.map(run, values, chunksize=chunksize))

    reasons = np.fromiter((code for code, _ in results), dtype=int, count=len(results))
    lengths = np.fromiter((length for _, length in results), dtype=int, count=len(results))
    return angles, reasons, lengths


def summarize(reasons: np.ndarray) -> dict[TerminationReason, int]:
    counts = np.bincount(np.asarray(reasons, dtype=int), minlength=len(REASON_ORDER))
    return {reason: int(counts[code]) for code, reason in enumerate(REASON_ORDER)}


def plot_sweep(
    angles: np.ndarray,
    reasons: np.ndarray,
    lengths: np.ndarray,
    out: Path,
    *,
    title: str = "Missile outcome per launch angle",
) -> Path:
    out.parent.mkdir(parents=True, exist_ok=True)
    cmap = ListedColormap(REASON_COLORS)

    fig, (ax_len, ax_reason) = plt.subplots(
        2, 1, figsize=(10, 6), sharex=True, gridspec_kw={"height_ratios": [3, 1]}
    )
    degrees = np.degrees(angles)
    ax_len.scatter(degrees, lengths, c=reasons, cmap=cmap, vmin=-0.5, vmax=len(REASON_ORDER) - 0.5, s=8)
    ax_len.set_ylabel("Path length [steps]")
    ax_len.set_title(title)

    im = ax_reason.imshow(
        reasons[np.newaxis, :],
        aspect="auto",
        cmap=cmap,
        vmin=-0.5,
        vmax=len(REASON_ORDER) - 0.5,
        extent=[degrees.min(), degrees.max(), 0, 1],
    )
    ax_reason.set_yticks([])
    ax_reason.set_xlabel("Launch angle [degrees]")
    cbar = fig.colorbar(im, ax=[ax_len, ax_reason], ticks=list(range(len(REASON_ORDER))))
    cbar.ax.set_yticklabels([str(reason) for reason in REASON_ORDER])

    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--scenario", choices=SCENARIO_DISPLAY_ORDER, default=DEFAULT_SCENARIO_KEY)
    parser.add_argument("--shooter", type=int, choices=(0, 1), default=0)
    parser.add_argument("--points", type=int, default=DEFAULT_POINTS)
    parser.add_argument("--workers", type=int, default=1)
    parser.add_argument("--out", type=Path, default=DEFAULT_OUTPUT)
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="INFO")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    scenario = get_scenario(args.scenario)
    scene = scenario.build_scene()
    ship = scene.ships[args.shooter]
    angles = np.linspace(ship.min_angle, ship.max_angle, max(2, args.points))

    logger.info(
        "Sweeping %d angles for ship %d in scenario %r (%d worker(s))",
        angles.size,
        args.shooter + 1,
        scenario.key,
        args.workers,
    )
    angles, reasons, lengths = sweep_angles(scene, args.shooter, angles, workers=args.workers)

    for reason, count in summarize(reasons).items():
        logger.info("  %-13s %5d", reason, count)
    hits = angles[reasons == REASON_CODES[TerminationReason.HIT_ENEMY]]
    if hits.size:
        logger.info("Hitting angles span %.2f to %.2f degrees", math.degrees(hits.min()), math.degrees(hits.max()))

    out = plot_sweep(angles, reasons, lengths, args.out, title=f"{scenario.name}: ship {args.shooter + 1}")
    logger.info("Figure saved to %s", out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
