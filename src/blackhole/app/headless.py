from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Optional

from ..logging_config import configure_logging
from ..sim.core.config import GameConfig
from ..sim.core.world import World
from ..sim.types.metrics import StepMetrics

logger = logging.getLogger(__name__)

_BASIC_HEADER = [
    "tick",
    "alive_orbs",
    "food_count",
    "player_radius",
    "player_score",
    "game_over",
    "step_ms",
]

_DETAILED_HEADER = [
    "tick",
    "alive_orbs",
    "food_count",
    "food_spawned",
    "food_eaten",
    "orbs_eaten",
    "player_radius",
    "player_score",
    "game_over",
    "step_ms",
    "largest_radius",
    "mean_radius",
    "total_score",
]


def _format_basic_row(metrics: StepMetrics, step_ms: float) -> list[object]:
    return [
        metrics.tick,
        metrics.alive_orbs,
        metrics.food_count,
        f"{metrics.player_radius:.4f}",
        metrics.player_score,
        int(metrics.game_over),
        f"{step_ms:.3f}",
    ]


def _format_detailed_row(world: World, metrics: StepMetrics, step_ms: float) -> list[object]:
    alive = [orb for orb in world.orbs if orb.alive]
    if alive:
        largest_radius = max(orb.radius for orb in alive)
        mean_radius = sum(orb.radius for orb in alive) / len(alive)
        total_score = sum(orb.score for orb in alive)
    else:
        largest_radius = 0.0
        mean_radius = 0.0
        total_score = 0
    return [
        metrics.tick,
        metrics.alive_orbs,
        metrics.food_count,
        metrics.food_spawned,
        metrics.food_eaten,
        metrics.orbs_eaten,
        f"{metrics.player_radius:.4f}",
        metrics.player_score,
        int(metrics.game_over),
        f"{step_ms:.3f}",
        f"{largest_radius:.4f}",
        f"{mean_radius:.4f}",
        total_score,
    ]


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"min": 0.0, "max": 0.0, "avg": 0.0}
    return {
        "min": float(min(values)),
        "max": float(max(values)),
        "avg": float(sum(values) / len(values)),
    }


def run_headless(
    steps: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    log_format: str = "detailed",
    summary_path: Optional[Path] = None,
    dt: float = 1.0,
    config: Optional[GameConfig] = None,
    stop_on_game_over: bool = True,
) -> World:
    """Run a session without a display, the player idle, ``dt`` per step."""
    config = config if config is not None else GameConfig()
    if seed is not None:
        config.seed = seed

    log_mode = log_format.lower().strip()
    if log_mode not in {"basic", "detailed"}:
        raise ValueError(f"Unknown log format: {log_format}")

    world = World(config)

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_DETAILED_HEADER if log_mode == "detailed" else _BASIC_HEADER)

    step_ms_series: list[float] = []
    alive_series: list[float] = []
    radius_series: list[float] = []
    food_eaten = 0
    orbs_eaten = 0
    game_over_tick: Optional[int] = None

    try:
        for _ in range(steps):
            already_over = world.game_over
            metrics = world.step(dt)
            step_ms = 0.0 if deterministic_log else metrics.step_duration_ms
            if not already_over:
                step_ms_series.append(step_ms)
                alive_series.append(float(metrics.alive_orbs))
                radius_series.append(metrics.player_radius)
                food_eaten += metrics.food_eaten
                orbs_eaten += metrics.orbs_eaten

            if writer:
                if log_mode == "detailed":
                    writer.writerow(_format_detailed_row(world, metrics, step_ms))
                else:
                    writer.writerow(_format_basic_row(metrics, step_ms))

            if metrics.game_over:
                if game_over_tick is None:
                    game_over_tick = metrics.tick
                if stop_on_game_over:
                    break
    finally:
        if csv_file:
            csv_file.close()

    logger.info(
        "headless run finished after %d ticks (game over: %s)", world.tick, world.game_over
    )

    if summary_path:
        summary = {
            "steps": steps,
            "ticks_run": world.tick,
            "seed": config.seed,
            "dt": dt,
            "log_format": log_mode,
            "deterministic_log": deterministic_log,
            "game_over": world.game_over,
            "game_over_tick": game_over_tick,
            "player": {"radius": world.player.radius, "score": world.player.score},
            "food_eaten": food_eaten,
            "orbs_eaten": orbs_eaten,
            "step_ms": _summary_stats(step_ms_series),
            "alive_orbs": _summary_stats(alive_series),
            "player_radius": _summary_stats(radius_series),
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
    return world


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless black hole session")
    parser.add_argument("--steps", type=int, default=3000)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--dt", type=float, default=1.0, help="Simulation-time delta per step")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the defaults")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-step metrics")
    parser.add_argument(
        "--log-format",
        choices=["basic", "detailed"],
        default="detailed",
        help="CSV format to write when --log is provided.",
    )
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write summary stats for the run.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (step_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument(
        "--keep-running",
        action="store_true",
        help="Keep stepping after the player is consumed (steps become no-ops).",
    )
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    args = parser.parse_args()
    configure_logging(level=args.log_level)
    config = GameConfig.from_yaml(args.config) if args.config else None
    run_headless(
        args.steps,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        log_format=args.log_format,
        summary_path=args.summary,
        dt=args.dt,
        config=config,
        stop_on_game_over=not args.keep_running,
    )


if __name__ == "__main__":
    main()
