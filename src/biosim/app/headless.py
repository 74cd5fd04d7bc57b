from __future__ import annotations

import argparse
import csv
import json
import logging
from pathlib import Path
from typing import Optional

from ..sim.core.config import SimulationConfig
from ..sim.core.world import World
from ..sim.types.metrics import GenerationMetrics

logger = logging.getLogger(__name__)

_HEADER = [
    "generation",
    "population",
    "survivors",
    "survival_rate",
    "moves",
    "blocked_moves",
    "unique_colors",
    "gen_ms",
]


def _format_row(metrics: GenerationMetrics, gen_ms: float) -> list[object]:
    return [
        metrics.generation,
        metrics.population,
        metrics.survivors,
        f"{metrics.survival_rate:.4f}",
        metrics.moves,
        metrics.blocked_moves,
        metrics.unique_colors,
        f"{gen_ms:.3f}",
    ]


def _summary_stats(values: list[float]) -> dict[str, float]:
    if not values:
        return {"count": 0, "mean": 0.0, "min": 0.0, "max": 0.0, "last": 0.0}
    return {
        "count": len(values),
        "mean": sum(values) / len(values),
        "min": min(values),
        "max": max(values),
        "last": values[-1],
    }


def run_headless(
    generations: int,
    seed: Optional[int],
    log_path: Optional[Path],
    deterministic_log: bool = False,
    config_path: Optional[Path] = None,
    summary_path: Optional[Path] = None,
) -> World:
    config = SimulationConfig.from_yaml(config_path) if config_path else SimulationConfig()
    if seed is not None:
        config.seed = seed
    world = World(config)
    logger.info(
        "Running %d generations on a %dx%d grid (population=%d, seed=%d)",
        generations,
        config.grid_width,
        config.grid_height,
        config.population,
        config.seed,
    )

    writer = None
    csv_file = None
    if log_path:
        csv_file = Path(log_path).open("w", newline="")
        writer = csv.writer(csv_file)
        writer.writerow(_HEADER)

    survival_series: list[float] = []
    try:
        for _ in range(generations):
            metrics = world.run_generation()
            survival_series.append(metrics.survival_rate)
            if writer:
                gen_ms = 0.0 if deterministic_log else metrics.generation_duration_ms
                writer.writerow(_format_row(metrics, gen_ms))
    finally:
        if csv_file:
            csv_file.close()

    if summary_path:
        summary = {
            "generations": generations,
            "seed": config.seed,
            "config_version": config.config_version,
            "deterministic_log": deterministic_log,
            "survival_rate": _summary_stats(survival_series),
            "neuron_presence": {node.value: count for node, count in world.neuron_presence().items()},
        }
        Path(summary_path).write_text(json.dumps(summary, indent=2))
    return world


def main() -> None:
    parser = argparse.ArgumentParser(description="Headless biosim evolution run")
    parser.add_argument("--generations", type=int, default=100)
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--config", type=Path, default=None, help="YAML file with simulation settings")
    parser.add_argument("--log", type=Path, default=None, help="CSV file to write per-generation metrics")
    parser.add_argument(
        "--summary",
        type=Path,
        default=None,
        help="Optional JSON file to write survival stats and neuron presence for the run.",
    )
    parser.add_argument(
        "--deterministic-log",
        action="store_true",
        help="Write deterministic CSV (gen_ms is forced to 0.000 so identical seeds match).",
    )
    parser.add_argument("--verbose", action="store_true", help="Log at DEBUG level")
    args = parser.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    run_headless(
        args.generations,
        args.seed,
        args.log,
        deterministic_log=args.deterministic_log,
        config_path=args.config,
        summary_path=args.summary,
    )


if __name__ == "__main__":
    main()
