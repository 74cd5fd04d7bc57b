from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml

SELECTION_REGIONS = ("east", "west", "north", "south", "center")


class ConfigError(ValueError):
    """Invalid simulation configuration, raised before any cell is created."""


class GenomeLengthError(ConfigError):
    pass


@dataclass
class SelectionConfig:
    region: str = "east"
    fraction: float = 0.5


@dataclass
class SimulationConfig:
    grid_width: int = 128
    grid_height: int = 128
    population: int = 1000
    genome_length: int = 16
    steps_per_gen: int = 300
    # Percent chance, per gene and per oscillator, of a single bit flip.
    mutation_rate: float = 0.1
    sexual_reproduction: bool = True
    seed: int = 42
    config_version: str = "v1"
    selection: SelectionConfig = field(default_factory=SelectionConfig)

    @staticmethod
    def from_yaml(path: Path) -> "SimulationConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)

    def validate(self) -> None:
        check_grid_bounds(self.grid_width, self.grid_height)
        check_steps_per_gen(self.steps_per_gen)
        if self.genome_length <= 0:
            raise ConfigError(f"genome_length must be positive, got {self.genome_length}")
        if self.population <= 0:
            raise ConfigError(f"population must be positive, got {self.population}")
        if self.population > self.grid_width * self.grid_height:
            raise ConfigError(
                f"population {self.population} does not fit a "
                f"{self.grid_width}x{self.grid_height} grid"
            )
        if not 0.0 <= self.mutation_rate <= 100.0:
            raise ConfigError(f"mutation_rate must be a percentage in [0, 100], got {self.mutation_rate}")
        if self.selection.region not in SELECTION_REGIONS:
            raise ConfigError(
                f"selection.region must be one of {', '.join(SELECTION_REGIONS)}, got {self.selection.region!r}"
            )
        if not 0.0 < self.selection.fraction <= 1.0:
            raise ConfigError(f"selection.fraction must be in (0, 1], got {self.selection.fraction}")


def check_grid_bounds(grid_width: int, grid_height: int) -> None:
    if grid_width <= 0:
        raise ConfigError(f"grid_width must be positive, got {grid_width}")
    if grid_height <= 0:
        raise ConfigError(f"grid_height must be positive, got {grid_height}")


def check_steps_per_gen(steps_per_gen: int) -> None:
    if steps_per_gen <= 0:
        raise ConfigError(f"steps_per_gen must be positive, got {steps_per_gen}")


def load_config(raw: dict) -> SimulationConfig:
    selection = SelectionConfig(**raw.get("selection", {}))
    sim_values = {k: v for k, v in raw.items() if k != "selection"}
    return SimulationConfig(selection=selection, **sim_values)
