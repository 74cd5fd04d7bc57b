from __future__ import annotations

import logging
from time import perf_counter
from typing import Dict, List, Tuple

from .cell import Cell, CellParts
from .config import ConfigError, SimulationConfig
from .direction import Direction
from .gene import NodeID
from .rng import DeterministicRng
from ..systems import metrics as metrics_system
from ..systems.decision import one_step
from ..systems.reproduction import asexually_reproduce, new_random, sexually_reproduce
from ..systems.selection import survives
from ..types.metrics import GenerationMetrics

logger = logging.getLogger(__name__)

_PLACEMENT_ATTEMPTS = 32


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class World:
    """Owns the grid, the living cells and the generation loop around the cell engine."""

    def __init__(self, config: SimulationConfig):
        config.validate()
        self._config = config
        self._rng = DeterministicRng(config.seed)
        self._cells: List[Cell] = []
        self._occupancy: Dict[Tuple[int, int], int] = {}
        self._history: List[GenerationMetrics] = []
        self._generation = 0
        self._next_id = 0
        self._moves = 0
        self._blocked_moves = 0
        self._bootstrap_population()

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def cells(self) -> List[Cell]:
        return self._cells

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def metrics(self) -> List[GenerationMetrics]:
        return self._history

    def is_occupied(self, coords: Tuple[int, int]) -> bool:
        return coords in self._occupancy

    def reset(self) -> None:
        self._rng.reset()
        self._cells.clear()
        self._occupancy.clear()
        self._history.clear()
        self._generation = 0
        self._next_id = 0
        self._moves = 0
        self._blocked_moves = 0
        self._bootstrap_population()

    def step(self, tick: int) -> None:
        config = self._config
        occupancy = self._occupancy
        for cell in self._cells:
            if not cell.alive:
                continue
            movement = cell.movement
            current = movement.coords
            target = one_step(
                cell.neuron,
                movement,
                config.grid_width,
                config.grid_height,
                config.steps_per_gen,
                tick,
                self._rng,
            )
            if target == current:
                continue
            if target in occupancy:
                self._blocked_moves += 1
                continue
            del occupancy[current]
            occupancy[target] = cell.id
            movement.last_move_dir = Direction.from_offset(
                _sign(target[0] - current[0]), _sign(target[1] - current[1])
            )
            movement.set_coords(target)
            cell.moves += 1
            self._moves += 1

    def run_generation(self) -> GenerationMetrics:
        start = perf_counter()
        self._moves = 0
        self._blocked_moves = 0
        for tick in range(self._config.steps_per_gen):
            self.step(tick)

        survivors = self._apply_selection()
        population = len(self._cells)
        unique_colors = len({cell.other.color for cell in self._cells})
        duration_ms = (perf_counter() - start) * 1000.0
        metrics = metrics_system.create_metrics(
            self._generation,
            population,
            len(survivors),
            self._moves,
            self._blocked_moves,
            unique_colors,
            duration_ms,
        )
        self._history.append(metrics)
        logger.info(
            "Generation %d | survivors=%d/%d (%.1f%%) | moves=%d | colors=%d",
            metrics.generation,
            metrics.survivors,
            metrics.population,
            metrics.survival_rate * 100.0,
            metrics.moves,
            metrics.unique_colors,
        )

        self._generation += 1
        self._reproduce_next_generation(survivors)
        return metrics

    def neuron_presence(self) -> Dict[NodeID, int]:
        return metrics_system.neuron_presence(self._cells)

    def _bootstrap_population(self) -> None:
        config = self._config
        for _ in range(config.population):
            self._add_cell(new_random(config.genome_length, config.steps_per_gen, self._rng))

    def _apply_selection(self) -> List[Cell]:
        config = self._config
        survivors: List[Cell] = []
        for cell in self._cells:
            if not cell.alive:
                continue
            if survives(cell.movement, config.selection, config.grid_width, config.grid_height):
                survivors.append(cell)
            else:
                cell.other.is_alive = False
        return survivors

    def _reproduce_next_generation(self, survivors: List[Cell]) -> None:
        config = self._config
        self._cells = []
        self._occupancy.clear()
        if not survivors:
            logger.warning(
                "Generation %d died out; restarting from random genomes", self._generation - 1
            )
            self._bootstrap_population()
            return

        sexual = config.sexual_reproduction and len(survivors) >= 2
        for _ in range(config.population):
            parent = self._rng.sample_choice(survivors)
            if sexual:
                mate = self._rng.sample_choice(survivors)
                parts = sexually_reproduce(
                    (parent.other, parent.neuron),
                    (mate.other, mate.neuron),
                    config.genome_length,
                    config.steps_per_gen,
                    config.mutation_rate,
                    self._rng,
                )
            else:
                parts = asexually_reproduce(
                    (parent.other, parent.neuron.oscillator_period),
                    config.genome_length,
                    config.steps_per_gen,
                    config.mutation_rate,
                    self._rng,
                )
            self._add_cell(parts)

    def _add_cell(self, parts: CellParts) -> Cell:
        movement, neuron, other = parts
        movement.set_coords(self._free_location())
        cell = Cell(
            id=self._next_id,
            generation=self._generation,
            movement=movement,
            neuron=neuron,
            other=other,
        )
        self._next_id += 1
        self._cells.append(cell)
        self._occupancy[movement.coords] = cell.id
        return cell

    def _free_location(self) -> Tuple[int, int]:
        width = self._config.grid_width
        height = self._config.grid_height
        for _ in range(_PLACEMENT_ATTEMPTS):
            coords = (self._rng.next_int(width), self._rng.next_int(height))
            if coords not in self._occupancy:
                return coords
        free = [(x, y) for x in range(width) for y in range(height) if (x, y) not in self._occupancy]
        if not free:
            raise ConfigError(f"No free grid cell left on a {width}x{height} grid")
        return self._rng.sample_choice(free)
