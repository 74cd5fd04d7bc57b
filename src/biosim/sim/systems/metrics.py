from __future__ import annotations

from typing import Dict, Iterable

from ..core.cell import Cell
from ..core.gene import NodeID
from ..types.metrics import GenerationMetrics


def create_metrics(
    generation: int,
    population: int,
    survivors: int,
    moves: int,
    blocked_moves: int,
    unique_colors: int,
    duration_ms: float,
) -> GenerationMetrics:
    survival_rate = survivors / population if population > 0 else 0.0
    return GenerationMetrics(
        generation=generation,
        population=population,
        survivors=survivors,
        survival_rate=survival_rate,
        moves=moves,
        blocked_moves=blocked_moves,
        unique_colors=unique_colors,
        generation_duration_ms=duration_ms,
    )


def neuron_presence(cells: Iterable[Cell]) -> Dict[NodeID, int]:
    """Number of living cells whose network touches each node at least once."""
    counts = {node: 0 for node in NodeID}
    for cell in cells:
        if not cell.alive:
            continue
        used = set()
        for head, tail, _ in cell.neuron.neural_net.connections:
            used.add(head)
            used.add(tail)
        for node in used:
            counts[node] += 1
    return counts
