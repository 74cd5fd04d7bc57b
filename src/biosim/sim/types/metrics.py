from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class GenerationMetrics:
    generation: int
    population: int
    survivors: int
    survival_rate: float
    moves: int
    blocked_moves: int
    unique_colors: int
    generation_duration_ms: float = 0.0
