from __future__ import annotations

import random
from typing import Sequence, TypeVar

T = TypeVar("T")


class DeterministicRng:
    def __init__(self, seed: int):
        self._seed = seed
        self._random = random.Random(seed)

    @property
    def seed(self) -> int:
        return self._seed

    def reset(self) -> None:
        self._random.seed(self._seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_bool(self) -> bool:
        return self._random.random() < 0.5

    def next_int(self, max_value: int) -> int:
        return self._random.randrange(max_value)

    def next_bits(self, count: int) -> int:
        return self._random.getrandbits(count)

    def next_percent_hit(self, rate: float) -> bool:
        """True with probability ``rate / 100``."""
        return self._random.random() * 100.0 < rate

    def sample_choice(self, items: Sequence[T]) -> T | None:
        if not items:
            return None
        return self._random.choice(items)
