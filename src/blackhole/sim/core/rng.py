from __future__ import annotations

import random
from typing import Optional

from pygame.math import Vector2


class DeterministicRng:
    """Seeded random source; ``None`` seeds from the OS."""

    def __init__(self, seed: Optional[int]):
        self._seed = seed
        self._random = random.Random(seed)

    def next_float(self) -> float:
        return self._random.random()

    def next_range(self, low: float, high: float) -> float:
        return self._random.random() * (high - low) + low

    def next_point(self, width: float, height: float) -> Vector2:
        return Vector2(self.next_range(0.0, width), self.next_range(0.0, height))
