from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from pygame.math import Vector2

from .config import Color


class FoodTier(str, Enum):
    COMMON = "Common"
    RARE = "Rare"


@dataclass(frozen=True, eq=False)
class Food:
    position: Vector2
    value: int
    color: Color
    tier: FoodTier = FoodTier.COMMON

    @property
    def display_radius(self) -> float:
        return 4.0 + self.value * 0.3
