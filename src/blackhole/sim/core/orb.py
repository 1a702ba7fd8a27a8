from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from pygame.math import Vector2

from .config import Color, OrbConfig


@dataclass(slots=True, eq=False)
class Orb:
    id: int
    position: Vector2
    radius: float
    is_player: bool = False
    color: Color = (0, 0, 0)
    score: int = 0
    alive: bool = True
    wander_target: Optional[Vector2] = None
    wander_cooldown: float = 0.0

    def speed(self, config: OrbConfig) -> float:
        """Base speed for the role, damped as the orb grows."""
        return effective_speed(self.radius, self.is_player, config)


def effective_speed(radius: float, is_player: bool, config: OrbConfig) -> float:
    size_factor = max(config.min_speed_factor, 1.0 - radius / config.speed_damping_radius)
    base = config.player_base_speed if is_player else config.bot_base_speed
    return base * size_factor
