from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StepMetrics:
    tick: int
    alive_orbs: int
    food_count: int
    food_spawned: int
    food_eaten: int
    orbs_eaten: int
    player_radius: float
    player_score: int
    game_over: bool
    step_duration_ms: float = 0.0
