from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.config import Color


@dataclass(slots=True, frozen=True)
class OrbView:
    id: int
    x: float
    y: float
    radius: float
    color: Color
    score: int
    is_player: bool


@dataclass(slots=True, frozen=True)
class FoodView:
    x: float
    y: float
    value: int
    radius: float
    color: Color


@dataclass(slots=True)
class Snapshot:
    tick: int
    world_width: float
    world_height: float
    player: OrbView
    orbs: List[OrbView]
    food: List[FoodView]
    game_over: bool
