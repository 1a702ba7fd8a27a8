from __future__ import annotations

import logging
import math
from typing import List, TYPE_CHECKING

from ..core.config import OrbConfig
from ..core.food import Food
from ..core.orb import Orb
from ..utils.math2d import distance

if TYPE_CHECKING:
    from ..core.world import World

logger = logging.getLogger(__name__)


def eat_food(world: World, orb: Orb, foods: List[Food]) -> int:
    """Consume every food whose center lies strictly inside the orb.

    Iterates from the back so removal keeps indices valid. Returns the number
    of items eaten.
    """
    config = world._config.orb
    eaten = 0
    for index in range(len(foods) - 1, -1, -1):
        food = foods[index]
        if distance(orb.position, food.position) < orb.radius:
            absorb_food(orb, food, config)
            del foods[index]
            eaten += 1
    return eaten


def absorb_food(orb: Orb, food: Food, config: OrbConfig) -> None:
    orb.radius += food.value * config.food_growth_per_value
    orb.score += food.value


def eat_orbs(world: World, orb: Orb, orbs: List[Orb]) -> int:
    """Consume dominated orbs in collection order.

    Growth from an earlier victim counts for the later checks of the same pass.
    """
    config = world._config.orb
    eaten = 0
    for other in orbs:
        if other is orb or not other.alive:
            continue
        if can_consume(orb, other, config):
            absorb_orb(orb, other, config)
            other.alive = False
            eaten += 1
            logger.debug(
                "orb %d consumed orb %d (radius %.2f, score %d)", orb.id, other.id, orb.radius, orb.score
            )
    return eaten


def can_consume(orb: Orb, other: Orb, config: OrbConfig) -> bool:
    return (
        distance(orb.position, other.position) < orb.radius
        and orb.radius > other.radius * config.eat_ratio
    )


def absorb_orb(orb: Orb, other: Orb, config: OrbConfig) -> None:
    my_area = math.pi * orb.radius * orb.radius
    their_area = math.pi * other.radius * other.radius
    orb.radius = math.sqrt((my_area + their_area * config.area_transfer) / math.pi)
    orb.score += math.floor(other.score * config.score_transfer) + config.score_bonus
