from __future__ import annotations

from typing import List, Optional, TYPE_CHECKING

from pygame.math import Vector2

from ..core.food import Food
from ..core.input import KeyState
from ..core.orb import Orb
from ..utils.math2d import _clamp_value, _safe_normalize_xy, distance

if TYPE_CHECKING:
    from ..core.world import World


def move_player(world: World, orb: Orb, keys: KeyState, dt: float) -> None:
    dx, dy = keys.axis()
    if dx == 0.0 and dy == 0.0:
        return
    direction = _safe_normalize_xy(dx, dy)
    _advance(orb, direction, orb.speed(world._config.orb) * dt)


def move_bot(world: World, orb: Orb, foods: List[Food], orbs: List[Orb], dt: float) -> None:
    bot = world._config.bot
    orb.wander_cooldown -= dt
    if orb.wander_target is None or orb.wander_cooldown <= 0:
        pick_wander_target(world, orb)

    speed = orb.speed(world._config.orb)
    threat = nearest_threat(world, orb, orbs)
    if threat is not None:
        away_x = orb.position.x - threat.position.x
        away_y = orb.position.y - threat.position.y
        _advance(orb, _safe_normalize_xy(away_x, away_y), speed * dt)
        return

    target = orb.wander_target
    food, food_distance = nearest_food(orb, foods)
    if food is not None and food_distance < bot.forage_radius:
        target = food.position

    to_x = target.x - orb.position.x
    to_y = target.y - orb.position.y
    _advance(orb, _safe_normalize_xy(to_x, to_y), speed * dt)


def pick_wander_target(world: World, orb: Orb) -> None:
    bot = world._config.bot
    orb.wander_target = world._rng.next_point(world._config.world_width, world._config.world_height)
    orb.wander_cooldown = world._rng.next_range(bot.wander_min, bot.wander_max)


def nearest_threat(world: World, orb: Orb, orbs: List[Orb]) -> Optional[Orb]:
    bot = world._config.bot
    best: Optional[Orb] = None
    best_distance = bot.threat_radius
    for other in orbs:
        if other is orb or not other.alive:
            continue
        if other.radius <= orb.radius * bot.threat_ratio:
            continue
        d = distance(orb.position, other.position)
        if d < best_distance:
            best = other
            best_distance = d
    return best


def nearest_food(orb: Orb, foods: List[Food]) -> tuple[Optional[Food], float]:
    closest: Optional[Food] = None
    closest_distance = float("inf")
    for food in foods:
        d = distance(orb.position, food.position)
        if d < closest_distance:
            closest = food
            closest_distance = d
    return closest, closest_distance


def clamp_to_bounds(world: World, orb: Orb) -> None:
    width = world._config.world_width
    height = world._config.world_height
    orb.position.update(
        _clamp_value(orb.position.x, orb.radius, width - orb.radius),
        _clamp_value(orb.position.y, orb.radius, height - orb.radius),
    )


def _advance(orb: Orb, direction: Vector2, step: float) -> None:
    orb.position.update(
        orb.position.x + direction.x * step,
        orb.position.y + direction.y * step,
    )
