from __future__ import annotations

from typing import TYPE_CHECKING

from ..types.metrics import StepMetrics

if TYPE_CHECKING:
    from ..core.world import World


def create_metrics(
    world: World,
    food_spawned: int,
    food_eaten: int,
    orbs_eaten: int,
    duration_ms: float,
) -> StepMetrics:
    player = world.player
    return StepMetrics(
        tick=world.tick,
        alive_orbs=sum(1 for orb in world.orbs if orb.alive),
        food_count=len(world.food),
        food_spawned=food_spawned,
        food_eaten=food_eaten,
        orbs_eaten=orbs_eaten,
        player_radius=player.radius,
        player_score=player.score,
        game_over=world.game_over,
        step_duration_ms=duration_ms,
    )
