from __future__ import annotations

import colorsys
import logging
from time import perf_counter
from typing import List, Optional

from pygame.math import Vector2

from .config import Color, GameConfig
from .food import Food, FoodTier
from .input import KeyState
from .orb import Orb
from .rng import DeterministicRng
from ..systems import consumption, metrics as metrics_system, movement
from ..types.metrics import StepMetrics
from ..types.snapshot import FoodView, OrbView, Snapshot

logger = logging.getLogger(__name__)


class World:
    """The play session: owns every orb and food item plus the terminal flag.

    Orbs are updated strictly in collection order, so an orb processed earlier
    in a step may consume one that would otherwise have moved later in the
    same step. Dead orbs stay in the collection but are inert.
    """

    def __init__(self, config: GameConfig, keys: Optional[KeyState] = None):
        self._config = config
        self._rng = DeterministicRng(config.seed)
        self._keys = keys if keys is not None else KeyState()
        self._orbs: List[Orb] = []
        self._food: List[Food] = []
        self._player: Orb | None = None
        self._game_over = False
        self._tick = 0
        self._metrics: StepMetrics | None = None
        self.initialize()

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def orbs(self) -> List[Orb]:
        return self._orbs

    @property
    def food(self) -> List[Food]:
        return self._food

    @property
    def player(self) -> Orb:
        assert self._player is not None
        return self._player

    @property
    def keys(self) -> KeyState:
        return self._keys

    @property
    def game_over(self) -> bool:
        return self._game_over

    @property
    def tick(self) -> int:
        return self._tick

    @property
    def metrics(self) -> StepMetrics | None:
        return self._metrics

    def initialize(self) -> None:
        config = self._config
        self._orbs = []
        self._food = []
        self._game_over = False
        self._tick = 0
        self._metrics = None

        self._player = Orb(
            id=0,
            position=Vector2(config.world_width / 2, config.world_height / 2),
            radius=config.orb.player_radius,
            is_player=True,
            color=config.orb.player_color,
        )
        self._orbs.append(self._player)
        for _ in range(config.bot_count):
            self._spawn_bot()
        for _ in range(config.food_target):
            self.spawn_food()
        logger.info(
            "session initialized: %d bots, %d food, world %.0fx%.0f",
            config.bot_count,
            len(self._food),
            config.world_width,
            config.world_height,
        )

    def restart(self) -> None:
        logger.info("restarting session")
        self.initialize()

    def spawn_food(self) -> Food:
        config = self._config.food
        position = self._rng.next_point(self._config.world_width, self._config.world_height)
        if self._rng.next_float() < config.common_chance:
            food = Food(position, config.common_value, config.common_color, FoodTier.COMMON)
        else:
            food = Food(position, config.rare_value, config.rare_color, FoodTier.RARE)
        self._food.append(food)
        return food

    def add_orb(self, position: Vector2, radius: float, color: Color | None = None) -> Orb:
        """Append a bot to the collection; it is updated after every existing orb."""
        orb = Orb(
            id=len(self._orbs),
            position=Vector2(position),
            radius=radius,
            color=color if color is not None else self._random_color(),
        )
        movement.pick_wander_target(self, orb)
        self._orbs.append(orb)
        return orb

    def add_food(self, position: Vector2, value: int) -> Food:
        config = self._config.food
        if value >= config.rare_value:
            food = Food(Vector2(position), value, config.rare_color, FoodTier.RARE)
        else:
            food = Food(Vector2(position), value, config.common_color, FoodTier.COMMON)
        self._food.append(food)
        return food

    def step(self, dt: float) -> StepMetrics | None:
        if self._game_over:
            return self._metrics

        start = perf_counter()
        spawned = self._refill_food()

        food_eaten = 0
        orbs_eaten = 0
        for orb in self._orbs:
            eaten_food, eaten_orbs = self.update_orb(orb, dt)
            food_eaten += eaten_food
            orbs_eaten += eaten_orbs
        spawned += self._refill_food()

        if not self.player.alive:
            self._game_over = True
            logger.info("player consumed at tick %d with score %d", self._tick, self.player.score)

        self._tick += 1
        elapsed_ms = (perf_counter() - start) * 1000.0
        self._metrics = metrics_system.create_metrics(self, spawned, food_eaten, orbs_eaten, elapsed_ms)
        return self._metrics

    def update_orb(self, orb: Orb, dt: float) -> tuple[int, int]:
        """Run one orb's update pass. Returns (food eaten, orbs eaten)."""
        if not orb.alive:
            return 0, 0
        if dt > 0:
            if orb.is_player:
                movement.move_player(self, orb, self._keys, dt)
            else:
                movement.move_bot(self, orb, self._food, self._orbs, dt)
        movement.clamp_to_bounds(self, orb)
        food_eaten = consumption.eat_food(self, orb, self._food)
        orbs_eaten = consumption.eat_orbs(self, orb, self._orbs)
        if food_eaten or orbs_eaten:
            # growth can push the edge back past a wall
            movement.clamp_to_bounds(self, orb)
        return food_eaten, orbs_eaten

    def snapshot(self) -> Snapshot:
        return Snapshot(
            tick=self._tick,
            world_width=self._config.world_width,
            world_height=self._config.world_height,
            player=self._orb_view(self.player),
            orbs=[self._orb_view(orb) for orb in self._orbs if orb.alive],
            food=[
                FoodView(
                    x=food.position.x,
                    y=food.position.y,
                    value=food.value,
                    radius=food.display_radius,
                    color=food.color,
                )
                for food in self._food
            ],
            game_over=self._game_over,
        )

    def _refill_food(self) -> int:
        spawned = 0
        while len(self._food) < self._config.food_target:
            self.spawn_food()
            spawned += 1
        return spawned

    def _spawn_bot(self) -> Orb:
        config = self._config
        margin = config.orb.bot_spawn_margin
        position = Vector2(
            self._rng.next_range(margin, config.world_width - margin),
            self._rng.next_range(margin, config.world_height - margin),
        )
        radius = self._rng.next_range(config.orb.bot_radius_min, config.orb.bot_radius_max)
        return self.add_orb(position, radius)

    def _random_color(self) -> Color:
        hue = int(self._rng.next_range(0.0, 360.0))
        red, green, blue = colorsys.hls_to_rgb(
            hue / 360.0, self._config.orb.bot_lightness, self._config.orb.bot_saturation
        )
        return (round(red * 255), round(green * 255), round(blue * 255))

    @staticmethod
    def _orb_view(orb: Orb) -> OrbView:
        return OrbView(
            id=orb.id,
            x=orb.position.x,
            y=orb.position.y,
            radius=orb.radius,
            color=orb.color,
            score=orb.score,
            is_player=orb.is_player,
        )
