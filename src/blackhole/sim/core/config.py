from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

import yaml

Color = tuple[int, int, int]


@dataclass
class OrbConfig:
    player_base_speed: float = 2.8
    bot_base_speed: float = 2.1
    min_speed_factor: float = 0.4
    speed_damping_radius: float = 400.0
    player_radius: float = 30.0
    player_color: Color = (0x33, 0x55, 0xFF)
    bot_radius_min: float = 22.0
    bot_radius_max: float = 38.0
    bot_spawn_margin: float = 100.0
    bot_saturation: float = 0.70
    bot_lightness: float = 0.55
    food_growth_per_value: float = 0.35
    eat_ratio: float = 1.1
    area_transfer: float = 0.9
    score_transfer: float = 1.2
    score_bonus: int = 20


@dataclass
class BotConfig:
    threat_ratio: float = 1.3
    threat_radius: float = 300.0
    forage_radius: float = 400.0
    wander_min: float = 2.0
    wander_max: float = 5.0


@dataclass
class FoodConfig:
    common_value: int = 1
    rare_value: int = 3
    common_chance: float = 0.85
    common_color: Color = (0xFF, 0xAA, 0x33)
    rare_color: Color = (0xFF, 0x33, 0xAA)


@dataclass
class GameConfig:
    world_width: float = 2000.0
    world_height: float = 2000.0
    food_target: int = 250
    bot_count: int = 6
    seed: Optional[int] = None
    frame_ms: float = 16.67
    max_frame_delta: Optional[float] = None
    viewport_width: int = 1280
    viewport_height: int = 720
    fps: int = 60
    orb: OrbConfig = field(default_factory=OrbConfig)
    bot: BotConfig = field(default_factory=BotConfig)
    food: FoodConfig = field(default_factory=FoodConfig)

    @property
    def player_base_speed(self) -> float:
        return self.orb.player_base_speed

    @property
    def bot_base_speed(self) -> float:
        return self.orb.bot_base_speed

    def constants(self) -> dict:
        return {
            "worldWidth": self.world_width,
            "worldHeight": self.world_height,
            "foodTarget": self.food_target,
            "botCount": self.bot_count,
            "playerBaseSpeed": self.player_base_speed,
            "botBaseSpeed": self.bot_base_speed,
        }

    @staticmethod
    def from_yaml(path: Path) -> "GameConfig":
        data = yaml.safe_load(Path(path).read_text()) or {}
        return load_config(data)


def _section(cls, raw: dict, name: str):
    values = raw.get(name, {}) or {}
    known = {f.name for f in fields(cls)}
    unknown = set(values) - known
    if unknown:
        raise ValueError(f"Unknown {name} config keys: {sorted(unknown)}")
    converted = {}
    for key, value in values.items():
        if key.endswith("_color") and isinstance(value, (list, tuple)):
            value = tuple(int(channel) for channel in value)
        converted[key] = value
    return cls(**converted)


def load_config(raw: dict) -> GameConfig:
    orb = _section(OrbConfig, raw, "orb")
    bot = _section(BotConfig, raw, "bot")
    food = _section(FoodConfig, raw, "food")
    top_level = {f.name for f in fields(GameConfig)} - {"orb", "bot", "food"}
    game_values = {k: v for k, v in raw.items() if k not in {"orb", "bot", "food"}}
    unknown = set(game_values) - top_level
    if unknown:
        raise ValueError(f"Unknown config keys: {sorted(unknown)}")
    config = GameConfig(orb=orb, bot=bot, food=food, **game_values)
    validate_config(config)
    return config


def validate_config(config: GameConfig) -> None:
    if config.world_width <= 0 or config.world_height <= 0:
        raise ValueError("world_width and world_height must be positive")
    if config.food_target < 0:
        raise ValueError("food_target must be >= 0")
    if config.bot_count < 0:
        raise ValueError("bot_count must be >= 0")
    if config.frame_ms <= 0:
        raise ValueError("frame_ms must be positive")
    if config.max_frame_delta is not None and config.max_frame_delta <= 0:
        raise ValueError("max_frame_delta must be positive when set")
    if config.orb.player_radius <= 0:
        raise ValueError("orb.player_radius must be positive")
    if not 0 < config.orb.bot_radius_min <= config.orb.bot_radius_max:
        raise ValueError("orb.bot_radius_min must be positive and <= orb.bot_radius_max")
    if config.bot.wander_min > config.bot.wander_max:
        raise ValueError("bot.wander_min must be <= bot.wander_max")
    if not 0.0 <= config.food.common_chance <= 1.0:
        raise ValueError("food.common_chance must be within [0, 1]")
