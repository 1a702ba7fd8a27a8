import os
import sys
from pathlib import Path

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

ROOT = Path(__file__).resolve().parents[2]
src_root = ROOT / "src"
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from blackhole.sim.core.config import BotConfig, FoodConfig, GameConfig, OrbConfig  # noqa: E402
from blackhole.sim.core.world import World  # noqa: E402


def make_config(**overrides) -> GameConfig:
    """An empty arena: one player, no bots, no food, fixed seed."""
    orb = overrides.pop("orb", OrbConfig())
    bot = overrides.pop("bot", BotConfig())
    food = overrides.pop("food", FoodConfig())
    values = {"seed": 1234, "bot_count": 0, "food_target": 0}
    values.update(overrides)
    return GameConfig(orb=orb, bot=bot, food=food, **values)


@pytest.fixture
def empty_world() -> World:
    return World(make_config())
