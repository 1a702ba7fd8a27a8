from __future__ import annotations

import pytest
from pytest import approx

from blackhole.sim.core.config import GameConfig, load_config


def test_defaults_match_game_constants():
    config = GameConfig()
    assert config.constants() == {
        "worldWidth": 2000.0,
        "worldHeight": 2000.0,
        "foodTarget": 250,
        "botCount": 6,
        "playerBaseSpeed": 2.8,
        "botBaseSpeed": 2.1,
    }
    assert config.seed is None
    assert config.max_frame_delta is None


def test_from_yaml_overrides_nested_sections(tmp_path):
    path = tmp_path / "arena.yaml"
    path.write_text(
        "\n".join(
            [
                "world_width: 1200",
                "bot_count: 3",
                "seed: 8",
                "max_frame_delta: 4.0",
                "orb:",
                "  player_radius: 12.5",
                "  player_color: [1, 2, 3]",
                "bot:",
                "  threat_radius: 250",
                "food:",
                "  common_chance: 0.5",
            ]
        )
    )

    config = GameConfig.from_yaml(path)

    assert config.world_width == approx(1200.0)
    assert config.world_height == approx(2000.0)
    assert config.bot_count == 3
    assert config.seed == 8
    assert config.max_frame_delta == approx(4.0)
    assert config.orb.player_radius == approx(12.5)
    assert config.orb.player_color == (1, 2, 3)
    assert config.bot.threat_radius == approx(250.0)
    assert config.food.common_chance == approx(0.5)


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert GameConfig.from_yaml(path) == GameConfig()


@pytest.mark.parametrize(
    "raw",
    [
        {"unknown_option": 1},
        {"orb": {"wings": 2}},
        {"world_width": 0},
        {"bot_count": -1},
        {"food_target": -5},
        {"orb": {"bot_radius_min": 40.0, "bot_radius_max": 30.0}},
        {"bot": {"wander_min": 6.0, "wander_max": 5.0}},
        {"food": {"common_chance": 1.5}},
        {"max_frame_delta": 0},
    ],
)
def test_invalid_config_is_rejected(raw):
    with pytest.raises(ValueError):
        load_config(raw)
