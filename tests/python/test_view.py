from __future__ import annotations

from pygame.math import Vector2
from pytest import approx

from blackhole.render.view import (
    GAME_OVER_TITLE,
    build_frame,
    camera_offset,
    grid_lines,
    hud_text,
    star_positions,
)
from blackhole.sim.core.config import OrbConfig
from blackhole.sim.core.world import World
from conftest import make_config

VIEWPORT = (800, 600)


def test_camera_centers_on_player():
    assert camera_offset(Vector2(1000.0, 1000.0), VIEWPORT) == Vector2(600.0, 700.0)


def test_grid_covers_viewport():
    vertical, horizontal = grid_lines(Vector2(650.0, -30.0), VIEWPORT)
    assert vertical[0] == approx(-150.0)
    assert horizontal[0] == approx(-70.0)
    assert vertical[-1] >= 800.0 - 100.0
    assert all(b - a == approx(100.0) for a, b in zip(vertical, vertical[1:]))


def test_stars_are_deterministic_and_on_screen():
    offset = Vector2(-1234.5, 987.0)
    stars = star_positions(offset, VIEWPORT)
    assert stars == star_positions(Vector2(offset), VIEWPORT)
    assert len(stars) == 60
    assert all(0 <= x < 800 and 0 <= y < 600 for x, y in stars)
    assert stars[0] == ((-371) % 800, 296 % 600)


def test_frame_projects_food_and_live_orbs():
    world = World(make_config(orb=OrbConfig(player_radius=20.0)))
    player = world.player
    world.add_food(player.position + Vector2(50.0, 0.0), 3)
    bot = world.add_orb(player.position + Vector2(-100.0, 40.0), 10.0)
    dead = world.add_orb(player.position + Vector2(100.0, 40.0), 10.0)
    dead.alive = False

    frame = build_frame(world.snapshot(), VIEWPORT)

    assert len(frame.food) == 1
    assert frame.food[0].x == approx(450.0)
    assert frame.food[0].y == approx(300.0)
    assert frame.food[0].radius == approx(4.9)
    assert len(frame.orbs) == 2
    player_sprite, bot_sprite = frame.orbs
    assert (player_sprite.core.x, player_sprite.core.y) == (approx(400.0), approx(300.0))
    assert player_sprite.glow_radius == approx(26.0)
    assert bot_sprite.core.color == bot.color
    assert bot_sprite.core.x == approx(300.0)
    assert frame.overlay == []


def test_hud_formats_radius_and_score():
    world = World(make_config(orb=OrbConfig(player_radius=5.0)))
    world.add_food(world.player.position, 1)
    world.add_food(world.player.position, 1)
    world.step(1.0)

    assert hud_text(world.snapshot()) == {"size": "5.7", "score": "2"}


def test_overlay_only_when_game_over():
    world = World(make_config(orb=OrbConfig(player_radius=5.0)))
    world.add_orb(world.player.position, 30.0)
    world.step(1.0)

    frame = build_frame(world.snapshot(), VIEWPORT)

    assert frame.overlay[0] == GAME_OVER_TITLE
    assert len(frame.orbs) == 1
