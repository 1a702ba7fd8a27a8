from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List

from pygame.math import Vector2

from ..sim.core.config import Color
from ..sim.types.snapshot import Snapshot

GRID_SPACING = 100
STAR_COUNT = 60
STAR_PARALLAX = 0.3
GLOW_SCALE = 1.3
HIGHLIGHT_OFFSET = 0.3
HIGHLIGHT_SCALE = 0.35
GAME_OVER_TITLE = "You were consumed!"
GAME_OVER_HINT = "Press R or click Restart to play again"


@dataclass(slots=True, frozen=True)
class Circle:
    x: float
    y: float
    radius: float
    color: Color


@dataclass(slots=True, frozen=True)
class OrbSprite:
    core: Circle
    glow_radius: float
    highlight: Circle


@dataclass(slots=True)
class Frame:
    offset: Vector2
    viewport: tuple[int, int]
    vertical_lines: List[float] = field(default_factory=list)
    horizontal_lines: List[float] = field(default_factory=list)
    stars: List[tuple[int, int]] = field(default_factory=list)
    food: List[Circle] = field(default_factory=list)
    orbs: List[OrbSprite] = field(default_factory=list)
    hud: dict[str, str] = field(default_factory=dict)
    overlay: List[str] = field(default_factory=list)


def camera_offset(player_position: Vector2, viewport: tuple[int, int]) -> Vector2:
    width, height = viewport
    return Vector2(player_position.x - width / 2, player_position.y - height / 2)


def grid_lines(offset: Vector2, viewport: tuple[int, int], spacing: int = GRID_SPACING) -> tuple[List[float], List[float]]:
    width, height = viewport
    start_x = -(math.fmod(offset.x, spacing) + spacing)
    start_y = -(math.fmod(offset.y, spacing) + spacing)
    vertical = []
    x = start_x
    while x < width + spacing:
        vertical.append(x)
        x += spacing
    horizontal = []
    y = start_y
    while y < height + spacing:
        horizontal.append(y)
        y += spacing
    return vertical, horizontal


def star_positions(offset: Vector2, viewport: tuple[int, int], count: int = STAR_COUNT) -> List[tuple[int, int]]:
    """Decorative stars keyed off the camera so they drift with parallax."""
    width, height = viewport
    shift_x = math.floor(offset.x * STAR_PARALLAX)
    shift_y = math.floor(offset.y * STAR_PARALLAX)
    return [((i * 37 + shift_x) % width, (i * 53 + shift_y) % height) for i in range(count)]


def hud_text(snapshot: Snapshot) -> dict[str, str]:
    return {
        "size": f"{snapshot.player.radius:.1f}",
        "score": str(int(snapshot.player.score)),
    }


def build_frame(snapshot: Snapshot, viewport: tuple[int, int]) -> Frame:
    offset = camera_offset(Vector2(snapshot.player.x, snapshot.player.y), viewport)
    vertical, horizontal = grid_lines(offset, viewport)
    frame = Frame(
        offset=offset,
        viewport=viewport,
        vertical_lines=vertical,
        horizontal_lines=horizontal,
        stars=star_positions(offset, viewport),
        hud=hud_text(snapshot),
    )
    for food in snapshot.food:
        frame.food.append(Circle(food.x - offset.x, food.y - offset.y, food.radius, food.color))
    # snapshot.orbs already excludes dead orbs
    for orb in snapshot.orbs:
        screen_x = orb.x - offset.x
        screen_y = orb.y - offset.y
        frame.orbs.append(
            OrbSprite(
                core=Circle(screen_x, screen_y, orb.radius, orb.color),
                glow_radius=orb.radius * GLOW_SCALE,
                highlight=Circle(
                    screen_x - orb.radius * HIGHLIGHT_OFFSET,
                    screen_y - orb.radius * HIGHLIGHT_OFFSET,
                    orb.radius * HIGHLIGHT_SCALE,
                    (255, 255, 255),
                ),
            )
        )
    if snapshot.game_over:
        frame.overlay = [GAME_OVER_TITLE, GAME_OVER_HINT]
    return frame
