from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional

import pygame

from ..logging_config import configure_logging
from ..render.view import Frame, build_frame
from ..sim.core.config import GameConfig
from ..sim.core.world import World
from .frame_clock import FrameClock

logger = logging.getLogger(__name__)

BACKGROUND = (5, 5, 16)
GRID_COLOR = (255, 255, 255, 13)
STAR_COLOR = (255, 255, 255, 77)
OVERLAY_COLOR = (0, 0, 0, 153)
TEXT_COLOR = (255, 255, 255)
BUTTON_COLOR = (40, 40, 70)


class GameClient:
    """pygame frame driver: input in, one step, one render, repeat."""

    def __init__(self, config: GameConfig):
        self.config = config
        self.viewport = (config.viewport_width, config.viewport_height)
        self.world = World(config)
        self.frame_clock = FrameClock(config.frame_ms, config.max_frame_delta)
        self.running = False
        self.screen: Optional[pygame.Surface] = None
        self.font: Optional[pygame.font.Font] = None
        self.big_font: Optional[pygame.font.Font] = None
        self.restart_button = pygame.Rect(config.viewport_width - 130, 10, 120, 36)

    def restart(self) -> None:
        self.world.restart()
        self.world.keys.clear()
        self.frame_clock.reset()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_r:
                self.restart()
            else:
                self.world.keys.handle_key(event.key, True)
        elif event.type == pygame.KEYUP:
            self.world.keys.handle_key(event.key, False)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.restart_button.collidepoint(event.pos):
                self.restart()

    def run(self) -> None:
        pygame.init()
        pygame.display.set_caption("Black Hole")
        self.screen = pygame.display.set_mode(self.viewport)
        self.font = pygame.font.Font(None, 24)
        self.big_font = pygame.font.Font(None, 48)
        clock = pygame.time.Clock()
        self.running = True
        logger.info("game client started at %dx%d", *self.viewport)
        try:
            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)
                dt = self.frame_clock.tick(float(pygame.time.get_ticks()))
                self.world.step(dt)
                self.draw(build_frame(self.world.snapshot(), self.viewport))
                pygame.display.flip()
                clock.tick(self.config.fps)
        finally:
            pygame.quit()

    def draw(self, frame: Frame) -> None:
        screen = self.screen
        assert screen is not None
        width, height = frame.viewport
        screen.fill(BACKGROUND)

        layer = pygame.Surface(frame.viewport, pygame.SRCALPHA)
        for x in frame.vertical_lines:
            pygame.draw.line(layer, GRID_COLOR, (x, 0), (x, height))
        for y in frame.horizontal_lines:
            pygame.draw.line(layer, GRID_COLOR, (0, y), (width, y))
        for sx, sy in frame.stars:
            layer.fill(STAR_COLOR, pygame.Rect(sx, sy, 2, 2))
        screen.blit(layer, (0, 0))

        for food in frame.food:
            pygame.draw.circle(screen, food.color, (food.x, food.y), food.radius)

        for sprite in frame.orbs:
            core = sprite.core
            glow_size = int(sprite.glow_radius * 2) + 1
            glow = pygame.Surface((glow_size, glow_size), pygame.SRCALPHA)
            pygame.draw.circle(glow, (*core.color, 90), (sprite.glow_radius, sprite.glow_radius), sprite.glow_radius)
            screen.blit(glow, (core.x - sprite.glow_radius, core.y - sprite.glow_radius))
            pygame.draw.circle(screen, (0, 0, 0), (core.x, core.y), core.radius)
            shine = sprite.highlight
            spot_size = int(shine.radius * 2) + 1
            spot = pygame.Surface((spot_size, spot_size), pygame.SRCALPHA)
            pygame.draw.circle(spot, (*shine.color, 31), (shine.radius, shine.radius), shine.radius)
            screen.blit(spot, (shine.x - shine.radius, shine.y - shine.radius))

        self._draw_hud(frame)
        if frame.overlay:
            self._draw_overlay(frame)

    def _draw_hud(self, frame: Frame) -> None:
        assert self.screen is not None and self.font is not None
        text = f"Size: {frame.hud['size']}   Score: {frame.hud['score']}"
        self.screen.blit(self.font.render(text, True, TEXT_COLOR), (10, 10))
        pygame.draw.rect(self.screen, BUTTON_COLOR, self.restart_button, border_radius=6)
        label = self.font.render("Restart", True, TEXT_COLOR)
        self.screen.blit(label, label.get_rect(center=self.restart_button.center))

    def _draw_overlay(self, frame: Frame) -> None:
        assert self.screen is not None and self.font is not None and self.big_font is not None
        width, height = frame.viewport
        shade = pygame.Surface(frame.viewport, pygame.SRCALPHA)
        shade.fill(OVERLAY_COLOR)
        self.screen.blit(shade, (0, 0))
        title, hint = frame.overlay
        title_surface = self.big_font.render(title, True, TEXT_COLOR)
        hint_surface = self.font.render(hint, True, TEXT_COLOR)
        self.screen.blit(title_surface, title_surface.get_rect(center=(width / 2, height / 2 - 20)))
        self.screen.blit(hint_surface, hint_surface.get_rect(center=(width / 2, height / 2 + 20)))


def main() -> None:
    parser = argparse.ArgumentParser(description="Black hole arena")
    parser.add_argument("--config", type=Path, default=None, help="YAML file overriding the defaults")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", default=None, help="Logging level (default: INFO)")
    args = parser.parse_args()
    configure_logging(level=args.log_level)
    config = GameConfig.from_yaml(args.config) if args.config else GameConfig()
    if args.seed is not None:
        config.seed = args.seed
    GameClient(config).run()


if __name__ == "__main__":
    main()
