from __future__ import annotations

from dataclasses import dataclass

import pygame

KEY_BINDINGS: dict[int, str] = {
    pygame.K_UP: "up",
    pygame.K_w: "up",
    pygame.K_DOWN: "down",
    pygame.K_s: "down",
    pygame.K_LEFT: "left",
    pygame.K_a: "left",
    pygame.K_RIGHT: "right",
    pygame.K_d: "right",
}


@dataclass(slots=True)
class KeyState:
    up: bool = False
    down: bool = False
    left: bool = False
    right: bool = False

    def press(self, name: str) -> None:
        self._set(name, True)

    def release(self, name: str) -> None:
        self._set(name, False)

    def clear(self) -> None:
        self.up = self.down = self.left = self.right = False

    def axis(self) -> tuple[float, float]:
        # opposing flags cancel before normalization
        dx = float(self.right) - float(self.left)
        dy = float(self.down) - float(self.up)
        return dx, dy

    def _set(self, name: str, value: bool) -> None:
        if name not in ("up", "down", "left", "right"):
            raise ValueError(f"Unknown key flag: {name}")
        setattr(self, name, value)

    def handle_key(self, key: int, pressed: bool) -> bool:
        name = KEY_BINDINGS.get(key)
        if name is None:
            return False
        self._set(name, pressed)
        return True
