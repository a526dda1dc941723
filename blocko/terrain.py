"""Static platforms that entities can stand on."""

from __future__ import annotations

import pygame

PLATFORM_COLOR = (0, 255, 0)


class Platform:
    """A solid green rectangle with integer coordinates."""

    def __init__(self, x: float, y: float, width: float, height: float) -> None:
        self.rect = pygame.Rect(int(x), int(y), int(width), int(height))

    def draw(self, surface: pygame.Surface) -> None:
        surface.fill(PLATFORM_COLOR, self.rect)