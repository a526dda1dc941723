"""Projectiles fired across the screen."""

from __future__ import annotations

import pygame

from blocko.entity import SCREEN_WIDTH
from blocko.vector2d import Vector2D

BULLET_SIZE = 10
BULLET_COLOR = (0, 0, 255)


class Bullet:
    """A small square that travels to the right at a fixed speed."""

    def __init__(self, x: int, y: int, speed: int, enemy: bool) -> None:
        self.position = Vector2D(int(x), int(y))
        self.speed = speed
        self.enemy = enemy
        self.rect = pygame.Rect(int(x), int(y), BULLET_SIZE, BULLET_SIZE)
        self.sprite = pygame.Surface((BULLET_SIZE, BULLET_SIZE))
        self.sprite.fill(BULLET_COLOR)

    @property
    def off_screen(self) -> bool:
        """True once the bullet has reached the right edge."""
        return self.position.x >= SCREEN_WIDTH

    def update(self) -> None:
        """Move the bullet forward by its speed."""
        self.position.x += self.speed
        self.rect.x = int(self.position.x)

    def render(self, surface: pygame.Surface) -> None:
        surface.blit(self.sprite, self.rect)