"""Physical entities: enemies and the player."""

from __future__ import annotations

import pygame

from blocko.vector2d import Vector2D

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 600

JUMP_VELOCITY = -0.5
GRAVITY_STEP = 0.0005
WALK_SPEED = 0.075
RUN_SPEED = 0.275
PLAYER_START = (50.0, 50.0)

ENEMY_COLOR = (255, 0, 0)
PLAYER_COLOR = (0, 0, 255)


class Entity:
    """A coloured box affected by gravity and kept inside the screen."""

    def __init__(self, x: float, y: float, width: float, height: float, speed: float) -> None:
        self.position = Vector2D(x, y)
        self.velocity = Vector2D(0.0, 0.0)
        self.gravity = Vector2D(0.0, 0.05)
        self._width = width
        self._height = height
        self.speed = speed
        self.rect = pygame.Rect(int(x), int(y), int(width), int(height))
        self.health = 1
        self.is_falling = False
        self.is_jumping = False
        self.on_platform = False
        self.enemy = True
        self.color = ENEMY_COLOR
        self.sprite = pygame.Surface((0, 0))
        self.set_color(*ENEMY_COLOR)

    @property
    def x(self) -> float:
        return self.position.x

    @x.setter
    def x(self, value: float) -> None:
        self.position.x = value
        self.rect.x = int(value)

    @property
    def y(self) -> float:
        return self.position.y

    @y.setter
    def y(self, value: float) -> None:
        self.position.y = value
        self.rect.y = int(value)

    @property
    def width(self) -> float:
        return self._width

    @width.setter
    def width(self, value: float) -> None:
        self._width = value
        self.rect.w = int(value)

    @property
    def height(self) -> float:
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = value
        self.rect.h = int(value)

    def update(self) -> bool:
        """Advance one physics step; always returns False."""
        if self.is_jumping and not self.is_falling:
            self.velocity.y = JUMP_VELOCITY
            self.is_falling = True
            self.is_jumping = False
            self.on_platform = False

        if not self.on_platform:
            self.velocity.y += GRAVITY_STEP

        self.position = self.position + self.velocity

        self.rect.x = int(self.position.x)
        self.rect.y = int(self.position.y)

        if self.position.y > SCREEN_HEIGHT - self.rect.h:
            self.position.y = SCREEN_HEIGHT - self.rect.h
            self.velocity.y = 0.0
            self.is_falling = False
            self.on_platform = False

        if self.position.x > SCREEN_WIDTH - self.rect.w:
            self.position.x = SCREEN_WIDTH - self.rect.w
            self.velocity.x = 0.0
        elif self.position.x < 0:
            self.position.x = 0.0
            self.velocity.x = 0.0

        return False

    def render(self, surface: pygame.Surface) -> None:
        """Draw the sprite stretched to the entity's rectangle."""
        sprite = self.sprite
        if sprite.get_size() != self.rect.size:
            sprite = pygame.transform.scale(sprite, self.rect.size)
        surface.blit(sprite, self.rect)

    def set_color(self, r: int, g: int, b: int) -> None:
        """Replace the sprite with a solid box of the given colour."""
        self.color = (r, g, b)
        self.sprite = pygame.Surface((int(self._width), int(self._height)))
        self.sprite.fill(self.color)

    def collides_with(self, rect: pygame.Rect) -> bool:
        """Return True if this entity's rectangle overlaps ``rect``."""
        return bool(self.rect.colliderect(rect))

    def handle_collision(self) -> None:
        """Land on a platform."""
        self.velocity.y = 0.0
        self.is_falling = False
        self.is_jumping = False
        self.on_platform = True


class Player(Entity):
    """The entity steered by the keyboard."""

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        speed: float,
        health: int,
    ) -> None:
        super().__init__(x, y, width, height, speed)
        self.health = health
        self.enemy = False
        self.is_running = False
        self.set_color(*PLAYER_COLOR)

    def jump(self) -> None:
        """Request a jump, taken on the next update if not already falling."""
        if not self.is_jumping:
            self.is_jumping = True
            self.on_platform = False

    def _current_speed(self) -> float:
        self.speed = RUN_SPEED if self.is_running else WALK_SPEED
        return self.speed

    def move_left(self) -> None:
        self.velocity.x = -self._current_speed()

    def move_right(self) -> None:
        self.velocity.x = self._current_speed()

    def reset(self) -> None:
        """Put the player back at the start position of a level."""
        self.position.x, self.position.y = PLAYER_START