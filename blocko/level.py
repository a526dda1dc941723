"""A single level: its entities, platforms, bullets and score."""

from __future__ import annotations

import pygame

from blocko.bullet import Bullet
from blocko.entity import Entity, Player
from blocko.menu import Text, load_font
from blocko.terrain import Platform

POINTS_PER_KILL = 100
SCORE_RECT = (750, 0, 50, 50)
SCORE_COLOR = (0, 0, 0)


def _contains(items: list, item: object) -> bool:
    return any(existing is item for existing in items)


def _remove(items: list, item: object) -> bool:
    for index, existing in enumerate(items):
        if existing is item:
            del items[index]
            return True
    return False


class Level:
    """Everything on screen for one stage of the game."""

    def __init__(self, name: str, font: pygame.font.Font | None = None) -> None:
        self.name = name
        self.next: Level | None = None
        self.player: Player | None = None
        self.points = 0
        self.entities: list[Entity] = []
        self.platforms: list[Platform] = []
        self.bullets: list[Bullet] = []
        self._font = font if font is not None else load_font()
        self.point_text = Text(*SCORE_RECT, "", SCORE_COLOR, self._font)

    def update(self) -> bool:
        """Run one frame; return True when no enemies are left."""
        for entity in list(self.entities):
            if not _contains(self.entities, entity):
                continue
            entity.update()
            collided = False
            for platform in self.platforms:
                if entity.collides_with(platform.rect):
                    collided = True
                    entity.handle_collision()
            if not collided:
                entity.on_platform = False
            for bullet in list(self.bullets):
                bullet.update()
                if bullet.off_screen:
                    self.remove_bullet(bullet)
                    continue
                if not _contains(self.entities, entity):
                    continue
                if entity.collides_with(bullet.rect) and entity.enemy != bullet.enemy:
                    entity.health -= 1
                    self.remove_bullet(bullet)
                    if entity.health <= 0:
                        self.remove_entity(entity)
                        self.add_points(POINTS_PER_KILL)

        for entity in list(self.entities):
            if entity.enemy:
                continue
            for other in list(self.entities):
                if not _contains(self.entities, entity):
                    break
                if not other.enemy or not _contains(self.entities, other):
                    continue
                if entity.collides_with(other.rect):
                    entity.health -= 1
                    self.remove_entity(other)
                    if entity.health <= 0:
                        self.remove_entity(entity)

        return not any(entity.enemy for entity in self.entities)

    def render(self, surface: pygame.Surface) -> None:
        """Draw entities, bullets, platforms and the score."""
        if not self.entities:
            return
        for entity in self.entities:
            entity.render(surface)
        for bullet in self.bullets:
            bullet.render(surface)
        for platform in self.platforms:
            platform.draw(surface)
        self.point_text.render(surface)

    def add_points(self, value: int) -> None:
        self.points += value
        self.point_text = Text(*SCORE_RECT, str(self.points), SCORE_COLOR, self._font)

    def add_entity(self, entity: Entity | None) -> None:
        if entity is not None:
            self.entities.append(entity)

    def remove_entity(self, entity: Entity) -> None:
        _remove(self.entities, entity)

    def add_platform(self, platform: Platform | None) -> None:
        if platform is not None:
            self.platforms.append(platform)

    def remove_platform(self, platform: Platform) -> None:
        _remove(self.platforms, platform)

    def add_bullet(self, bullet: Bullet) -> None:
        self.bullets.append(bullet)

    def remove_bullet(self, bullet: Bullet) -> None:
        _remove(self.bullets, bullet)