import pygame

from blocko.bullet import BULLET_COLOR, BULLET_SIZE, Bullet
from blocko.entity import SCREEN_WIDTH


def test_initial_rect():
    b = Bullet(70, 70, 1, False)
    assert b.rect == pygame.Rect(70, 70, BULLET_SIZE, BULLET_SIZE)
    assert b.enemy is False


def test_float_coordinates_are_truncated():
    b = Bullet(70.9, 20.5, 1, True)
    assert (b.position.x, b.position.y) == (70, 20)
    assert b.enemy is True


def test_update_moves_by_speed():
    b = Bullet(100, 40, 3, False)
    b.update()
    assert b.position.x == 103
    assert b.rect.x == 103
    assert b.rect.y == 40


def test_repeated_updates_accumulate():
    b = Bullet(0, 0, 2, False)
    for _ in range(5):
        b.update()
    assert b.position.x == 5 * 2
    assert b.rect.x == b.position.x


def test_off_screen_at_edge():
    b = Bullet(SCREEN_WIDTH - 1, 0, 1, False)
    assert b.off_screen is False
    b.update()
    assert b.off_screen is True


def test_render_draws_blue_square():
    surface = pygame.Surface((SCREEN_WIDTH, 600))
    b = Bullet(200, 200, 1, False)
    b.render(surface)
    assert tuple(surface.get_at(b.rect.center))[:3] == BULLET_COLOR
    assert tuple(surface.get_at((b.rect.right + 1, b.rect.y)))[:3] == (0, 0, 0)