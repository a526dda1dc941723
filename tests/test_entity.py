import pygame
import pytest

from blocko.entity import (
    ENEMY_COLOR,
    GRAVITY_STEP,
    PLAYER_COLOR,
    PLAYER_START,
    RUN_SPEED,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    WALK_SPEED,
    Entity,
    Player,
)


def make_enemy(x=100.0, y=100.0):
    return Entity(x, y, 40.0, 30.0, 1.0)


def make_player():
    return Player(50, 50, 50, 50, 0.075, 1)


def test_rect_matches_constructor():
    e = Entity(10.7, 20.2, 40.0, 30.0, 1.0)
    assert e.rect == pygame.Rect(int(10.7), int(20.2), 40, 30)
    assert e.health == 1
    assert e.enemy is True


def test_update_returns_false():
    assert make_enemy().update() is False


def test_gravity_accumulates_when_not_on_platform():
    e = make_enemy()
    e.update()
    assert e.velocity.y == pytest.approx(GRAVITY_STEP)
    e.update()
    assert e.velocity.y == pytest.approx(2 * GRAVITY_STEP)


def test_no_gravity_on_platform():
    e = make_enemy()
    e.on_platform = True
    e.update()
    assert e.velocity.y == 0.0
    assert e.position.y == pytest.approx(100.0)


def test_jump_moves_upward():
    e = make_enemy(y=300.0)
    e.is_jumping = True
    e.update()
    assert e.velocity.y < 0
    assert e.position.y < 300.0
    assert e.is_falling is True
    assert e.is_jumping is False


def test_ground_clamps_position():
    e = make_enemy(y=SCREEN_HEIGHT + 100.0)
    e.is_falling = True
    e.update()
    assert e.position.y == SCREEN_HEIGHT - e.rect.h
    assert e.velocity.y == 0.0
    assert e.is_falling is False


def test_right_wall_clamps_position():
    e = make_enemy(x=SCREEN_WIDTH + 50.0)
    e.velocity.x = 2.0
    e.update()
    assert e.position.x == SCREEN_WIDTH - e.rect.w
    assert e.velocity.x == 0.0


def test_left_wall_clamps_position():
    e = make_enemy(x=-20.0)
    e.velocity.x = -1.0
    e.update()
    assert e.position.x == 0.0
    assert e.velocity.x == 0.0


def test_position_setters_update_rect():
    e = make_enemy()
    e.x = 321.9
    e.y = 123.4
    assert e.x == 321.9
    assert e.rect.topleft == (int(321.9), int(123.4))


def test_size_setters_update_rect():
    e = make_enemy()
    e.width = 77.0
    e.height = 66.0
    assert e.rect.size == (77, 66)
    assert (e.width, e.height) == (77.0, 66.0)


def test_collides_with_overlap_and_disjoint():
    e = make_enemy()
    assert e.collides_with(pygame.Rect(110, 110, 5, 5)) is True
    assert e.collides_with(pygame.Rect(500, 500, 5, 5)) is False


def test_handle_collision_lands():
    e = make_enemy()
    e.velocity.y = 3.0
    e.is_falling = True
    e.is_jumping = True
    e.handle_collision()
    assert e.velocity.y == 0.0
    assert (e.is_falling, e.is_jumping, e.on_platform) == (False, False, True)


def test_enemy_renders_red():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    e = make_enemy()
    e.render(surface)
    assert tuple(surface.get_at(e.rect.center))[:3] == ENEMY_COLOR
    assert tuple(surface.get_at((0, 0)))[:3] == (0, 0, 0)


def test_set_color_changes_render():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    e = make_enemy()
    e.set_color(0, 255, 0)
    e.render(surface)
    assert tuple(surface.get_at(e.rect.center))[:3] == (0, 255, 0)


def test_player_defaults():
    p = make_player()
    assert p.enemy is False
    assert p.health == 1
    assert p.is_running is False
    assert p.color == PLAYER_COLOR


def test_player_renders_blue():
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    p = make_player()
    p.render(surface)
    assert tuple(surface.get_at(p.rect.center))[:3] == PLAYER_COLOR


def test_player_walk_speeds():
    p = make_player()
    p.move_left()
    assert p.velocity.x == -WALK_SPEED
    p.move_right()
    assert p.velocity.x == WALK_SPEED


def test_player_run_speeds():
    p = make_player()
    p.is_running = True
    p.move_right()
    assert p.velocity.x == RUN_SPEED
    assert p.speed == RUN_SPEED
    p.move_left()
    assert p.velocity.x == -RUN_SPEED


def test_player_jump_sets_flags_once():
    p = make_player()
    p.on_platform = True
    p.jump()
    assert p.is_jumping is True
    assert p.on_platform is False
    p.on_platform = True
    p.jump()
    assert p.on_platform is True


def test_player_reset_returns_to_start():
    p = make_player()
    p.position.x = 700.0
    p.position.y = 400.0
    p.reset()
    assert (p.position.x, p.position.y) == PLAYER_START