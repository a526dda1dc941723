"""The game loop: menus, levels, input handling and drawing."""

from __future__ import annotations

import argparse
import os
from collections.abc import Callable
from pathlib import Path

import pygame

from blocko.bullet import Bullet
from blocko.entity import SCREEN_HEIGHT, SCREEN_WIDTH, Player
from blocko.level_manager import DEFAULT_DATA_PATH, LevelManager
from blocko.menu import DEFAULT_FONT_PATH, MenuManager

BACKGROUND = (255, 255, 255)
RED = (255, 0, 0)
GREEN = (0, 255, 0)
WHITE = (255, 255, 255)

WIN_DELAY_MS = 5000
DEATH_DELAY_MS = 2000
BULLET_OFFSET = 20


class Game:
    """Holds the window, menus and levels and runs one frame at a time."""

    def __init__(
        self,
        data_path: str | Path = DEFAULT_DATA_PATH,
        font_path: str | None = DEFAULT_FONT_PATH,
        delay: Callable[[int], object] | None = None,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.data_path = data_path
        self.is_running = False
        self.screen: pygame.Surface | None = None
        self.starting_up = True
        self.loaded_player: Player | None = None
        self.menu_manager = MenuManager(font_path)
        self.level_manager = LevelManager(data_path, font_path=font_path, clock=clock)
        self.current_menu = None
        self._delay = delay if delay is not None else pygame.time.delay

    def init(self, title: str, x: int, y: int, width: int, height: int, fullscreen: bool) -> None:
        """Open the window, load the levels, place the player and build menus."""
        flags = pygame.FULLSCREEN if fullscreen else 0
        os.environ["SDL_VIDEO_WINDOW_POS"] = f"{x},{y}"
        pygame.init()
        try:
            self.screen = pygame.display.set_mode((width, height), flags)
            pygame.display.set_caption(title)
            self.screen.fill(BACKGROUND)
            self.is_running = True
        except pygame.error:
            self.screen = None
            self.is_running = False

        self.level_manager.load(self.data_path)
        self._spawn_player()

        death = self.menu_manager.add_menu("deathScreen")
        main_menu = self.menu_manager.add_menu("main")
        win = self.menu_manager.add_menu("winScreen")
        death.add_text(150, 160, 500, 300, "You Died", RED)
        win.add_text(150, 160, 500, 300, "You Won", GREEN)
        main_menu.add_text(150, 10, 500, 300, "Grand Theft Blocko", GREEN)
        main_menu.add_text(290, 500, 200, 50, "Start", WHITE)
        main_menu.add_button(290, 500, 200, 50, "start", RED)
        self._show_menu("main")

    def running(self) -> bool:
        return self.is_running

    @property
    def _canvas(self) -> pygame.Surface:
        if self.screen is None:
            self.screen = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
        return self.screen

    def _show_menu(self, name: str) -> None:
        self.menu_manager.set_current_menu(name)
        self.current_menu = self.menu_manager.current_menu

    def _spawn_player(self) -> None:
        player = Player(50, 50, 50, 50, 0.075, 1)
        level = self.level_manager.current_level
        level.add_entity(player)
        level.player = player
        self.loaded_player = player

    def _restart(self) -> None:
        """Return to the main menu with freshly loaded levels and a new player."""
        self._show_menu("main")
        self.starting_up = True
        self.level_manager.reset()
        self._spawn_player()

    def _player_lost(self) -> bool:
        level = self.level_manager.current_level
        return not level.entities or self.loaded_player.health <= 0

    @staticmethod
    def _present() -> None:
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> None:
        """Apply one input event to the menu or to the player."""
        if event.type == pygame.QUIT:
            self.is_running = False
        if self.starting_up:
            if event.type != pygame.QUIT:
                self.current_menu.handle_event(event)
            return

        player = self.loaded_player
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_LEFT:
                player.move_left()
            elif event.key == pygame.K_RIGHT:
                player.move_right()
            elif event.key == pygame.K_UP:
                player.jump()
            elif event.key == pygame.K_f:
                self.level_manager.current_level.add_bullet(
                    Bullet(
                        player.position.x + BULLET_OFFSET,
                        player.position.y + BULLET_OFFSET,
                        1,
                        False,
                    )
                )
            elif event.key == pygame.K_LSHIFT:
                player.is_running = True
        elif event.type == pygame.KEYUP:
            if event.key in (pygame.K_LEFT, pygame.K_RIGHT):
                player.velocity.x = 0.0
            elif event.key == pygame.K_LSHIFT:
                player.is_running = False

    def handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def update(self) -> None:
        """Advance the menu or the level by one frame."""
        if self.starting_up:
            self.starting_up = self.current_menu.update()
            if not self.starting_up:
                self.level_manager.start_timer()
            return

        self.level_manager.update()

        if self.level_manager.beat_game:
            self.level_manager.stop_timer()
            self._show_menu("winScreen")
            self.current_menu.render(self._canvas)
            self._present()
            self._delay(WIN_DELAY_MS)
            self._restart()

        if self._player_lost():
            level = self.level_manager.current_level
            level.entities.clear()
            level.platforms.clear()
            level.bullets.clear()

    def render(self) -> None:
        """Draw the frame; show the death screen and restart when the player lost."""
        canvas = self._canvas
        canvas.fill(BACKGROUND)
        if self.starting_up:
            self.current_menu.render(canvas)
        else:
            self.level_manager.render(canvas)
            if self._player_lost():
                self._show_menu("deathScreen")
                self.current_menu.render(canvas)
                self._present()
                self._delay(DEATH_DELAY_MS)
                self._restart()
        self._present()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="blocko", description="Grand Theft Blocko")
    parser.add_argument("--data", default=DEFAULT_DATA_PATH, help="level data file")
    args = parser.parse_args(argv)

    game = Game(data_path=args.data)
    game.init("Semester Project", 550, 250, SCREEN_WIDTH, SCREEN_HEIGHT, False)
    try:
        while game.running():
            game.handle_events()
            game.update()
            game.render()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())