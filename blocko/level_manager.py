"""Loading levels from a data file and stepping through them."""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from pathlib import Path

import pygame

from blocko.entity import Entity
from blocko.level import Level
from blocko.menu import DEFAULT_FONT_PATH, Text, load_font
from blocko.terrain import Platform

DEFAULT_DATA_PATH = "data.txt"
BOSS_HEALTH = 10
TIMER_RECT = (0, 0, 50, 50)
TIMER_COLOR = (0, 0, 0)

_FIELD_COUNTS = {"e": 5, "b": 5, "p": 4}


def _parse_numbers(line: str, marker: str, line_number: int) -> list[float]:
    """Read the space-separated numbers of a record line.

    Every occurrence of the record's marker letter is dropped, and each space
    ends a number, so two spaces in a row or a space right after the marker
    make an empty number, which is an error.
    """
    tokens = line.replace(marker, "").split(" ")
    if tokens and tokens[-1] == "":
        tokens.pop()
    values = []
    for token in tokens:
        try:
            values.append(float(token))
        except ValueError as exc:
            raise ValueError(f"line {line_number}: invalid number {token!r}") from exc
    needed = _FIELD_COUNTS[marker]
    if len(values) < needed:
        raise ValueError(
            f"line {line_number}: expected {needed} numbers, got {len(values)}"
        )
    return values


def parse_levels(lines: Iterable[str]) -> list[Level]:
    """Build the chain of levels described by ``lines``.

    ``l...`` starts a level named by the whole line, ``e`` adds an enemy,
    ``b`` a boss with extra health and ``p`` a platform. Other lines are
    ignored. Each level is linked to the one that follows it.
    """
    levels: list[Level] = []
    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        if not line:
            continue
        kind = line[0]
        if kind == "l":
            level = Level(line)
            if levels:
                levels[-1].next = level
            levels.append(level)
            continue
        if kind not in _FIELD_COUNTS:
            continue
        if not levels:
            raise ValueError(f"line {line_number}: record before any level")
        values = _parse_numbers(line, kind, line_number)
        current = levels[-1]
        if kind == "p":
            current.add_platform(Platform(*values[:4]))
        else:
            enemy = Entity(*values[:5])
            if kind == "b":
                enemy.health = BOSS_HEALTH
            current.add_entity(enemy)
    return levels


class LevelManager:
    """Owns the levels, the current one, and the on-screen play timer."""

    def __init__(
        self,
        path: str | Path = DEFAULT_DATA_PATH,
        font_path: str | None = DEFAULT_FONT_PATH,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.path = path
        self.levels: list[Level] = []
        self.current_level: Level | None = None
        self.beat_game = False
        self.starting_ticks = 0
        self.elapsed_ticks = 0
        self.final_seconds = 0
        self.timer_text: Text | None = None
        self._clock = clock if clock is not None else time.monotonic
        self._font = load_font(font_path)

    @property
    def elapsed_seconds(self) -> int:
        """Whole seconds since the timer was started."""
        return self.elapsed_ticks - self.starting_ticks

    def _ticks(self) -> int:
        return int(self._clock())

    def load(self, path: str | Path) -> None:
        """Append the levels read from ``path`` and go to the first level."""
        self.path = path
        with open(path, encoding="utf-8") as handle:
            self.levels.extend(parse_levels(handle))
        self.first_level()

    def reset(self) -> None:
        """Drop every level and reload them from the data file."""
        self.levels.clear()
        self.beat_game = False
        self.load(self.path)

    def update(self) -> None:
        """Tick the timer and the level; advance when the level is cleared."""
        self.update_timer()
        if self.current_level is not None and self.current_level.update():
            self.next_level()

    def render(self, surface: pygame.Surface) -> None:
        if self.current_level is not None:
            self.current_level.render(surface)
        if self.timer_text is not None:
            self.timer_text.render(surface)

    def _refresh_timer_text(self) -> None:
        self.timer_text = Text(
            *TIMER_RECT, str(self.elapsed_seconds), TIMER_COLOR, self._font
        )

    def start_timer(self) -> None:
        now = self._ticks()
        self.starting_ticks = now
        self.elapsed_ticks = now
        self._refresh_timer_text()

    def update_timer(self) -> None:
        """Refresh the displayed time whenever the second changes."""
        now = self._ticks()
        if self.elapsed_ticks != now:
            self.elapsed_ticks = now
            self._refresh_timer_text()

    def stop_timer(self) -> None:
        self.final_seconds = self.elapsed_seconds
        self.elapsed_ticks = 0
        self.starting_ticks = 0

    def add_level(self, name: str) -> Level:
        level = Level(name, self._font)
        self.levels.append(level)
        return level

    def first_level(self) -> None:
        if not self.levels:
            raise LookupError("no levels loaded")
        self.current_level = self.levels[0]

    def next_level(self) -> None:
        """Carry the player and score to the next level, or mark the game won."""
        current = self.current_level
        if current is None or current.next is None:
            self.beat_game = True
            return
        player = current.player
        points = current.points
        self.current_level = current.next
        if player is not None:
            player.reset()
            self.current_level.player = player
            self.current_level.add_entity(player)
        self.current_level.add_points(points)