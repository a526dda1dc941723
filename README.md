# blocko

A small side-on platformer in an 800×600 window: you are a blue block, the
enemies are red blocks, and you clear a level by shooting every enemy on it.
Clearing the last level wins the game. Touching an enemy removes that enemy but
costs you one point of health; you start with one, so a touch kills you and the
game goes back to the main menu with the levels loaded afresh.

## Installing

```
pip install .
```

## Playing

Run the game from a directory that holds the level file `data.txt`:

```
blocko
```

A different level file can be given with `--data`:

```
blocko --data mylevels.txt
```

If a `FreeSans.ttf` font is present in the working directory it is used for the
on-screen text; otherwise pygame's default font is used.

Click **Start** on the main menu, then:

| Key         | Action                         |
|-------------|--------------------------------|
| Left/Right  | move                           |
| Up          | jump                           |
| Left Shift  | hold to run                    |
| F           | shoot to the right             |

The score is shown in the top right corner and the elapsed seconds in the top
left. Each enemy shot down is worth 100 points, and the score carries over from
one level to the next. A boss takes ten hits.

## Level file

The level file is read line by line. The first character of each line says
what it describes; lines that start with anything else, and empty lines, are
ignored.

```
llevel one
e400 300 50 50 0.1
p0 500 300 20
b600 100 80 80 0.1
llevel two
e300 200 50 50 0.1
```

- `l...` starts a new level; the whole line is its name. Levels are played in
  the order they appear.
- `ex y width height speed` adds an enemy to the current level.
- `bx y width height speed` adds a boss: an enemy with ten health.
- `px y width height` adds a platform to the current level.

The numbers follow the letter directly and are separated by single spaces. A
space right after the letter, two spaces in a row, a value that is not a
number, too few values, or an `e`, `b` or `p` line before the first `l` line
raises `ValueError`.

The same parsing is available as `blocko.level_manager.parse_levels`, which
takes an iterable of lines and returns the linked list of `Level` objects.

## Using it from Python

The game objects can be used directly:

- `blocko.vector2d.Vector2D` — 2D vector with `+`, `-`, `*`, `/`, `length()`
  and `normalize()`.
- `blocko.entity.Entity` and `blocko.entity.Player` — boxes with gravity,
  screen-edge clamping, `update()`, `collides_with()` and, for the player,
  `jump()`, `move_left()`, `move_right()` and `reset()`.
- `blocko.bullet.Bullet` and `blocko.terrain.Platform`.
- `blocko.menu.Text`, `Button`, `Menu` and `MenuManager`.
- `blocko.level.Level` — one stage: collisions, scoring, `update()` returns
  True once no enemies are left.
- `blocko.level_manager.LevelManager` — loads levels with `load(path)`, moves
  through them with `next_level()`, and keeps the play timer.
- `blocko.game.Game` — the frame loop (`init`, `handle_events`, `update`,
  `render`); `blocko.game.main` is the `blocko` command.

## What it does not do

Enemies do not move on their own or shoot back; they only fall under gravity.
Scores and times are not saved anywhere, and the time taken is not shown on the
win screen.

## Running the tests

```
pip install .[test]
pytest
```