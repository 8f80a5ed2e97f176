# doubledodge

Double Dodge is a small arcade game for two players who share one keyboard.
Each player steers a square on their own side of a wall that runs down the
middle of the arena. Creatures appear at the edges of the arena every half
second and drift straight across it. If either square touches a creature or
the wall, the round is over. The score goes up by one for each second the
round lasts.

## Installing

```
pip install .
```

This installs pygame as well.

## Playing

```
doubledodge
```

A window titled "Double Dodge!" opens with a **Play** button. Click it to
start a round. When the round ends, the arena stays on screen behind a
**Restart** button; click it to play again. Press `Esc` or close the window
to quit.

| Player | Colour | Keys |
|--------|--------|------|
| 1 | red | `W` `A` `S` `D` |
| 2 | teal | arrow keys |

The score is shown in the top-left corner while a round is running.

The window is 1000 by 600 pixels unless you ask for another size:

```
doubledodge --width 1200 --height 800
```

Both sizes must be positive. Creatures enter further out on a larger window.

Text is drawn with `fonts/FiraSans-Bold.ttf` and `fonts/FiraMono-Medium.ttf`,
looked up relative to the directory you start the game from. These fonts are
not included with the package; when they are not found, pygame's default font
is used instead.

## Using the package

The game logic in `doubledodge.game` does not depend on a window, so you can
drive it yourself:

```python
import random

from doubledodge.game import Game

game = Game(1000, 600, random.Random(1))
game.play()
game.spawn_creature()
game.update(set())
game.tick_score()
print(game.state, game.scoreboard.text())
```

- `Game.play()` starts a round from the menu or game-over state and raises
  `RuntimeError` if a round is already running.
- `Game.update(pressed)` runs one frame: it moves both players for the set of
  held key names (`"a"`, `"d"`, `"w"`, `"s"`, `"left"`, `"right"`, `"up"`,
  `"down"`), moves every creature and checks for collisions.
- `Game.spawn_creature()` and `Game.tick_score()` do nothing outside a round;
  the window calls them every 0.5 and 1.0 seconds.
- `collide`, `spawn_position` and `creature_type_from_index` are plain
  functions in the same module.

`doubledodge.scoreboard.Scoreboard` holds the score, and
`doubledodge.ui` has the `Button` used for the Play and Restart screens.
`doubledodge.app.run(width, height)` opens the pygame window at the size you
give, and `doubledodge.app.main()` is what the `doubledodge` command runs.

## What it does not do

Scores are not saved between rounds or between runs, and there is no
high-score table. There are no sounds and no settings screen.

## Running the tests

```
pip install ".[test]"
pytest
```