# spacedefender

A small arcade shooter. Ten meteors fall toward your ship. Shoot all ten
before one of them hits you. You start with 15 shots. A falling bonus crate
gives 15 more.

## Installing

```
pip install .
```

This installs `pygame` as well.

## Playing

```
spacedefender
```

The game reads its art from `images/` (`icon.png`, `background.png`,
`spaceship.png`, `explode.png`, `space_object.png`, `bonus.png`) and its font
from `font/static/BitcountGridDouble-Regular.ttf`. By default these are
looked up under the current directory. Use `--assets` to point somewhere else:

```
spacedefender --assets path/to/assets
```

If `images/icon.png` or `images/background.png` cannot be loaded, the command
exits with status 1 without opening a window. The other images are optional:
the game skips drawing any that are missing. If the font is missing, pygame's
default font is used instead.

| Key           | Action                                 |
|---------------|----------------------------------------|
| Space         | Start the game, then fire a shot       |
| W / A / S / D | Move the ship up / left / down / right |
| F             | Restart after a win or a loss          |

The ship stays inside the 720×720 playfield. The HUD shows how many shots
you have left (`Ammo`) and how many meteors are still falling (`Enemy`).
Meteors that leave the bottom of the screen come back in from above. So does
the bonus, until you catch it. After a win the ship goes back to its starting
spot. After a crash it restarts where it was.

## Using the pieces

The rules of the game are kept apart from the drawing, so you can drive them
without a window:

- `spacedefender.motion`: `move_spaceship` and `scroll_background`. These are
  the movement rules for the ship and for the two-panel starfield.
- `spacedefender.entities`: `Rect` (with `intersects`), plus `Meteor`,
  `Bonus` and `Bullet`.
- `spacedefender.game`: `Game` and its `Key` enum. Also `FrameTimes` and
  `frame_times`, which turn elapsed microseconds into the time step for each
  kind of object.
- `spacedefender.app`: `hud_texts` and the `main` entry point.

```python
import random
from spacedefender.game import Game, Key

game = Game(random.Random(1))
game.update(16_000, {Key.SPACE})   # holding Space starts the game
game.key_pressed(Key.SPACE)        # fire
game.update(16_000, set())
print(game.ammo_left, game.enemies_left)
```

## What it does not do

There is no sound, no score or high-score storage, and there are no levels
beyond the single ten-meteor round.

## Tests

```
pip install .[test]
pytest
```