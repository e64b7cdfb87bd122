# defender

A small tower defense game. Enemies walk a fixed path across the map
towards your base. You buy weapons in the shop, place them on the map
and stop the enemies before they get through. The base has 5 hit points,
and each enemy that reaches it takes some of them away. When the base has
none left, the game ends and the end screen shows your score.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Running

```
defender
```

The game opens a 1920×1080 fullscreen window and runs at 60 frames per
second. It loads its pictures and font from `img/` and its music from
`music/`, relative to the current directory, so start it from the
directory that holds them. A picture that cannot be loaded is not drawn.
A sound that cannot be loaded stays silent. If the font cannot be loaded,
pygame's default font is used.

With no arguments, the four weapons are read from `obito.txt`, `vent.txt`,
`gun.txt` and `sniper.txt`. You can name weapon files on the command line
instead, in the same order:

```
defender obito.txt vent.txt gun.txt sniper.txt
```

The first four files named are used. If fewer than four are given, the
game stops with a `ValueError`.

### Weapon files

A weapon file is plain text with one value per line. Only its first 4000
bytes are read.

```
img/weapons/gun.png
120
45
40
```

1. the path of the weapon's sprite sheet;
2. the width of its hitbox;
3. the height of its hitbox;
4. how much one upgrade widens the hitbox.

If a line is missing, loading fails with an `IndexError`.

The first two weapons (`WeaponKind.OBITO` and `WeaponKind.VENT`) can be
placed only on the zones inside the ship. The last two (`WeaponKind.GUN`
and `WeaponKind.SNIPER`) can be placed only on the zones outside it.

## Playing

On the menu, click **Play** to start, **How to play** to read the rules,
or **Quit** to leave. Escape on the menu also quits.

During a game:

| Key    | Action                                  |
|--------|-----------------------------------------|
| S      | open the shop                           |
| C      | close the shop (while it is open)       |
| M      | add 10000 gold (while the shop is open) |
| Escape | pause                                   |
| P      | resume from pause                       |
| Q      | quit                                    |

You earn one gold every 0.6 seconds, and more while enemies that a weapon
has hit are dying. You start with 1000 gold.

In the shop, **Buy** a weapon for 500, 1000, 1500 or 3000 gold, then click
a highlighted zone of the map to place it. **Upgrade** costs 300 gold and
widens a weapon's hitbox by its upgrade step. The cross closes the shop.

The pause screen offers **Resume**, **Back to menu** and **Leave**. On the
end screen, Escape closes the game.

## Using the game logic

You can drive the game state without a window:

```python
from defender.state import Game
from defender.events import Event, EventKind, Key, Effect, handle_event

game = Game.create(["obito.txt", "vent.txt", "gun.txt", "sniper.txt"])
game.update(1 / 60, (0, 0))

effect = handle_event(game, Event(EventKind.MOUSE_PRESSED), (950, 180))
assert game.flags.game  # the Play button was clicked

handle_event(game, Event(EventKind.KEY_PRESSED, Key.S), (0, 0))
assert game.flags.shop
```

The main pieces are:

- `handle_event` changes the `Game` and returns an `Effect`, which names
  what lies outside the game state: closing the window or starting a sound.
- `defender.app.Renderer` draws a `Game` onto a pygame surface.
- `defender.app.run(weapon_files)` opens the window and plays the game.

## What it does not do

- There is no settings screen.
- Scores are not saved between games.
- A finished game cannot be restarted without starting the program again.