# solong

A small tile-based puzzle game. You walk a knight around a walled map,
pick up every coin, and then step onto the exit once it has opened.

## Installing

```
pip install .
```

The game window is drawn with pygame. To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
so_long path/to/map.ber
```

The command takes exactly one argument, the path of a map file. Sprites are
read from `./images/xpm/` relative to the directory you start the game in;
that directory must hold these XPM files:

* `field1x32.xpm`
* `wall32.xpm`
* `coin_bg32.xpm`
* `exit_closed_bg32.xpm`
* `exit_opened_bg32.xpm`
* `knight_front_bg32.xpm`

Each tile is drawn as a 32 × 32 pixel square.

Controls:

| Key | Action                              |
|-----|-------------------------------------|
| W   | move one row toward the next line   |
| S   | move one row toward the previous line |
| A   | move left                           |
| D   | move right                          |
| Esc | quit                                |

Rows are counted from the top of the map, so W moves the knight down the
screen and S moves it up.

The knight cannot walk into walls or onto the exit while it is still
closed. Each move is reported on standard error as `move_count: N`. When the
last coin is picked up the exit opens. Walking onto the open exit ends the
game, and so do Esc and closing the window.

## Map files

A map is a plain text file with one row per line and one character per tile:

| Char | Meaning       |
|------|---------------|
| `1`  | wall          |
| `0`  | empty floor   |
| `C`  | coin          |
| `E`  | exit          |
| `P`  | player start  |

For example:

```
1111111
1P0C0E1
1111111
```

A map can be played only if all of these hold:

* it is not empty and every row has the same length;
* it holds no characters other than the tiles above;
* there is exactly one `P` and exactly one `E`;
* there is at least one `C` and at least one `1`;
* every coin and the exit can be reached from the start without passing
  through walls.

If something is wrong, the game prints `Error` followed by one of these
reasons on standard error and exits with status 1:

* `wrong number of arguments`
* `map file not found`
* `Map isn't playable`
* `initialization failed` (a sprite could not be read)

## Using the package in code

The pieces of the game can be used without opening a window:

```python
from solong.game_map import parse_map, validate_map
from solong.game import Game, Direction

game_map = parse_map("1111111\n1P0C0E1\n1111111\n")
validate_map(game_map)          # raises MapError if the map cannot be played

game = Game.from_map(game_map, log=None)
game.move(Direction.RIGHT)      # True: the step was taken
print(game.moves, game.finished())
```

The modules:

* `solong.game_map`: `GameMap`, `parse_map`, `read_map`, `count_tiles`,
  `check_map`, `count_reachable`, `validate_map` and `MapError`.
* `solong.game`: `Game` (`from_map`, `move`, `handle_key`, `finished`),
  `Direction` and the key codes in `Key`. With `log=None` move reports go
  to standard error; pass any callable taking a string to collect them
  elsewhere.
* `solong.xpm`: reads XPM images with `load_xpm`, `parse_xpm_text` and
  `parse_xpm_lines` into an `XpmImage`; raises `XpmError` on bad input.
* `solong.colors`: `color_by_name` looks up X11 colour names such as
  `"light goldenrod"` as `0xRRGGBB` values, ignoring case; `"none"` gives
  `-1` and unknown names give `None`.
* `solong.render`: `load_sprites`, `xpm_to_surface`, `tile_sprite` and
  `draw_map` for drawing a game onto a pygame surface.
* `solong.cli`: `main` and `load_game`, behind the `so_long` command.

## What it does not do

The package ships no sprite images and no sample maps; both have to be
supplied by you. There is no score keeping, level sequence or save state:
one run plays one map.