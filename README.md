# solong

A small top-down puzzle game played on a grid of 64×64 pixel tiles. You move
the player around a walled map, pick up every collectible, and then walk onto
the exit. The game counts your moves and prints the total when you finish.

## Installing

```
pip install .
```

This installs `pygame`, which the game uses for its window.

## Playing

```
so_long path/to/level.ber
```

The command takes exactly one argument, the map file. With any other number
of arguments it exits at once and does nothing. If the map breaks a rule, the
command prints `Error` and the reason to standard error and exits with
status 1.

Controls:

| Key                | Action     |
|--------------------|------------|
| `W` / Up arrow     | move up    |
| `A` / Left arrow   | move left  |
| `S` / Down arrow   | move down  |
| `D` / Right arrow  | move right |
| `Esc`              | quit       |

Moves take effect when the key is released. Closing the window also quits.
Walking into a wall does nothing. Stepping toward the exit before every
collectible has been picked up counts as a move, but the player stays where
it is. Once every collectible is taken, reaching the exit ends the game and
prints the move count.

## Map files

A map is a plain text file whose name ends in `.ber`. Each line is one row,
and each character is one tile:

| Char | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `P`  | player start |
| `C`  | collectible  |
| `E`  | exit         |

A map is accepted only when all of these hold:

* every row is the same length;
* the map is fully enclosed by walls;
* it has exactly one `P`, exactly one `E` and at least one `C`;
* it contains no other characters;
* every non-wall tile can be reached from the player's start without
  passing through the exit.

Example:

```
1111111111
1P00C00001
1011110101
1C0000E0C1
1111111111
```

## Textures

Tiles are drawn from XPM images named `wall.xpm`, `floor.xpm`, `exit.xpm`,
`collect.xpm` and `player.xpm`. The command looks for them in `src/textures`
relative to the current directory. A texture that cannot be loaded is
reported with `Error: could not load <name>.xpm!`, and the game goes on
without drawing that kind of tile.

## Using it as a library

The pieces can be used on their own:

* `solong.mapcheck.load_map(path)` reads and checks a map and returns a
  `GameMap` (its `rows`, the player's `(x, y)` start and the number of
  collectibles). A map that fails a check raises `MapError`.
  `validate_rows(rows)` runs the same checks on rows already in memory.
* `solong.game.Game` holds the game state. `move(direction)` and
  `handle_key(keycode)` return a `MoveOutcome`. `key_to_direction(keycode)`
  maps a key code (WASD or the arrow keys, as X11 key symbols) to a
  `Direction`.
* `solong.xpm.load_xpm(path)` and `solong.xpm.parse_xpm(text)` decode XPM
  images into `XpmImage` objects and raise `XpmError` on bad data.
  `XpmImage.pixel(x, y)` returns the colour of one pixel.
* `solong.colors.lookup_color(name)` turns a name from the X11 colour table
  into a colour value, ignoring case; it returns `None` for an unknown name
  and `-1` for `none`.
* `solong.linereader.iter_lines(stream, buffer_size)` yields the lines of a
  text or binary stream, reading it in chunks of the given size;
  `count_lines(path)` counts the lines of a file.
* `solong.printf.format_printf(fmt, *args)` renders a minimal printf-style
  format string with the conversions `c s p d i u x X %`;
  `ft_printf(fmt, *args)` writes it to standard output.
* `solong.app.run(game, texture_dir)` opens the window and plays a `Game`
  until it is won or quit.

```python
from solong.mapcheck import load_map
from solong.game import Game, Direction

game = Game(load_map("level.ber"))
outcome = game.move(Direction.RIGHT)
print(outcome, game.moves)
```

## What it does not do

The window shows only the tiles: there is no on-screen move counter, no
enemies and no animation. The texture directory for the `so_long` command is
fixed at `src/textures`, and only XPM images are read.