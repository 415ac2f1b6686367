# solong

A small top-down puzzle game. You walk a player around a walled map,
pick up every collectable, and then step onto the exit.

## Installing

```
pip install .
```

This installs the game and its one dependency, `pygame`. For the tests,
install the `test` extra (`pip install .[test]`) and run `pytest`.

## Playing

```
solong path/to/map.ber
```

The command takes exactly one argument, the map file. With any other
number of arguments it prints `Please, insert the map path` and exits
with status 1.

Controls:

- `W` / up arrow: move up
- `S` / down arrow: move down
- `A` / left arrow: move left
- `D` / right arrow: move right
- `Esc` or closing the window: quit

Keys act when they are released. Each move you make is printed to the
terminal, for example `Move 3, with a movement left`. Walls block you.
The exit stays closed until you have picked up every collectable. When
you step onto it, the game prints
`You reached your destination! Congratulations!` and ends.

The window is 91 pixels per tile in each direction and is titled
`so_long`. Sprites are loaded from an `assets` directory in the current
working directory, which must hold `wall.xpm`, `space.xpm`,
`player.xpm`, `collectable.xpm` and `exit.xpm`. They are drawn at their
own size, one per tile, and are not scaled.

## Map files

Maps are plain text files with the `.ber` extension. Each line is one
row of tiles:

| Character | Tile         |
|-----------|--------------|
| `1`       | wall         |
| `0`       | empty floor  |
| `P`       | player start |
| `C`       | collectable  |
| `E`       | exit         |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected when, checked in this order:

- the file name does not end in `.ber` with something before it, or the
  file cannot be opened;
- the file is empty or holds an empty line between rows;
- it does not have exactly one `P`, exactly one `E` and at least one `C`;
- it uses any character other than the five above;
- its rows are not all as long as the first;
- it is not closed by walls on all four sides;
- the exit and every collectable cannot be reached from the start
  (the exit counts as blocking, so collectables reachable only through
  it make the map unplayable).

The command then prints `Error` followed by the reason, and exits with
status 0 without opening a window.

## Using it as a library

```python
from solong.gamemap import GameMap, load_map
from solong.game import Game, Direction, MoveOutcome

game_map = GameMap.from_text("1111111\n1P0C0E1\n1111111\n")
game = Game(game_map)
outcome = game.move(Direction.RIGHT)   # MoveOutcome.MOVED
```

- `solong.gamemap`: `load_map(path)` reads and validates a `.ber` file
  and returns a `GameMap`. `GameMap.from_text(text)` parses map text
  without checking the layout; `validate(grid)` applies the rules above.
  The individual checks (`verify_extension`, `split_rows`,
  `check_unique`, `check_characters`, `is_rectangular`, `is_closed`,
  `find_player`, `count_collectables`, `is_playable`) are available too.
- `solong.errors`: `MapError` is raised for an invalid map; its `kind`
  is an `ErrorKind`, and `error_message(kind)` gives the text shown to
  the player.
- `solong.game`: `Game.move(direction)` and `Game.press(key_code)`
  return a `MoveOutcome` (`MOVED`, `BLOCKED`, `WON`, `QUIT` or
  `IGNORED`). `Game.moves` counts successful moves and `Game.finished`
  is set once the game is won or quit. `Key` holds the key codes the
  game reacts to, and `direction_for_key` maps them to a `Direction`.
- `solong.render`: `Renderer(game, asset_dir)` draws the game with
  pygame; `Renderer.run()` opens the window and runs the event loop.
  `main(argv)` is what the `solong` command calls.

## What it does not do

No sprite images come with the package: you supply the `assets`
directory yourself. The game does not keep scores or save progress, and
the move counter is shown only in the terminal, not in the window.