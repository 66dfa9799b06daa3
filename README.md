# solong

A small tile-based puzzle game. You walk a player around a walled map,
pick up every collectible and then reach the exit, while keeping clear of
enemies. Sprites are read from XPM images and drawn in a pygame window.

## Installing

```
pip install .
```

## Playing

```
solong path/to/map.ber
```

The command takes exactly one argument, the map file. It loads its sprites
from `assets/sprites/` under the current directory, one XPM file per sprite:

```
wall.xpm  ground.xpm  collect.xpm  exit.xpm
player_0.xpm  player_1.xpm  player_2.xpm  player_3.xpm
enemy_0.xpm   enemy_1.xpm   enemy_2.xpm   enemy_3.xpm
```

Each tile is drawn as large as the largest sprite. The player sprite
follows the last direction of travel (`player_0` down, `player_1` left,
`player_2` right, `player_3` up). An enemy within three columns of the
player shows `enemy_0` when it is level with or above the player and
`enemy_3` when below. A farther enemy shows `enemy_2` when it is to the
left of the player and `enemy_1` when it is to the right.

Controls (acted on when the key is released):

- `W` / `A` / `S` / `D` or the arrow keys move the player.
- `Q` or `Esc` quits, as does closing the window.

The step counter (`STEPS: n`) is shown in the top-left corner. Walking
into a wall only turns the player. The exit stays closed until every
collectible has been taken; reaching it then prints `YOU WIN!`. Walking
into an enemy prints `GAME OVER!`. After either, moves are ignored until
you quit. When the window regains focus the player turns to face down.

If the arguments are wrong or the map or a sprite cannot be loaded, the
command prints a coloured `Error` report and exits with status 255.

## Map files

Maps are plain text files with the `.ber` extension. Each line is one row
of tiles:

| Tile | Meaning     |
|------|-------------|
| `1`  | wall        |
| `0`  | floor       |
| `C`  | collectible |
| `E`  | exit        |
| `P`  | player      |
| `J`  | enemy       |

The rules checked when a map is loaded:

- the first line sets the width, which must be at least 4;
- every row has exactly that many tiles;
- a row that is not all walls must start and end with a wall;
- a row made only of walls may appear after the first line only as the
  last line, with no newline after it;
- there must be at least 4 rows, exactly one `P`, exactly one `E`, and at
  least one `C`.

Note that the file must not end with a newline. For example:

```
111111
1P0C01
100001
1C0JE1
111111
```

A map that breaks a rule is rejected with a `solong.mapfile.MapError`
carrying a message such as `Wrong construction of the map!` or
`Something is missing from the map!`.

## Using it as a library

```python
from solong.mapfile import load_map
from solong.game import Game, Direction, MoveResult

game = Game(load_map("level.ber"))
result = game.move(Direction.RIGHT)
if result is MoveResult.WON:
    print("won in", game.steps, "steps")
frame = game.render()   # list of (column, row, sprite name)
```

The modules:

- `solong.mapfile`: `load_map`, `parse_map`, `validate_row`,
  `check_extension`, `format_error`, the `GameMap` grid (`tile`,
  `set_tile`, `width`, `height`) and `MapError`.
- `solong.game`: `Game` (`move`, `render`, `resume`, `steps`,
  `coins_taken`, `coins_left`, `over`), `Direction`, `MoveResult`,
  `choose_sprite` and `enemy_sprite`.
- `solong.xpm`: `read_xpm_file` and `parse_xpm` decode XPM images into
  `XpmImage` objects (`width`, `height`, `pixels`, `pixel(x, y)`);
  `strip_comments`, `quoted_lines`, `split_words` and `color_spec_to_rgb`
  are the steps they are built from. Errors raise `XpmError`.
- `solong.colors`: `lookup_color` resolves X11 colour names, ignoring
  case, to `0xRRGGBB` values (`"none"` gives -1, unknown names `None`).
- `solong.visual`: `rgb_shifts` and `convert_color` pack a `0xRRGGBB`
  colour into the pixel layout of a visual given its colour masks.
- `solong.app`: `main`, `run`, `load_sprites`, `SpriteSet`, `key_action`,
  `Action` and `steps_text`.

## What it does not do

Enemies stand still; they only turn to face the player. There are no
bundled maps or sprites, no sound, and no saving of progress or scores.

## Running the tests

```
pip install .[test]
pytest
```