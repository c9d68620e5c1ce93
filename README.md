# fromage

The pieces of a small tile-based puzzle game. A mouse walks a walled room,
picks up every piece of cheese and then leaves through the door; walking into
the fox ends the game. The package holds the level format and its checks, the
rules of play, an XPM picture reader, colour handling, window event hooks and
a tiny `printf`. It needs nothing beyond the standard library.

## Installing

```
pip install .
```

## Level files

A level is a text file whose name ends in `.ber`. Each line is one row of the
room:

| Tile | Meaning                       |
|------|-------------------------------|
| `1`  | wall                          |
| `0`  | floor                         |
| `P`  | the player's starting square  |
| `C`  | a piece of cheese             |
| `E`  | the exit door                 |
| `R`  | the fox                       |

`fromage.mapfile.load_map` accepts a level only if:

- every row has the same length (empty lines are dropped);
- it has exactly one `P`, exactly one `E`, at least one `C`, and no other characters;
- the first and last rows are all wall, and every row starts and ends with a wall;
- every piece of cheese can be reached from the start, and a square next to the
  door is reachable. Walls, the door and the fox block the way.

Otherwise it raises `MapError` (a `ValueError`).

```
1111111
1P0C0E1
1000001
1111111
```

```python
from fromage.mapfile import load_map, MapError

try:
    rows = load_map("level.ber")
except MapError as err:
    print("bad level:", err)
```

The single checks are also available: `split_lines`, `read_rows`,
`is_rectangle`, `valid_count`, `is_enclosed`, `find_tile`, `flood_fill`,
`is_playable` and `validate_rows`.

## Playing a game

`fromage.game.Game` holds the state of one game on a board given as rows.

```python
from fromage.game import Game, Direction, end_message

game = Game(rows)
game.handle_key("d")          # w a s d or the arrow key codes; True if the player moved
game.move(Direction.DOWN)     # a step without counting it
print(game.steps, game.collect, game.outcome)
```

- `handle_key` counts a step for every successful move; the escape key
  (65307) sets the outcome to `Outcome.CLOSED`.
- Stepping onto the door once all cheese is gone gives `Outcome.ESCAPED`;
  stepping onto the fox gives `Outcome.CAUGHT`. In both cases the player does
  not move.
- Every move appends `(row, column, sprite)` tuples to `game.draws`, naming the
  squares a front end must redraw (`floor`, `collect`, `door_open`,
  `player_right`, and so on).
- `tile_sprite` and `wall_sprite` name the sprite for a square of the starting
  board; `number_width` and `digit_positions` lay out a step counter in 12-pixel
  digits; `end_message(outcome, steps, remaining)` gives the closing text.

## Pictures and colours

- `fromage.xpm.load_xpm(path)` reads an XPM file into a `fromage.image.Image`;
  `parse_xpm` and `xpm_from_data` build one from the picture's strings. Colours
  named `none` become the transparent value `0xFF000000`; problems raise
  `XpmError`.
- `fromage.image.Image` stores 32-bit pixels in a `bytearray`, with
  `set_pixel`, `get_pixel`, `pixels`, `data_address` and `same_layout`;
  `new_image(width, height)` makes a black one.
- `fromage.colors.lookup_color` and `parse_color` turn X colour names and
  `#rrggbb` forms into integers; `channel_shifts` and `good_color` convert a
  colour to a pixel value for shallow visuals.

## Events

`fromage.events.HookTable` keeps one hook per X event number (`EventType`),
each with a function, a parameter and an input mask (`EventMask`). `set`,
`key_hook`, `mouse_hook` and `expose_hook` bind functions,
`combined_mask` gives the mask a window must select, and `dispatch` calls the
right hook with the values the event carries.

## Formatted output

`fromage.printf.format_printf` implements `%c %s %p %d %i %u %x %X` and `%%`
with 32-bit integer wrapping; `print_formatted` writes the result to standard
output and returns its length.

## What this package does not do

There is no window, no screen drawing and no command that starts a game.
Turning `Game.draws` into pictures on screen and feeding key presses to
`Game.handle_key` is left to whatever front end uses the package.