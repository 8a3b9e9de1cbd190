# mermaidgame

A small top-down puzzle game. You steer a mermaid around a tile map, pick up
every coin and then swim through the door. Swim into the villain and you
lose.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Playing

```
mermaidgame path/to/level.ber
```

The same can be started with `python -m mermaidgame.app path/to/level.ber`.
Given anything other than exactly one argument, the command does nothing and
exits with status 0.

The map is checked first; if it is valid, `Valid path.` is printed and a
window opens with one 60×60 pixel tile per map cell. The textures are read
from a `textures/` directory in the current working directory, which must
hold these XPM files: `ocean1.xpm`, `coral1.xpm`, `ariel1.xpm`,
`ariel_reversed.xpm`, `coin2.xpm`, `reversed_coin.xpm`, `door3.xpm` and
`ursula.xpm`. If one of them cannot be read or decoded, an error is printed
and the command exits with status 1.

Controls:

- `W`, `A`, `S`, `D` or the arrow keys move the player. Moving left or right
  also turns the mermaid to face that way. The `Return` key counts as a move
  up.
- `Esc` quits. Because of how key codes are translated, the `5` key quits
  as well.
- Closing the window quits.

On every key press the key code is printed on the terminal, followed, while
the game goes on, by `the number of movements = N`. The move count is also
drawn at the top of the window. The coins flicker between two sprites.

Reaching the door after collecting every coin prints `YOU WON`; moving onto
the villain prints `YOU LOSE`. Either way the window closes and the command
exits with status 0. Walking onto the door while coins remain is allowed; the
door stays in place once you leave it.

## Map files

A map is a text file whose name ends in `.ber`. Each line is one row of
tiles, and every row must be the same width:

| Character | Meaning                    |
|-----------|----------------------------|
| `1`       | wall                       |
| `0`       | open water                 |
| `P`       | player start (exactly one) |
| `E`       | exit door (exactly one)    |
| `C`       | coin (at least one)        |
| `V`       | villain                    |

Whitespace at the start and end of the file and at the end of each line is
ignored. The map must be closed in by walls on every side, must contain no
empty lines inside it, must hold only the characters above, and the player
must be able to reach the exit and every coin without crossing a wall. A map
that breaks any of these rules, a missing file, or a name not ending in
`.ber` is rejected: `Error` and a message are printed and the program exits
with status 1.

Example:

```
1111111
1P0C0E1
1000V01
1111111
```

## Using it as a library

- `mermaidgame.mapfile`
  - `load_map(path)` reads and validates a `.ber` file and returns a
    `GameMap` (`grid`, `player`, `exit`, `collectibles`, `height`, `width`);
    `parse_map(text)` does the same from a string. Both raise `MapError`.
  - The single checks are available too: `check_filename`,
    `ensure_not_blank`, `check_double_newlines`, `trim_back`,
    `check_characters`, `measure` and `check_borders`.
- `mermaidgame.pathcheck`
  - `find_player(grid)` returns the `(row, column)` of the player or `None`.
  - `reachable_cells(grid, start)` returns the set of cells reachable from
    `start` without crossing a wall.
  - `has_valid_path(grid)` tells whether the exit and all coins can be
    reached from the player's start.
- `mermaidgame.game`
  - `Game(game_map)` holds the state of a running game: `rows`, `player`,
    `collectibles`, `moves`, `facing` and `outcome`. `Game.move(direction)`
    takes a `Direction` (`UP`, `DOWN`, `LEFT`, `RIGHT`); `Game.press(keycode)`
    takes a key code. Both return an `Outcome` (`PLAYING`, `WON`, `LOST`,
    `QUIT`); walls simply block a move.
  - `direction_for_key(keycode)` maps a key code to a `Direction` or `None`.
  - `CoinAnimator.tick()` advances the coin animation by one frame and tells
    whether the reversed coin is showing.
- `mermaidgame.xpm`
  - `read_xpm(path)` and `parse_xpm(lines)` decode XPM images into an
    `XpmImage` (`width`, `height`, `pixels`, `pixel(x, y)`) holding
    `0xRRGGBB` values, with the colour `None` as `0xFF000000`. They raise
    `XpmError` on unreadable or malformed input.
  - Helpers: `strip_comments`, `quoted_strings`, `split_words`, `find`,
    `find_unquoted` and `color_key`.
- `mermaidgame.colors`
  - `lookup_color(name)` resolves X11 colour names such as `"navy blue"` or
    `"gray50"` to `0xRRGGBB` values, ignoring case (`"none"` gives -1);
    unknown names raise `KeyError`.
  - `text_to_rgb(name, end)` turns an XPM colour specification (`#rrggbb` or
    a name) into a value, giving 0 for unknown names.
  - `rgb_shifts(red_mask, green_mask, blue_mask)` and
    `good_color(color, depth, shifts)` convert colours to pixel values for
    visuals shallower than 24 bits.
- `mermaidgame.app`
  - `Textures.load(directory)` loads the sprites, `tile_layout(game)` lists
    the sprites to draw with their pixel positions, `render(surface, game,
    textures, coin)` draws a frame on a pygame surface, and `main(argv)` runs
    the command.