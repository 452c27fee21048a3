# raycub

Building blocks for a grid-based raycasting game: reading the map block of a
`.cub`-style map file into a padded grid, assembling the game state and its
texture table from a parsed map description, and a few text and formatting
helpers.

The package has no runtime dependencies and no command-line entry point; it is
used as a library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `raycub.text`

String and number helpers:

- `parse_int(text)`: reads a leading decimal integer like C's `atoi`. It skips
  leading whitespace, takes one optional sign, stops at the first non-digit and
  clamps to the 32-bit signed range. Text without digits gives `0`.
- `split_any(text, charset)`: splits on any character of `charset` and drops
  empty words.
- `trim(text, charset)`: strips characters of `charset` from both ends.
- `substring(text, start, length)`: up to `length` characters from `start`, or
  `""` when `start` is past the end.
- `find_within(haystack, needle, limit=None)`: index of `needle` in the first
  `limit` characters, or `-1`.
- `compare_prefix(first, second, count=None)`: difference of the first
  differing code points within `count` characters, or `0`.
- `count_digits(number)` and `count_digits_base(number, base)`.

### `raycub.lines`

- `LineReader(stream)`: reads a text stream one line at a time. `read_line()`
  returns the next line with its newline kept, or `None` at the end. Iterating
  over the reader yields every remaining line.
- `read_lines(path)`: returns the list of all lines of a file.

### `raycub.printf`

A small printf-like formatter that understands `%c %s %p %d %i %u %x %X` and
`%%`. Integers follow 32-bit `int`/`unsigned int` rules. `None` prints as
`(null)` for `%s` and as `(nil)` for `%p`.

- `format_message(fmt, *args)`: returns the formatted text. It raises
  `ValueError` when the format ends in a lone `%` or when there are too few
  arguments.
- `print_message(fmt, *args, stream=None)`: writes to `stream` (stdout by
  default) and returns the number of characters written.
- `print_error(fmt, *args, stream=None)`: the same, but writes to stderr by
  default and keeps a trailing lone `%`.

### `raycub.model`

The data types and constants:

- Types: `Direction`, `Position`, `GridPosition`, `Keys` (with `reset()`),
  `Tile`, `TextureSpec`, `MapConfig`, `Texture` (with `frame_count(direction)`
  and `frames(direction)`) and `Game`.
- The window event and mask enums `MlxEvent` and `MlxMask`.
- Constants such as `WIDTH`, `HEIGHT`, `FOV`, `RAYS`, `WALK_SPEED` and
  `ROT_SPEED`.
- `MAX_FRAME` (200), the largest number of animation frames per direction that
  a `TextureSpec` accepts.

### `raycub.grid`

- `pad_map_line(line, width)`: turns spaces and newlines into `'A'`, cuts the
  line at `width` and pads it with `'A'`.
- `load_map_grid(path, position, width, height)`: skips the first `position`
  lines of the file and reads up to `height` padded rows. A file that ends
  early gives fewer rows.

### `raycub.world`

- `pack_rgb(rgb)`: packs three components into `0xRRGGBB`.
- `player_orientation(directions)`: gives the angle for the first set flag,
  in the order north 0, then π/2, π and 3π/2. It raises `ValueError` when no
  flag is set.
- `build_tiles(config)`: builds the grid of `Tile`s.
- `assign_vars(game)`: resets counters, flags and textures. The wall
  character `'1'` gets the minimap colour `0xFF000000`.
- `assign_to_cube(config, loader, bonus=False)`: builds a complete `Game`.
  With `bonus=True` it uses the per-character animated textures and starts
  with the minimap shown.

### `raycub.textures`

- `texture_kind(char)`: `0` for `0 O N S E W`, `1` for any other character.
- `assign_textures(game, config, loader)`: gives every character the four
  wall images from `config`.
- `assign_textures_bonus(game, config, loader)`: uses each character's
  `TextureSpec`, including its frames, speed, kind and minimap colour.
- `TextureLoadError`: raised when `loader` returns `None` or a path is
  missing. Each path is loaded only once.

## Example

```python
from raycub.grid import load_map_grid
from raycub.text import parse_int, split_any

rows = load_map_grid("maps/level.cub", position=8, width=12, height=6)
red, green, blue = (parse_int(part) for part in split_any("220,100,0", ","))
```

## What this package does not do

There is no window, rendering, raycasting or input handling, and no command to
start a game. The package does not parse or check the header of a map file
(texture identifiers, colours, wall enclosure, player placement). You fill in
a `MapConfig` yourself. It does not decode images either: the `loader` you pass
to `assign_to_cube` and the texture functions turns a path into whatever frame
object you use, and returns `None` when the path cannot be loaded.