# tilebatch

A small tile-based renderer built on pygame. Each frame is drawn as a *batch*,
which is a plain list of `Sprite` entries. Each entry names a cell (`src_idx`)
in a `SpriteSheet`, a destination position (`dst_px`) and a rotation in
degrees. A `Renderer` draws the whole batch at once.

## Modules

- `tilebatch.vectors` provides the `IVec2` and `FVec2` vectors and the helpers
  `clamp`, `dot`, `length` and `normalize`.
- `tilebatch.sprites` provides three classes:
  - `Image.load(path)` loads an image file. `Image.from_surface(surface)` wraps
    an existing pygame surface.
  - `SpriteSheet.load(path, sprite_width, sprite_height, scale)` loads a sheet
    of equal-sized cells. `columns` and `rows` give the grid size.
  - `Sprite` is one cell of a sheet placed in the window.
- `tilebatch.font` is the bitmap font. `find_char(ch)` gives the grid position
  of a glyph; characters the font lacks map to `?`. `push_font_ch` adds one
  character to a batch and `push_font_str` adds a string. Each character
  advances 9 pixels. A newline moves down 8 pixels and returns to the starting
  column.
- `tilebatch.background`: `push_background(batch, sheet, screen_size)` lays a
  one-tile ring of alternating tiles, inset one tile from the screen edges.
- `tilebatch.level` defines `Room` and `Level`.
  - `build_levels()` returns fresh copies of the built-in levels: "level
    template" (id 0) and "level one" (id 1). Each has one 7×7 room.
  - `push_level(batch, level, font_sheet, rng, screen_height)` writes a caption
    near the bottom-left corner and adds every room tile. The caption reads
    `name <id=N> (rooms=N)` and is cut to 31 characters. Each tile gets a random
    rotation of 0, 90, 180 or 270 degrees, taken from `rng`.
- `tilebatch.render`:
  - `source_rect(sprite)` and `destination_rect(sprite)` compute the areas of
    the sheet and of the target that a sprite covers.
  - `Renderer(width, height, title="window name", surface=None)` opens a window,
    or draws onto `surface` if one is given. Its methods are `begin()` (clear
    to black), `draw_batch(batch, clear_after_render=True)`, `end()` (present)
    and `close()`. It is also a context manager.
- `tilebatch.state`: `GameState(resource_dir="res", renderer=None, rng=None)`
  owns the renderer, the font sheet (`font.png`, 8×8 cells, scale 3) and the
  background sheet (`bg.png`, 8×8 cells, scale 4).
  - It starts on level 0.
  - `set_current_level(level_id)` switches level. The first time a level is
    used, its rooms' tile sheets are loaded from `bg.png`.
  - `level` is the current level. `close()` releases the renderer.
  - It is also a context manager.
- `tilebatch.timing` measures elapsed time. `Clock` gives `ns()` and
  `seconds()` since its first reading. `time_ns()` and `time_s()` use a shared
  clock, and `ns_to_sec` and `sec_to_ns` convert between the two units.
- `tilebatch.diagnostics`:
  - `log`, `warn` and `error` write lines of the form
    `[LOG][file.py:line][function] message`, with `WRN` or `ERR` as the tag for
    the last two. `LOG` lines go to standard output, the others to standard
    error.
  - `ensure(condition, message)` reports the failure and raises `GameError`.

## Installation

```
pip install .
```

To run the tests, install the test extra:

```
pip install ".[test]"
```

## Running the demo

```
tilebatch
```

This opens a 1280×720 window. On it the demo draws:

- the background ring;
- the current level, which is level 0;
- the letter `A`, followed by the whole font alphabet, both drifting slowly
  with time.

Close the window to quit.

Options:

- `--resources DIR` is the directory that holds `font.png` and `bg.png`. The
  default is `res`, relative to the current directory.
- `--frames N` stops after N frames.

If an image cannot be loaded, or another check fails, the command prints
`error: ...` to standard error and exits with status 1.

## Building a batch yourself

```python
from tilebatch.sprites import SpriteSheet
from tilebatch.font import push_font_str
from tilebatch.vectors import FVec2

font = SpriteSheet.load("res/font.png", 8, 8, 3.0)
batch = []
push_font_str(batch, font, "hello\nworld", FVec2(8.0, 8.0))
# batch now holds one Sprite per visible character
```

Pass the batch to `Renderer.draw_batch(batch, clear_after_render)`, between
`Renderer.begin()` and `Renderer.end()`.

## What it does not do

The package ships no images: you supply `font.png` and `bg.png`. The demo
handles no input other than closing the window. It never changes level on its
own; use `GameState.set_current_level` to switch.

## Errors

A failed check raises `tilebatch.diagnostics.GameError`. Examples are an image
that cannot be loaded, a level id that is out of range, and a room larger than
16×16 tiles.