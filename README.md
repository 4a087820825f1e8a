# lifeboard

Conway's Game of Life on a 10×10 board whose edges wrap around, together
with a small software renderer that draws the board, a status sidebar and
a stroke-based capital-letter font onto an in-memory framebuffer
(1024×768 by default).

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
lifeboard [KEYS] [-o FRAME.ppm] [--realtime]
```

`KEYS` is a string of keystrokes, played one per frame. Each frame is
drawn, then its keystroke is applied. The board starts from a built-in
glider and, while running, advances one generation every time a frame is
drawn. Any character without a binding just lets a frame pass.

| Key | Action                                         |
|-----|------------------------------------------------|
| z   | move the cursor up                             |
| s   | move the cursor down                           |
| q   | move the cursor left                           |
| d   | move the cursor right                          |
| e   | toggle the cell under the cursor (paused only) |
| p   | pause or resume the simulation                 |
| x   | draw the goodbye screen and stop               |

The cursor stays within the board (0 to 9 on each axis). Keys after `x`
are ignored.

Options:

- `-o`, `--output FILE` — write the last drawn frame as a binary PPM image.
- `--realtime` — wait between frames: 500 ms while running, 300 ms while
  paused, and 3000 ms after the goodbye screen.

When done, the command prints the board as ten lines of `#` (alive) and
`.` (dead).

Example: let three generations pass, pause, move right and down, toggle a
cell, and save the frame:

```
lifeboard "...pdse" -o frame.ppm
```

## Using it as a library

```python
from lifeboard.game import Life
from lifeboard.screen import Screen
from lifeboard.app import Session

life = Life(None)          # starts from the built-in glider
life.toggle(0, 0)
life.step()
print(life.alive(3, 2), life.neighbours(3, 2))

screen = Screen(1024, 768)
session = Session(life)
session.handle_key("p")
session.render(screen)
with open("frame.ppm", "wb") as out:
    out.write(screen.to_ppm())
```

- `lifeboard.game`: `Life` holds the 100 cells (`cells`) and offers
  `alive`, `toggle`, `neighbours` and `step`; `wrapped_index` maps any
  coordinates onto the board. `Life(cells)` raises `ValueError` unless
  given exactly 100 values.
- `lifeboard.screen`: `Screen` provides `clear`, `draw_pixel`, `draw_rect`,
  `draw_empty_rect`, `draw_circle`, `draw_line`, `draw_rounded_rect`,
  `draw_letter`, `draw_string` and `to_ppm`. Drawing is clipped to the
  screen. Drawn pixels are stored with red and blue swapped, as
  `swap_red_blue` does, while `clear` stores its colour unchanged;
  `Screen.pixel` returns the stored value and raises `IndexError` off
  screen. `glyph` returns a letter's line segments; only `A`–`Z` have
  glyphs, other characters draw nothing.
- `lifeboard.ui`: the screen sections `draw_header`, `draw_sidebar`,
  `draw_game_area`, `draw_footer`, `draw_exit_screen` and `draw_panic`,
  and the `Color` palette.
- `lifeboard.app`: `Session` with `handle_key`, `render` and `delay_ms`,
  and the `main` function behind the `lifeboard` command.

## What it does not do

There is no live display and no keyboard reading: the command takes its
keystrokes as an argument and frames exist only in memory or as PPM
files. `draw_panic` is available to callers but the command never shows
it.