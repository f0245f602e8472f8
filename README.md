# wireframe

Draws a height map stored in a `.fdf` file as an isometric wireframe in a
1280×720 pygame window.

## The map format

A `.fdf` file holds one row of the grid per line. Fields are separated by
spaces, and each field is the height (`z`) of a point. A point may also
carry a colour after a comma, written in hexadecimal:

```
0 0 0 0
0 5 5 0
0 5,0xFF0000 5 0
0 0 0 0
```

Points without a colour are drawn white. Every row must have the same number
of fields as the first row, otherwise the map is rejected. Heights are read
like C's `atoi`: leading whitespace and one sign are allowed, reading stops at
the first non-digit, and text without digits counts as 0.

Each edge of the grid is drawn in the colour of its starting point.

## Installing

```
pip install .
```

## Running

```
wireframe path/to/map.fdf
wireframe --bonus path/to/map.fdf
```

The command takes exactly one map file, optionally together with `--bonus`.
It prints an `ERROR:` message and exits with status 1 if the argument count is
wrong, the file name does not end in `.fdf`, the file cannot be opened or is
empty, or its rows have different lengths.

Without `--bonus` the map is shown in a fixed isometric view and only Esc
does anything. Closing the window or pressing Esc prints `Closed` and exits
with status 1.

## Keys (with `--bonus`)

| Key | Action |
| --- | --- |
| Esc | close the window |
| Arrow keys | move the drawing (10 pixels, or 30 when the map has more than 70 columns or the zoom is at least 0.9) |
| Keypad `+` / `-` | zoom in / out by 0.1 (zooming out stops once the zoom is 0.2 or less) |
| `q` / `e` | decrease / increase the projection angle by 5° |
| `w` / `s` | rotate about the x axis |
| `a` / `d` | rotate about the y axis |
| `z` / `x` | rotate about the z axis |
| Left Shift | stretch every height by its value from the file |
| Left Ctrl | undo one stretch |
| `1` | reset, then show the grid from above without projection, shifted left |
| `2` | reset, then show the isometric view |
| `r` | reset the view and the heights |

Rotations take effect only in the isometric view. The `3` key is recognised
but has no effect.

## Using it as a library

- `wireframe.parsing.load_map(path)` reads and checks a file and returns a
  `HeightMap` (`rows`, `cols`, `points[row][column]` of `Point`). Problems
  raise `MapError`, a subclass of `ValueError`. The module also provides
  `parse_int`, `parse_hex`, `split_fields`, `count_columns`, `parse_row` and
  `read_lines`.
- `wireframe.view.Viewer(height_map, bonus=True)` holds the view settings in
  a `ViewState`. `handle_key(key)` takes a `Key` value and returns `True` when
  the key asks to quit. `apply_size(flag)` stretches (`1`) or unstretches
  (`-1`) the heights. `project(point)` returns a point at its screen position.
  `render(canvas)` clears a `Canvas` and draws every edge onto it.
- `wireframe.view.Canvas(width, height)` is a frame of 32-bit pixels with
  `clear`, `put_pixel` and `get_pixel`. Pixels outside the canvas raise
  `IndexError`.
- `wireframe.projection` holds `get_radian`, `isometric`, `rotate_x`,
  `rotate_y`, `rotate_z` and the line generator `bresenham`.
- `wireframe.app.run(path, bonus=False)` opens the window. `main(argv=None)`
  is the command entry point.

## What it does not do

There is no mouse control and no way to save the picture. The window is
1280×720 and its size cannot be changed.

## Running the tests

```
pip install .[test]
pytest
```