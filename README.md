# wireframe

A viewer that draws a height-map file as an anti-aliased wireframe mesh in
an isometric or parallel projection, with colours graded by elevation.

## Installing

```
pip install .
```

The window is drawn with pygame, which is installed as a dependency.

## Running

```
wireframe path/to/map.fdf
```

The command takes exactly one argument, the map file. It prints
`Incorrect Argument Number!` when given any other number of arguments,
`Incorrect Map File!` when the file cannot be opened, and
`Map loading error` when the file is not a valid map. An empty map file
closes quietly.

## Map files

A map file is plain text. Each line is a row of the grid, each
space-separated value is the height of one point. A point may carry its own
colour after a comma, written in hexadecimal:

```
0 0 0 0
0 5 5,0xff0000 0
0 0 0 0
```

Every row must have the same number of points, and no row may be blank.
Points without a colour are coloured by their height relative to the lowest
and highest points of the map (the range always includes zero), from blue
for the lowest to pink for the highest.

## Controls

A help menu is drawn down the left side of the window.

| Input                        | Action                              |
|------------------------------|-------------------------------------|
| Scroll, `+` / `=` / `*`, `-` | Zoom in and out                     |
| Arrow keys                   | Move the view                       |
| `K` / `L`                    | Raise or flatten the relief         |
| `I`                          | Isometric projection                |
| `P`                          | Parallel projection                 |
| `2` / `8`                    | Rotate about the X axis             |
| `4` / `6`                    | Rotate about the Y axis             |
| `3` / `7`                    | Rotate about the Z axis             |
| Left button and drag         | Rotate with the mouse               |
| `Esc` or close window        | Quit                                |

Number keys work on the main row and on the keypad. Switching projection
resets the rotation.

## Using it as a library

The pieces work without opening a window:

```python
from wireframe.parsing import parse_map
from wireframe.camera import Controls, Key, default_camera
from wireframe.render import Canvas, render

heightmap = parse_map(["0 0 0", "0 4 0", "0 0 0"])
camera = default_camera(heightmap.height)
canvas = Canvas()
render(canvas, heightmap, camera)
print(hex(canvas.get_pixel(960, 512)))

controls = Controls(camera, on_change=lambda: render(canvas, heightmap, camera))
controls.handle_key(Key.PLUS)   # zooms in and redraws
```

- `wireframe.parsing` — `parse_map`, `load_map`, `read_lines`, `HeightMap`
  and `MapError` (raised for an empty map, a blank row or rows of different
  lengths; its `exit_code` is 0 for an empty map and 1 otherwise).
- `wireframe.camera` — `Camera`, `default_camera`, `Controls`, `Projection`,
  `Key` and `MouseButton`.
- `wireframe.render` — `Canvas`, `project`, `draw_line`, `render` and
  `menu_lines`.
- `wireframe.colors` — the palette, `default_color` and `gradient_color`.
- `wireframe.geometry` — `Point`, the rotations and `isometric`.
- `wireframe.tokens` — parsing of map cells (`parse_cell`, `parse_int`,
  `parse_hex`, `split_words`).
- `wireframe.printf` — a small formatter, `sprintf` and `printf`, with the
  conversions `%c %d %i %u %x %X %s %p %%`.
- `wireframe.app` — `Viewer`, whose `run()` opens the window, and `main`.

## What it does not do

The viewer only shows a map in a window. It does not save rendered images,
edit maps or write map files.