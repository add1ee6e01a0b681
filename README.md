# raycube

A small first-person raycaster. It reads a `.cub` scene file that holds
texture paths, floor and ceiling colours and a grid map. It then opens a
pygame window and draws the walls column by column, walking the grid with
the DDA algorithm.

## Installing

```
pip install .
```

To work on the package and run its tests:

```
pip install .[test]
pytest
```

## Running

```
raycube path/to/level.cub
```

The command needs exactly one argument, a file name that ends in `.cub`
and has at least one character before the extension. Otherwise it prints
`Usage: ... (<name>.cub)` or `Invalid argument! (<name>.cub)` and exits
with status 1. If the scene cannot be read or parsed, it writes
`Error: ...` to standard error and exits with status 1. It does the same,
printing `Error loading texture: <path>`, when one of the four texture
paths is missing or pygame cannot load it as an image.

### Controls

| Key                    | Action         |
|------------------------|----------------|
| `W` / Up arrow         | Move forward   |
| `S` / Down arrow       | Move backward  |
| `A` / Left arrow       | Turn left      |
| `D` / Right arrow      | Turn right     |
| `Esc`                  | Quit           |

Closing the window also quits. The player moves 0.20 cells per key press
and turns 0.05 radians, and a move is made on each axis only when the
target cell is open floor.

After the first key press the window shows debug values in red: the
player's position (`posX`, `posY`), the last key code, a frame counter
(`fps`), and the view direction (`rayDirX`, `rayDirY`). All of these are
shown as truncated integers.

## Scene files

A scene file lists its elements first and then the map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
10N001
111111
```

* `NO`, `SO`, `WE`, `EA`: the texture path for each wall face.
* `F`, `C`: the floor and ceiling colours, three numbers separated by
  commas.
* The map uses `1` for walls, `0` for open floor, a space for cells
  outside the map, and exactly one of `N`, `S`, `E`, `W` for the player's
  start cell and the way the player faces.

The command loads scenes with `raycube.config.parse_config`. That reader
removes spaces and tabs around each line and takes the map to start at
the first line that begins with `1`. Rows are padded with spaces to the
width of the widest row. The map must have exactly one player start, and
no open cell, the player's cell included, may lie on the border of the
map or next to a space. Otherwise it raises `ConfigError`.

## What the program does not do

* Walls are drawn in flat colours chosen by cell value, and faces hit on
  the other axis are drawn at half brightness. The texture files are only
  loaded to check that they exist. They are never drawn.
* The floor and ceiling colours are parsed but never drawn. The
  background of the view stays black.
* The frame counter only changes when a key is pressed, because the view
  is redrawn on key presses only.

## Using it as a library

The parsers and the renderer work without a window:

```python
from raycube.config import parse_config
from raycube.render import FrameBuffer, draw_frame

config = parse_config("level.cub")
frame = FrameBuffer()              # 1920 x 1080 by default
draw_frame(frame, config.player, config.world)
print(frame.pixels.shape)          # (1080, 1920), 0xRRGGBB values
```

* `raycube.config`: `parse_config`, `parse_config_text`, `parse_color`,
  `is_map_closed`, and the `Config`, `Player` and `WorldMap` classes.
  `WorldMap.cell(x, y)` returns -1 (void), 0 (floor) or 1 (wall) and
  treats cells outside the grid as void.
* `raycube.movement`: `move_player` and `rotate_player`.
* `raycube.raycasting`: `cast_ray` returns a `RayHit` with the
  perpendicular wall distance, the colour, the side that was hit and the
  map cell. `ray_direction` and `wall_color` are also available.
* `raycube.render`: `FrameBuffer` (`clear`, `put_pixel`, `draw_column`),
  `column_span` and `draw_frame`.
* `raycube.controls`: the `Key` codes, `handle_key`, which returns
  `False` for Esc, and `describe_release` and `describe_motion`.
* `raycube.debug`: `FpsCounter`, `format_texture_paths`,
  `format_colors`, `format_map` and `debug_lines`.
* `raycube.app`: `Game`, `is_cub_file`, `validate_args` and `main`.

### Stricter scene checking

`raycube.scenefile.parse_scene_file` checks a scene more strictly and
returns a `Scene` that holds `SceneElements` and a `MapInfo`. The checks
come from `raycube.elements` and `raycube.mapcheck`:

* no more than six element lines, and none of them missing;
* no value with a space before a letter inside it;
* colours written as `nbr, nbr, nbr`, each from 0 to 255;
* every texture path can be opened;
* the map has only `01NSEW` and spaces, no blank rows, one player, and
  is closed by walls horizontally, vertically and in its first and last
  rows.

It raises `SceneError` with a message that names the first problem it
finds. The `raycube` command does not run these checks.