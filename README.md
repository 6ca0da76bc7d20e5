# cubscene

`cubscene` reads and validates `.cub` scene files for a grid-based raycaster.
A scene file names four wall textures and the floor and ceiling colours, then
draws the map as a grid of characters.

## Scene file format

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
10N001
111111
```

- `NO`, `SO`, `WE`, `EA`: path to a readable file ending in `.xpm` for each
  wall face.
- `F`, `C`: floor and ceiling colour as `R,G,B`. Only digits, spaces and
  exactly two commas are allowed; each component must be at most 255, and a
  colour that packs to 0 (`0,0,0`) is rejected.
- Any other identifier is an error. Blank lines are ignored. Parameter lines
  are read until all six are known.
- After the parameters, blank lines may follow; the first non-blank line must
  start with `1` and begins the map, which runs to the end of the file.
- The map may use `1` (wall), `0` (floor), spaces, and exactly one of
  `N`, `S`, `E`, `W` for the player's start position and facing. Spaces are
  stored as void cells (`V`) and the player's cell as `0`.
- The map must be closed: in the first and last rows every cell between the
  first and the last wall must be a wall, and every void cell may only touch
  void cells or walls.

## Installation

```
pip install .
```

## Command line

```
cubscene maps/level.cub
```

The command takes exactly one argument, the path to a `.cub` file. On success
it prints `Inicio do game` and exits with status 0. When the arguments or the
file break a rule, it prints `Error` on one line followed by a description on
standard output and exits with status 1.

## Library use

```python
from cubscene.parser import parse_scene
from cubscene.grid import validate_grid
from cubscene.errors import CubError

try:
    scene = parse_scene("maps/level.cub")
    validate_grid(scene.grid)
except CubError as exc:
    print(exc.message)
else:
    print(scene.player, scene.floor, scene.ceiling)
```

- `cubscene.parser.parse_scene(path)` returns a `cubscene.model.Scene` with
  `textures` (keyed by `Direction`), `floor`, `ceiling`, `grid`, `width`,
  `height` and `player`. It does not check that the map is closed.
- `cubscene.grid.validate_grid(grid)` checks that a grid is closed and raises
  `CubError` otherwise.
- `cubscene.cli.load_scene(argv)` runs the same checks as the command: the
  argument count, the `.cub` extension, whether the file can be read, parsing,
  and grid validation.
- `cubscene.color.rgb_to_int(text)` turns an `R,G,B` string into a packed
  `0xRRGGBB` integer.
- `cubscene.model.spawn_player(direction, x, y)` builds a `Player` in the
  middle of a cell with the direction and camera-plane vectors for its facing.
- `cubscene.errors.format_error(message)` gives the text the command prints.

The package also carries small helper modules: `cubscene.text` (character
classes, `atoi`, `itoa`), `cubscene.strtools` (C-style string routines such as
`strlcpy`, `strnstr`, `split`), `cubscene.memory` (byte-buffer routines),
`cubscene.linked` (`LinkedList`), `cubscene.output` (writing to streams) and
`cubscene.linereader` (`LineReader`, line-at-a-time reading from file
descriptors).

## What it does not do

`cubscene` only loads and checks scene files. It opens no window, loads no
texture images (it only checks that the texture files can be opened), and
renders nothing; there is no game loop or key handling.

## Running the tests

```
pip install .[test]
pytest
```