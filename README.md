# vrscene

A small software 3D renderer. Meshes are read from plain-text `.vrobj`
files, transformed into the viewer's frame (yaw, pitch and roll),
projected with a fixed focal length and drawn as filled faces with a
scanline triangle filler. The window is opened with pygame; the
geometry, projection and face filling are done by the package itself.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running

```
vrscene
```

Options:

- `--models-dir DIR` — directory holding the `.vrobj` files
  (default: `models`, relative to the current directory).
- `--display N` — index of the display to open the window on
  (default: `1`). If there is no display with that index the command
  prints `Failed to get display bounds: ...` and exits with status 1,
  so on a machine with a single monitor run `vrscene --display 0`.

The scene holds a black sky, two models and a directional light:

- a model named `triangularPrism`, loaded from `cube.vrobj` and placed
  at `(0, -0.5, 7)`;
- a model named `cube`, loaded from `prism.vrobj` and placed at
  `(0, -0.5, 5)`.

If a model file cannot be opened, `Error opening file!` is printed to
standard error and that model is left empty. The window opens full
screen; the command returns 0 when the window is closed.

### Controls

| Key            | Action                       |
|----------------|------------------------------|
| W / S          | move forward / backward      |
| A / D          | strafe left / right          |
| Space          | move up                      |
| Left Shift     | move down                    |
| Left / Right   | turn (yaw)                   |
| Up / Down      | look up / down (pitch)       |
| 1 / 2          | roll                         |
| F11            | toggle full screen           |

Movement and turning are scaled by the milliseconds elapsed between
frames, so speed does not depend on frame rate.

## The `.vrobj` format

A `.vrobj` file is plain text, one record per line, fields separated by
spaces (runs of spaces are ignored).

Vertex lines come first. Each holds up to three coordinates `x y z`
(missing ones are zero, so an empty line here is a vertex at the
origin) followed by any number of zero-based indices of the vertices it
is connected to:

```
0 0 0 1 3
1 0 0 0 2
1 1 0 1 3
0 1 0 2 0
```

A line whose first field is `f` switches the rest of the file to face
mode; any indices after the `f` on that line already form a face. From
then on every non-empty line lists the zero-based indices of the
vertices of one face:

```
f
0 1 2 3
```

A negative index refers to the first vertex. An index past the last
vertex, or a field that is not a number, raises `vrscene.model.ModelError`.

The connections between the vertices of a face set the order in which
the face is walked from its first vertex in both directions and split
into triangles. If those connections do not form a closed loop, filling
the face raises `ValueError`.

## Using the library

- `vrscene.geometry` — `Color`, `Vector3` (with `normalized()`), `Pos`
  (position plus yaw, pitch and roll in degrees, with
  `normalized_rotation()`) and `Pos2D` (with `distance_to()`).
- `vrscene.mesh` — `Vertex`, `Vertex3D`, `FaceVertex`, `Face` (`add`,
  `remove`, `link`, `average_depth`) and the `edges` helper.
- `vrscene.raster` — `Canvas`, a drawing surface that records every
  command it receives (`commands`, `lines`); `Viewport` (screen size,
  focal length 1000 by default, `to_screen`, `clamp`, `contains`);
  `bresenham_line`, `interpolate_x`, `triangle_spans`, `fill_triangle`,
  `draw_line`, `face_triangles` and `fill_face`.
- `vrscene.scene` — `Player`, `Renderable` and its kinds `Sky`, `Cube`
  and `LightRaySource`, the `ObjectType` enumeration, `process_light`
  and the `Scene` that renders its objects in order.
- `vrscene.model` — `split_tokens`, `parse_vrobj`, `load_vrobj`,
  `ModelError` and the `Model` renderable (`project`, `render`).
- `vrscene.app` — `Control`, `apply_input`, `build_scene`,
  `PygameCanvas` and `main`, the entry point of the `vrscene` command.

A model can be loaded, projected and drawn without opening a window:

```python
from vrscene.geometry import Color, Pos
from vrscene.model import Model, load_vrobj
from vrscene.raster import Canvas, Viewport
from vrscene.scene import Player

vertices, faces = load_vrobj("models/cube.vrobj")
model = Model("cube", Pos(0, 0, 5), 1, Color(255, 255, 255, 255), vertices, faces)
canvas = Canvas()
model.render(canvas, Player(Pos(0, 0, 0), "viewer"), Viewport(800, 600))
print(canvas.lines[:5])
```

## What it does not do

- Faces are filled in alternating red and white in file order; a
  model's own colour and size are stored but not used, and faces are
  not sorted by depth, so nearer faces can be hidden by later ones.
- The light source does not shade anything: for each lit object it sets
  its own orientation and prints the x component of the normalised
  direction to standard output, once per frame.
- `Cube` objects draw nothing.
- There is no clipping against the near plane beyond clamping points
  behind the viewer to a tiny positive depth and clamping triangle
  corners to the screen edges.