# cengine

A small engine core with no dependencies, built around an entity-component
system. It provides:

- `cengine.log`: `Logger` writes coloured, timestamped lines at a `Level`
  (`DEBUG`, `INFO`, `NOTICE`, `WARNING`, `ERROR`, `CRITICAL`, `SILENT`).
  `Logger.format` returns a line without writing it.
- `cengine.mathutils`: `clamp`, `normalize_range`, and the frozen `Vec2` and
  `Vec3` dataclasses.
- `cengine.matrix`: the immutable `Mat4`. It supports `identity`, products
  written `a @ b`, `transpose`, `perspective`, `translate`, `rotate_x`,
  `rotate_y`, `rotate_z`, `scaled`, `look_at`, `from_euler`, `position`,
  `extract_scale` and `format`. Translation is stored in row 3.
- `cengine.stopwatch`: `Stopwatch`. `stop()` returns the seconds since
  `start()`, or `0.0` if the stopwatch is not running.
- `cengine.files`: `get_file_path`, `read_file` and `read_local`. Files are
  read relative to the working directory and decoded as UTF-8.
- `cengine.entity`: `EntityRegistry` and the `Component` identifiers
  `TRANSFORM`, `MESH` and `CAMERA`.
  - There are at most 100 entities. `create()` raises `OverflowError` when all
    are in use.
  - Requests for dead entities, or for component ids outside 0–31, are ignored.
- `cengine.components`: `Transform`, `Camera`, `Mesh`, `ComponentStore` and
  `World`.
  - `World` is a registry plus the stores `transforms`, `meshes` and `cameras`.
  - `Transform.update()` recomputes `right`, `up` and `forward` from the Euler
    rotation.
- `cengine.obj_loader`: `load_obj`, `parse_vec3` and `parse_face_indices`.
  - `load_obj` reads `v x y z` and `f v/t/n ...` records into a `Mesh`.
  - Face indices are made zero-based.
  - A malformed face raises `ObjParseError`, which is a `ValueError`.
- `cengine.input`: `InputState`, with the enums `Key` (W, A, S, D) and
  `Action`.
  - `handle_key` keeps each movement axis within [-1, 1].
  - `update_cursor` normalises a pixel position to [0, 1], with y growing
    upwards, and records `mouse_delta`.
- `cengine.systems`: `transform_system_update`, `mesh_matrices` and
  `render_system_update`.
  - `mesh_matrices` returns the model, view and projection matrices.
  - `render_system_update` uses the last camera that has a transform. It passes
    each mesh that has a transform to a `draw` callable and returns how many it
    drew.
  - It raises `LookupError` when there is no such camera.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Example

```python
from cengine.components import Camera, Transform, World
from cengine.files import read_local
from cengine.mathutils import Vec3
from cengine.obj_loader import load_obj
from cengine.systems import mesh_matrices, render_system_update, transform_system_update

world = World()

mesh = load_obj(read_local("/Assets/Models/cube.obj"))
cube = world.registry.create()
world.meshes.add(cube, mesh)
world.transforms.add(
    cube, Transform(position=Vec3(0.0, 0.0, 5.0), scale=Vec3(1.0, 1.0, 1.0))
)

eye = world.registry.create()
world.cameras.add(eye, Camera(fov=80.0, aspect=1280 / 960, near_plane=0.1, far_plane=100.0))
world.transforms.add(eye, Transform())

transform_system_update(world)


def draw(mesh, mesh_transform, camera, camera_transform):
    model, view, projection = mesh_matrices(mesh_transform, camera, camera_transform)
    mvp = model @ view @ projection
    print(len(mesh.vertices), "vertices", mvp.format())


render_system_update(world, draw)
```

## What it does not do

The package opens no window and does not talk to a graphics API. It compiles
no shaders, draws nothing to the screen and has no main loop or command-line
program.

`InputState` does not read the keyboard or the mouse itself. Key events and
cursor positions must be fed to it from whatever windowing layer you use.
Likewise, the `draw` callable passed to `render_system_update` does the actual
drawing.