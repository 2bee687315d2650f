# planetviewer

planetviewer turns a grayscale heightmap image into a terrain mesh. It opens
an OpenGL window through pyglet and lets you fly a free camera over the
terrain. Coloured axes and a small reference triangle are drawn at the origin.

## Installation

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
planetviewer
```

Options:

- `--assets DIR`: the directory holding the shaders and the heightmap
  (default `../assets`, relative to the current directory).
- `--width N`, `--height N`: window size in pixels (default 800 x 600). Both
  must be positive.

Run `planetviewer --help` for the full usage text.

The assets directory must hold three files:

- `vertex_shader.vs`: the GLSL vertex shader. It is given the uniform
  `uMVP` (projection x view x model) and reads the vertex position from
  attribute 0.
- `fragment_shader.fs`: the GLSL fragment shader.
- `europe_heightmap.png`: the heightmap. Its first channel is used as the
  height.

If a shader file cannot be read, or a shader fails to compile or link,
`planetviewer.shader.ShaderError` is raised.

## Controls

| Key    | Action            |
|--------|-------------------|
| z      | move forward      |
| s      | move backward     |
| q      | strafe left       |
| d      | strafe right      |
| e      | move up           |
| a      | move down         |
| mouse  | look around       |
| f      | toggle fullscreen |
| Escape | quit              |

The mouse is captured by the window. Each key press moves the camera once,
by its movement speed (500 units per second) times the length of the last
frame. Holding a key down does not keep the camera moving. The pitch is
held between -89 and 89 degrees.

## Using the pieces as a library

```python
from planetviewer.camera import Camera, CameraMovement, look_at, perspective
from planetviewer.mapchunk import build_indices, build_vertices, load_heightmap

camera = Camera()
camera.move(CameraMovement.FORWARD, 0.016)
camera.move_mouse(10.0, -5.0)
view = camera.view_matrix()
projection = camera.projection_matrix()
mvp = projection @ view

heights = [[0, 128], [255, 64]]
vertices = build_vertices(heights, 32.0 / 256.0, 16.0)  # shape (4, 3)
indices = build_indices(2, 2)                            # one strip of 4 indices
```

- `look_at(eye, center, up)` returns a right-handed 4x4 view matrix.
- `perspective(fovy, aspect, z_near, z_far)` returns a right-handed
  projection matrix with clip depth in [-1, 1]. `fovy` is in radians. A zero
  aspect, a zero field of view, or equal near and far planes raise
  `ValueError`.
- `Camera.projection_matrix()` calls `perspective` with the negated `fovy`
  attribute as given and with the camera's `aspect`, `z_near` and `z_far`.
- `load_heightmap(path)` reads the first channel of an image as 8-bit
  heights. The bottom row of the image comes first. 16-bit images are
  reduced to their high byte.
- `build_vertices(heights, y_scale, y_shift)` gives one vertex per sample.
  Rows run along x and columns along z, both centred on the origin. The
  y value is `height * y_scale - y_shift`.
- `build_indices(width, height)` gives the element indices for one triangle
  strip per pair of adjacent rows.

`Shader` and `MapChunk.generate` / `render` / `destroy` need a current
OpenGL context, such as the one a pyglet window creates.

## What it does not do

No shaders and no heightmap come with the package. The viewer cannot start
until you provide an assets directory with the three files listed above.
The terrain is a single mesh built once from one image. There is no
streaming or tiling of larger maps, and no texturing or lighting beyond
what your shaders do.