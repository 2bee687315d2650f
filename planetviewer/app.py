"""Viewer window: input handling, frame timing and the draw loop."""

from __future__ import annotations

import argparse
import math
from pathlib import Path

import numpy as np

from .camera import CameraMovement, perspective
from .camera import Camera
from .mapchunk import MapChunk

WINDOW_TITLE = "OpenGL Test"
WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
WINDOW_X = 100
WINDOW_Y = 100
FIELD_OF_VIEW = 80.0
Z_NEAR = 1.0
Z_FAR = 1000.0
CLEAR_COLOR = (0.1, 0.1, 0.1, 1.0)

VERTEX_SHADER_FILE = "vertex_shader.vs"
FRAGMENT_SHADER_FILE = "fragment_shader.fs"
HEIGHTMAP_FILE = "europe_heightmap.png"

_KEY_MOVEMENTS = {
    ord("z"): CameraMovement.FORWARD,
    ord("s"): CameraMovement.BACKWARD,
    ord("q"): CameraMovement.LEFT,
    ord("d"): CameraMovement.RIGHT,
    ord("e"): CameraMovement.UP,
    ord("a"): CameraMovement.DOWN,
}

_OVERLAY_VERTEX_SOURCE = """#version 330 core
in vec3 position;
in vec3 colors;
out vec3 vertex_color;
uniform mat4 uMVP;
void main() {
    gl_Position = uMVP * vec4(position, 1.0);
    vertex_color = colors;
}
"""

_OVERLAY_FRAGMENT_SOURCE = """#version 330 core
in vec3 vertex_color;
out vec4 frag_color;
void main() {
    frag_color = vec4(vertex_color, 1.0);
}
"""

_AXES_POSITIONS = (0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0, 0, 1)
_AXES_COLORS = (1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1, 0, 0, 0, 1, 0, 0, 1)
_TRIANGLE_POSITIONS = (0.0, 1.0, 0.0, -1.0, -1.0, 0.0, 1.0, -1.0, 0.0)
_TRIANGLE_COLORS = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


def movement_for_key(symbol):
    """Camera movement bound to a key symbol, or None if the key is unbound."""
    return _KEY_MOVEMENTS.get(symbol)


class _Overlay:
    """Coloured axes and a reference triangle drawn at the origin."""

    def __init__(self):
        from pyglet import gl
        from pyglet.graphics.shader import Shader, ShaderProgram

        self._gl = gl
        self._program = ShaderProgram(
            Shader(_OVERLAY_VERTEX_SOURCE, "vertex"),
            Shader(_OVERLAY_FRAGMENT_SOURCE, "fragment"),
        )
        self._axes = self._program.vertex_list(
            6, gl.GL_LINES, position=("f", _AXES_POSITIONS), colors=("f", _AXES_COLORS)
        )
        self._triangle = self._program.vertex_list(
            3,
            gl.GL_TRIANGLES,
            position=("f", _TRIANGLE_POSITIONS),
            colors=("f", _TRIANGLE_COLORS),
        )

    def draw(self, camera) -> None:
        gl = self._gl
        projection = perspective(
            math.radians(camera.fovy), camera.aspect, camera.z_near, camera.z_far
        )
        mvp = projection @ camera.view_matrix()
        self._program.use()
        self._program["uMVP"] = tuple(float(x) for x in np.asarray(mvp).flatten(order="F"))
        try:
            gl.glLineWidth(2.0)
        except gl.GLException:
            # Wide lines are not available in every context.
            pass
        self._axes.draw(gl.GL_LINES)
        self._triangle.draw(gl.GL_TRIANGLES)
        self._program.stop()


class PlanetViewer:
    """The viewer window with its camera, terrain and event handlers."""

    def __init__(self, width, height, assets_dir):
        import pyglet
        from pyglet import gl

        self.assets_dir = Path(assets_dir)
        self.window = pyglet.window.Window(width, height, caption=WINDOW_TITLE)
        self.window.set_location(WINDOW_X, WINDOW_Y)
        self.window.set_exclusive_mouse(True)
        self._fullscreen = False
        self._first_mouse = True
        self._delta_time = 0.0
        self._closed = False

        gl.glEnable(gl.GL_DEPTH_TEST)
        gl.glClearColor(*CLEAR_COLOR)

        self.camera = Camera()
        self.camera.fovy = FIELD_OF_VIEW
        self.camera.aspect = width / height
        self.camera.z_near = Z_NEAR
        self.camera.z_far = Z_FAR

        self.map_chunk = MapChunk(self.camera, width, height)
        self.map_chunk.generate(
            self.assets_dir / VERTEX_SHADER_FILE,
            self.assets_dir / FRAGMENT_SHADER_FILE,
            self.assets_dir / HEIGHTMAP_FILE,
        )
        self._overlay = _Overlay()
        self.window.push_handlers(self)

    def _tick(self, dt) -> None:
        self._delta_time = dt

    def _shutdown(self) -> None:
        if not self._closed:
            self._closed = True
            self.map_chunk.destroy()

    def on_draw(self) -> None:
        from pyglet import gl

        gl.glClear(gl.GL_COLOR_BUFFER_BIT | gl.GL_DEPTH_BUFFER_BIT)
        self.map_chunk.render()
        self._overlay.draw(self.camera)

    def on_key_press(self, symbol, modifiers):
        from pyglet.event import EVENT_HANDLED
        from pyglet.window import key

        if symbol == key.ESCAPE:
            self._shutdown()
            self.window.close()
            return EVENT_HANDLED
        if symbol == key.F:
            self._fullscreen = not self._fullscreen
            self.window.set_fullscreen(self._fullscreen)
            return EVENT_HANDLED
        direction = movement_for_key(symbol)
        if direction is not None:
            self.camera.move(direction, self._delta_time)
        return EVENT_HANDLED

    def on_mouse_motion(self, x, y, dx, dy) -> None:
        if self._first_mouse:
            self._first_mouse = False
            dx = dy = 0
        # Window y grows upwards; the camera expects screen-style offsets.
        self.camera.move_mouse(dx, -dy)

    def on_close(self) -> None:
        self._shutdown()

    def run(self) -> None:
        """Run the event loop until the window is closed."""
        import pyglet

        pyglet.clock.schedule(self._tick)
        try:
            pyglet.app.run()
        finally:
            pyglet.clock.unschedule(self._tick)
            self._shutdown()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="planetviewer", description="Fly over a height-map terrain.")
    parser.add_argument(
        "--assets",
        type=Path,
        default=Path("..") / "assets",
        help="directory holding the shaders and the height map",
    )
    parser.add_argument("--width", type=int, default=WINDOW_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=WINDOW_HEIGHT, help="window height in pixels")
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("window width and height must be positive")

    viewer = PlanetViewer(args.width, args.height, args.assets)
    viewer.run()
    return 0