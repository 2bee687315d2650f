"""Terrain mesh built from a height-map image and drawn as triangle strips."""

from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from .shader import Shader

log = logging.getLogger(__name__)

Y_SCALE = 32.0 / 256.0
Y_SHIFT = 16.0


def load_heightmap(path) -> np.ndarray:
    """Read the first channel of an image as 8-bit heights, bottom row first."""
    with Image.open(path) as image:
        if image.mode == "P":
            image = image.convert("RGBA")
        elif image.mode == "1":
            image = image.convert("L")
        pixels = np.asarray(image)
    if pixels.ndim == 3:
        pixels = pixels[..., 0]
    if pixels.dtype.kind == "f":
        pixels = np.clip(pixels, 0, 255).astype(np.uint8)
    elif pixels.dtype != np.uint8:
        pixels = np.clip(pixels.astype(np.int64) >> 8, 0, 255).astype(np.uint8)
    return np.ascontiguousarray(np.flipud(pixels))


def build_vertices(heights, y_scale=Y_SCALE, y_shift=Y_SHIFT) -> np.ndarray:
    """One (x, y, z) vertex per height sample, centred on the origin.

    Rows run along x and columns along z; the result has shape
    ``(rows * columns, 3)`` in row-major order.
    """
    heights = np.asarray(heights)
    if heights.ndim != 2:
        raise ValueError(f"height map must be two-dimensional, got {heights.ndim} dimensions")
    rows, cols = heights.shape
    i, j = np.meshgrid(np.arange(rows), np.arange(cols), indexing="ij")
    vertices = np.empty((rows, cols, 3), dtype=np.float32)
    vertices[..., 0] = -rows / 2.0 + i
    vertices[..., 1] = heights.astype(np.float32) * y_scale - y_shift
    vertices[..., 2] = -cols / 2.0 + j
    return vertices.reshape(-1, 3)


def build_indices(width, height) -> np.ndarray:
    """Element indices for one triangle strip per pair of adjacent rows."""
    if width < 1 or height < 1:
        raise ValueError(f"grid must be at least 1x1, got {width}x{height}")
    rows = np.arange(height - 1)[:, None, None]
    cols = np.arange(width)[None, :, None]
    sides = np.arange(2)[None, None, :]
    return (cols + width * (rows + sides)).astype(np.uint32).ravel()


def _address(array: np.ndarray) -> int:
    """Memory address of a contiguous array's first element."""
    return array.__array_interface__["data"][0]


class MapChunk:
    """A height-map terrain uploaded to the GPU and rendered with a shader."""

    def __init__(self, camera, screen_width, screen_height):
        self.camera = camera
        self.screen_width = float(screen_width)
        self.screen_height = float(screen_height)
        self.position = np.zeros(3)
        self.num_strips = 0
        self.num_vert_per_strip = 0
        self._index_size = np.dtype(np.uint32).itemsize
        self._shader = None
        self._vao = None
        self._vbo = None
        self._ebo = None
        self._buffers = None

    def generate(self, vertex_shader_path, fragment_shader_path, heightmap_path) -> None:
        """Compile the shader, build the mesh and upload it to GPU buffers."""
        from pyglet import gl

        self._shader = Shader(vertex_shader_path, fragment_shader_path)

        heights = load_heightmap(heightmap_path)
        rows, cols = heights.shape
        vertices = np.ascontiguousarray(build_vertices(heights), dtype=np.float32)
        indices = np.ascontiguousarray(build_indices(cols, rows), dtype=np.uint32)
        self.num_strips = rows - 1
        self.num_vert_per_strip = cols * 2
        log.info("image reader and index ready")

        vao = (gl.GLuint * 1)()
        gl.glGenVertexArrays(1, vao)
        gl.glBindVertexArray(vao[0])

        vbo = (gl.GLuint * 1)()
        gl.glGenBuffers(1, vbo)
        gl.glBindBuffer(gl.GL_ARRAY_BUFFER, vbo[0])
        gl.glBufferData(
            gl.GL_ARRAY_BUFFER,
            vertices.nbytes,
            _address(vertices),
            gl.GL_STATIC_DRAW,
        )
        gl.glVertexAttribPointer(0, 3, gl.GL_FLOAT, gl.GL_FALSE, 0, 0)
        gl.glEnableVertexAttribArray(0)

        ebo = (gl.GLuint * 1)()
        gl.glGenBuffers(1, ebo)
        gl.glBindBuffer(gl.GL_ELEMENT_ARRAY_BUFFER, ebo[0])
        gl.glBufferData(
            gl.GL_ELEMENT_ARRAY_BUFFER,
            indices.nbytes,
            _address(indices),
            gl.GL_STATIC_DRAW,
        )

        self._vao, self._vbo, self._ebo = vao, vbo, ebo
        self._buffers = (vertices, indices)
        log.info("Buffers ready")

    def render(self) -> None:
        """Draw the terrain one row strip at a time."""
        if self._vao is None or self._shader is None:
            raise RuntimeError("map chunk has not been generated")
        from pyglet import gl

        self._shader.use()
        model = np.identity(4)
        mvp = self.camera.projection_matrix() @ self.camera.view_matrix() @ model
        self._shader.set_mat4("uMVP", mvp)

        gl.glBindVertexArray(self._vao[0])
        strip_bytes = self._index_size * self.num_vert_per_strip
        for strip in range(self.num_strips):
            gl.glDrawElements(
                gl.GL_TRIANGLE_STRIP,
                self.num_vert_per_strip,
                gl.GL_UNSIGNED_INT,
                strip_bytes * strip,
            )

    def destroy(self) -> None:
        """Release the GPU buffers; does nothing if none were created."""
        if self._vao is None:
            return
        from pyglet import gl

        gl.glDeleteVertexArrays(1, self._vao)
        gl.glDeleteBuffers(1, self._vbo)
        gl.glDeleteBuffers(1, self._ebo)
        self._vao = self._vbo = self._ebo = None
        self._buffers = None