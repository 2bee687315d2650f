"""GLSL shader programs built from a vertex and a fragment source file."""

from __future__ import annotations

from pathlib import Path

import numpy as np


class ShaderError(Exception):
    """Raised when shader sources cannot be read, compiled or linked."""


def read_shader_sources(vertex_path, fragment_path) -> tuple[str, str]:
    """Return the text of the vertex and fragment shader files."""
    sources = []
    for path in (vertex_path, fragment_path):
        try:
            sources.append(Path(path).read_text(encoding="utf-8"))
        except OSError as err:
            raise ShaderError(f"shader file not successfully read: {path}: {err}") from err
    return sources[0], sources[1]


def _column_major(mat, size: int) -> tuple[float, ...]:
    array = np.asarray(mat, dtype=float)
    if array.shape != (size, size):
        raise ValueError(f"expected a {size}x{size} matrix, got shape {array.shape}")
    return tuple(float(x) for x in array.flatten(order="F"))


def _vector(args, size: int) -> tuple[float, ...]:
    if len(args) == 1:
        values = tuple(float(x) for x in np.asarray(args[0], dtype=float).ravel())
    else:
        values = tuple(float(x) for x in args)
    if len(values) != size:
        raise ValueError(f"expected {size} components, got {len(values)}")
    return values


class Shader:
    """A linked shader program with helpers for setting uniforms."""

    def __init__(self, vertex_path, fragment_path):
        from pyglet.graphics.shader import Shader as GLShader
        from pyglet.graphics.shader import ShaderException, ShaderProgram

        self._missing_uniform = ShaderException
        vertex_code, fragment_code = read_shader_sources(vertex_path, fragment_path)

        compiled = []
        try:
            for code, kind, label in (
                (vertex_code, "vertex", "VERTEX"),
                (fragment_code, "fragment", "FRAGMENT"),
            ):
                try:
                    compiled.append(GLShader(code, kind))
                except ShaderException as err:
                    raise ShaderError(f"shader compilation error of type {label}: {err}") from err
            try:
                self._program = ShaderProgram(*compiled)
            except ShaderException as err:
                raise ShaderError(f"program linking error: {err}") from err
        finally:
            for shader in compiled:
                shader.delete()
        self.id = self._program.id

    def use(self) -> None:
        """Make this program the active one."""
        self._program.use()

    def _set(self, name: str, value) -> None:
        try:
            self._program[name] = value
        except self._missing_uniform:
            # A uniform that is absent or optimised away is silently skipped.
            pass

    def set_bool(self, name, value) -> None:
        self._set(name, int(bool(value)))

    def set_int(self, name, value) -> None:
        self._set(name, int(value))

    def set_float(self, name, value) -> None:
        self._set(name, float(value))

    def set_vec2(self, name, *args) -> None:
        self._set(name, _vector(args, 2))

    def set_vec3(self, name, *args) -> None:
        self._set(name, _vector(args, 3))

    def set_vec4(self, name, *args) -> None:
        self._set(name, _vector(args, 4))

    def set_mat2(self, name, mat) -> None:
        self._set(name, _column_major(mat, 2))

    def set_mat3(self, name, mat) -> None:
        self._set(name, _column_major(mat, 3))

    def set_mat4(self, name, mat) -> None:
        self._set(name, _column_major(mat, 4))