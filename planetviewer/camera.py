"""Free-flying camera driven by Euler angles, plus view/projection helpers."""

from __future__ import annotations

import math
from enum import Enum, auto

import numpy as np

PITCH_LIMIT = 89.0


class CameraMovement(Enum):
    """Directions the camera can be moved in."""

    FORWARD = auto()
    BACKWARD = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()


def _normalize(v: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(v)
    if length == 0.0:
        raise ValueError("cannot normalize a zero-length vector")
    return v / length


def look_at(eye, center, up) -> np.ndarray:
    """Right-handed view matrix looking from ``eye`` towards ``center``.

    The matrix is returned in row-major math form, so it transforms
    column vectors as ``matrix @ point``.
    """
    eye = np.asarray(eye, dtype=float)
    center = np.asarray(center, dtype=float)
    up = np.asarray(up, dtype=float)

    f = _normalize(center - eye)
    s = _normalize(np.cross(f, up))
    u = np.cross(s, f)

    result = np.identity(4)
    result[0, :3] = s
    result[1, :3] = u
    result[2, :3] = -f
    result[0, 3] = -np.dot(s, eye)
    result[1, 3] = -np.dot(u, eye)
    result[2, 3] = np.dot(f, eye)
    return result


def perspective(fovy, aspect, z_near, z_far) -> np.ndarray:
    """Right-handed perspective projection with clip depth in [-1, 1].

    ``fovy`` is the vertical field of view in radians.
    """
    if aspect == 0:
        raise ValueError("aspect ratio must not be zero")
    if z_near == z_far:
        raise ValueError("near and far planes must differ")
    tan_half = math.tan(fovy / 2.0)
    if tan_half == 0:
        raise ValueError("field of view must not be zero")

    result = np.zeros((4, 4))
    result[0, 0] = 1.0 / (aspect * tan_half)
    result[1, 1] = 1.0 / tan_half
    result[2, 2] = -(z_far + z_near) / (z_far - z_near)
    result[2, 3] = -(2.0 * z_far * z_near) / (z_far - z_near)
    result[3, 2] = -1.0
    return result


class Camera:
    """Camera with position, orientation and perspective settings."""

    def __init__(self):
        self.position = np.zeros(3)
        self.world_up = np.array([0.0, 1.0, 0.0])
        self.front = np.array([0.0, 0.0, -1.0])
        self.right = np.array([1.0, 0.0, 0.0])
        self.up = np.array([0.0, 1.0, 0.0])
        self.yaw = -128.0
        self.pitch = -42.0
        self.movement_speed = 500.0
        self.mouse_sensitivity = 1.0
        self.zoom = 1.0
        self.fovy = 80.0
        self.aspect = 800 / 600
        self.z_near = 1.0
        self.z_far = 1000.0
        self._update_vectors()

    def _update_vectors(self) -> None:
        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        front = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = _normalize(front)
        self.right = _normalize(np.cross(self.front, self.world_up))
        self.up = _normalize(np.cross(self.right, self.front))

    def move(self, direction, delta_time) -> None:
        """Move along one of the camera's axes for ``delta_time`` seconds."""
        velocity = self.movement_speed * delta_time
        steps = {
            CameraMovement.FORWARD: self.front,
            CameraMovement.BACKWARD: -self.front,
            CameraMovement.LEFT: -self.right,
            CameraMovement.RIGHT: self.right,
            CameraMovement.UP: self.up,
            CameraMovement.DOWN: -self.up,
        }
        self.position = self.position + steps[CameraMovement(direction)] * velocity

    def move_mouse(self, xoffset, yoffset, constrain_pitch=True) -> None:
        """Turn the camera by mouse offsets, scaled by the sensitivity."""
        self.yaw += xoffset * self.mouse_sensitivity
        self.pitch += yoffset * self.mouse_sensitivity
        if constrain_pitch:
            self.pitch = max(-PITCH_LIMIT, min(PITCH_LIMIT, self.pitch))
        self._update_vectors()

    def view_matrix(self) -> np.ndarray:
        """View matrix for the current position and orientation."""
        return look_at(self.position, self.position + self.front, self.up)

    def projection_matrix(self) -> np.ndarray:
        """Projection matrix built from the camera's perspective settings."""
        return perspective(-self.fovy, self.aspect, self.z_near, self.z_far)