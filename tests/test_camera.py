import math

import numpy as np
import pytest

from planetviewer.camera import Camera, CameraMovement, look_at, perspective


def test_initial_angles():
    cam = Camera()
    assert cam.yaw == -128.0
    assert cam.pitch == -42.0
    assert cam.movement_speed == 500


def test_initial_vectors_are_orthonormal():
    cam = Camera()
    for v in (cam.front, cam.right, cam.up):
        assert np.linalg.norm(v) == pytest.approx(1.0)
    assert np.dot(cam.front, cam.right) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.front, cam.up) == pytest.approx(0.0, abs=1e-12)
    assert np.dot(cam.right, cam.up) == pytest.approx(0.0, abs=1e-12)


def test_front_follows_euler_angles():
    cam = Camera()
    assert cam.front[1] == pytest.approx(math.sin(math.radians(cam.pitch)))


def test_pitch_is_clamped_up():
    cam = Camera()
    cam.move_mouse(0, 500)
    assert cam.pitch == 89.0


def test_pitch_is_clamped_down():
    cam = Camera()
    cam.move_mouse(0, -500)
    assert cam.pitch == -89.0


def test_pitch_unconstrained():
    cam = Camera()
    cam.move_mouse(0, 500, False)
    assert cam.pitch > 89.0


def test_mouse_sensitivity_scales_offsets():
    cam = Camera()
    cam.mouse_sensitivity = 2.0
    before = cam.yaw
    cam.move_mouse(10, 0)
    assert cam.yaw - before == pytest.approx(20.0)


@pytest.mark.parametrize(
    "there, back",
    [
        (CameraMovement.FORWARD, CameraMovement.BACKWARD),
        (CameraMovement.LEFT, CameraMovement.RIGHT),
        (CameraMovement.UP, CameraMovement.DOWN),
    ],
)
def test_opposite_moves_cancel(there, back):
    cam = Camera()
    cam.move(there, 0.25)
    assert np.linalg.norm(cam.position) > 0
    cam.move(back, 0.25)
    np.testing.assert_allclose(cam.position, np.zeros(3), atol=1e-9)


def test_forward_moves_along_front():
    cam = Camera()
    cam.move(CameraMovement.FORWARD, 0.1)
    np.testing.assert_allclose(cam.position, cam.front * cam.movement_speed * 0.1)


def test_view_matrix_maps_eye_to_origin():
    cam = Camera()
    cam.move(CameraMovement.RIGHT, 0.3)
    view = cam.view_matrix()
    point = view @ np.append(cam.position, 1.0)
    np.testing.assert_allclose(point, [0, 0, 0, 1], atol=1e-9)


def test_view_matrix_looks_down_negative_z():
    cam = Camera()
    view = cam.view_matrix()
    point = view @ np.append(cam.position + cam.front, 1.0)
    np.testing.assert_allclose(point, [0, 0, -1, 1], atol=1e-9)


def test_look_at_rotation_is_orthonormal():
    m = look_at([1, 2, 3], [4, 0, -2], [0, 1, 0])
    rot = m[:3, :3]
    np.testing.assert_allclose(rot @ rot.T, np.identity(3), atol=1e-12)


def test_look_at_rejects_degenerate_direction():
    with pytest.raises(ValueError):
        look_at([0, 0, 0], [0, 0, 0], [0, 1, 0])


def test_perspective_maps_planes_to_clip_range():
    proj = perspective(math.radians(90), 1.0, 1.0, 10.0)
    near = proj @ np.array([0, 0, -1.0, 1])
    far = proj @ np.array([0, 0, -10.0, 1])
    assert near[2] / near[3] == pytest.approx(-1.0)
    assert far[2] / far[3] == pytest.approx(1.0)


def test_perspective_rejects_zero_aspect():
    with pytest.raises(ValueError):
        perspective(1.0, 0, 1, 10)


def test_perspective_rejects_equal_planes():
    with pytest.raises(ValueError):
        perspective(1.0, 1.0, 5, 5)


def test_projection_matrix_uses_camera_settings():
    cam = Camera()
    np.testing.assert_allclose(
        cam.projection_matrix(),
        perspective(-cam.fovy, cam.aspect, cam.z_near, cam.z_far),
    )