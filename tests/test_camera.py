import math

import pytest

from awgen.camera import (
    MAX_PITCH,
    MAX_ZOOM,
    MIN_PITCH,
    MIN_ZOOM,
    CameraControls,
    CameraState,
    CameraTarget,
    keyboard_rotate,
    mouse_pan,
    mouse_rotate,
    mouse_zoom,
    smooth_follow,
)
from awgen.geometry.linalg import Vec2, Vec3
from awgen.utilities.vec_cmp import approx_eq


def test_zoom_limits_follow_base_zoom():
    target = CameraTarget()
    mouse_zoom(target, CameraControls(), 100.0)
    assert target.scale == 4.0 / 16.0
    mouse_zoom(target, CameraControls(), -100.0)
    assert target.scale == 256.0 / 16.0


def test_target_defaults():
    target = CameraTarget()
    assert target.duration == 0.05
    assert target.rotation == Vec3(45.0, -45.0, 0.0)


def test_up_and_right_are_orthonormal():
    target = CameraTarget()
    up, right = target.up(), target.right()
    assert math.isclose(up.length(), 1.0, abs_tol=1e-9)
    assert math.isclose(right.length(), 1.0, abs_tol=1e-9)
    assert math.isclose(up.dot(right), 0.0, abs_tol=1e-9)


def test_right_is_horizontal_without_roll():
    assert math.isclose(CameraTarget().right().y, 0.0, abs_tol=1e-9)


def test_smooth_follow_reaches_target_after_duration():
    target = CameraTarget(position=Vec3(3.0, 4.0, 5.0), scale=2.0)
    camera = CameraState()
    smooth_follow(camera, target, target.duration * 2)
    assert approx_eq(camera.position, target.position)
    assert math.isclose(camera.scale, target.scale)
    assert math.isclose(abs(camera.rotation.dot(target.quat())), 1.0, abs_tol=1e-6)


def test_smooth_follow_with_no_time_stays_put():
    target = CameraTarget(position=Vec3(3.0, 4.0, 5.0), scale=2.0)
    camera = CameraState()
    smooth_follow(camera, target, 0.0)
    assert camera.position == Vec3.ZERO
    assert camera.scale == 1.0


def test_smooth_follow_moves_partway():
    target = CameraTarget(position=Vec3(10.0, 0.0, 0.0))
    camera = CameraState()
    smooth_follow(camera, target, target.duration / 2)
    assert 0.0 < camera.position.x < target.position.x


def test_mouse_pan_vertical_moves_along_up():
    target = CameraTarget()
    up = target.up()
    mouse_pan(target, CameraControls(), Vec2(0.0, 2.0), Vec2(16.0, 16.0), Vec2(16.0, 16.0))
    assert approx_eq(target.position, up * 2.0)


def test_mouse_pan_opposite_moves_cancel():
    target = CameraTarget()
    controls = CameraControls()
    mouse_pan(target, controls, Vec2(5.0, -3.0), Vec2(16.0, 9.0), Vec2(800.0, 450.0))
    mouse_pan(target, controls, Vec2(-5.0, 3.0), Vec2(16.0, 9.0), Vec2(800.0, 450.0))
    assert approx_eq(target.position, Vec3.ZERO)


def test_mouse_rotate_changes_yaw():
    target = CameraTarget()
    mouse_rotate(target, CameraControls(rotate_sensitivity=1.0), Vec2(10.0, 0.0))
    assert target.rotation.x == 45.0 - 10.0


def test_mouse_rotate_wraps_yaw():
    target = CameraTarget()
    mouse_rotate(target, CameraControls(rotate_sensitivity=1.0), Vec2(-1000.0, 0.0))
    assert -360.0 < target.rotation.x < 360.0


@pytest.mark.parametrize("dy, limit", [(1000.0, MIN_PITCH), (-1000.0, MAX_PITCH)])
def test_mouse_rotate_clamps_pitch(dy, limit):
    target = CameraTarget()
    mouse_rotate(target, CameraControls(), Vec2(0.0, dy))
    assert target.rotation.y == limit


def test_mouse_zoom_round_trip():
    target = CameraTarget()
    controls = CameraControls()
    mouse_zoom(target, controls, 1.0)
    assert target.scale < 1.0
    mouse_zoom(target, controls, -1.0)
    assert math.isclose(target.scale, 1.0)


@pytest.mark.parametrize("wheel, limit", [(100.0, MIN_ZOOM), (-100.0, MAX_ZOOM)])
def test_mouse_zoom_clamps(wheel, limit):
    target = CameraTarget()
    mouse_zoom(target, CameraControls(), wheel)
    assert target.scale == limit


def test_keyboard_rotate_without_keys_does_nothing():
    target = CameraTarget()
    assert keyboard_rotate(target, False, False) is False
    assert target.rotation.x == 45.0


def test_keyboard_rotate_both_keys_cancel():
    target = CameraTarget()
    assert keyboard_rotate(target, True, True) is False
    assert target.rotation.x == 45.0


def test_keyboard_rotate_round_trip():
    target = CameraTarget()
    assert keyboard_rotate(target, False, True) is True
    assert target.rotation.x == 90.0
    keyboard_rotate(target, True, False)
    assert target.rotation.x == 45.0


@pytest.mark.parametrize("half_step, angle", [(False, 45.0), (True, 22.5)])
def test_keyboard_rotate_snaps_to_step(half_step, angle):
    target = CameraTarget(rotation=Vec3(50.0, -45.0, 0.0))
    keyboard_rotate(target, False, True, half_step)
    assert math.isclose(math.fmod(target.rotation.x, angle), 0.0, abs_tol=1e-9)
    assert -360.0 < target.rotation.x < 360.0