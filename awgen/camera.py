"""The orthographic camera: its target, controls and smoothing."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Optional

from awgen.geometry.linalg import EulerRot, Quat, Vec2, Vec3

CAMERA_CLIP_DIST = 500.0
"""Distance from the camera to the clipping plane, in both directions."""

BASE_ZOOM = 16.0
"""Visible height of the view at zoom level one."""

MIN_ZOOM = 4.0 / BASE_ZOOM
"""Smallest zoom level."""

MAX_ZOOM = 256.0 / BASE_ZOOM
"""Largest zoom level."""

MIN_PITCH = -80.0
"""Lowest camera pitch, in degrees."""

MAX_PITCH = -22.5
"""Highest camera pitch, in degrees."""

_ZOOM_STEP = 1.25
_SNAP_ANGLE = 45.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def _round_half_away(value: float) -> float:
    return math.copysign(math.floor(abs(value) + 0.5), value)


@dataclass
class CameraTarget:
    """Where the camera is heading: position, Euler rotation in degrees and zoom.

    ``rotation`` holds yaw, pitch and roll; ``scale`` is the zoom level.
    """

    duration: float = 0.05
    rotation: Vec3 = field(default_factory=lambda: Vec3(45.0, -45.0, 0.0))
    position: Vec3 = Vec3.ZERO
    scale: float = 1.0

    def quat(self) -> Quat:
        """The rotation of the target as a quaternion."""
        return Quat.from_euler(
            EulerRot.YXZ,
            math.radians(self.rotation.x),
            math.radians(self.rotation.y),
            math.radians(self.rotation.z),
        )

    def up(self) -> Vec3:
        """The target's up vector."""
        return self.quat() * Vec3.Y

    def right(self) -> Vec3:
        """The target's right vector."""
        return self.quat() * Vec3.X


@dataclass
class CameraControls:
    """Sensitivities of the camera's mouse controls."""

    pan_sensitivity: float = 1.0
    rotate_sensitivity: float = 0.25
    zoom_sensitivity: float = 1.0


@dataclass
class CameraState:
    """The camera's current position, rotation and orthographic scale."""

    position: Vec3 = Vec3.ZERO
    rotation: Quat = field(default_factory=Quat.identity)
    scale: float = 1.0


def smooth_follow(camera: CameraState, target: CameraTarget, delta_seconds: float) -> None:
    """Move ``camera`` part of the way towards ``target`` for one frame."""
    delta = _clamp(delta_seconds / target.duration, 0.0, 1.0)
    camera.position = camera.position.lerp(target.position, delta)
    camera.rotation = camera.rotation.slerp(target.quat(), delta)
    camera.scale = camera.scale * (target.scale / camera.scale) ** delta


def mouse_pan(
    target: CameraTarget,
    controls: CameraControls,
    delta: Vec2,
    area_size: Vec2,
    viewport_size: Optional[Vec2] = None,
) -> None:
    """Drag the target by a mouse movement given in viewport pixels.

    ``area_size`` is the world-space size of the visible area; a missing
    viewport size counts as one by one.
    """
    viewport = viewport_size if viewport_size is not None else Vec2.ONE
    moved = delta * area_size / viewport * controls.pan_sensitivity
    target.position = target.position + target.up() * moved.y + target.right() * -moved.x


def mouse_rotate(target: CameraTarget, controls: CameraControls, delta: Vec2) -> None:
    """Turn the target by a mouse movement; pitch stays within its limits."""
    moved = delta * controls.rotate_sensitivity
    target.rotation = replace(
        target.rotation,
        x=math.fmod(target.rotation.x - moved.x, 360.0),
        y=_clamp(target.rotation.y - moved.y, MIN_PITCH, MAX_PITCH),
    )


def mouse_zoom(target: CameraTarget, controls: CameraControls, wheel_delta: float) -> None:
    """Zoom the target by a scroll-wheel amount within the zoom limits."""
    amount = wheel_delta * controls.zoom_sensitivity
    target.scale = _clamp(target.scale * _ZOOM_STEP ** (-amount), MIN_ZOOM, MAX_ZOOM)


def keyboard_rotate(
    target: CameraTarget, rotate_left: bool, rotate_right: bool, half_step: bool = False
) -> bool:
    """Snap-rotate the target's yaw by one step; return whether it turned.

    A step is 45 degrees, or half that with ``half_step``. Pressing both
    directions together cancels out.
    """
    angle = _SNAP_ANGLE * (0.5 if half_step else 1.0)
    step = int(rotate_right) - int(rotate_left)
    if step == 0:
        return False
    yaw = target.rotation.x + step * angle
    yaw = _round_half_away(yaw / angle) * angle
    target.rotation = replace(target.rotation, x=math.fmod(yaw, 360.0))
    return True