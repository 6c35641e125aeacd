"""Small vector, quaternion and bounding-box types used by the voxel engine."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Iterator, Optional, Union

Scalar = Union[int, float]


class EulerRot(Enum):
    """Order in which Euler angles are applied (intrinsic rotations)."""

    XYZ = "XYZ"
    XZY = "XZY"
    YXZ = "YXZ"
    YZX = "YZX"
    ZXY = "ZXY"
    ZYX = "ZYX"


@dataclass(frozen=True)
class Vec2:
    """A two-component float vector."""

    x: float = 0.0
    y: float = 0.0

    ZERO: ClassVar[Vec2]
    ONE: ClassVar[Vec2]

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        return Vec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vec2:
        return Vec2(-self.x, -self.y)

    def __mul__(self, other: Union[Vec2, Scalar]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x * other.x, self.y * other.y)
        return Vec2(self.x * other, self.y * other)

    def __rmul__(self, other: Scalar) -> Vec2:
        return Vec2(self.x * other, self.y * other)

    def __truediv__(self, other: Union[Vec2, Scalar]) -> Vec2:
        if isinstance(other, Vec2):
            return Vec2(self.x / other.x, self.y / other.y)
        return Vec2(self.x / other, self.y / other)


Vec2.ZERO = Vec2(0.0, 0.0)
Vec2.ONE = Vec2(1.0, 1.0)


@dataclass(frozen=True)
class Vec3:
    """A three-component float vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    ZERO: ClassVar[Vec3]
    ONE: ClassVar[Vec3]
    X: ClassVar[Vec3]
    Y: ClassVar[Vec3]
    Z: ClassVar[Vec3]
    NEG_X: ClassVar[Vec3]
    NEG_Y: ClassVar[Vec3]
    NEG_Z: ClassVar[Vec3]

    @classmethod
    def splat(cls, value: float) -> Vec3:
        """A vector with every component set to ``value``."""
        return cls(value, value, value)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, other: Union[Vec3, Scalar]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other: Scalar) -> Vec3:
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __truediv__(self, other: Union[Vec3, Scalar]) -> Vec3:
        if isinstance(other, Vec3):
            return Vec3(self.x / other.x, self.y / other.y, self.z / other.z)
        return Vec3(self.x / other, self.y / other, self.z / other)

    def dot(self, other: Vec3) -> float:
        """The dot product of two vectors."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """The cross product of two vectors."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        """The Euclidean length of the vector."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Vec3:
        """A unit vector pointing the same way; raises ValueError for zero."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize vector {self!r}")
        return self / length

    def lerp(self, other: Vec3, t: float) -> Vec3:
        """Linear interpolation from this vector towards ``other``."""
        return self + (other - self) * t


Vec3.ZERO = Vec3(0.0, 0.0, 0.0)
Vec3.ONE = Vec3(1.0, 1.0, 1.0)
Vec3.X = Vec3(1.0, 0.0, 0.0)
Vec3.Y = Vec3(0.0, 1.0, 0.0)
Vec3.Z = Vec3(0.0, 0.0, 1.0)
Vec3.NEG_X = Vec3(-1.0, 0.0, 0.0)
Vec3.NEG_Y = Vec3(0.0, -1.0, 0.0)
Vec3.NEG_Z = Vec3(0.0, 0.0, -1.0)

_SLERP_DOT_THRESHOLD = 1.0 - 1.1920929e-07


@dataclass(frozen=True)
class Quat:
    """A rotation quaternion stored as (x, y, z, w)."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    @classmethod
    def identity(cls) -> Quat:
        """The quaternion that performs no rotation."""
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def _from_axis(cls, axis: str, angle: float) -> Quat:
        s = math.sin(angle * 0.5)
        c = math.cos(angle * 0.5)
        if axis == "X":
            return cls(s, 0.0, 0.0, c)
        if axis == "Y":
            return cls(0.0, s, 0.0, c)
        return cls(0.0, 0.0, s, c)

    @classmethod
    def from_euler(cls, order: EulerRot, a: float, b: float, c: float) -> Quat:
        """Build a rotation from three angles in radians, applied in ``order``."""
        result = cls.identity()
        for axis, angle in zip(order.value, (a, b, c)):
            result = result * cls._from_axis(axis, angle)
        return result

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __add__(self, other: Quat) -> Quat:
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def _scaled(self, factor: float) -> Quat:
        return Quat(self.x * factor, self.y * factor, self.z * factor, self.w * factor)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return self.rotate(other)
        if isinstance(other, Quat):
            return Quat(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        return NotImplemented

    def dot(self, other: Quat) -> float:
        """The four-dimensional dot product."""
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def length(self) -> float:
        """The norm of the quaternion."""
        return math.sqrt(self.dot(self))

    def normalize(self) -> Quat:
        """A unit-length copy of this quaternion; raises ValueError for zero."""
        length = self.length()
        if length == 0.0 or not math.isfinite(length):
            raise ValueError(f"cannot normalize quaternion {self!r}")
        return self._scaled(1.0 / length)

    def rotate(self, v: Vec3) -> Vec3:
        """Rotate a vector by this quaternion."""
        axis = Vec3(self.x, self.y, self.z)
        t = axis.cross(v) * 2.0
        return v + t * self.w + axis.cross(t)

    def slerp(self, other: Quat, t: float) -> Quat:
        """Spherical interpolation along the shortest arc towards ``other``."""
        end = other
        dot = self.dot(end)
        if dot < 0.0:
            end = -end
            dot = -dot
        if dot > _SLERP_DOT_THRESHOLD:
            return (self._scaled(1.0 - t) + end._scaled(t)).normalize()
        theta = math.acos(min(1.0, dot))
        scale1 = math.sin(theta * (1.0 - t))
        scale2 = math.sin(theta * t)
        return (self._scaled(scale1) + end._scaled(scale2))._scaled(1.0 / math.sin(theta))


@dataclass(frozen=True)
class Aabb3d:
    """An axis-aligned bounding box."""

    min: Vec3
    max: Vec3

    @classmethod
    def from_points(cls, points: Iterable[Vec3]) -> Aabb3d:
        """The smallest box holding every point; raises ValueError when empty."""
        iterator = iter(points)
        try:
            first = next(iterator)
        except StopIteration:
            raise ValueError("cannot build a bounding box from no points") from None
        lo = [first.x, first.y, first.z]
        hi = list(lo)
        for point in iterator:
            for axis, value in enumerate(point):
                lo[axis] = min(lo[axis], value)
                hi[axis] = max(hi[axis], value)
        return cls(Vec3(*lo), Vec3(*hi))

    def translated(self, offset: Vec3) -> Aabb3d:
        """This box moved by ``offset``."""
        return Aabb3d(self.min + offset, self.max + offset)

    def ray_intersection(
        self, origin: Vec3, direction: Vec3, max_distance: float
    ) -> Optional[float]:
        """Distance along the ray at which it enters this box, if within reach.

        The direction is normalised first; a ray starting inside the box hits
        at distance zero.
        """
        direction = direction.normalize()
        t_min = 0.0
        t_max = max_distance
        for o, d, lo, hi in zip(origin, direction, self.min, self.max):
            if d == 0.0:
                if o < lo or o > hi:
                    return None
                continue
            near, far = (lo, hi) if d > 0.0 else (hi, lo)
            t_min = max(t_min, (near - o) / d)
            t_max = min(t_max, (far - o) / d)
        return t_min if t_min <= t_max else None