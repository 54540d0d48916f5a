"""Quaternions for 3D rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

from cckit.constants import EPSILON, PI
from cckit.mat3 import Mat3
from cckit.mat4 import Mat4
from cckit.vectors import Vec3


@dataclass(frozen=True, eq=False)
class Quat:
    """A quaternion with vector part (x, y, z) and scalar part w."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 1.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    @classmethod
    def identity(cls) -> Quat:
        return cls(0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_axis_angle(cls, axis: Vec3, angle: float) -> Quat:
        half = angle * 0.5
        s = math.sin(half)
        return cls(axis.x * s, axis.y * s, axis.z * s, math.cos(half))

    @classmethod
    def from_euler(cls, pitch: float, yaw: float, roll: float) -> Quat:
        cy, sy = math.cos(yaw * 0.5), math.sin(yaw * 0.5)
        cp, sp = math.cos(pitch * 0.5), math.sin(pitch * 0.5)
        cr, sr = math.cos(roll * 0.5), math.sin(roll * 0.5)
        return cls(
            sr * cp * cy - cr * sp * sy,
            cr * sp * cy + sr * cp * sy,
            cr * cp * sy - sr * sp * cy,
            cr * cp * cy + sr * sp * sy,
        )

    @classmethod
    def from_rotation_matrix(cls, m) -> Quat:
        """Extract the rotation of a Mat3 or the upper-left 3x3 of a Mat4."""
        return cls(*_extract_rotation(m))

    def __mul__(self, other):
        if isinstance(other, Quat):
            return Quat(
                self.w * other.x + self.x * other.w + self.y * other.z - self.z * other.y,
                self.w * other.y - self.x * other.z + self.y * other.w + self.z * other.x,
                self.w * other.z + self.x * other.y - self.y * other.x + self.z * other.w,
                self.w * other.w - self.x * other.x - self.y * other.y - self.z * other.z,
            )
        if isinstance(other, Real):
            return Quat(self.x * other, self.y * other, self.z * other, self.w * other)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Quat:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quat(self.x * scalar, self.y * scalar, self.z * scalar, self.w * scalar)

    def __add__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x + other.x, self.y + other.y, self.z + other.z, self.w + other.w)

    def __sub__(self, other: Quat) -> Quat:
        if not isinstance(other, Quat):
            return NotImplemented
        return Quat(self.x - other.x, self.y - other.y, self.z - other.z, self.w - other.w)

    def __neg__(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, -self.w)

    def __truediv__(self, scalar: float) -> Quat:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Quat(self.x / scalar, self.y / scalar, self.z / scalar, self.w / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Quat):
            return NotImplemented
        return all(abs(a - b) <= EPSILON for a, b in zip(self, other))

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"({self.x:g}, {self.y:g}, {self.z:g}, {self.w:g})"

    def length_squared(self) -> float:
        return self.dot(self)

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> Quat:
        """Unit quaternion; a (near) zero quaternion yields the identity."""
        length = self.length()
        if length > EPSILON:
            return self / length
        return Quat.identity()

    def conjugate(self) -> Quat:
        return Quat(-self.x, -self.y, -self.z, self.w)

    def inverse(self) -> Quat:
        """Multiplicative inverse; a (near) zero quaternion yields the identity."""
        length_sq = self.length_squared()
        if length_sq > EPSILON:
            return self.conjugate() / length_sq
        return Quat.identity()

    def rotate(self, v: Vec3) -> Vec3:
        q = self.normalized()
        result = q * Quat(v.x, v.y, v.z, 0.0) * q.conjugate()
        return Vec3(result.x, result.y, result.z)

    def dot(self, other: Quat) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z + self.w * other.w

    def to_euler(self) -> Vec3:
        """Euler angles as Vec3(pitch, yaw, roll)."""
        q = self.normalized()
        roll = math.atan2(2.0 * (q.w * q.x + q.y * q.z), 1.0 - 2.0 * (q.x * q.x + q.y * q.y))
        sinp = 2.0 * (q.w * q.y - q.z * q.x)
        if abs(sinp) >= 1.0:
            pitch = math.copysign(PI / 2.0, sinp)
        else:
            pitch = math.asin(sinp)
        yaw = math.atan2(2.0 * (q.w * q.z + q.x * q.y), 1.0 - 2.0 * (q.y * q.y + q.z * q.z))
        return Vec3(pitch, yaw, roll)

    def to_mat4(self) -> Mat4:
        """Rotation matrix of this quaternion (assumed to be of unit length)."""
        x, y, z, w = self
        xx, yy, zz = x * x, y * y, z * z
        xy, xz, yz = x * y, x * z, y * z
        wx, wy, wz = w * x, w * y, w * z
        return Mat4(
            1.0 - 2.0 * (yy + zz), 2.0 * (xy - wz), 2.0 * (xz + wy), 0.0,
            2.0 * (xy + wz), 1.0 - 2.0 * (xx + zz), 2.0 * (yz - wx), 0.0,
            2.0 * (xz - wy), 2.0 * (yz + wx), 1.0 - 2.0 * (xx + yy), 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def slerp(cls, a: Quat, b: Quat, t: float) -> Quat:
        """Spherical interpolation along the shortest arc."""
        cos_theta = a.dot(b)
        if cos_theta < 0.0:
            cos_theta = -cos_theta
            b = -b
        if abs(1.0 - cos_theta) <= EPSILON:
            return cls.lerp(a, b, t).normalized()
        theta = math.acos(min(max(cos_theta, -1.0), 1.0))
        sin_theta = math.sin(theta)
        return (math.sin((1.0 - t) * theta) * a + math.sin(t * theta) * b) / sin_theta

    @classmethod
    def lerp(cls, a: Quat, b: Quat, t: float) -> Quat:
        return a + (b - a) * t


def _extract_rotation(m) -> tuple[float, float, float, float]:
    trace = m[0, 0] + m[1, 1] + m[2, 2]
    if trace > 0.0:
        s = math.sqrt(trace + 1.0) * 2.0
        return (
            (m[2, 1] - m[1, 2]) / s,
            (m[0, 2] - m[2, 0]) / s,
            (m[1, 0] - m[0, 1]) / s,
            0.25 * s,
        )
    if m[0, 0] > m[1, 1] and m[0, 0] > m[2, 2]:
        s = math.sqrt(1.0 + m[0, 0] - m[1, 1] - m[2, 2]) * 2.0
        return (
            0.25 * s,
            (m[0, 1] + m[1, 0]) / s,
            (m[0, 2] + m[2, 0]) / s,
            (m[2, 1] - m[1, 2]) / s,
        )
    if m[1, 1] > m[2, 2]:
        s = math.sqrt(1.0 + m[1, 1] - m[0, 0] - m[2, 2]) * 2.0
        return (
            (m[0, 1] + m[1, 0]) / s,
            0.25 * s,
            (m[1, 2] + m[2, 1]) / s,
            (m[0, 2] - m[2, 0]) / s,
        )
    s = math.sqrt(1.0 + m[2, 2] - m[0, 0] - m[1, 1]) * 2.0
    return (
        (m[0, 2] + m[2, 0]) / s,
        (m[1, 2] + m[2, 1]) / s,
        0.25 * s,
        (m[1, 0] - m[0, 1]) / s,
    )


def from_mat4(m: Mat4) -> Quat:
    """Quaternion for the rotation held in a 4x4 matrix."""
    return Quat(*_extract_rotation(m))


def from_mat3(m: Mat3) -> Quat:
    """Quaternion for the rotation held in a 3x3 matrix."""
    return from_mat4(Mat4.from_mat3(m))