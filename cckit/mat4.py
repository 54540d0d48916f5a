"""4x4 matrix stored column-major."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable

from cckit.constants import EPSILON
from cckit.mat3 import Mat3
from cckit.vectors import Vec3, Vec4

_SIZE = 4
_SINGULAR_TOLERANCE = 1e-10


def _check_index(index: int) -> int:
    if not isinstance(index, int) or not 0 <= index < _SIZE:
        raise IndexError(f"matrix index out of range: {index!r}")
    return index


class Mat4:
    """A 4x4 matrix.

    Constructor arguments are given in row order; storage is column-major.
    With no arguments the identity matrix is built.
    """

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: float) -> None:
        if not args:
            self._data = [1.0 if r == c else 0.0 for c in range(_SIZE) for r in range(_SIZE)]
            return
        if len(args) != 16:
            raise TypeError(f"Mat4 takes 0 or 16 values, got {len(args)}")
        values = [float(a) for a in args]
        self._data = [values[r * _SIZE + c] for c in range(_SIZE) for r in range(_SIZE)]

    @classmethod
    def identity(cls) -> Mat4:
        return cls()

    @classmethod
    def zero(cls) -> Mat4:
        return cls(*([0.0] * 16))

    @classmethod
    def from_column_major(cls, values: Iterable[float]) -> Mat4:
        data = [float(v) for v in values]
        if len(data) != 16:
            raise ValueError(f"expected 16 values, got {len(data)}")
        m = cls()
        m._data = data
        return m

    @classmethod
    def from_mat3(cls, m: Mat3) -> Mat4:
        """Embed a 3x3 matrix in the upper-left corner of an identity matrix."""
        result = cls()
        for r in range(3):
            for c in range(3):
                result._data[c * _SIZE + r] = m[r, c]
        return result

    @classmethod
    def from_translation(cls, v: Vec3) -> Mat4:
        return cls(
            1.0, 0.0, 0.0, v.x,
            0.0, 1.0, 0.0, v.y,
            0.0, 0.0, 1.0, v.z,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def from_rotation(cls, angle: float, axis: Vec3) -> Mat4:
        """Rotation by ``angle`` radians about ``axis`` (normalized first)."""
        c = math.cos(angle)
        s = math.sin(angle)
        ax, ay, az = axis.normalized()
        k = 1.0 - c
        return cls(
            c + k * ax * ax, k * ax * ay - s * az, k * ax * az + s * ay, 0.0,
            k * ay * ax + s * az, c + k * ay * ay, k * ay * az - s * ax, 0.0,
            k * az * ax - s * ay, k * az * ay + s * ax, c + k * az * az, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    @classmethod
    def from_scale(cls, v: Vec3) -> Mat4:
        return cls(
            v.x, 0.0, 0.0, 0.0,
            0.0, v.y, 0.0, 0.0,
            0.0, 0.0, v.z, 0.0,
            0.0, 0.0, 0.0, 1.0,
        )

    def __getitem__(self, key):
        """m[row, col] gives an element; m[row] gives a row tuple."""
        if isinstance(key, tuple):
            row, col = key
            return self._data[_check_index(col) * _SIZE + _check_index(row)]
        return self._row(_check_index(key))

    def _row(self, r: int) -> tuple[float, float, float, float]:
        return tuple(self._data[c * _SIZE + r] for c in range(_SIZE))  # type: ignore[return-value]

    def _col(self, c: int) -> tuple[float, float, float, float]:
        start = c * _SIZE
        return tuple(self._data[start:start + _SIZE])  # type: ignore[return-value]

    def __mul__(self, other):
        if isinstance(other, Mat4):
            rows = [self._row(r) for r in range(_SIZE)]
            return Mat4.from_column_major(
                sum(a * b for a, b in zip(row, other._col(c)))
                for c in range(_SIZE)
                for row in rows
            )
        if isinstance(other, Vec4):
            x, y, z, w = (
                sum(a * b for a, b in zip(self._row(r), other)) for r in range(_SIZE)
            )
            return Vec4(x, y, z, w)
        if isinstance(other, Real):
            return Mat4.from_column_major(v * other for v in self._data)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Mat4:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Mat4.from_column_major(v * scalar for v in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return all(abs(a - b) <= EPSILON for a, b in zip(self._data, other._data))

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for r in range(_SIZE) for v in self._row(r))
        return f"Mat4({values})"

    def column_major(self) -> tuple[float, ...]:
        return tuple(self._data)

    def transpose(self) -> Mat4:
        return Mat4(*(v for c in range(_SIZE) for v in self._col(c)))

    def _minors(self):
        (a00, a01, a02, a03), (a10, a11, a12, a13), (a20, a21, a22, a23), (a30, a31, a32, a33) = (
            self._row(r) for r in range(_SIZE)
        )
        s = (
            a00 * a11 - a10 * a01,
            a00 * a12 - a10 * a02,
            a00 * a13 - a10 * a03,
            a01 * a12 - a11 * a02,
            a01 * a13 - a11 * a03,
            a02 * a13 - a12 * a03,
        )
        c = (
            a20 * a31 - a30 * a21,
            a20 * a32 - a30 * a22,
            a20 * a33 - a30 * a23,
            a21 * a32 - a31 * a22,
            a21 * a33 - a31 * a23,
            a22 * a33 - a32 * a23,
        )
        return s, c

    def determinant(self) -> float:
        s, c = self._minors()
        return s[0] * c[5] - s[1] * c[4] + s[2] * c[3] + s[3] * c[2] - s[4] * c[1] + s[5] * c[0]

    def inverse(self) -> Mat4:
        """Inverse matrix.

        Raises ValueError when the matrix is singular.
        """
        s, c = self._minors()
        det = s[0] * c[5] - s[1] * c[4] + s[2] * c[3] + s[3] * c[2] - s[4] * c[1] + s[5] * c[0]
        if abs(det) < _SINGULAR_TOLERANCE:
            raise ValueError("matrix is singular and cannot be inverted")
        inv = 1.0 / det
        (a00, a01, a02, a03), (a10, a11, a12, a13), (a20, a21, a22, a23), (a30, a31, a32, a33) = (
            self._row(r) for r in range(_SIZE)
        )
        return Mat4(
            (a11 * c[5] - a12 * c[4] + a13 * c[3]) * inv,
            (-a01 * c[5] + a02 * c[4] - a03 * c[3]) * inv,
            (a31 * s[5] - a32 * s[4] + a33 * s[3]) * inv,
            (-a21 * s[5] + a22 * s[4] - a23 * s[3]) * inv,
            (-a10 * c[5] + a12 * c[2] - a13 * c[1]) * inv,
            (a00 * c[5] - a02 * c[2] + a03 * c[1]) * inv,
            (-a30 * s[5] + a32 * s[2] - a33 * s[1]) * inv,
            (a20 * s[5] - a22 * s[2] + a23 * s[1]) * inv,
            (a10 * c[4] - a11 * c[2] + a13 * c[0]) * inv,
            (-a00 * c[4] + a01 * c[2] - a03 * c[0]) * inv,
            (a30 * s[4] - a31 * s[2] + a33 * s[0]) * inv,
            (-a20 * s[4] + a21 * s[2] - a23 * s[0]) * inv,
            (-a10 * c[3] + a11 * c[1] - a12 * c[0]) * inv,
            (a00 * c[3] - a01 * c[1] + a02 * c[0]) * inv,
            (-a30 * s[3] + a31 * s[1] - a32 * s[0]) * inv,
            (a20 * s[3] - a21 * s[1] + a22 * s[0]) * inv,
        )

    def transform_vec3(self, v: Vec3) -> Vec3:
        """Transform a point (w = 1), dividing by the resulting w when needed."""
        x, y, z, w = self * Vec4(v.x, v.y, v.z, 1.0)
        if w != 0.0 and w != 1.0:
            return Vec3(x / w, y / w, z / w)
        return Vec3(x, y, z)