"""3x3 matrix stored column-major."""

from __future__ import annotations

import math
from numbers import Real
from typing import Iterable

from cckit.constants import EPSILON
from cckit.vectors import Vec2, Vec3

_SIZE = 3


def _approx_equal(a: float, b: float, tol: float = EPSILON) -> bool:
    return abs(a - b) <= tol


def _check_index(index: int) -> int:
    if not isinstance(index, int) or not 0 <= index < _SIZE:
        raise IndexError(f"matrix index out of range: {index!r}")
    return index


class Mat3:
    """A 3x3 matrix.

    Constructor arguments are given in row order; storage is column-major.
    With no arguments the identity matrix is built.
    """

    __slots__ = ("_data",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: float) -> None:
        if not args:
            self._data = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
            return
        if len(args) != 9:
            raise TypeError(f"Mat3 takes 0 or 9 values, got {len(args)}")
        m00, m01, m02, m10, m11, m12, m20, m21, m22 = (float(a) for a in args)
        self._data = [m00, m10, m20, m01, m11, m21, m02, m12, m22]

    @classmethod
    def identity(cls) -> Mat3:
        return cls()

    @classmethod
    def zero(cls) -> Mat3:
        return cls(*([0.0] * 9))

    @classmethod
    def from_column_major(cls, values: Iterable[float]) -> Mat3:
        data = [float(v) for v in values]
        if len(data) != 9:
            raise ValueError(f"expected 9 values, got {len(data)}")
        m = cls()
        m._data = data
        return m

    @classmethod
    def from_rotation(cls, angle: float) -> Mat3:
        c = math.cos(angle)
        s = math.sin(angle)
        return cls(c, -s, 0.0, s, c, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_scale(cls, scale: Vec2) -> Mat3:
        return cls(scale.x, 0.0, 0.0, 0.0, scale.y, 0.0, 0.0, 0.0, 1.0)

    @classmethod
    def from_translation(cls, translation: Vec2) -> Mat3:
        return cls(1.0, 0.0, translation.x, 0.0, 1.0, translation.y, 0.0, 0.0, 1.0)

    def __getitem__(self, key):
        """m[row, col] gives an element; m[row] gives a row tuple."""
        if isinstance(key, tuple):
            row, col = key
            return self._data[_check_index(col) * _SIZE + _check_index(row)]
        return self.row(key)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        row, col = key
        self._data[_check_index(col) * _SIZE + _check_index(row)] = float(value)

    def __add__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3.from_column_major(a + b for a, b in zip(self._data, other._data))

    def __sub__(self, other: Mat3) -> Mat3:
        if not isinstance(other, Mat3):
            return NotImplemented
        return Mat3.from_column_major(a - b for a, b in zip(self._data, other._data))

    def __mul__(self, other):
        if isinstance(other, Mat3):
            result = Mat3.zero()
            for r in range(_SIZE):
                row = self.row(r)
                for c in range(_SIZE):
                    result[r, c] = sum(a * b for a, b in zip(row, other.col(c)))
            return result
        if isinstance(other, Vec3):
            return self.transform_vector(other)
        if isinstance(other, Real):
            return Mat3.from_column_major(v * other for v in self._data)
        return NotImplemented

    def __rmul__(self, scalar: float) -> Mat3:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Mat3.from_column_major(v * scalar for v in self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3):
            return NotImplemented
        return all(_approx_equal(a, b) for a, b in zip(self._data, other._data))

    def __str__(self) -> str:
        return "\n".join(
            "[ " + ", ".join(f"{v:.6f}" for v in self.row(r)) + " ]" for r in range(_SIZE)
        )

    def __repr__(self) -> str:
        values = ", ".join(repr(v) for r in range(_SIZE) for v in self.row(r))
        return f"Mat3({values})"

    def column_major(self) -> tuple[float, ...]:
        return tuple(self._data)

    def row(self, index: int) -> tuple[float, float, float]:
        r = _check_index(index)
        return (self._data[r], self._data[_SIZE + r], self._data[2 * _SIZE + r])

    def col(self, index: int) -> tuple[float, float, float]:
        start = _check_index(index) * _SIZE
        return tuple(self._data[start:start + _SIZE])  # type: ignore[return-value]

    def transform_vector(self, v: Vec3) -> Vec3:
        x, y, z = (a * v.x + b * v.y + c * v.z for a, b, c in map(self.row, range(_SIZE)))
        return Vec3(x, y, z)

    def transpose(self) -> Mat3:
        return Mat3(*self.col(0), *self.col(1), *self.col(2))

    def determinant(self) -> float:
        (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = map(self.row, range(_SIZE))
        return (
            a00 * (a11 * a22 - a21 * a12)
            - a10 * (a01 * a22 - a21 * a02)
            + a20 * (a01 * a12 - a11 * a02)
        )

    def inverse(self) -> Mat3:
        """Inverse matrix; a singular matrix yields the identity."""
        det = self.determinant()
        if abs(det) <= EPSILON:
            return Mat3.identity()
        inv = 1.0 / det
        (a00, a01, a02), (a10, a11, a12), (a20, a21, a22) = map(self.row, range(_SIZE))
        return Mat3(
            (a11 * a22 - a12 * a21) * inv,
            -(a01 * a22 - a02 * a21) * inv,
            (a01 * a12 - a02 * a11) * inv,
            -(a10 * a22 - a12 * a20) * inv,
            (a00 * a22 - a02 * a20) * inv,
            -(a00 * a12 - a02 * a10) * inv,
            (a10 * a21 - a11 * a20) * inv,
            -(a00 * a21 - a01 * a20) * inv,
            (a00 * a11 - a01 * a10) * inv,
        )