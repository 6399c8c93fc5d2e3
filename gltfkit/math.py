"""Small vector, matrix and quaternion types for node transforms.

Matrices are stored column-major: ``Matrix4.x`` is the first column.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

__all__ = ["Vector3", "Vector4", "Matrix3", "Matrix4", "Quaternion"]


@dataclass(frozen=True, slots=True)
class Vector3:
    """A three-component vector."""

    x: float
    y: float
    z: float

    def magnitude(self) -> float:
        """Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector3:
        """Return the vector scaled to unit length."""
        return self * (1.0 / self.magnitude())

    def __mul__(self, s: float) -> Vector3:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector3(self.x * s, self.y * s, self.z * s)

    __rmul__ = __mul__

    def __iter__(self):
        yield from (self.x, self.y, self.z)


@dataclass(frozen=True, slots=True)
class Vector4:
    """A four-component vector."""

    x: float
    y: float
    z: float
    w: float

    def as_array(self) -> list[float]:
        """Return the components as ``[x, y, z, w]``."""
        return [self.x, self.y, self.z, self.w]

    @classmethod
    def from_array(cls, values: Iterable[float]) -> Vector4:
        """Build a vector from exactly four values."""
        x, y, z, w = values
        return cls(x, y, z, w)

    def __add__(self, other: Vector4) -> Vector4:
        if not isinstance(other, Vector4):
            return NotImplemented
        return Vector4(
            self.x + other.x,
            self.y + other.y,
            self.z + other.z,
            self.w + other.w,
        )

    def __mul__(self, s: float) -> Vector4:
        if not isinstance(s, (int, float)):
            return NotImplemented
        return Vector4(self.x * s, self.y * s, self.z * s, self.w * s)

    __rmul__ = __mul__

    def __iter__(self):
        yield from (self.x, self.y, self.z, self.w)


@dataclass(frozen=True, slots=True)
class Matrix3:
    """A 3x3 matrix of three column vectors."""

    x: Vector3
    y: Vector3
    z: Vector3

    @classmethod
    def from_columns(
        cls,
        c0r0: float, c0r1: float, c0r2: float,
        c1r0: float, c1r1: float, c1r2: float,
        c2r0: float, c2r1: float, c2r2: float,
    ) -> Matrix3:
        """Build a matrix from its elements, given column by column."""
        return cls(
            Vector3(c0r0, c0r1, c0r2),
            Vector3(c1r0, c1r1, c1r2),
            Vector3(c2r0, c2r1, c2r2),
        )

    def determinant(self) -> float:
        """Determinant of the matrix."""
        x, y, z = self.x, self.y, self.z
        return (
            x.x * (y.y * z.z - z.y * y.z)
            - y.x * (x.y * z.z - z.y * x.z)
            + z.x * (x.y * y.z - y.y * x.z)
        )

    def trace(self) -> float:
        """Sum of the diagonal elements."""
        return self.x.x + self.y.y + self.z.z


@dataclass(frozen=True, slots=True)
class Matrix4:
    """A 4x4 matrix of four column vectors."""

    x: Vector4
    y: Vector4
    z: Vector4
    w: Vector4

    @classmethod
    def from_array(cls, array: Sequence[Sequence[float]]) -> Matrix4:
        """Build a matrix from four columns of four values."""
        x, y, z, w = array
        return cls(
            Vector4.from_array(x),
            Vector4.from_array(y),
            Vector4.from_array(z),
            Vector4.from_array(w),
        )

    @classmethod
    def from_translation(cls, v: Vector3) -> Matrix4:
        """Homogeneous transformation matrix from a translation vector."""
        return cls(
            Vector4(1.0, 0.0, 0.0, 0.0),
            Vector4(0.0, 1.0, 0.0, 0.0),
            Vector4(0.0, 0.0, 1.0, 0.0),
            Vector4(v.x, v.y, v.z, 1.0),
        )

    @classmethod
    def from_nonuniform_scale(cls, x: float, y: float, z: float) -> Matrix4:
        """Homogeneous transformation matrix from per-axis scale factors."""
        return cls(
            Vector4(x, 0.0, 0.0, 0.0),
            Vector4(0.0, y, 0.0, 0.0),
            Vector4(0.0, 0.0, z, 0.0),
            Vector4(0.0, 0.0, 0.0, 1.0),
        )

    @classmethod
    def from_quaternion(cls, q: Quaternion) -> Matrix4:
        """Rotation matrix equivalent to the quaternion."""
        vx, vy, vz, s = q.v.x, q.v.y, q.v.z, q.s
        x2 = vx + vx
        y2 = vy + vy
        z2 = vz + vz

        xx2 = x2 * vx
        xy2 = x2 * vy
        xz2 = x2 * vz

        yy2 = y2 * vy
        yz2 = y2 * vz
        zz2 = z2 * vz

        sy2 = y2 * s
        sz2 = z2 * s
        sx2 = x2 * s

        return cls(
            Vector4(1.0 - yy2 - zz2, xy2 + sz2, xz2 - sy2, 0.0),
            Vector4(xy2 - sz2, 1.0 - xx2 - zz2, yz2 + sx2, 0.0),
            Vector4(xz2 + sy2, yz2 - sx2, 1.0 - xx2 - yy2, 0.0),
            Vector4(0.0, 0.0, 0.0, 1.0),
        )

    def as_array(self) -> list[list[float]]:
        """Return the columns as nested lists."""
        return [col.as_array() for col in self.columns()]

    def columns(self) -> tuple[Vector4, Vector4, Vector4, Vector4]:
        """The four column vectors in order."""
        return (self.x, self.y, self.z, self.w)

    def _transform(self, v: Vector4) -> Vector4:
        a, b, c, d = self.columns()
        return a * v.x + b * v.y + c * v.z + d * v.w

    def __matmul__(self, other: Matrix4) -> Matrix4:
        if not isinstance(other, Matrix4):
            return NotImplemented
        return Matrix4(*(self._transform(col) for col in other.columns()))


@dataclass(frozen=True, slots=True)
class Quaternion:
    """A quaternion with scalar part ``s`` and vector part ``v``."""

    s: float
    v: Vector3

    @classmethod
    def from_parts(cls, w: float, xi: float, yj: float, zk: float) -> Quaternion:
        """Build a quaternion from its scalar and vector components."""
        return cls(w, Vector3(xi, yj, zk))

    @classmethod
    def from_axis_angle(cls, axis: Vector3, radians: float) -> Quaternion:
        """Rotation of ``radians`` about a unit ``axis``."""
        half = 0.5 * radians
        return cls(math.cos(half), axis * math.sin(half))

    @classmethod
    def from_matrix(cls, m: Matrix3) -> Quaternion:
        """Quaternion equivalent to a rotation matrix."""
        trace = m.trace()
        if trace >= 0.0:
            s = math.sqrt(1.0 + trace)
            w = 0.5 * s
            s = 0.5 / s
            x = (m.y.z - m.z.y) * s
            y = (m.z.x - m.x.z) * s
            z = (m.x.y - m.y.x) * s
        elif m.x.x > m.y.y and m.x.x > m.z.z:
            s = math.sqrt((m.x.x - m.y.y - m.z.z) + 1.0)
            x = 0.5 * s
            s = 0.5 / s
            y = (m.y.x + m.x.y) * s
            z = (m.x.z + m.z.x) * s
            w = (m.y.z - m.z.y) * s
        elif m.y.y > m.z.z:
            s = math.sqrt((m.y.y - m.x.x - m.z.z) + 1.0)
            y = 0.5 * s
            s = 0.5 / s
            z = (m.z.y + m.y.z) * s
            x = (m.y.x + m.x.y) * s
            w = (m.z.x - m.x.z) * s
        else:
            s = math.sqrt((m.z.z - m.x.x - m.y.y) + 1.0)
            z = 0.5 * s
            s = 0.5 / s
            x = (m.x.z + m.z.x) * s
            y = (m.z.y + m.y.z) * s
            w = (m.x.y - m.y.x) * s
        return cls.from_parts(w, x, y, z)