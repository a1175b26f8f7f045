"""Small vector and 4x4 matrix toolkit used by the rasterizer."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vec3:
    """Immutable three-component vector."""

    x: float
    y: float
    z: float

    def __add__(self, other: Vec3) -> Vec3:
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return Vec3(-self.x, -self.y, -self.z)

    def __mul__(self, factor: float) -> Vec3:
        return Vec3(self.x * factor, self.y * factor, self.z * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Vec3:
        return Vec3(self.x / divisor, self.y / divisor, self.z / divisor)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return the unit vector in the same direction."""
        size = self.length()
        if size == 0:
            raise ValueError("cannot normalise a zero-length vector")
        return self / size


@dataclass(frozen=True)
class Vec4:
    """Immutable homogeneous four-component vector."""

    x: float
    y: float
    z: float
    w: float

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z
        yield self.w

    def xyz(self) -> Vec3:
        """Drop the w component."""
        return Vec3(self.x, self.y, self.z)

    def perspective_divide(self) -> Vec3:
        """Divide x, y and z by w."""
        return Vec3(self.x / self.w, self.y / self.w, self.z / self.w)


Row = tuple[float, float, float, float]


@dataclass(frozen=True)
class Mat4:
    """Immutable row-major 4x4 matrix."""

    rows: tuple[Row, Row, Row, Row]

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(value) for value in row) for row in self.rows)
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("a Mat4 needs exactly four rows of four values")
        object.__setattr__(self, "rows", rows)

    @staticmethod
    def identity() -> Mat4:
        return Mat4(
            tuple(
                tuple(1.0 if i == j else 0.0 for j in range(4)) for i in range(4)
            )
        )

    def __getitem__(self, key: tuple[int, int]) -> float:
        row, column = key
        return self.rows[row][column]

    def __matmul__(self, other: Mat4) -> Mat4:
        columns = list(zip(*other.rows))
        return Mat4(
            tuple(
                tuple(sum(a * b for a, b in zip(row, column)) for column in columns)
                for row in self.rows
            )
        )

    def transform(self, vector: Vec4) -> Vec4:
        """Multiply a homogeneous vector by this matrix."""
        x, y, z, w = (sum(a * b for a, b in zip(row, vector)) for row in self.rows)
        return Vec4(x, y, z, w)

    def transform_point(self, point: Vec3) -> Vec4:
        """Transform a point, taking w = 1."""
        return self.transform(Vec4(point.x, point.y, point.z, 1.0))


def clamp(value: float, lo: float = 0.0, hi: float = 1.0) -> float:
    """Limit value to the range [lo, hi]."""
    if value < lo:
        return lo
    if value > hi:
        return hi
    return value


def translate(tx: float, ty: float, tz: float) -> Mat4:
    return Mat4(
        (
            (1, 0, 0, tx),
            (0, 1, 0, ty),
            (0, 0, 1, tz),
            (0, 0, 0, 1),
        )
    )


def scale(sx: float, sy: float, sz: float) -> Mat4:
    return Mat4(
        (
            (sx, 0, 0, 0),
            (0, sy, 0, 0),
            (0, 0, sz, 0),
            (0, 0, 0, 1),
        )
    )


def perspective(
    left: float, right: float, bottom: float, top: float, near: float, far: float
) -> Mat4:
    """Perspective projection for the frustum given by its six planes."""
    if right == left or top == bottom or far == near:
        raise ValueError("degenerate view frustum")
    width = right - left
    height = top - bottom
    depth = far - near
    return Mat4(
        (
            (2 * near / width, 0, (right + left) / width, 0),
            (0, 2 * near / height, (top + bottom) / height, 0),
            (0, 0, -(far + near) / depth, -2 * far * near / depth),
            (0, 0, -1, 0),
        )
    )


def viewport(nx: int, ny: int) -> Mat4:
    """Map normalised device coordinates to an nx by ny pixel grid, y down."""
    return Mat4(
        (
            (nx / 2, 0, 0, (nx - 1) / 2),
            (0, -ny / 2, 0, (ny - 1) / 2),
            (0, 0, 0.5, 0.5),
            (0, 0, 0, 1),
        )
    )