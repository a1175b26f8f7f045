"""Triangle coverage tests and a colour/depth frame buffer."""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Protocol

from .vecmath import Vec3

Color = tuple[int, int, int]


class _Point2(Protocol):
    x: float
    y: float


def edge(a: _Point2, b: _Point2, c: _Point2) -> float:
    """Signed 2-D edge function of point c against the line a -> b."""
    return (c.x - a.x) * (b.y - a.y) - (c.y - a.y) * (b.x - a.x)


def inside_triangle(p: _Point2, a: _Point2, b: _Point2, c: _Point2) -> bool:
    """True when p lies inside or on the triangle, for either winding."""
    weights = (edge(b, c, p), edge(c, a, p), edge(a, b, p))
    return all(w >= 0 for w in weights) or all(w <= 0 for w in weights)


def bounding_box(
    points: Iterable[_Point2], width: int, height: int
) -> tuple[int, int, int, int]:
    """Return (xmin, xmax, ymin, ymax), truncated and clipped to the image."""
    points = list(points)
    xs = [int(p.x) for p in points]
    ys = [int(p.y) for p in points]
    return (
        max(0, min(xs)),
        min(width - 1, max(xs)),
        max(0, min(ys)),
        min(height - 1, max(ys)),
    )


def covered_pixels(
    a: _Point2, b: _Point2, c: _Point2, width: int, height: int
) -> Iterator[tuple[int, int, tuple[float, float, float]]]:
    """Yield (x, y, barycentric weights) for pixel centres inside the triangle.

    Degenerate triangles cover nothing.
    """
    denom = edge(b, c, a)
    if denom == 0:
        return
    xmin, xmax, ymin, ymax = bounding_box((a, b, c), width, height)
    for y in range(ymin, ymax + 1):
        for x in range(xmin, xmax + 1):
            p = Vec3(x + 0.5, y + 0.5, 0.0)
            if not inside_triangle(p, a, b, c):
                continue
            w0 = edge(b, c, p) / denom
            w1 = edge(c, a, p) / denom
            yield x, y, (w0, w1, 1.0 - w0 - w1)


class FrameBuffer:
    """Row-major colour and depth storage; iterating yields colours in order."""

    def __init__(self, width: int, height: int, background: Color = (0, 0, 0)):
        if width <= 0 or height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.width = width
        self.height = height
        self._colors: list[Color] = [background] * (width * height)
        self._depth: list[float] = [math.inf] * (width * height)

    def _index(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return y * self.width + x

    def depth_test(self, x: int, y: int, z: float) -> bool:
        """True when z is nearer than the depth stored at (x, y)."""
        return z < self._depth[self._index(x, y)]

    def set(self, x: int, y: int, z: float, color: Color) -> None:
        """Store depth and colour at (x, y)."""
        index = self._index(x, y)
        self._depth[index] = z
        self._colors[index] = tuple(color)

    def pixel(self, x: int, y: int) -> Color:
        return self._colors[self._index(x, y)]

    def __iter__(self) -> Iterator[Color]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)