"""Latitude/longitude tessellated unit sphere."""

from __future__ import annotations

import math
from dataclasses import dataclass

from .vecmath import Vec3

Triangle = tuple[int, int, int]


@dataclass(frozen=True)
class SphereMesh:
    """Vertex positions and index triples of a triangle mesh."""

    vertices: tuple[Vec3, ...]
    triangles: tuple[Triangle, ...]

    def triangle(self, index: int) -> tuple[Vec3, Vec3, Vec3]:
        """Return the three vertex positions of one triangle."""
        a, b, c = self.triangles[index]
        return self.vertices[a], self.vertices[b], self.vertices[c]


def _ring_point(theta: float, phi: float) -> Vec3:
    return Vec3(
        math.sin(theta) * math.cos(phi),
        math.cos(theta),
        -math.sin(theta) * math.sin(phi),
    )


def create_sphere(width: int = 32, height: int = 16) -> SphereMesh:
    """Build a unit sphere from height - 2 rings of width vertices plus two poles."""
    if width < 2 or height < 3:
        raise ValueError("sphere needs width >= 2 and height >= 3")

    vertices = [
        _ring_point(j / (height - 1) * math.pi, i / (width - 1) * 2 * math.pi)
        for j in range(1, height - 1)
        for i in range(width)
    ]
    vertices.append(Vec3(0.0, 1.0, 0.0))
    vertices.append(Vec3(0.0, -1.0, 0.0))

    north = (height - 2) * width
    south = north + 1
    last_ring = (height - 3) * width

    triangles: list[Triangle] = []
    for j in range(height - 3):
        for i in range(width - 1):
            here = j * width + i
            below = here + width
            triangles.append((here, below + 1, here + 1))
            triangles.append((here, below, below + 1))
    for i in range(width - 1):
        triangles.append((north, i, i + 1))
        triangles.append((south, last_ring + i + 1, last_ring + i))

    return SphereMesh(tuple(vertices), tuple(triangles))