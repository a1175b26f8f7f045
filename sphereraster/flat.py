"""Flat shading: one colour per triangle, lit at its centroid."""

from __future__ import annotations

from typing import Sequence

from .lighting import RenderSetup, face_towards, shade, to_display_color
from .raster import Color, FrameBuffer, covered_pixels
from .scene import SphereMesh
from .vecmath import Vec3


def triangle_color(world_vertices: Sequence[Vec3], setup: RenderSetup) -> Color:
    """Display colour of a world-space triangle, lit at its centroid."""
    a, b, c = world_vertices
    normal = (b - a).cross(c - a).normalized()
    centroid = (a + b + c) / 3.0
    normal = face_towards(normal, setup.eye_pos, centroid)
    linear = shade(centroid, normal, setup.material, setup.light_pos, setup.eye_pos)
    return to_display_color(linear)


def render_flat(mesh: SphereMesh, setup: RenderSetup) -> FrameBuffer:
    """Rasterise the mesh with one colour per triangle and a depth buffer."""
    frame = FrameBuffer(setup.width, setup.height)
    for index in range(len(mesh.triangles)):
        vertices = mesh.triangle(index)
        color = triangle_color([setup.world(v) for v in vertices], setup)
        a, b, c = (setup.clip(v).perspective_divide() for v in vertices)
        for x, y, (w0, w1, w2) in covered_pixels(a, b, c, setup.width, setup.height):
            z = w0 * a.z + w1 * b.z + w2 * c.z
            if frame.depth_test(x, y, z):
                frame.set(x, y, z, color)
    return frame