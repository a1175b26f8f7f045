"""Gouraud shading: lighting per vertex, colours interpolated per pixel."""

from __future__ import annotations

from .lighting import RenderSetup, face_towards, shade, to_display_color
from .raster import FrameBuffer, covered_pixels
from .scene import SphereMesh
from .vecmath import Vec3, Vec4


def vertex_colors(mesh: SphereMesh, setup: RenderSetup) -> tuple[Vec3, ...]:
    """Linear RGB lighting of every mesh vertex, in vertex order."""
    colors = []
    for vertex in mesh.vertices:
        position = setup.world(vertex)
        normal = face_towards(vertex.normalized(), setup.eye_pos, position)
        colors.append(
            shade(position, normal, setup.material, setup.light_pos, setup.eye_pos)
        )
    return tuple(colors)


def _perspective_weights(
    weights: tuple[float, float, float], clip: tuple[Vec4, Vec4, Vec4]
) -> tuple[float, float, float]:
    scaled = [w / p.w for w, p in zip(weights, clip)]
    total = sum(scaled)
    return scaled[0] / total, scaled[1] / total, scaled[2] / total


def render_gouraud(mesh: SphereMesh, setup: RenderSetup) -> FrameBuffer:
    """Rasterise the mesh with perspective-correct interpolated vertex colours."""
    colors = vertex_colors(mesh, setup)
    frame = FrameBuffer(setup.width, setup.height)
    for corners in mesh.triangles:
        clip = tuple(setup.clip(mesh.vertices[i]) for i in corners)
        a, b, c = (p.perspective_divide() for p in clip)
        ca, cb, cc = (colors[i] for i in corners)
        for x, y, weights in covered_pixels(a, b, c, setup.width, setup.height):
            w0, w1, w2 = _perspective_weights(weights, clip)
            z = w0 * a.z + w1 * b.z + w2 * c.z
            if not frame.depth_test(x, y, z):
                continue
            linear = ca * w0 + cb * w1 + cc * w2
            frame.set(x, y, z, to_display_color(linear))
    return frame