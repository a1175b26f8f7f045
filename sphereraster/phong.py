"""Phong shading: normals and positions interpolated, lighting per pixel."""

from __future__ import annotations

from .lighting import RenderSetup, face_towards, shade, to_display_color
from .raster import FrameBuffer, covered_pixels
from .scene import SphereMesh
from .vecmath import Vec3, Vec4


def vertex_attributes(
    mesh: SphereMesh, setup: RenderSetup
) -> tuple[tuple[Vec3, ...], tuple[Vec3, ...]]:
    """World-space positions and eye-facing unit normals of every vertex."""
    positions = []
    normals = []
    for vertex in mesh.vertices:
        position = setup.world(vertex)
        positions.append(position)
        normals.append(face_towards(vertex.normalized(), setup.eye_pos, position))
    return tuple(positions), tuple(normals)


def _perspective_weights(
    weights: tuple[float, float, float], clip: tuple[Vec4, ...]
) -> tuple[float, float, float]:
    scaled = [w / p.w for w, p in zip(weights, clip)]
    total = sum(scaled)
    return scaled[0] / total, scaled[1] / total, scaled[2] / total


def render_phong(mesh: SphereMesh, setup: RenderSetup) -> FrameBuffer:
    """Rasterise the mesh, evaluating the lighting model at every pixel."""
    positions, normals = vertex_attributes(mesh, setup)
    frame = FrameBuffer(setup.width, setup.height)
    for corners in mesh.triangles:
        clip = tuple(setup.clip(mesh.vertices[i]) for i in corners)
        a, b, c = (p.perspective_divide() for p in clip)
        pa, pb, pc = (positions[i] for i in corners)
        na, nb, nc = (normals[i] for i in corners)
        for x, y, weights in covered_pixels(a, b, c, setup.width, setup.height):
            w0, w1, w2 = _perspective_weights(weights, clip)
            z = w0 * a.z + w1 * b.z + w2 * c.z
            if not frame.depth_test(x, y, z):
                continue
            position = pa * w0 + pb * w1 + pc * w2
            normal = (na * w0 + nb * w1 + nc * w2).normalized()
            linear = shade(
                position, normal, setup.material, setup.light_pos, setup.eye_pos
            )
            frame.set(x, y, z, to_display_color(linear))
    return frame