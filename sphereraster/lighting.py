"""Phong reflection model, material and the fixed camera/light setup."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .raster import Color
from .vecmath import Mat4, Vec3, Vec4, clamp, perspective, scale, translate, viewport

GAMMA = 2.2


@dataclass(frozen=True)
class Material:
    """Reflection coefficients of a surface."""

    ambient: Vec3 = Vec3(0.0, 1.0, 0.0)
    diffuse: Vec3 = Vec3(0.0, 0.5, 0.0)
    specular: Vec3 = Vec3(0.5, 0.5, 0.5)
    ambient_intensity: float = 0.2
    shininess: float = 32.0


@dataclass(frozen=True)
class RenderSetup:
    """Image size, transforms, material and light of one render."""

    width: int
    height: int
    model: Mat4
    camera: Mat4
    material: Material = field(default_factory=Material)
    light_pos: Vec3 = Vec3(-4.0, 4.0, -3.0)
    eye_pos: Vec3 = Vec3(0.0, 0.0, 0.0)

    @staticmethod
    def default(width: int = 512, height: int = 512) -> RenderSetup:
        """The sphere scaled by 2 and placed 7 units in front of the eye."""
        model = translate(0, 0, -7) @ scale(2, 2, 2)
        view = Mat4.identity()
        projection = perspective(-0.1, 0.1, -0.1, 0.1, -0.1, -1000.0)
        camera = viewport(width, height) @ projection @ view @ model
        return RenderSetup(width=width, height=height, model=model, camera=camera)

    def world(self, point: Vec3) -> Vec3:
        """Model-space point in world space."""
        return self.model.transform_point(point).xyz()

    def clip(self, point: Vec3) -> Vec4:
        """Model-space point in homogeneous screen space, before the divide."""
        return self.camera.transform_point(point)


def face_towards(normal: Vec3, eye_pos: Vec3, position: Vec3) -> Vec3:
    """Flip the normal if it points away from the eye."""
    if normal.dot(eye_pos - position) < 0.0:
        return -normal
    return normal


def shade(
    position: Vec3,
    normal: Vec3,
    material: Material,
    light_pos: Vec3,
    eye_pos: Vec3,
) -> Vec3:
    """Linear RGB from ambient, diffuse and specular terms at one point."""
    to_light = (light_pos - position).normalized()
    n_dot_l = normal.dot(to_light)
    diffuse = max(0.0, n_dot_l)
    reflected = (-to_light + normal * (2.0 * n_dot_l)).normalized()
    to_eye = (eye_pos - position).normalized()
    specular = max(0.0, reflected.dot(to_eye)) ** material.shininess
    return (
        material.ambient * material.ambient_intensity
        + material.diffuse * diffuse
        + material.specular * specular
    )


def _channel(value: float) -> int:
    corrected = clamp(clamp(value) ** (1.0 / GAMMA))
    return int(math.floor(corrected * 255.0 + 0.5))


def to_display_color(linear: Vec3) -> Color:
    """Clamp, gamma-correct and quantise a linear colour to 8-bit RGB."""
    return (_channel(linear.x), _channel(linear.y), _channel(linear.z))