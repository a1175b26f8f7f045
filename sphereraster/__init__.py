"""Pure-Python rasterization of a lit sphere with flat, Gouraud and Phong shading, saved as PPM and BMP."""

__version__ = "0.1.0"
__all__ = [
    "vecmath",
    "scene",
    "raster",
    "imagefile",
    "lighting",
    "flat",
    "gouraud",
    "phong",
    "cli",
]