# sphereraster

A small pure-Python software rasterizer with no third-party dependencies.
It builds a latitude/longitude tessellated unit sphere. The sphere is scaled
by 2 and placed 7 units in front of an eye at the origin. The package
projects it with a perspective matrix and fills its triangles against a
depth buffer. It lights the result with the Phong reflection model: a green
ambient and diffuse material, white specular highlights with shininess 32,
and a point light at (-4, 4, -3). Gamma correction with γ = 2.2 is applied
to the final colours.

Three shading modes are available:

- **flat**: one colour per triangle, lit at the triangle's centroid.
- **gouraud**: lighting is evaluated per vertex. The colours are then
  interpolated across each triangle with perspective correction.
- **phong**: world position and normal are interpolated with perspective
  correction, and lighting is evaluated per pixel.

Each render is saved as a binary PPM (`P6`) image and as an uncompressed
24-bit BMP image.

## Installation

```
pip install .
```

## Command line

```
sphereraster [flat|gouraud|phong] [--width N] [--height N] [--output-dir DIR] [--open]
```

- `mode`: the shading mode. The default is `phong`.
- `--width`, `--height`: the image size in pixels. The default is 512 × 512.
  Both values must be positive.
- `--output-dir`: the directory that receives the images. It is created if
  it does not exist. The default is the current directory.
- `--open`: on Windows, opens the BMP in the default viewer. On other
  platforms this option does nothing.

The images are written as `<mode>_output.ppm` and `<mode>_output.bmp`.
For example, a plain `sphereraster` run writes `phong_output.ppm` and
`phong_output.bmp`.

Rendering is done in pure Python. A 512 × 512 image therefore takes a
noticeable amount of time. Use smaller sizes for quick previews.

## Library use

```python
from sphereraster.scene import create_sphere
from sphereraster.lighting import RenderSetup
from sphereraster.phong import render_phong
from sphereraster.imagefile import write_ppm, write_bmp

mesh = create_sphere(32, 16)
setup = RenderSetup.default(256, 256)
frame = render_phong(mesh, setup)

pixels = list(frame)
write_ppm("sphere.ppm", frame.width, frame.height, pixels)
write_bmp("sphere.bmp", frame.width, frame.height, pixels)
```

`render_flat` in `sphereraster.flat` and `render_gouraud` in
`sphereraster.gouraud` take the same arguments as `render_phong`. All three
functions return a `FrameBuffer`.

You can read a pixel with `FrameBuffer.pixel(x, y)`. It raises `IndexError`
for a position outside the image. Iterating over a `FrameBuffer` yields
`(r, g, b)` tuples in row-major order, starting with the top row.

`sphereraster.cli.render(mode, width, height)` renders the default scene in
one of the modes without going through the command line. An unknown mode
raises `ValueError`.

### Modules

- `sphereraster.vecmath` contains the basic math types and helpers:
  - `Vec3` and `Vec4`, which are immutable vectors.
  - `Mat4`, an immutable row-major 4×4 matrix. Matrices are multiplied with
    `a @ b`. Use `transform` or `transform_point` to apply a matrix to a
    vector.
  - `clamp`.
  - The matrix builders `translate`, `scale`, `perspective` and `viewport`.
- `sphereraster.scene` contains `create_sphere(width, height)`, which
  returns a `SphereMesh` of vertices and index triples.
- `sphereraster.raster` contains the rasterization helpers:
  - The edge function `edge`.
  - The coverage test `inside_triangle`.
  - `bounding_box`.
  - `covered_pixels`, which yields pixel centres and barycentric weights.
  - The colour and depth store `FrameBuffer`.
- `sphereraster.imagefile` contains `encode_ppm` and `encode_bmp`, which
  return bytes. It also contains `write_ppm` and `write_bmp`, which write
  those bytes to a file.
- `sphereraster.lighting` contains the lighting pieces:
  - `Material`.
  - `RenderSetup`, which holds the image size, transforms, material, light
    and eye.
  - `shade`, which computes the linear RGB colour at a point.
  - `face_towards`.
  - `to_display_color`, which clamps, gamma-corrects and quantises a colour
    to 8 bits.

## Limitations

The package renders only its built-in sphere. It does not load meshes or
scenes from files. It has no window or interactive display. Images are
only written to disk, and the `--open` option hands the BMP to a viewer on
Windows only.

## Tests

```
pip install .[test]
pytest
```