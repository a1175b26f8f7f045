import pytest

from sphereraster.flat import render_flat
from sphereraster.gouraud import render_gouraud, vertex_colors
from sphereraster.lighting import RenderSetup
from sphereraster.scene import create_sphere

SIZE = 64


@pytest.fixture(scope="module")
def mesh():
    return create_sphere()


@pytest.fixture(scope="module")
def setup():
    return RenderSetup.default(SIZE, SIZE)


@pytest.fixture(scope="module")
def frame(mesh, setup):
    return render_gouraud(mesh, setup)


def test_vertex_colors_one_per_vertex(mesh, setup):
    assert len(vertex_colors(mesh, setup)) == len(mesh.vertices)


def test_vertex_colors_at_least_ambient(mesh, setup):
    material = setup.material
    ambient = material.ambient * material.ambient_intensity
    for color in vertex_colors(mesh, setup):
        assert color.y >= ambient.y - 1e-9
        assert color.x >= 0.0
        assert color.x == pytest.approx(color.z)


def test_render_covers_centre_not_corners(frame):
    assert frame.pixel(SIZE // 2, SIZE // 2) != (0, 0, 0)
    for x, y in [(0, 0), (SIZE - 1, 0), (0, SIZE - 1), (SIZE - 1, SIZE - 1)]:
        assert frame.pixel(x, y) == (0, 0, 0)


def test_pixels_are_greenish_grey(frame):
    lit = [color for color in frame if color != (0, 0, 0)]
    assert lit
    for r, g, b in lit:
        assert r == b
        assert g >= r


def test_coverage_matches_flat_shading(mesh, setup, frame):
    flat = render_flat(mesh, setup)
    gouraud_covered = [color != (0, 0, 0) for color in frame]
    flat_covered = [color != (0, 0, 0) for color in flat]
    assert gouraud_covered == flat_covered


def test_smooth_shading_has_more_colours_than_flat(mesh, setup, frame):
    flat = render_flat(mesh, setup)
    assert len(set(frame)) > len(set(flat))