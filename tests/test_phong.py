import pytest

from sphereraster.gouraud import render_gouraud
from sphereraster.lighting import RenderSetup
from sphereraster.phong import render_phong, vertex_attributes
from sphereraster.scene import create_sphere

SIZE = 32


@pytest.fixture(scope="module")
def mesh():
    return create_sphere()


@pytest.fixture(scope="module")
def setup():
    return RenderSetup.default(SIZE, SIZE)


@pytest.fixture(scope="module")
def frame(mesh, setup):
    return render_phong(mesh, setup)


def test_vertex_attributes_one_per_vertex(mesh, setup):
    positions, normals = vertex_attributes(mesh, setup)
    assert len(positions) == len(mesh.vertices)
    assert len(normals) == len(mesh.vertices)


def test_vertex_normals_are_unit_and_face_eye(mesh, setup):
    positions, normals = vertex_attributes(mesh, setup)
    for position, normal in zip(positions, normals):
        assert normal.length() == pytest.approx(1.0)
        assert normal.dot(setup.eye_pos - position) >= 0.0


def test_vertex_positions_are_world_space(mesh, setup):
    positions, _ = vertex_attributes(mesh, setup)
    for vertex, position in zip(mesh.vertices, positions):
        assert position.x == pytest.approx(2 * vertex.x)
        assert position.z == pytest.approx(2 * vertex.z - 7)


def test_frame_dimensions(frame):
    assert frame.width == SIZE
    assert frame.height == SIZE
    assert len(frame) == SIZE * SIZE


def test_corner_is_background(frame):
    assert frame.pixel(0, 0) == (0, 0, 0)


def test_centre_is_lit_green(frame):
    r, g, b = frame.pixel(SIZE // 2, SIZE // 2)
    assert g > 0
    assert g >= r


def test_colors_have_equal_red_and_blue(frame):
    for r, g, b in frame:
        assert r == b
        assert g >= r


def test_coverage_matches_gouraud(mesh, setup, frame):
    other = render_gouraud(mesh, setup)
    lit_phong = {i for i, c in enumerate(frame) if c != (0, 0, 0)}
    lit_gouraud = {i for i, c in enumerate(other) if c != (0, 0, 0)}
    assert lit_phong == lit_gouraud
    assert lit_phong