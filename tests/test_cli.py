import pytest

from sphereraster.cli import main, render
from sphereraster.lighting import RenderSetup
from sphereraster.phong import render_phong
from sphereraster.scene import create_sphere


def test_render_unknown_mode():
    with pytest.raises(ValueError):
        render("toon", 8, 8)


def test_render_dimensions():
    frame = render("flat", 16, 12)
    assert frame.width == 16
    assert frame.height == 12


def test_render_phong_matches_module():
    expected = render_phong(create_sphere(), RenderSetup.default(16, 16))
    assert list(render("phong", 16, 16)) == list(expected)


def test_main_writes_ppm_and_bmp(tmp_path):
    result = main(
        ["gouraud", "--width", "8", "--height", "8", "--output-dir", str(tmp_path)]
    )
    assert result == 0
    ppm = (tmp_path / "gouraud_output.ppm").read_bytes()
    header = b"P6\n8 8\n255\n"
    assert ppm.startswith(header)
    assert len(ppm) == len(header) + 8 * 8 * 3
    bmp = (tmp_path / "gouraud_output.bmp").read_bytes()
    assert bmp[:2] == b"BM"


def test_main_ppm_matches_render(tmp_path):
    main(["flat", "--width", "8", "--height", "8", "--output-dir", str(tmp_path)])
    ppm = (tmp_path / "flat_output.ppm").read_bytes()
    body = ppm[len(b"P6\n8 8\n255\n"):]
    expected = bytes(ch for pixel in render("flat", 8, 8) for ch in pixel)
    assert body == expected


def test_main_rejects_unknown_mode(tmp_path):
    with pytest.raises(SystemExit):
        main(["toon", "--output-dir", str(tmp_path)])


def test_main_rejects_non_positive_size(tmp_path):
    with pytest.raises(SystemExit):
        main(["flat", "--width", "0", "--output-dir", str(tmp_path)])