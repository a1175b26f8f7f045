"""Command line entry point: render the lit sphere to PPM and BMP files."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Callable, Sequence

from .flat import render_flat
from .gouraud import render_gouraud
from .imagefile import write_bmp, write_ppm
from .lighting import RenderSetup
from .phong import render_phong
from .raster import FrameBuffer
from .scene import SphereMesh, create_sphere

_RENDERERS: dict[str, Callable[[SphereMesh, RenderSetup], FrameBuffer]] = {
    "flat": render_flat,
    "gouraud": render_gouraud,
    "phong": render_phong,
}


def render(mode: str = "phong", width: int = 512, height: int = 512) -> FrameBuffer:
    """Render the default sphere scene with the named shading mode."""
    try:
        renderer = _RENDERERS[mode]
    except KeyError:
        raise ValueError(
            f"unknown shading mode {mode!r}; choose from {', '.join(_RENDERERS)}"
        ) from None
    return renderer(create_sphere(), RenderSetup.default(width, height))


def _open_with_viewer(path: Path) -> None:
    if sys.platform == "win32":
        os.startfile(path)  # type: ignore[attr-defined]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="sphereraster",
        description="Rasterise a shaded sphere and save it as PPM and BMP.",
    )
    parser.add_argument(
        "mode", nargs="?", default="phong", choices=sorted(_RENDERERS)
    )
    parser.add_argument("--width", type=int, default=512)
    parser.add_argument("--height", type=int, default=512)
    parser.add_argument("--output-dir", type=Path, default=Path("."))
    parser.add_argument(
        "--open", action="store_true", help="open the BMP in the default viewer"
    )
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("width and height must be positive")

    frame = render(args.mode, args.width, args.height)
    pixels = list(frame)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    ppm_path = args.output_dir / f"{args.mode}_output.ppm"
    bmp_path = args.output_dir / f"{args.mode}_output.bmp"
    write_ppm(ppm_path, frame.width, frame.height, pixels)
    write_bmp(bmp_path, frame.width, frame.height, pixels)
    if args.open:
        _open_with_viewer(bmp_path)
    return 0


if __name__ == "__main__":
    sys.exit(main())