"""Binary PPM (P6) and 24-bit BMP encoders."""

from __future__ import annotations

import os
import struct
from pathlib import Path
from typing import Iterable, Sequence

Color = Sequence[int]

_FILE_HEADER = struct.Struct("<2sIHHI")
_INFO_HEADER = struct.Struct("<IiiHHIIiiII")
_BI_RGB = 0


def _checked(width: int, height: int, pixels: Iterable[Color]) -> list[Color]:
    if width <= 0 or height <= 0:
        raise ValueError("image dimensions must be positive")
    pixels = list(pixels)
    if len(pixels) != width * height:
        raise ValueError(
            f"expected {width * height} pixels for {width}x{height}, got {len(pixels)}"
        )
    if any(len(pixel) != 3 for pixel in pixels):
        raise ValueError("every pixel needs three channels")
    return pixels


def encode_ppm(width: int, height: int, pixels: Iterable[Color]) -> bytes:
    """Encode row-major RGB pixels, top row first, as a binary PPM."""
    pixels = _checked(width, height, pixels)
    header = f"P6\n{width} {height}\n255\n".encode("ascii")
    return header + bytes(channel for pixel in pixels for channel in pixel)


def encode_bmp(width: int, height: int, pixels: Iterable[Color]) -> bytes:
    """Encode row-major RGB pixels, top row first, as an uncompressed 24-bit BMP."""
    pixels = _checked(width, height, pixels)
    row_pitch = (width * 3 + 3) & ~3
    padding = bytes(row_pitch - width * 3)
    rows = [pixels[y * width:(y + 1) * width] for y in range(height)]
    body = b"".join(
        bytes(channel for r, g, b in row for channel in (b, g, r)) + padding
        for row in reversed(rows)
    )
    offset = _FILE_HEADER.size + _INFO_HEADER.size
    file_header = _FILE_HEADER.pack(b"BM", offset + len(body), 0, 0, offset)
    info_header = _INFO_HEADER.pack(
        _INFO_HEADER.size, width, height, 1, 24, _BI_RGB, 0, 0, 0, 0, 0
    )
    return file_header + info_header + body


def write_ppm(
    path: str | os.PathLike[str], width: int, height: int, pixels: Iterable[Color]
) -> None:
    Path(path).write_bytes(encode_ppm(width, height, pixels))


def write_bmp(
    path: str | os.PathLike[str], width: int, height: int, pixels: Iterable[Color]
) -> None:
    Path(path).write_bytes(encode_bmp(width, height, pixels))