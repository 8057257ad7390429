"""Reading and writing of 8-bit PPM/PGM images (P5 gray, P6 color headers)."""

from __future__ import annotations

import os
from dataclasses import dataclass

_MAGIC_GRAY = b"P5\n"
_MAGIC_RGB = b"P6\n"
_MAX_VALUE = 255
_HEADER_READ_SIZE = 256


class PPMError(ValueError):
    """Raised when a PPM file or header cannot be understood."""


@dataclass(frozen=True)
class PPMHeader:
    """Dimensions and layout of a PPM image header."""

    width: int
    height: int
    is_rgb: bool
    header_size: int


def _is_digit(byte: int) -> bool:
    return 0x30 <= byte <= 0x39


def _skip_comments(data: bytes, pos: int) -> int:
    while pos < len(data) and data[pos] == ord("#"):
        end = data.find(b"\n", pos)
        if end < 0:
            raise PPMError("unterminated comment in header")
        pos = end + 1
    return pos


def _read_number(data: bytes, pos: int) -> tuple[int, int]:
    pos = _skip_comments(data, pos)
    while pos < len(data) and not _is_digit(data[pos]):
        pos += 1
    if pos >= len(data):
        raise PPMError("truncated header")
    start = pos
    while pos < len(data) and _is_digit(data[pos]):
        pos += 1
    return int(data[start:pos]), pos


def parse_ppm_header(data: bytes) -> PPMHeader:
    """Parse the header at the start of ``data``.

    Only headers with a maximum value of 255 are accepted.
    """
    data = bytes(data)
    if data[:3] == _MAGIC_GRAY:
        is_rgb = False
    elif data[:3] == _MAGIC_RGB:
        is_rgb = True
    else:
        raise PPMError("not a P5 or P6 image")

    pos = len(_MAGIC_GRAY)
    width, pos = _read_number(data, pos)
    height, pos = _read_number(data, pos)
    max_value, pos = _read_number(data, pos)
    if max_value != _MAX_VALUE:
        raise PPMError(f"unsupported maximum value {max_value}")
    end = data.find(b"\n", pos)
    if end < 0:
        raise PPMError("truncated header")
    return PPMHeader(width, height, is_rgb, end + 1)


def format_ppm_header(width: int, height: int) -> bytes:
    """Return the header of a gray-level (P5) image of the given size."""
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    return b"%s%d %d\n%d\n" % (_MAGIC_GRAY, width, height, _MAX_VALUE)


def read_image(path: str | os.PathLike[str]) -> tuple[int, int, bytes]:
    """Load a gray-level image and return ``(width, height, pixels)``."""
    with open(path, "rb") as stream:
        data = stream.read()
    header = parse_ppm_header(data[:_HEADER_READ_SIZE])
    if header.is_rgb:
        raise PPMError("only gray levels supported, found RGB")
    size = header.width * header.height
    pixels = data[header.header_size:header.header_size + size]
    if len(pixels) != size:
        raise PPMError(f"expected {size} bytes but got {len(pixels)}")
    return header.width, header.height, pixels


def write_image(
    path: str | os.PathLike[str], width: int, height: int, pixels: bytes
) -> int:
    """Write a gray-level image and return the number of pixel bytes written."""
    size = width * height
    pixels = bytes(pixels)
    if len(pixels) < size:
        raise ValueError(f"need {size} pixels, got {len(pixels)}")
    header = format_ppm_header(width, height)
    with open(path, "wb") as stream:
        stream.write(header)
        return stream.write(pixels[:size])