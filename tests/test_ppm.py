import pytest

from aideckimg.ppm import (
    PPMError,
    PPMHeader,
    format_ppm_header,
    parse_ppm_header,
    read_image,
    write_image,
)


def test_format_header_bytes():
    assert format_ppm_header(324, 244) == b"P5\n324 244\n255\n"


def test_format_header_negative_raises():
    with pytest.raises(ValueError):
        format_ppm_header(-1, 4)


@pytest.mark.parametrize("width,height", [(1, 1), (28, 28), (324, 244), (640, 480)])
def test_header_round_trip(width, height):
    header = format_ppm_header(width, height)
    parsed = parse_ppm_header(header + b"\x00" * 8)
    assert parsed == PPMHeader(width, height, False, len(header))


def test_parse_rgb_header():
    data = b"P6\n4 3\n255\n" + b"\x00" * 36
    parsed = parse_ppm_header(data)
    assert parsed.is_rgb is True
    assert (parsed.width, parsed.height) == (4, 3)


def test_parse_skips_comment_after_magic():
    header = b"P5\n# a comment line\n4 3\n255\n"
    parsed = parse_ppm_header(header)
    assert (parsed.width, parsed.height) == (4, 3)
    assert parsed.header_size == len(header)


def test_parse_bad_magic():
    with pytest.raises(PPMError):
        parse_ppm_header(b"P2\n4 3\n255\n")


def test_parse_unsupported_max_value():
    with pytest.raises(PPMError):
        parse_ppm_header(b"P5\n4 3\n65535\n")


def test_parse_truncated_header():
    with pytest.raises(PPMError):
        parse_ppm_header(b"P5\n4 ")


def test_write_read_round_trip(tmp_path):
    path = tmp_path / "img.ppm"
    pixels = bytes(i % 256 for i in range(20 * 15))
    written = write_image(path, 20, 15, pixels)
    assert written == len(pixels)
    assert read_image(path) == (20, 15, pixels)


def test_written_file_starts_with_header(tmp_path):
    path = tmp_path / "img.ppm"
    write_image(path, 5, 2, bytes(10))
    data = path.read_bytes()
    assert data.startswith(format_ppm_header(5, 2))
    assert len(data) == len(format_ppm_header(5, 2)) + 10


def test_write_uses_only_needed_pixels(tmp_path):
    path = tmp_path / "img.ppm"
    assert write_image(path, 2, 2, bytes(range(8))) == 4
    assert read_image(path) == (2, 2, bytes(range(4)))


def test_write_too_few_pixels(tmp_path):
    with pytest.raises(ValueError):
        write_image(tmp_path / "img.ppm", 4, 4, bytes(3))


def test_read_rgb_rejected(tmp_path):
    path = tmp_path / "color.ppm"
    path.write_bytes(b"P6\n2 2\n255\n" + bytes(12))
    with pytest.raises(PPMError):
        read_image(path)


def test_read_short_pixel_data(tmp_path):
    path = tmp_path / "short.ppm"
    path.write_bytes(format_ppm_header(4, 4) + bytes(5))
    with pytest.raises(PPMError):
        read_image(path)