"""Image kernels for raw Bayer frames: demosaicking and inversion.

Both kernels come in a single-threaded form and in a form that splits the
work between several workers. Each worker handles one contiguous span,
rounded up so the load is spread as evenly as possible.
"""

from __future__ import annotations

import enum
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable


class OutputMode(enum.Enum):
    """Layout of the demosaicked output."""

    RGB = "rgb"
    """Three bytes per pixel: red, green, blue."""
    GRAY = "gray"
    """One byte per pixel: integer mean of the three channels."""
    GRAY_WEIGHTED = "gray-weighted"
    """One byte per pixel: 0.33 of each channel, truncated."""

    @property
    def channels(self) -> int:
        return 3 if self is OutputMode.RGB else 1


def _check_image(data: bytes, width: int, height: int) -> None:
    if width < 0 or height < 0:
        raise ValueError("image dimensions must not be negative")
    if len(data) < width * height:
        raise ValueError(
            f"need {width * height} bytes of input, got {len(data)}"
        )


def _check_workers(workers: int) -> None:
    if workers < 1:
        raise ValueError("at least one worker is required")


def worker_span(total: int, workers: int, worker_id: int) -> range:
    """Return the indices out of ``range(total)`` handled by ``worker_id``."""
    _check_workers(workers)
    if not 0 <= worker_id < workers:
        raise ValueError(f"worker id {worker_id} out of range for {workers} workers")
    if total < 0:
        raise ValueError("total must not be negative")
    per_worker = (total + workers - 1) // workers
    start = worker_id * per_worker
    end = min((worker_id + 1) * per_worker, total)
    return range(start, max(start, end))


def _bayer_pixel(data: bytes, width: int, x: int, y: int) -> tuple[int, int, int]:
    """Interpolate the (red, green, blue) values at an interior pixel."""
    up = (y - 1) * width
    row = y * width
    down = (y + 1) * width
    center = data[row + x]
    left = data[row + x - 1]
    right = data[row + x + 1]
    above = data[up + x]
    below = data[down + x]
    diagonal = (
        data[up + x - 1] + data[down + x - 1] + data[down + x + 1] + data[up + x + 1]
    ) // 4
    cross = (left + below + right + above) // 4

    odd_x, odd_y = x % 2, y % 2
    if not odd_x and not odd_y:
        return center, cross, diagonal
    if odd_x and not odd_y:
        return (left + right) // 2, center, (below + above) // 2
    if not odd_x and odd_y:
        return (below + above) // 2, center, (left + right) // 2
    return diagonal, cross, center


def _to_gray(red: int, green: int, blue: int, mode: OutputMode) -> int:
    if mode is OutputMode.GRAY_WEIGHTED:
        return int(0.33 * red + 0.33 * green + 0.33 * blue)
    return (red + green + blue) // 3


def _demosaick_rows(
    data: bytes,
    width: int,
    height: int,
    mode: OutputMode,
    rows: Iterable[int],
    out: bytearray,
) -> None:
    channels = mode.channels
    for y in rows:
        if y == 0 or y == height - 1:
            continue  # border rows stay zero
        for x in range(1, width - 1):
            red, green, blue = _bayer_pixel(data, width, x, y)
            idx = y * width + x
            if channels == 3:
                out[idx * 3:idx * 3 + 3] = bytes((red, green, blue))
            else:
                out[idx] = _to_gray(red, green, blue, mode)


def demosaick(
    data: bytes, width: int, height: int, mode: OutputMode = OutputMode.GRAY
) -> bytes:
    """Demosaick a raw RGGB Bayer frame; border pixels are set to zero."""
    mode = OutputMode(mode)
    _check_image(data, width, height)
    out = bytearray(width * height * mode.channels)
    _demosaick_rows(bytes(data), width, height, mode, range(height), out)
    return bytes(out)


def invert(data: bytes) -> bytes:
    """Return the photographic negative of 8-bit pixel data."""
    return bytes(255 - pixel for pixel in data)


def demosaick_parallel(
    data: bytes,
    width: int,
    height: int,
    mode: OutputMode = OutputMode.GRAY,
    workers: int = 8,
) -> bytes:
    """Demosaick with rows shared out between ``workers`` threads."""
    mode = OutputMode(mode)
    _check_image(data, width, height)
    _check_workers(workers)
    source = bytes(data)
    out = bytearray(width * height * mode.channels)
    spans = [worker_span(height, workers, wid) for wid in range(workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [
            pool.submit(_demosaick_rows, source, width, height, mode, span, out)
            for span in spans
        ]
        for future in futures:
            future.result()
    return bytes(out)


def invert_parallel(data: bytes, workers: int = 8) -> bytes:
    """Invert pixel data with the pixels shared out between ``workers`` threads."""
    _check_workers(workers)
    source = bytes(data)
    spans = [worker_span(len(source), workers, wid) for wid in range(workers)]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        parts = pool.map(lambda span: invert(source[span.start:span.stop]), spans)
        return b"".join(parts)