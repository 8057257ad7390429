"""Simple gray-level image manipulations: resize, crop and binarize."""

from __future__ import annotations

import argparse
import sys

from .ppm import PPMError, read_image, write_image


def resize_image(
    image: bytes, width: int, height: int, factor: int
) -> tuple[bytes, int, int]:
    """Shrink an image by ``factor`` using a box average away from the borders.

    Returns ``(pixels, new_width, new_height)``. Pixels near the border are
    sampled directly instead of averaged.
    """
    if factor < 2:
        raise ValueError("resize factor must be at least 2")
    if len(image) < width * height:
        raise ValueError("image is smaller than width * height")
    new_width = width // factor
    new_height = height // factor
    half = factor // 2
    out = bytearray(new_width * new_height)

    for y in range(0, height, factor):
        row = y // factor
        if row >= new_height:
            break
        for x in range(0, width, factor):
            col = x // factor
            if col >= new_width:
                break
            inside = half < y < height - half and half < x < width - half
            if inside:
                window = [
                    image[(y + n) * width + x + m]
                    for n in range(-half, half)
                    for m in range(-half, half)
                ]
                out[row * new_width + col] = sum(window) // len(window)
            else:
                out[row * new_width + col] = image[y * width + x]
    return bytes(out), new_width, new_height


def crop_image(
    image: bytes,
    width: int,
    height: int,
    crop_width: int,
    crop_height: int,
    crop_x: int,
    crop_y: int,
) -> bytes:
    """Return the ``crop_width`` x ``crop_height`` region at ``(crop_x, crop_y)``."""
    if min(crop_width, crop_height, crop_x, crop_y) < 0:
        raise ValueError("crop geometry must not be negative")
    if crop_x + crop_width > width or crop_y + crop_height > height:
        raise ValueError("crop should not be bigger than the original image")
    return b"".join(
        image[y * width + crop_x:y * width + crop_x + crop_width]
        for y in range(crop_y, crop_y + crop_height)
    )


def binary_image(image: bytes, threshold: int) -> bytes:
    """Map pixels below ``threshold`` to 255 and all others to 0."""
    return bytes(255 if pixel < threshold else 0 for pixel in image)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Resize, crop and binarize a gray-level PPM image."
    )
    parser.add_argument("input", nargs="?", default="../../../img.ppm")
    parser.add_argument("output", nargs="?", default="../../../img_out.ppm")
    parser.add_argument("--width", type=int, default=324)
    parser.add_argument("--height", type=int, default=244)
    parser.add_argument("--factor", type=int, default=6)
    parser.add_argument("--crop-width", type=int, default=28)
    parser.add_argument("--crop-height", type=int, default=28)
    parser.add_argument("--crop-x", type=int, default=15)
    parser.add_argument("--crop-y", type=int, default=1)
    parser.add_argument("--threshold", type=int, default=25)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Run the resize, crop, binarize pipeline on an image file."""
    args = _parse_args(argv)

    try:
        width, height, pixels = read_image(args.input)
    except (OSError, PPMError) as exc:
        print(f"Failed to load image {args.input}: {exc}", file=sys.stderr)
        return 1
    if (width, height) != (args.width, args.height):
        print(
            f"Dimension mismatch for {args.input}: expects "
            f"[{args.width}x{args.height}], got [{width}x{height}]",
            file=sys.stderr,
        )
        return 1
    print(f"Image {args.input}, [W: {width}, H: {height}], Gray, loaded")

    resized, new_width, new_height = resize_image(
        pixels, width, height, args.factor
    )
    print("Image made smaller")

    if args.crop_width > new_width or args.crop_height > new_height:
        print("crop should not be bigger than original image!", file=sys.stderr)
        return 1
    try:
        cropped = crop_image(
            resized,
            new_width,
            new_height,
            args.crop_width,
            args.crop_height,
            args.crop_x,
            args.crop_y,
        )
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print("Image cropped")

    binary = binary_image(cropped, args.threshold)
    print("Image binarized")

    write_image(args.output, args.crop_width, args.crop_height, binary)
    return 0


if __name__ == "__main__":
    sys.exit(main())