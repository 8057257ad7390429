# aideckimg

Small image-processing tools for 8-bit grayscale camera frames. The package
uses only the standard library. It provides:

- **PPM I/O** (`aideckimg.ppm`): reads and writes binary grayscale (`P5`)
  images, and parses and builds their headers.
- **Manipulations** (`aideckimg.manipulate`): downscaling by block averages,
  cropping and threshold binarisation, plus a command that chains the three.
- **Kernels** (`aideckimg.kernels`): Bayer demosaicking to gray or RGB, and
  pixel inversion. Each has a variant that splits the work across worker
  threads.

## Installation

```
pip install .
```

To install the test extra and run the tests:

```
pip install .[test]
pytest
```

## Reading and writing images

```python
from aideckimg.ppm import read_image, write_image, parse_ppm_header, format_ppm_header, PPMError

header = parse_ppm_header(format_ppm_header(324, 244))
# PPMHeader(width=324, height=244, is_rgb=False, header_size=...)

try:
    width, height, pixels = read_image("img.ppm")
except PPMError as exc:
    print(f"could not load image: {exc}")
```

`parse_ppm_header` accepts `P5` and `P6` headers whose maximum value is 255,
skips `#` comment lines and returns a `PPMHeader`. It raises `PPMError` for
any other header. `read_image` loads only grayscale (`P5`) files. It raises
`PPMError` for a colour image or when there are too few pixel bytes.
`write_image(path, width, height, pixels)` writes a `P5` header and then the
first `width * height` pixel bytes. It returns the number of pixel bytes
written.

## Manipulating images

```python
from aideckimg.manipulate import resize_image, crop_image, binary_image

small, w, h = resize_image(pixels, 324, 244, 6)   # shrink by a factor of 6
patch = crop_image(small, w, h, 28, 28, 15, 1)    # 28x28 window at (15, 1)
mask = binary_image(patch, 25)                    # below 25 -> 255, else 0
```

`resize_image` needs a factor of at least 2. Pixels near the border are
sampled directly and are not averaged. `crop_image` raises `ValueError` if the
window does not fit in the image.

The `aideckimg-manipulate` command runs these steps on a PPM file and writes
the result as a new PPM file:

```
aideckimg-manipulate input.ppm output.ppm --width 324 --height 244 \
    --factor 6 --crop-width 28 --crop-height 28 --crop-x 15 --crop-y 1 --threshold 25
```

The values shown are the defaults. The command checks that the input matches
`--width` and `--height`, and on a failure it exits with status 1.

## Demosaicking and inverting

```python
from aideckimg.kernels import OutputMode, demosaick, invert, demosaick_parallel, invert_parallel, worker_span

gray = demosaick(raw, 324, 244, OutputMode.GRAY)
rgb = demosaick_parallel(raw, 324, 244, OutputMode.RGB, workers=8)
negative = invert_parallel(raw, workers=4)
```

`demosaick` rebuilds an image from a raw RGGB Bayer frame. Border pixels are
set to zero. `OutputMode.RGB` gives three bytes per pixel. `OutputMode.GRAY`
gives the integer mean of the three channels. `OutputMode.GRAY_WEIGHTED`
gives `0.33` of each channel, truncated. `invert` maps every pixel `p` to
`255 - p`. The `*_parallel` variants return the same bytes as the
single-threaded versions. They share rows (or pixels) out between `workers`
threads, 8 by default. `worker_span(total, workers, worker_id)` returns the
`range` that one worker handles. Each span is rounded up so the load stays
as even as possible.

## What this package does not do

The package works only on image data in memory and on PPM files. It does not
capture from a camera, encode or stream JPEG frames, or serve images over a
network.