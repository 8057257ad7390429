"""Grayscale PPM I/O, image manipulations and Bayer demosaicking kernels."""

__version__ = "0.1.0"
__all__ = ["kernels", "manipulate", "ppm"]