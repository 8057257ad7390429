[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aideckimg"
version = "0.1.0"
description = "Grayscale PPM image tools, image manipulations and Bayer demosaicking kernels for small camera frames"
requires-python = ">=3.10"
dependencies = []
keywords = ["ppm", "pgm", "image", "demosaicking", "bayer", "camera", "grayscale"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aideckimg-manipulate = "aideckimg.manipulate:main"

[tool.hatch.build.targets.wheel]
packages = ["aideckimg"]

[tool.hatch.build.targets.sdist]
include = ["aideckimg", "tests", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
