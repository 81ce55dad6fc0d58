[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pronto_raster"
version = "0.1.0"
description = "In-memory rasters, lazy raster views, distance transforms, patch delineation and circular moving-window indicators"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "raster",
    "gis",
    "moving window",
    "distance transform",
    "landscape metrics",
    "patches",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["pronto_raster"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
