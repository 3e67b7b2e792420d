[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "geodesy"
version = "0.1.0"
description = "Coordinate tuples, coordinate sets and context providers for geodetic computations"
requires-python = ">=3.10"
dependencies = []
keywords = ["geodesy", "coordinates", "gis", "coordinate-set", "context"]
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
packages = ["geodesy"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
