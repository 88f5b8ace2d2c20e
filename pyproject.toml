[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "firstbreak"
version = "0.1.0"
description = "Seismic first-break picking and survey parameter file handling"
requires-python = ">=3.10"
keywords = ["seismic", "first break", "geophysics", "static correction", "neural network", "p190"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["firstbreak"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
