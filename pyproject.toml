[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dockscore"
version = "0.1.0"
description = "Building blocks for molecular docking: atom typing, empirical scoring terms, interpolated energy grids and pose bookkeeping"
requires-python = ">=3.10"
dependencies = []
keywords = ["docking", "scoring function", "molecular modelling", "chemistry", "grid interpolation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Chemistry",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dockscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
