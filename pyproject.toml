[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ilattice"
version = "0.4.0"
description = "2 and 3-dimensional integer lattice math: vectors, AABBs, Morton codes and grid ray traversal."
requires-python = ">=3.10"
dependencies = []
keywords = ["vector", "integer", "math", "3D", "morton", "lattice", "aabb", "voxel", "ray"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["ilattice"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
