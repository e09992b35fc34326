[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fermibreakup"
version = "0.1.0"
description = "Nuclear data utilities for the Fermi break-up model: nuclear masses, integer partitions, sampling helpers and channel weights"
requires-python = ">=3.10"
dependencies = []
keywords = ["nuclear physics", "fermi break-up", "nuclear mass", "fragmentation", "monte carlo"]
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
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["fermibreakup"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
