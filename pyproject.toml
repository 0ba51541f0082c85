[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "pinmap"
version = "0.1.0"
description = "Lay out connector pins on concentric rings and wire pins between two connectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["connector", "pinout", "wiring", "harness", "layout"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Manufacturing",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
pinmap = "pinmap.app:main"

[tool.hatch.build.targets.wheel]
packages = ["pinmap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
