[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polarcog"
version = "0.1.0"
description = "Center of gravity of weighted items given in polar coordinates, with a console plot"
requires-python = ">=3.10"
dependencies = []
keywords = ["center of gravity", "polar coordinates", "physics", "ucb", "multi-armed bandit"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
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

[project.scripts]
polarcog = "polarcog.cli:main"
polarcog-ucb = "polarcog.bandit:main"

[tool.hatch.build.targets.wheel]
packages = ["polarcog"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
