[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fromage"
version = "0.1.0"
description = "Rules, level checking, XPM reading and event hooks for a small tile-based cheese-collecting puzzle game."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "puzzle", "tiles", "xpm", "level"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["fromage"]

[tool.pytest.ini_options]
addopts = "-ra"
