[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lifeboard"
version = "0.2.0"
description = "Conway's Game of Life on a wrapping 10x10 board, drawn onto an in-memory framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["game of life", "conway", "cellular automaton", "framebuffer", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lifeboard = "lifeboard.app:main"

[tool.hatch.build.targets.wheel]
packages = ["lifeboard"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
