[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "termfolio"
version = "0.1.0"
description = "A terminal portfolio: ANSI résumé page over HTTP, an interactive TUI with Tetris, and an SSH front end."
requires-python = ">=3.10"
keywords = ["terminal", "portfolio", "ansi", "tui", "tetris", "ssh", "curl"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Terminals",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "blessed",
    "wcwidth",
    "paramiko",
    "cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
termfolio = "termfolio.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["termfolio"]

[tool.pytest.ini_options]
addopts = "-ra"
