[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yuletide"
version = "0.1.0"
description = "Solvers for a twelve-day series of holiday programming puzzles"
requires-python = ">=3.10"
keywords = ["puzzles", "advent", "solver", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
dependencies = [
    "numpy",
    "scipy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yuletide-day01 = "yuletide.day01:main"
yuletide-day02 = "yuletide.day02:main"
yuletide-day03 = "yuletide.day03:main"
yuletide-day04 = "yuletide.day04:main"
yuletide-day05 = "yuletide.day05:main"
yuletide-day06 = "yuletide.day06:main"
yuletide-day07 = "yuletide.day07:main"
yuletide-day08 = "yuletide.day08:main"
yuletide-day09 = "yuletide.day09:main"
yuletide-day10 = "yuletide.day10:main"
yuletide-day11 = "yuletide.day11:main"
yuletide-day12 = "yuletide.day12:main"

[tool.hatch.build.targets.wheel]
packages = ["yuletide"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
