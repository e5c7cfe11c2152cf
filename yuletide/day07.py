"""Tachyon manifold: beams split by splitters on their way down a grid."""

from collections.abc import Sequence
from functools import lru_cache
from pathlib import Path

from yuletide.cli import run_command

Point = tuple[int, int]


def count_paths(grid: Sequence[str]) -> tuple[int, int]:
    """Return the number of beam paths to the bottom and the number of splitters hit."""
    if not grid:
        raise ValueError("Grid should not be empty")
    start = grid[0].find("S")
    if start < 0:
        raise ValueError("Start should be on first line")

    height = len(grid)
    width = len(grid[0])
    splitters: set[Point] = set()

    @lru_cache(maxsize=None)
    def search(x: int, y: int) -> int:
        if y == height:
            return 1
        if x == width:
            return 0
        cell = grid[y][x]
        if cell in ("S", "."):
            return search(x, y + 1)
        if cell == "^":
            splitters.add((x, y))
            return search(max(x - 1, 0), y) + search(x + 1, y)
        raise ValueError(f"Invalid cell char: {cell!r}")

    paths = search(start, 0)
    return paths, len(splitters)


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    paths, splitters = count_paths(puzzle_input.splitlines())
    return paths if part_two else splitters


def run(input_path: str | Path, part_two: bool) -> int:
    """Trace the beams through the manifold at ``input_path`` and print the result."""
    beams = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {beams}")
    return beams


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)