"""Movie theatre tiles: the largest rectangle between red tiles."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from itertools import combinations
from pathlib import Path

from yuletide.cli import run_command

Coord = tuple[int, int]


@dataclass(frozen=True)
class Rectangle:
    """An axis-aligned rectangle of tiles, bounds inclusive."""

    x_min: int
    x_max: int
    y_min: int
    y_max: int

    @classmethod
    def from_corners(cls, a: Coord, b: Coord) -> Rectangle:
        return cls(
            x_min=min(a[0], b[0]),
            x_max=max(a[0], b[0]),
            y_min=min(a[1], b[1]),
            y_max=max(a[1], b[1]),
        )

    @property
    def area(self) -> int:
        return (self.x_max - self.x_min + 1) * (self.y_max - self.y_min + 1)

    def _misses_interior_of(self, other: Rectangle) -> bool:
        return (
            self.x_max <= other.x_min
            or self.x_min >= other.x_max
            or self.y_max <= other.y_min
            or self.y_min >= other.y_max
        )


def _parse_coord(line: str) -> Coord:
    x, sep, y = line.partition(",")
    if not sep:
        raise ValueError(f"Coordinates should be split by commas: {line!r}")
    return int(x), int(y)


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    coords = [_parse_coord(line) for line in puzzle_input.splitlines()]
    if not coords:
        raise ValueError("Input should not be empty")
    # The tile loop closes back on its first corner.
    coords.append(coords[0])

    rectangles = [Rectangle.from_corners(a, b) for a, b in combinations(coords, 2)]
    if not part_two:
        return max(r.area for r in rectangles)

    # Line sections are rectangles with one side of length 1.
    sections = [Rectangle.from_corners(a, b) for a, b in zip(coords, coords[1:])]
    for rectangle in sorted(rectangles, key=lambda r: r.area, reverse=True):
        if all(s._misses_interior_of(rectangle) for s in sections):
            return rectangle.area
    raise ValueError("At least one rectangle should be free of line intersections")


def run(input_path: str | Path, part_two: bool) -> int:
    """Find the largest tile rectangle for the corners at ``input_path`` and print it."""
    largest = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {largest}")
    return largest


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)