"""Paper rolls on a grid: find rolls reachable by a forklift."""

from collections.abc import Sequence, Set
from itertools import product
from pathlib import Path

from yuletide.cli import run_command

Point = tuple[int, int]

_NEIGHBOUR_OFFSETS = [d for d in product((-1, 0, 1), repeat=2) if d != (0, 0)]


def get_removable_rolls(roll_locations: Set[Point]) -> set[Point]:
    """Return the rolls that have fewer than four neighbouring rolls."""
    return {
        (i, j)
        for i, j in roll_locations
        if sum((i + di, j + dj) in roll_locations for di, dj in _NEIGHBOUR_OFFSETS) < 4
    }


def _parse_rolls(puzzle_input: str) -> set[Point]:
    return {
        (i, j)
        for i, line in enumerate(puzzle_input.splitlines())
        for j, c in enumerate(line)
        if c == "@"
    }


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    rolls = _parse_rolls(puzzle_input)
    removable = get_removable_rolls(rolls)
    if not part_two:
        return len(removable)

    removed = 0
    while removable:
        removed += len(removable)
        rolls -= removable
        removable = get_removable_rolls(rolls)
    return removed


def run(input_path: str | Path, part_two: bool) -> int:
    """Count the removable rolls in the grid at ``input_path`` and print the count."""
    removed = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {removed}")
    return removed


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)