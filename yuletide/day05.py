"""Ingredient freshness: ID lookups against inclusive ranges."""

from bisect import bisect_right
from collections.abc import Iterable, Sequence
from pathlib import Path

from yuletide.cli import run_command

Range = tuple[int, int]


def merge_ranges(ranges: Iterable[Range]) -> list[Range]:
    """Merge overlapping inclusive ranges into a sorted, non-overlapping list."""
    merged: list[Range] = []
    for start, end in sorted(ranges, key=lambda r: r[0]):
        if merged and merged[-1][1] >= start:
            last_start, last_end = merged[-1]
            merged[-1] = (last_start, max(last_end, end))
        else:
            merged.append((start, end))
    return merged


def check_ranges(ranges: Sequence[Range], value: int) -> bool:
    """Return whether ``value`` lies in one of the sorted, disjoint ``ranges``."""
    idx = bisect_right([start for start, _ in ranges], value) - 1
    return idx >= 0 and ranges[idx][0] <= value <= ranges[idx][1]


def _parse_range(line: str) -> Range:
    lower, sep, upper = line.partition("-")
    if not sep:
        raise ValueError(f"Range input should be delimited by -: {line!r}")
    return int(lower), int(upper)


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    ranges_input, sep, ids_input = puzzle_input.partition("\n\n")
    if not sep:
        raise ValueError("Puzzle input format wrong")

    merged = merge_ranges(_parse_range(line) for line in ranges_input.splitlines())

    if part_two:
        return sum(end - start + 1 for start, end in merged)
    return sum(check_ranges(merged, int(line)) for line in ids_input.splitlines())


def run(input_path: str | Path, part_two: bool) -> int:
    """Count the fresh ingredients listed at ``input_path`` and print the count."""
    fresh = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {fresh}")
    return fresh


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)