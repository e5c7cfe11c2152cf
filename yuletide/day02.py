"""Invalid product IDs: numbers made of a repeated block of digits."""

from collections.abc import Sequence
from pathlib import Path

from yuletide.cli import run_command


def compute_splits(digits: int, part_two: bool) -> list[int]:
    """Return the block lengths that divide a number of ``digits`` digits evenly."""
    if part_two:
        return [d for d in range(1, digits // 2 + 1) if digits % d == 0]
    if digits % 2 == 0:
        return [digits // 2]
    return []


def _is_repeated(n: int, part_two: bool) -> bool:
    text = str(n)
    return any(
        text == text[:size] * (len(text) // size)
        for size in compute_splits(len(text), part_two)
    )


def _parse_range(spec: str) -> tuple[int, int]:
    start, sep, stop = spec.partition("-")
    if not sep:
        raise ValueError(f"Range should have two parts: {spec!r}")
    return int(start), int(stop)


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    total = 0
    for spec in puzzle_input.split(","):
        start, stop = _parse_range(spec)
        total += sum(n for n in range(start, stop + 1) if _is_repeated(n, part_two))
    return total


def run(input_path: str | Path, part_two: bool) -> int:
    """Sum the invalid IDs in the ranges at ``input_path`` and print the sum."""
    id_sum = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {id_sum}")
    return id_sum


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)