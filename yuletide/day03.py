"""Battery banks: pick digits in order to form the largest joltage."""

from collections.abc import Sequence
from pathlib import Path

from yuletide.cli import run_command


def max_pos_value(values: Sequence[int]) -> tuple[int, int]:
    """Return the index of the first maximum of ``values`` and that maximum."""
    if not values:
        raise ValueError("values should not be empty")
    best = max(values)
    return values.index(best), best


def process_line(line: str, part_two: bool) -> int:
    digits = [int(c) for c in line]
    total_digits = 12 if part_two else 2
    if len(digits) < total_digits:
        raise ValueError(f"Line needs at least {total_digits} digits: {line!r}")

    answer = 0
    start = 0
    for remaining in reversed(range(total_digits)):
        idx, value = max_pos_value(digits[start : len(digits) - remaining])
        answer = answer * 10 + value
        start += idx + 1
    return answer


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    return sum(process_line(line, part_two) for line in puzzle_input.splitlines())


def run(input_path: str | Path, part_two: bool) -> int:
    """Total the best joltages of the banks at ``input_path`` and print it."""
    joltage = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {joltage}")
    return joltage


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)