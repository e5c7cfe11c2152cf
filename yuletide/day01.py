"""Dial rotations: count how often the dial rests on or passes through zero."""

from collections.abc import Sequence
from pathlib import Path

from yuletide.cli import run_command

_START_POSITION = 50
_DIAL_SIZE = 100


def parse_line(line: str) -> int:
    """Return the rotation for a line: left turns negative, right turns positive."""
    return int(line.replace("L", "-").replace("R", ""))


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    position = _START_POSITION
    zeros = 0
    crossings = 0
    for rotation in map(parse_line, puzzle_input.splitlines()):
        crossings += abs(rotation) // _DIAL_SIZE
        end = (position + rotation) % _DIAL_SIZE
        if position != 0 and end != 0:
            if position > end and _sign(rotation) > 0:
                crossings += 1
            elif position < end and _sign(rotation) < 0:
                crossings += 1
        position = end
        if position == 0:
            zeros += 1
    return crossings + zeros if part_two else zeros


def run(input_path: str | Path, part_two: bool) -> int:
    """Count zero hits for the rotations in ``input_path`` and print the count."""
    zero_hits = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {zero_hits}")
    return zero_hits


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)