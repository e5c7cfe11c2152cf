"""Cephalopod maths worksheets: columns of numbers joined by one operator each."""

from collections.abc import Iterable, Sequence
from itertools import groupby
from math import prod
from pathlib import Path
from typing import TypeVar

from yuletide.cli import run_command

T = TypeVar("T")


def transpose(matrix: Sequence[Sequence[T]]) -> list[list[T]]:
    """Return the columns of ``matrix`` as rows, as wide as its first row."""
    if not matrix:
        raise ValueError("matrix should have at least one row")
    width = len(matrix[0])
    if any(len(row) < width for row in matrix):
        raise ValueError("every row should be at least as long as the first")
    return [list(column) for column in zip(*(row[:width] for row in matrix))]


def _is_blank(column: Sequence[str]) -> bool:
    return all(c == " " for c in column)


def _apply(op: str, values: Iterable[int]) -> int:
    if op == "*":
        return prod(values)
    if op == "+":
        return sum(values)
    raise ValueError(f"Invalid op: {op!r}")


def _read_by_rows(value_lines: Sequence[str]) -> list[list[int]]:
    return transpose([[int(s) for s in line.split()] for line in value_lines])


def _read_by_columns(value_lines: Sequence[str]) -> list[list[int]]:
    columns = transpose([list(line) for line in value_lines])
    return [
        [int("".join(column).strip()) for column in group]
        for blank, group in groupby(columns, key=_is_blank)
        if not blank
    ]


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    lines = puzzle_input.splitlines()
    if not lines:
        raise ValueError("Puzzle input should have at least one line")
    *value_lines, op_line = lines
    ops = op_line.split()

    problems = _read_by_columns(value_lines) if part_two else _read_by_rows(value_lines)
    return sum(_apply(op, values) for values, op in zip(problems, ops))


def run(input_path: str | Path, part_two: bool) -> int:
    """Total the worksheet answers at ``input_path`` and print the total."""
    grand_total = compute_answer(Path(input_path).read_text(), part_two)
    print(f"The answer is {grand_total}")
    return grand_total


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)