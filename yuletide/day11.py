"""Reactor wiring: count paths through a directed acyclic device graph."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence
from functools import cache
from pathlib import Path

from yuletide.cli import run_command

_OUT = "out"


def parse_graph(puzzle_input: str) -> dict[str, list[str]]:
    """Parse ``key: a b c`` lines into an adjacency mapping."""
    graph: dict[str, list[str]] = {}
    for line in puzzle_input.splitlines():
        key, sep, values = line.partition(":")
        if not sep:
            raise ValueError(f"No colon in line: {line!r}")
        graph[key] = values.split()
    return graph


def count_paths(graph: Mapping[str, Sequence[str]], start: str, target: str) -> int:
    """Return the number of paths from ``start`` to ``target``; ``out`` is a dead end."""

    @cache
    def search(key: str) -> int:
        if key == target:
            return 1
        if key == _OUT:
            return 0
        if key not in graph:
            raise ValueError(f"Key {key} not found in graph")
        return sum(search(v) for v in graph[key])

    return search(start)


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    graph = parse_graph(puzzle_input)
    if not part_two:
        return count_paths(graph, "you", _OUT)
    via_dac_first = (
        count_paths(graph, "svr", "dac")
        * count_paths(graph, "dac", "fft")
        * count_paths(graph, "fft", _OUT)
    )
    via_fft_first = (
        count_paths(graph, "svr", "fft")
        * count_paths(graph, "fft", "dac")
        * count_paths(graph, "dac", _OUT)
    )
    return via_dac_first + via_fft_first


def run(input_path: str | os.PathLike[str], part_two: bool) -> int:
    """Solve the puzzle stored at ``input_path`` and print the answer."""
    puzzle_input = Path(input_path).read_text()
    answer = compute_answer(puzzle_input, part_two)
    print(f"The answer is {answer}")
    return answer


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)