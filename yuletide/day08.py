"""Junction boxes: connect the closest pairs and track the circuits formed."""

from __future__ import annotations

import os
from collections import Counter
from collections.abc import Sequence
from itertools import combinations
from math import prod
from pathlib import Path

from yuletide.cli import run_command

Box = tuple[int, int, int]

_DEFAULT_PAIRS = 1000


class UnionFind:
    """Disjoint sets over the integers ``0..capacity-1``."""

    def __init__(self, capacity: int) -> None:
        self.capacity = capacity
        self._parents = {i: i for i in range(capacity)}

    def find(self, i: int) -> int:
        """Return the root of the set holding ``i``; raise KeyError if unknown."""
        if i not in self._parents:
            raise KeyError(i)
        root = i
        while self._parents[root] != root:
            root = self._parents[root]
        while i != root:
            parent = self._parents[i]
            self._parents[i] = root
            i = parent
        return root

    def union(self, i: int, j: int) -> None:
        """Join the sets holding ``i`` and ``j``."""
        root_i = self.find(i)
        root_j = self.find(j)
        if root_i != root_j:
            self._parents[root_i] = root_j

    def set_sizes(self) -> dict[int, int]:
        """Return the size of each set, keyed by its root."""
        return dict(Counter(self.find(i) for i in range(self.capacity)))


def squared_distance(a: Box, b: Box) -> int:
    return sum((p - q) ** 2 for p, q in zip(a, b))


def _parse_box(line: str) -> Box:
    coords = [int(s.strip()) for s in line.split(",")]
    if len(coords) < 3:
        raise ValueError(f"Junction box needs three coordinates: {line!r}")
    return coords[0], coords[1], coords[2]


def compute_answer(puzzle_input: str, pairs: int, part_two: bool) -> int:
    boxes = [_parse_box(line) for line in puzzle_input.splitlines()]
    by_distance = sorted(
        combinations(range(len(boxes)), 2),
        key=lambda pair: squared_distance(boxes[pair[0]], boxes[pair[1]]),
    )

    circuits = UnionFind(len(boxes))
    connections = 0
    for index, (p1, p2) in enumerate(by_distance):
        if index == pairs and not part_two:
            return prod(sorted(circuits.set_sizes().values(), reverse=True)[:3])

        if circuits.find(p1) != circuits.find(p2):
            circuits.union(p1, p2)
            connections += 1
            if connections == len(boxes) - 1:
                return boxes[p1][0] * boxes[p2][0]

    raise ValueError("Failed to connect all junction boxes")


def run(input_path: str | os.PathLike[str], pairs: int, part_two: bool) -> int:
    """Solve the puzzle stored at ``input_path`` and print the answer."""
    puzzle_input = Path(input_path).read_text()
    answer = compute_answer(puzzle_input, pairs, part_two)
    print(f"The answer is {answer}")
    return answer


def _run_default(input_path: str | os.PathLike[str], part_two: bool) -> int:
    return run(input_path, _DEFAULT_PAIRS, part_two)


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(_run_default, argv)