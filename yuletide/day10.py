"""Factory machines: button presses for indicator lights and joltage counters."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from functools import reduce
from itertools import combinations
from operator import xor
from pathlib import Path

import numpy as np
from scipy.optimize import Bounds, LinearConstraint, milp

from yuletide.cli import run_command

_MAX_PRESSES = 2**31 - 1


class MachineSpecError(ValueError):
    """Raised when a machine description cannot be parsed."""


def _strip_brackets(text: str, opening: str, closing: str) -> str:
    if not (text.startswith(opening) and text.endswith(closing)) or len(text) < 2:
        raise MachineSpecError(f"Expected {opening}...{closing}: {text!r}")
    return text[1:-1]


def _parse_ints(text: str, *, non_negative: bool) -> tuple[int, ...]:
    try:
        values = tuple(int(part) for part in text.split(","))
    except ValueError as exc:
        raise MachineSpecError(f"Expected comma separated integers: {text!r}") from exc
    if non_negative and any(v < 0 for v in values):
        raise MachineSpecError(f"Expected non-negative integers: {text!r}")
    return values


@dataclass(frozen=True)
class MachineSpec:
    """A machine: target light pattern as a bitset, buttons and joltage targets."""

    lights: int
    buttons: tuple[tuple[int, ...], ...]
    joltages: tuple[int, ...]

    @classmethod
    def parse(cls, text: str) -> MachineSpec:
        """Parse a line such as ``[.##.] (3) (1,3) {3,5,4,7}``."""
        specs = text.split(" ")
        if len(specs) < 2:
            raise MachineSpecError(f"Machine spec is too short: {text!r}")
        *head, jolt_spec = specs
        light_spec, *button_specs = head

        pattern = _strip_brackets(light_spec, "[", "]")
        lights = sum(1 << i for i, c in enumerate(pattern) if c == "#")
        joltages = _parse_ints(_strip_brackets(jolt_spec, "{", "}"), non_negative=False)
        buttons = tuple(
            _parse_ints(_strip_brackets(spec, "(", ")"), non_negative=True)
            for spec in button_specs
        )
        return cls(lights=lights, buttons=buttons, joltages=joltages)

    def button_bitsets(self) -> list[int]:
        """Return each button's set of toggled lights as a bitset."""
        return [sum(1 << v for v in button) for button in self.buttons]


def fewest_presses_for_lights(machine: MachineSpec) -> int:
    """Return the fewest button presses that light exactly the target pattern."""
    bitsets = machine.button_bitsets()
    for count in range(1, len(bitsets) + 1):
        for combo in combinations(bitsets, count):
            if reduce(xor, combo, 0) == machine.lights:
                return count
    raise ValueError("None of the button combinations matched the lights")


def fewest_presses_for_joltages(machine: MachineSpec) -> int:
    """Return the fewest presses that raise every counter to its joltage exactly."""
    if not machine.buttons:
        if any(machine.joltages):
            raise ValueError("Failed to solve ILP problem")
        return 0

    matrix = np.array(
        [
            [1.0 if i in button else 0.0 for button in machine.buttons]
            for i in range(len(machine.joltages))
        ]
    )
    targets = np.array(machine.joltages, dtype=float)
    variables = len(machine.buttons)

    result = milp(
        c=np.ones(variables),
        integrality=np.ones(variables),
        bounds=Bounds(0, _MAX_PRESSES),
        constraints=[LinearConstraint(matrix, targets, targets)],
    )
    if not result.success:
        raise ValueError(f"Failed to solve ILP problem: {result.message}")
    return int(round(result.fun))


def compute_answer(puzzle_input: str, part_two: bool) -> int:
    machines = (MachineSpec.parse(line.strip()) for line in puzzle_input.splitlines())
    solve = fewest_presses_for_joltages if part_two else fewest_presses_for_lights
    return sum(solve(machine) for machine in machines)


def run(input_path: str | os.PathLike[str], part_two: bool) -> int:
    """Solve the puzzle stored at ``input_path`` and print the answer."""
    puzzle_input = Path(input_path).read_text()
    answer = compute_answer(puzzle_input, part_two)
    print(f"The answer is {answer}")
    return answer


def main(argv: Sequence[str] | None = None) -> int:
    return run_command(run, argv)