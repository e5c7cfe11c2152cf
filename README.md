# yuletide

Solvers for a twelve-day series of holiday programming puzzles. Each day has its
own module, `yuletide.day01` through `yuletide.day12`, and its own command.

## Installation

```
pip install .
```

Day 10 uses `numpy` and `scipy` (`scipy.optimize.milp`) to solve an integer
linear program. Both are installed along with the package.

## Command line

Every day's command takes the path to a puzzle input file. It solves part one by
default. Pass `--part-two` to solve part two:

```
yuletide-day01 input.txt
yuletide-day01 --part-two input.txt
```

The commands run from `yuletide-day01` to `yuletide-day12`. Each one prints
`The answer is <n>`. If the input file cannot be read, or its contents cannot be
parsed, the command prints `Error: <message>` to standard error and exits with
status 1.

For day 8, the command connects the 1000 closest pairs of junction boxes.

## Library use

Each day module provides `compute_answer(puzzle_input, part_two)`, which works
on the input text and returns the answer. It also provides
`run(input_path, part_two)`, which reads a file, prints the answer and returns
it, and `main(argv=None)`, which is what the command calls:

```python
from yuletide import day05

answer = day05.compute_answer("3-5\n10-14\n\n1\n5\n", part_two=False)
assert answer == 1
```

Day 8 takes the number of pairs as an extra argument:
`day08.compute_answer(text, pairs, part_two)` and `day08.run(path, pairs, part_two)`.

Some helpers are public as well:

- `day02.compute_splits` for the block lengths that divide a digit count
- `day03.max_pos_value` and `day03.process_line` for picking the largest digits
- `day04.get_removable_rolls` for rolls with fewer than four neighbours
- `day05.merge_ranges` and `day05.check_ranges` for sets of inclusive integer ranges
- `day06.transpose` for turning rows into columns
- `day07.count_paths` for the number of beam paths and splitters hit
- `day08.UnionFind` (with `find`, `union` and `set_sizes`) and `day08.squared_distance`
- `day09.Rectangle` for axis-aligned tile rectangles, built with `Rectangle.from_corners`
- `day10.MachineSpec` for parsing a machine line (`MachineSpec.parse`, which raises
  `MachineSpecError`), with `fewest_presses_for_lights` and `fewest_presses_for_joltages`
- `day11.parse_graph` and `day11.count_paths` for counting paths through a device graph

`yuletide.cli` holds the shared argument handling: `parse_args` and `run_command`.

## Limits

Day 12 does not solve the packing problem. It counts a region as fitting when
its area is at least nine tiles per present, which ignores the present shapes.
Day 12 has no second part: with `--part-two` it prints
`There is not part two today!` and the answer is 0.

## Tests

```
pip install .[test]
pytest
```