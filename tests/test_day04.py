import pytest

from yuletide.day04 import compute_answer, get_removable_rolls, main, run

ROLL_GRID = (
    "..@@.@@@@.\n"
    "@@@.@.@.@@\n"
    "@@@@@.@.@@\n"
    "@.@@@@..@.\n"
    "@@.@@@@.@@\n"
    ".@@@@@@@.@\n"
    ".@.@.@.@@@\n"
    "@.@@@.@@@@\n"
    ".@@@@@@@@.\n"
    "@.@.@@@.@.\n"
)


@pytest.mark.parametrize(("part_two", "expected"), [(False, 13), (True, 43)])
def test_sample_grid(tmp_path, part_two, expected):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text(ROLL_GRID)
    assert run(grid_file, part_two) == expected


def test_main_part_one(tmp_path):
    grid_file = tmp_path / "grid.txt"
    grid_file.write_text(ROLL_GRID)
    assert main([str(grid_file)]) == 13


def test_removable_rolls_is_subset():
    rolls = {(0, 0), (0, 1), (1, 0), (1, 1), (5, 5)}
    removable = get_removable_rolls(rolls)
    assert removable <= rolls
    assert (5, 5) in removable


def test_fully_surrounded_roll_stays():
    rolls = {(i, j) for i in range(3) for j in range(3)}
    assert (1, 1) not in get_removable_rolls(rolls)


def test_part_two_removes_everything_in_small_block():
    assert compute_answer("@@\n@@\n", True) == 4