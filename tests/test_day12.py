import pytest

from yuletide.day12 import compute_answer, main, run

SAMPLE = """0:
###
##.
##.

1:
###
##.
.##

2:
.##
###
##.

3:
##.
###
##.

4:
###
#..
###

5:
###
.#.
###

4x4: 0 0 0 0 2 0
12x5: 1 0 1 0 2 2
12x5: 1 0 1 0 3 2
"""


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "sample_input.txt"
    path.write_text(SAMPLE)
    return path


def test_part_one(sample_path, capsys):
    assert run(sample_path, False) == 1
    assert "The answer is 1" in capsys.readouterr().out


def test_part_two(sample_path, capsys):
    assert run(sample_path, True) == 0
    out = capsys.readouterr().out
    assert "There is not part two today!" in out
    assert "The answer is 0" in out


@pytest.mark.parametrize(
    ("regions", "expected"),
    [
        ("3x3: 1\n", 1),
        ("3x3: 2\n", 0),
        ("6x3: 1 1\n", 1),
        ("2x2: 0\n5x5: 3\n", 1),
    ],
)
def test_region_capacity(regions, expected):
    assert compute_answer(regions, False) == expected


def test_misformatted_region_raises():
    with pytest.raises(ValueError):
        compute_answer("4x4 0 1\n", False)


def test_non_integer_dimension_raises():
    with pytest.raises(ValueError):
        compute_answer("4xa: 1\n", False)


def test_main(sample_path):
    assert main([str(sample_path)]) == 1
    assert main(["--part-two", str(sample_path)]) == 0


def test_main_bad_input_exits(tmp_path):
    path = tmp_path / "bad.txt"
    path.write_text("garbage\n")
    with pytest.raises(SystemExit) as excinfo:
        main([str(path)])
    assert excinfo.value.code == 1