import pytest

from yuletide.day06 import compute_answer, main, run, transpose

WORKSHEET = "\n".join(
    [
        "123 328  51 64 ",
        " 45 64  387 23 ",
        "  6 98  215 314",
        "*   +   *   +  ",
    ]
) + "\n"


@pytest.mark.parametrize(("part_two", "expected"), [(False, 4277556), (True, 3263827)])
def test_sample_worksheet(tmp_path, capsys, part_two, expected):
    worksheet_file = tmp_path / "worksheet.txt"
    worksheet_file.write_text(WORKSHEET)
    assert run(worksheet_file, part_two) == expected
    assert capsys.readouterr().out == f"The answer is {expected}\n"


def test_main_accepts_flag_after_path(tmp_path):
    worksheet_file = tmp_path / "worksheet.txt"
    worksheet_file.write_text(WORKSHEET)
    assert main([str(worksheet_file), "--part-two"]) == 3263827


@pytest.mark.parametrize(
    ("matrix", "expected"),
    [
        ([[1, 2, 3], [4, 5, 6]], [[1, 4], [2, 5], [3, 6]]),
        ([[1, 2], [3, 4, 5]], [[1, 3], [2, 4]]),
    ],
)
def test_transpose(matrix, expected):
    assert transpose(matrix) == expected


@pytest.mark.parametrize("matrix", [[[1, 2, 3], [4, 5]], []])
def test_transpose_rejects_bad_matrix(matrix):
    with pytest.raises(ValueError):
        transpose(matrix)


def test_transpose_twice_is_identity():
    matrix = [[1, 2], [3, 4], [5, 6]]
    assert transpose(transpose(matrix)) == matrix


def test_single_addition_problem():
    assert compute_answer("1 2\n3 4\n+ +\n", False) == 4 + 6


@pytest.mark.parametrize("worksheet", ["1\n2\n-\n", ""])
def test_bad_worksheet_raises(worksheet):
    with pytest.raises(ValueError):
        compute_answer(worksheet, False)