import pytest

from yuletide.day09 import Rectangle, compute_answer, main, run

RED_TILES = "7,1\n11,1\n11,7\n9,7\n9,5\n2,5\n2,3\n7,3\n"


@pytest.mark.parametrize(("part_two", "expected"), [(False, 50), (True, 24)])
def test_sample_tiles(tmp_path, capsys, part_two, expected):
    tiles_file = tmp_path / "tiles.txt"
    tiles_file.write_text(RED_TILES)
    flag = ["--part-two"] if part_two else []
    assert main([*flag, str(tiles_file)]) == expected
    assert capsys.readouterr().out == f"The answer is {expected}\n"
    assert run(tiles_file, part_two) == expected


def test_rectangle_from_corners_orders_bounds():
    rect = Rectangle.from_corners((11, 7), (7, 1))
    assert (rect.x_min, rect.x_max, rect.y_min, rect.y_max) == (7, 11, 1, 7)
    assert rect.area == 35


def test_rectangle_is_symmetric_in_corners():
    assert Rectangle.from_corners((2, 5), (9, 3)) == Rectangle.from_corners((9, 3), (2, 5))


def test_line_section_area_counts_tiles():
    assert Rectangle.from_corners((2, 3), (2, 5)).area == 3


def test_single_tile_gives_area_one():
    assert compute_answer("4,4\n", False) == 1


@pytest.mark.parametrize("tiles", ["", "7 1\n"])
def test_bad_input_raises(tiles):
    with pytest.raises(ValueError):
        compute_answer(tiles, False)