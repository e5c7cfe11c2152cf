from pathlib import Path

import pytest

from yuletide.cli import parse_args, run_command


def test_parse_args_with_part_two():
    args = parse_args(["--part-two", "input.txt"])
    assert args.part_two is True
    assert args.puzzle_input_path == Path("input.txt")


def test_parse_args_defaults_to_part_one():
    args = parse_args(["input.txt"])
    assert args.part_two is False
    assert args.puzzle_input_path == Path("input.txt")


def test_parse_args_requires_path():
    with pytest.raises(SystemExit) as info:
        parse_args([])
    assert info.value.code == 2


def test_run_command_passes_arguments_through():
    calls = []

    def fake_run(path, part_two):
        calls.append((path, part_two))
        return 42

    assert run_command(fake_run, ["--part-two", "data.txt"]) == 42
    assert calls == [(Path("data.txt"), True)]


def test_run_command_reports_errors(capsys):
    def failing_run(path, part_two):
        raise OSError("missing file")

    with pytest.raises(SystemExit) as info:
        run_command(failing_run, ["data.txt"])
    assert info.value.code == 1
    assert "Error: missing file" in capsys.readouterr().err