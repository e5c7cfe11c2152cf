"""Command-line handling shared by the daily puzzle solvers."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

T = TypeVar("T")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve a daily puzzle from an input file.")
    parser.add_argument(
        "--part-two",
        action="store_true",
        help="solve the second part of the puzzle",
    )
    parser.add_argument(
        "puzzle_input_path",
        type=Path,
        help="path to the puzzle input file",
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the command line into ``part_two`` and ``puzzle_input_path``."""
    return _build_parser().parse_args(argv)


def run_command(
    run: Callable[[Path, bool], T], argv: Sequence[str] | None = None
) -> T:
    """Parse ``argv`` and call ``run``; report failures and exit with status 1."""
    args = parse_args(argv)
    try:
        return run(args.puzzle_input_path, args.part_two)
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc