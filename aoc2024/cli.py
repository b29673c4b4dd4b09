"""Command line runner: checks each day against its example and solves it."""

from __future__ import annotations

import argparse
from collections.abc import Callable, Sequence
from functools import partial
from os import PathLike
from pathlib import Path

from . import (
    day01,
    day02,
    day03,
    day04,
    day05,
    day06,
    day07,
    day08,
    day09,
    day10,
    day11,
    day12,
    day13,
    day14,
    day15,
    day16,
    day17,
    day18,
    day19,
    day20,
    day22,
)
from .benchmark import benchmark
from .inputs import read_input

_DAYS = {
    1: (day01, ("11", "31")),
    2: (day02, ("2", "4")),
    3: (day03, ("161", "48")),
    4: (day04, ("18", "9")),
    5: (day05, ("143", "123")),
    6: (day06, ("41", "6")),
    7: (day07, ("3749", "11387")),
    8: (day08, ("14", "34")),
    9: (day09, ("1928", "2858")),
    10: (day10, ("36", "81")),
    11: (day11, ("55312", "65601038650482")),
    12: (day12, ("1184", "368")),
    13: (day13, ("480", "875318608908")),
    14: (day14, ("12", "1")),
    15: (day15, ("10092", "9021")),
    16: (day16, ("7036", "45")),
    17: (day17, ("6,4,6,0,4,5,7,2,7", "164541160582845")),
    18: (day18, ("22", "6,1")),
    19: (day19, ("6", "16")),
    20: (day20, ("0", "0")),
    22: (day22, ("37990510", "23")),
}

_SOLVER_ERRORS = (ValueError, ArithmeticError, LookupError)

Solver = Callable[[], str]


def _load(day: int, path: str | PathLike[str], test: bool) -> tuple[Solver, Solver]:
    if day not in _DAYS:
        raise ValueError(f"no solution for day {day}")
    module = _DAYS[day][0]
    puzzle = module.parse(read_input(path).content, test)
    return partial(module.part1, puzzle), partial(module.part2, puzzle)


def solve(day: int, path: str | PathLike[str], test: bool = False) -> tuple[str, str]:
    """Both answers for ``day`` using the input file at ``path``."""
    first, second = _load(day, path, test)
    return first(), second()


def _report_error(message: str, error: Exception) -> None:
    print(f"{message}: {error}, {type(error).__name__}")


def _run_day(day: int, directory: Path) -> bool:
    try:
        test_parts = _load(day, directory / "test", True)
    except (OSError, *_SOLVER_ERRORS) as exc:
        _report_error("Error occurred while loading the test case", exc)
        return False
    try:
        real_parts = _load(day, directory / "real", False)
    except (OSError, *_SOLVER_ERRORS) as exc:
        _report_error("Error occurred while loading the real case", exc)
        return False

    expected_answers = _DAYS[day][1]
    for part, (test_part, real_part, expected) in enumerate(
        zip(test_parts, real_parts, expected_answers), start=1
    ):
        try:
            answer = test_part()
        except _SOLVER_ERRORS as exc:
            _report_error(f"Error occurred while solving part {part}", exc)
            return False
        if answer != expected:
            print(f"Day {day} part {part}. Expected: [{expected}], got: [{answer}]")
            return False
        print(f"Day {day} part {part} test passed")
        try:
            timed = benchmark(real_part)
        except _SOLVER_ERRORS as exc:
            print(f"Day {day}, part {part}, error [{exc}]")
            continue
        print(f"Day {day}, part {part}, solution took {timed.time_ms}ms")
        print(timed.result)
        print()
    return True


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="aoc2024", description="Check and solve the puzzles of each day."
    )
    parser.add_argument("days", nargs="*", type=int, help="days to run (default: all)")
    parser.add_argument(
        "--inputs",
        type=Path,
        default=Path("inputs"),
        help="directory holding DD/test and DD/real input files",
    )
    args = parser.parse_args(argv)
    days = args.days or sorted(_DAYS)
    unknown = [day for day in days if day not in _DAYS]
    if unknown:
        parser.error(f"no solution for day(s): {', '.join(map(str, unknown))}")
    for day in days:
        if not _run_day(day, args.inputs / f"{day:02d}"):
            return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())