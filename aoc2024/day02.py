"""Red-Nosed Reports: checking level sequences for safety."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import pairwise

from .inputs import split_lines


def _check_safety(diffs: list[int], max_diff: int) -> bool:
    if any(d == 0 or abs(d) > max_diff for d in diffs):
        return False
    return all(d > 0 for d in diffs) or all(d < 0 for d in diffs)


def _diffs(nums: tuple[int, ...]) -> list[int]:
    return [b - a for a, b in pairwise(nums)]


@dataclass(frozen=True)
class Report:
    nums: tuple[int, ...]

    def __post_init__(self) -> None:
        if not self.nums:
            raise ValueError("a report needs at least one level")

    def is_safe(self, max_diff: int, can_remove: bool) -> bool:
        """Whether levels move steadily by at most ``max_diff``.

        With ``can_remove`` a single level may be dropped to make it safe.
        """
        if _check_safety(_diffs(self.nums), max_diff):
            return True
        if not can_remove:
            return False
        return any(
            _check_safety(_diffs(self.nums[:i] + self.nums[i + 1 :]), max_diff)
            for i in range(len(self.nums))
        )


def parse(text: str, test: bool = False) -> list[Report]:
    reports = []
    for line in split_lines(text):
        try:
            nums = tuple(int(part) for part in line.split(" "))
        except ValueError as exc:
            raise ValueError("Cannot parse input") from exc
        reports.append(Report(nums))
    return reports


def part1(puzzle: list[Report]) -> str:
    return str(sum(report.is_safe(3, False) for report in puzzle))


def part2(puzzle: list[Report]) -> str:
    return str(sum(report.is_safe(3, True) for report in puzzle))