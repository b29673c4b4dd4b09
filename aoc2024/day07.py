"""Bridge Repair: finding operators that make calibration equations true."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .inputs import split_lines

_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class Equation:
    result: int
    nums: tuple[int, ...]

    def can_be_achieved(self, concatenation: bool) -> bool:
        """Whether +, * (and, if allowed, digit concatenation) reach the result."""
        if not self.nums:
            raise ValueError("an equation needs at least one operand")

        def reach(index: int, current: int) -> bool:
            if index >= len(self.nums):
                return current == self.result
            num = self.nums[index]
            if reach(index + 1, current * num) or reach(index + 1, current + num):
                return True
            return concatenation and reach(index + 1, int(f"{current}{num}"))

        return reach(1, self.nums[0])


def parse(text: str, test: bool = False) -> list[Equation]:
    equations = []
    for line in split_lines(text):
        numbers = [int(n) for n in _NUMBER.findall(line)]
        result = numbers[0] if numbers else 0
        equations.append(Equation(result, tuple(numbers[1:])))
    return equations


def _total(equations: list[Equation], concatenation: bool) -> str:
    return str(sum(eq.result for eq in equations if eq.can_be_achieved(concatenation)))


def part1(puzzle: list[Equation]) -> str:
    return _total(puzzle, False)


def part2(puzzle: list[Equation]) -> str:
    return _total(puzzle, True)