"""Plutonian Pebbles: counting stones that split as you blink."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable

from .inputs import split_lines

_NUMBER = re.compile(r"\d+")


def next_stones(number: int) -> list[int]:
    """The stones one stone turns into after a single blink."""
    if number == 0:
        return [1]
    digits = str(number)
    if len(digits) % 2 == 0:
        half = len(digits) // 2
        return [int(digits[:half]), int(digits[half:])]
    return [number * 2024]


def count_after_blinks(numbers: Iterable[int], blinks: int) -> int:
    """How many stones there are after ``blinks`` blinks."""
    stones = Counter(numbers)
    for _ in range(blinks):
        following: Counter[int] = Counter()
        for number, count in stones.items():
            for stone in next_stones(number):
                following[stone] += count
        stones = following
    return sum(stones.values())


def parse(text: str, test: bool = False) -> tuple[int, ...]:
    return tuple(int(n) for line in split_lines(text) for n in _NUMBER.findall(line))


def part1(puzzle: Iterable[int]) -> str:
    return str(count_after_blinks(puzzle, 25))


def part2(puzzle: Iterable[int]) -> str:
    return str(count_after_blinks(puzzle, 75))