"""Historian Hysteria: comparing two lists of location ids."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass

from .inputs import split_lines


@dataclass(frozen=True)
class LocationLists:
    lefts: tuple[int, ...]
    rights: tuple[int, ...]


def parse(text: str, test: bool = False) -> LocationLists:
    lefts: list[int] = []
    rights: list[int] = []
    for line in split_lines(text):
        parts = line.split("   ")
        try:
            left, right = int(parts[0]), int(parts[1])
        except (ValueError, IndexError) as exc:
            raise ValueError("cannot parse input text") from exc
        lefts.append(left)
        rights.append(right)
    return LocationLists(tuple(lefts), tuple(rights))


def part1(puzzle: LocationLists) -> str:
    pairs = zip(sorted(puzzle.lefts), sorted(puzzle.rights))
    return str(sum(abs(right - left) for left, right in pairs))


def part2(puzzle: LocationLists) -> str:
    counts = Counter(puzzle.rights)
    return str(sum(num * counts[num] for num in puzzle.lefts))