"""Linen Layout: building towel designs out of stripe patterns."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .inputs import split_lines


@dataclass(frozen=True)
class Onsen:
    patterns: tuple[str, ...]
    designs: tuple[str, ...]


def match_design(patterns: Iterable[str], design: str) -> tuple[bool, int]:
    """Whether ``design`` can be built from ``patterns`` and in how many ways."""
    available = {pattern for pattern in patterns if pattern}
    if not design or not available:
        return False, 0
    sizes = {len(pattern) for pattern in available}
    ways = [1] + [0] * len(design)
    for end in range(1, len(design) + 1):
        ways[end] = sum(
            ways[end - size]
            for size in sizes
            if size <= end and design[end - size : end] in available
        )
    return ways[-1] > 0, ways[-1]


def parse(text: str, test: bool = False) -> Onsen:
    lines = split_lines(text)
    patterns = tuple(lines[0].split(", ")) if lines else ()
    designs = tuple(line for line in lines[1:] if line)
    return Onsen(patterns, designs)


def part1(puzzle: Onsen) -> str:
    return str(sum(match_design(puzzle.patterns, design)[0] for design in puzzle.designs))


def part2(puzzle: Onsen) -> str:
    return str(sum(match_design(puzzle.patterns, design)[1] for design in puzzle.designs))