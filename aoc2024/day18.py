"""RAM Run: escaping a memory grid as bytes fall into it."""

from __future__ import annotations

import re
from bisect import bisect_left
from collections import deque
from collections.abc import Collection
from dataclasses import dataclass

from .grid import Vertex
from .inputs import split_lines

_NUMBER = re.compile(r"\d+")
_TEST_SETUP = (7, 7, 12)
_REAL_SETUP = (71, 71, 1024)
_STEPS = (Vertex(1, 0), Vertex(0, 1), Vertex(-1, 0), Vertex(0, -1))


@dataclass(frozen=True)
class MemorySpace:
    """Grid size, where bytes fall in order, and how many fall before the first walk."""

    width: int
    height: int
    drops: tuple[Vertex, ...]
    count: int


def shortest_path(width: int, height: int, corrupted: Collection[Vertex]) -> int | None:
    """Steps from the top-left to the bottom-right corner, or ``None`` if blocked."""
    start = Vertex(0, 0)
    end = Vertex(width - 1, height - 1)
    distances = {start: 0}
    queue = deque([start])
    while queue:
        position = queue.popleft()
        if position == end:
            return distances[position]
        for step in _STEPS:
            ahead = position + step
            if (
                ahead in distances
                or ahead in corrupted
                or not (0 <= ahead.x < width and 0 <= ahead.y < height)
            ):
                continue
            distances[ahead] = distances[position] + 1
            queue.append(ahead)
    return None


def parse(text: str, test: bool = False) -> MemorySpace:
    width, height, count = _TEST_SETUP if test else _REAL_SETUP
    drops = []
    for line in split_lines(text):
        numbers = _NUMBER.findall(line)
        if len(numbers) < 2:
            raise ValueError(f"expected two numbers in line: {line!r}")
        drops.append(Vertex(int(numbers[0]), int(numbers[1])))
    return MemorySpace(width=width, height=height, drops=tuple(drops), count=count)


def part1(puzzle: MemorySpace) -> str:
    steps = shortest_path(puzzle.width, puzzle.height, set(puzzle.drops[: puzzle.count]))
    if steps is None:
        raise ValueError("the exit cannot be reached")
    return str(steps)


def part2(puzzle: MemorySpace) -> str:
    """Coordinates of the first byte that cuts the exit off; ``0,0`` if none does."""

    def blocked(index: int) -> bool:
        corrupted = set(puzzle.drops[: index + 1])
        return shortest_path(puzzle.width, puzzle.height, corrupted) is None

    candidates = range(puzzle.count, len(puzzle.drops))
    found = bisect_left(candidates, True, key=blocked)
    if found == len(candidates):
        return "0,0"
    drop = puzzle.drops[candidates[found]]
    return f"{drop.x},{drop.y}"