"""Hoof It: scoring and rating hiking trails on a topographic map."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache

from .grid import Vertex, char_to_int
from .inputs import split_lines

_STEPS = (Vertex(1, 0), Vertex(-1, 0), Vertex(0, 1), Vertex(0, -1))
_TRAILHEAD = 0
_PEAK = 9


@dataclass(frozen=True)
class TopoMap:
    """Map size and the height of every marked position."""

    width: int
    height: int
    heights: Mapping[Vertex, int] = field(default_factory=dict)

    def contains(self, point: Vertex) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    @property
    def trailheads(self) -> list[Vertex]:
        return [point for point, level in self.heights.items() if level == _TRAILHEAD]


def _uphill(topo: TopoMap, point: Vertex) -> Iterator[Vertex]:
    wanted = topo.heights[point] + 1
    for step in _STEPS:
        ahead = point + step
        if topo.contains(ahead) and topo.heights.get(ahead) == wanted:
            yield ahead


def _reachable_peaks(topo: TopoMap, head: Vertex) -> set[Vertex]:
    seen = {head}
    stack = [head]
    peaks: set[Vertex] = set()
    while stack:
        point = stack.pop()
        if topo.heights[point] == _PEAK:
            peaks.add(point)
            continue
        for ahead in _uphill(topo, point):
            if ahead not in seen:
                seen.add(ahead)
                stack.append(ahead)
    return peaks


def parse(text: str, test: bool = False) -> TopoMap:
    lines = split_lines(text)
    heights = {
        Vertex(x, y): char_to_int(char)
        for y, line in enumerate(lines)
        for x, char in enumerate(line)
        if char != "."
    }
    width = len(lines[-1]) if lines else 0
    return TopoMap(width=width, height=len(lines), heights=heights)


def part1(puzzle: TopoMap) -> str:
    return str(sum(len(_reachable_peaks(puzzle, head)) for head in puzzle.trailheads))


def part2(puzzle: TopoMap) -> str:
    @lru_cache(maxsize=None)
    def rating(point: Vertex) -> int:
        if puzzle.heights[point] == _PEAK:
            return 1
        return sum(rating(ahead) for ahead in _uphill(puzzle, point))

    return str(sum(rating(head) for head in puzzle.trailheads))