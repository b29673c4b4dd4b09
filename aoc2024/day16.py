"""Reindeer Maze: the cheapest routes from start to end."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count

from .grid import Vertex
from .inputs import split_lines

_EAST = Vertex(1, 0)
_TURN_COST = 1000


@dataclass(frozen=True)
class Maze:
    width: int
    height: int
    start: Vertex
    end: Vertex
    walls: frozenset[Vertex] = field(default_factory=frozenset)

    def contains(self, point: Vertex) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height

    def best_paths(self) -> list[tuple[int, frozenset[Vertex]]]:
        """Every cheapest route as ``(cost, tiles)``; empty if the end is unreachable.

        A step costs 1 and turning a quarter before it costs 1000 more;
        the reindeer starts facing east.
        """
        tie = count()
        heap: list[tuple[int, int, Vertex, Vertex, frozenset[Vertex]]] = [
            (0, next(tie), self.start, _EAST, frozenset())
        ]
        min_costs: dict[tuple[Vertex, Vertex], int] = {}
        found: list[tuple[int, frozenset[Vertex]]] = []
        best: int | None = None
        while heap:
            cost, _, position, direction, visited = heapq.heappop(heap)
            if position == self.end:
                best = cost if best is None else min(best, cost)
                found.append((cost, visited | {position}))
                continue
            if position in visited or (best is not None and cost > best):
                continue
            visited = visited | {position}
            for heading in (direction, direction.rotate_left(), direction.rotate_right()):
                ahead = position + heading
                if ahead in self.walls or not self.contains(ahead):
                    continue
                new_cost = cost + 1 + (_TURN_COST if heading != direction else 0)
                key = (ahead, heading)
                if key in min_costs and new_cost > min_costs[key]:
                    continue
                min_costs[key] = new_cost
                heapq.heappush(heap, (new_cost, next(tie), ahead, heading, visited))
        return [(cost, tiles) for cost, tiles in found if cost == best]


def parse(text: str, test: bool = False) -> Maze:
    lines = split_lines(text)
    walls: set[Vertex] = set()
    start = end = Vertex(0, 0)
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == "#":
                walls.add(Vertex(x, y))
            elif char == "S":
                start = Vertex(x, y)
            elif char == "E":
                end = Vertex(x, y)
    width = len(lines[-1]) if lines else 0
    return Maze(width=width, height=len(lines), start=start, end=end, walls=frozenset(walls))


def _paths(puzzle: Maze) -> list[tuple[int, frozenset[Vertex]]]:
    paths = puzzle.best_paths()
    if not paths:
        raise ValueError("the end cannot be reached")
    return paths


def part1(puzzle: Maze) -> str:
    return str(_paths(puzzle)[0][0])


def part2(puzzle: Maze) -> str:
    tiles: set[Vertex] = set()
    for _, path_tiles in _paths(puzzle):
        tiles |= path_tiles
    return str(len(tiles))