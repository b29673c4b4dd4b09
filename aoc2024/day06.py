"""Guard Gallivant: tracing a patrolling guard through a lab."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable
from dataclasses import dataclass, field

from .grid import Vertex
from .inputs import split_lines

_UP = Vertex(0, -1)


@dataclass(frozen=True)
class Lab:
    """Lab floor plan: its size, the guard's start and the obstacles."""

    width: int
    height: int
    start: Vertex
    obstacles: frozenset[Vertex] = field(default_factory=frozenset)

    def contains(self, point: Vertex) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height


class _ObstacleLines:
    """Obstacles sorted along each row and column for quick look-ahead."""

    def __init__(self, obstacles: Iterable[Vertex]) -> None:
        rows: dict[int, list[int]] = {}
        cols: dict[int, list[int]] = {}
        for obstacle in obstacles:
            rows.setdefault(obstacle.y, []).append(obstacle.x)
            cols.setdefault(obstacle.x, []).append(obstacle.y)
        self._rows = {y: sorted(xs) for y, xs in rows.items()}
        self._cols = {x: sorted(ys) for x, ys in cols.items()}

    def next_obstacle(
        self, position: Vertex, direction: Vertex, extra: Vertex
    ) -> Vertex | None:
        """The first obstacle hit from ``position``, ``extra`` included."""
        if direction.x != 0:
            line = self._rows.get(position.y, [])
            coord, step = position.x, direction.x
            extra_coord = extra.x if extra.y == position.y else None

            def at(c: int) -> Vertex:
                return Vertex(c, position.y)

        elif direction.y != 0:
            line = self._cols.get(position.x, [])
            coord, step = position.y, direction.y
            extra_coord = extra.y if extra.x == position.x else None

            def at(c: int) -> Vertex:
                return Vertex(position.x, c)

        else:
            raise ValueError(f"not a movement direction: {direction}")

        if step > 0:
            index = bisect_right(line, coord)
            hits = line[index : index + 1]
            if extra_coord is not None and extra_coord > coord:
                hits.append(extra_coord)
            best = min(hits, default=None)
        else:
            index = bisect_left(line, coord)
            hits = line[max(index - 1, 0) : index]
            if extra_coord is not None and extra_coord < coord:
                hits.append(extra_coord)
            best = max(hits, default=None)
        return None if best is None else at(best)


def _record_turn(turns: set[tuple[Vertex, Vertex]], position: Vertex, direction: Vertex) -> None:
    state = (position, direction)
    if state in turns:
        raise ValueError("the guard never leaves the lab")
    turns.add(state)


def _creates_loop(
    lines: _ObstacleLines, start: Vertex, extra: Vertex, direction: Vertex
) -> bool:
    seen: set[tuple[Vertex, Vertex]] = set()
    position = start
    while True:
        hit = lines.next_obstacle(position, direction, extra)
        if hit is None:
            return False
        if (hit, direction) in seen:
            return True
        seen.add((hit, direction))
        position = hit + -direction
        direction = direction.rotate_right()


def parse(text: str, test: bool = False) -> Lab:
    lines = split_lines(text)
    start = Vertex(0, 0)
    obstacles: set[Vertex] = set()
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char == "#":
                obstacles.add(Vertex(x, y))
            elif char == "^":
                start = Vertex(x, y)
    width = len(lines[-1]) if lines else 0
    return Lab(width=width, height=len(lines), start=start, obstacles=frozenset(obstacles))


def part1(puzzle: Lab) -> str:
    visited: set[Vertex] = set()
    turns: set[tuple[Vertex, Vertex]] = set()
    direction = _UP
    position = puzzle.start
    while True:
        visited.add(position)
        ahead = position + direction
        if ahead in puzzle.obstacles:
            _record_turn(turns, position, direction)
            direction = direction.rotate_right()
            continue
        if not puzzle.contains(ahead):
            break
        position = ahead
    return str(len(visited))


def part2(puzzle: Lab) -> str:
    lines = _ObstacleLines(o for o in puzzle.obstacles if puzzle.contains(o))
    visited: set[Vertex] = set()
    loop_makers: set[Vertex] = set()
    turns: set[tuple[Vertex, Vertex]] = set()
    direction = _UP
    position = puzzle.start
    while True:
        ahead = position + direction
        if ahead in puzzle.obstacles:
            _record_turn(turns, position, direction)
            direction = direction.rotate_right()
            continue
        if not puzzle.contains(ahead):
            break
        if ahead not in visited and _creates_loop(
            lines, position, ahead, direction.rotate_right()
        ):
            loop_makers.add(ahead)
        visited.add(position)
        position = ahead
    return str(len(loop_makers))