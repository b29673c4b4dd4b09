"""Race Condition: shortcuts through the walls of a one-way racetrack."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grid import Vertex
from .inputs import split_lines

_DIRECTIONS = (Vertex(-1, 0), Vertex(1, 0), Vertex(0, 1), Vertex(0, -1))
_MIN_SAVING = 100
_LONG_CHEAT = 20


@dataclass(frozen=True)
class Racetrack:
    """The track layout; ``min_saving`` is how many picoseconds a cheat must save."""

    width: int
    height: int
    start: Vertex
    end: Vertex
    walls: frozenset[Vertex] = field(default_factory=frozenset)
    min_saving: int = _MIN_SAVING

    def contains(self, point: Vertex) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height


def _track(race: Racetrack, take_last: bool) -> dict[Vertex, int]:
    """Each track position mapped to the picosecond it is reached at."""
    index = {race.start: 0}
    position = race.start
    while position != race.end:
        options = [
            ahead
            for ahead in (position + d for d in _DIRECTIONS)
            if ahead not in race.walls and ahead not in index and race.contains(ahead)
        ]
        if not options:
            raise ValueError("the track does not reach the end")
        position = options[-1] if take_last else options[0]
        index[position] = len(index)
    return index


def parse(text: str, test: bool = False) -> Racetrack:
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
    return Racetrack(
        width=width, height=len(lines), start=start, end=end, walls=frozenset(walls)
    )


def part1(puzzle: Racetrack) -> str:
    index = _track(puzzle, take_last=True)
    count = 0
    for position, at in index.items():
        if position == puzzle.end:
            continue
        for direction in _DIRECTIONS:
            one = position + direction
            two = one + direction
            three = two + direction
            if one not in puzzle.walls:
                continue
            if two not in puzzle.walls:
                target, length = two, 2
            elif three not in puzzle.walls:
                target, length = three, 3
            else:
                continue
            if target in index and index[target] - at - length >= puzzle.min_saving:
                count += 1
    return str(count)


def part2(puzzle: Racetrack) -> str:
    index = _track(puzzle, take_last=False)
    offsets = [
        (Vertex(dx, dy), abs(dx) + abs(dy))
        for dx in range(-_LONG_CHEAT, _LONG_CHEAT + 1)
        for dy in range(-_LONG_CHEAT, _LONG_CHEAT + 1)
        if abs(dx) + abs(dy) <= _LONG_CHEAT
    ]
    count = 0
    for position, at in index.items():
        if position == puzzle.end:
            continue
        for offset, length in offsets:
            reached = index.get(position + offset)
            if reached is not None and reached - at - length >= puzzle.min_saving:
                count += 1
    return str(count)