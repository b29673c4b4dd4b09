"""Resonant Collinearity: antinodes of same-frequency antennas."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from itertools import combinations

from .grid import Vertex
from .inputs import split_lines


@dataclass(frozen=True)
class AntennaMap:
    width: int
    height: int
    antennas: Mapping[str, tuple[Vertex, ...]] = field(default_factory=dict)

    def contains(self, point: Vertex) -> bool:
        return 0 <= point.x < self.width and 0 <= point.y < self.height


def _walk(antenna_map: AntennaMap, start: Vertex, step: Vertex):
    point = start + step
    while antenna_map.contains(point):
        yield point
        point = point + step


def find_antinodes(antenna_map: AntennaMap, resonant: bool) -> set[Vertex]:
    """Antinode positions inside the map.

    With ``resonant`` every in-line position counts, antennas included;
    otherwise only the point one spacing beyond each antenna of a pair.
    """
    antinodes: set[Vertex] = set()
    for positions in antenna_map.antennas.values():
        for first, second in combinations(positions, 2):
            towards_second = first.delta_to(second)
            towards_first = -towards_second
            if not resonant:
                for candidate in (first + towards_first, second + towards_second):
                    if antenna_map.contains(candidate):
                        antinodes.add(candidate)
                continue
            antinodes.update((first, second))
            antinodes.update(_walk(antenna_map, first, towards_first))
            antinodes.update(_walk(antenna_map, second, towards_second))
    return antinodes


def parse(text: str, test: bool = False) -> AntennaMap:
    lines = split_lines(text)
    antennas: dict[str, list[Vertex]] = {}
    for y, line in enumerate(lines):
        for x, char in enumerate(line):
            if char != ".":
                antennas.setdefault(char, []).append(Vertex(x, y))
    width = len(lines[-1]) if lines else 0
    return AntennaMap(
        width=width,
        height=len(lines),
        antennas={char: tuple(points) for char, points in antennas.items()},
    )


def part1(puzzle: AntennaMap) -> str:
    return str(len(find_antinodes(puzzle, False)))


def part2(puzzle: AntennaMap) -> str:
    return str(len(find_antinodes(puzzle, True)))