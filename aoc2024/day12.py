"""Garden Groups: pricing fences around regions of plants."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import cached_property

from .grid import Vertex
from .inputs import split_lines

_NEIGHBOURS = (Vertex(-1, 0), Vertex(1, 0), Vertex(0, -1), Vertex(0, 1))

# For each corner of a cell: the two side neighbours, the diagonal one
# between them, and the offset of the corner on a doubled grid.
_CORNERS = (
    (Vertex(-1, 0), Vertex(-1, -1), Vertex(0, -1), Vertex(-1, -1)),
    (Vertex(0, -1), Vertex(1, -1), Vertex(1, 0), Vertex(1, -1)),
    (Vertex(1, 0), Vertex(1, 1), Vertex(0, 1), Vertex(1, 1)),
    (Vertex(0, 1), Vertex(-1, 1), Vertex(-1, 0), Vertex(-1, 1)),
)


@dataclass(frozen=True)
class Region:
    """A connected group of cells growing the same plant."""

    plant: str
    cells: frozenset[Vertex]

    @property
    def area(self) -> int:
        return len(self.cells)

    @cached_property
    def perimeter(self) -> int:
        """Number of unit fence segments around the region."""
        return sum(
            1 for cell in self.cells for step in _NEIGHBOURS if cell + step not in self.cells
        )

    @cached_property
    def sides(self) -> int:
        """Number of straight fence sides, counted through the region's corners."""
        corners: dict[Vertex, int] = {}
        for cell in self.cells:
            doubled = Vertex(cell.x * 2, cell.y * 2)
            for side1, diagonal, side2, offset in _CORNERS:
                pattern = (
                    cell + side1 in self.cells,
                    cell + diagonal in self.cells,
                    cell + side2 in self.cells,
                )
                if pattern in ((False, False, False), (True, False, True)):
                    corners[doubled + offset] = 1
                elif pattern == (False, True, False):
                    corners[doubled + offset] = 2
        return sum(corners.values())


@dataclass(frozen=True)
class Garden:
    width: int
    height: int
    plants: Mapping[Vertex, str] = field(default_factory=dict)

    def regions(self) -> list[Region]:
        """Split the garden into connected regions of equal plants."""
        visited: set[Vertex] = set()
        regions: list[Region] = []
        for start in sorted(self.plants):
            if start in visited:
                continue
            plant = self.plants[start]
            cells = {start}
            frontier = [start]
            while frontier:
                following = []
                for position in frontier:
                    for step in _NEIGHBOURS:
                        neighbour = position + step
                        if neighbour in cells or self.plants.get(neighbour) != plant:
                            continue
                        cells.add(neighbour)
                        following.append(neighbour)
                frontier = following
            visited |= cells
            regions.append(Region(plant, frozenset(cells)))
        return regions


def parse(text: str, test: bool = False) -> Garden:
    lines = split_lines(text)
    plants = {
        Vertex(x, y): plant for y, line in enumerate(lines) for x, plant in enumerate(line)
    }
    width = len(lines[-1]) if lines else 0
    return Garden(width=width, height=len(lines), plants=plants)


def part1(puzzle: Garden) -> str:
    return str(sum(region.area * region.perimeter for region in puzzle.regions()))


def part2(puzzle: Garden) -> str:
    return str(sum(region.area * region.sides for region in puzzle.regions()))