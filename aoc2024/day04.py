"""Ceres Search: finding XMAS in a letter grid."""

from __future__ import annotations

from collections.abc import Sequence

from .grid import Vertex
from .inputs import split_lines

Grid = Sequence[str]

_DIRECTIONS = (
    Vertex(1, 0),
    Vertex(-1, 0),
    Vertex(0, 1),
    Vertex(0, -1),
    Vertex(1, -1),
    Vertex(1, 1),
    Vertex(-1, -1),
    Vertex(-1, 1),
)

# Letters outside the word count as the first letter.
_XMAS = {"X": 0, "M": 1, "A": 2, "S": 3}
_MAS = {"M": 1, "S": -1}


def _in_bounds(grid: Grid, point: Vertex) -> bool:
    return 0 <= point.y < len(grid) and 0 <= point.x < len(grid[point.y])


def is_xmas_word(grid: Grid, start: Vertex, direction: Vertex) -> bool:
    """Whether XMAS is spelled from ``start`` stepping by ``direction``."""
    current = -1
    point = start
    while _in_bounds(grid, point):
        letter = _XMAS.get(grid[point.y][point.x], 0)
        if letter - current != 1:
            return False
        if letter == _XMAS["S"]:
            return True
        current = letter
        point = point + direction
    return False


def is_crossed_word(grid: Grid, start: Vertex) -> bool:
    """Whether two diagonal MAS words cross at the ``A`` at ``start``."""
    if not _in_bounds(grid, start):
        raise IndexError(f"position outside the grid: {start}")
    x, y = start.x, start.y
    if grid[y][x] != "A":
        return False
    if not (0 < y < len(grid) - 1 and 0 < x < len(grid[y]) - 1):
        return False
    first = _MAS.get(grid[y - 1][x - 1], 0) * _MAS.get(grid[y + 1][x + 1], 0)
    second = _MAS.get(grid[y - 1][x + 1], 0) * _MAS.get(grid[y + 1][x - 1], 0)
    return first == -1 and second == -1


def _positions(grid: Grid):
    for y, row in enumerate(grid):
        for x in range(len(row)):
            yield Vertex(x, y)


def parse(text: str, test: bool = False) -> tuple[str, ...]:
    return tuple(split_lines(text))


def part1(puzzle: Grid) -> str:
    return str(
        sum(
            is_xmas_word(puzzle, position, direction)
            for position in _positions(puzzle)
            for direction in _DIRECTIONS
        )
    )


def part2(puzzle: Grid) -> str:
    return str(sum(is_crossed_word(puzzle, position) for position in _positions(puzzle)))