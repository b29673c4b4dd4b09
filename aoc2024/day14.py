"""Restroom Redoubt: robots wrapping around a bathroom floor."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass
from math import lcm

from .grid import Vertex
from .inputs import split_lines

_NUMBER = re.compile(r"-?\d+")
_TEST_SIZE = (11, 7)
_REAL_SIZE = (101, 103)
_QUADRANT_SECONDS = 100
_QUADRANTS = (Vertex(-1, -1), Vertex(1, -1), Vertex(1, 1), Vertex(-1, 1))


@dataclass(frozen=True)
class Robot:
    start: Vertex
    velocity: Vertex

    def position_after(self, moves: int, width: int, height: int) -> Vertex:
        """Where the robot stands after ``moves`` seconds, wrapping at the edges."""
        return Vertex(
            (self.start.x + self.velocity.x * moves) % width,
            (self.start.y + self.velocity.y * moves) % height,
        )


@dataclass(frozen=True)
class Bathroom:
    width: int
    height: int
    robots: tuple[Robot, ...] = ()


def render(positions: Iterable[Vertex], width: int, height: int) -> str:
    """Draw occupied tiles as ``#`` and free ones as ``.``, one row per line."""
    occupied = set(positions)
    return "\n".join(
        "".join("#" if Vertex(x, y) in occupied else "." for x in range(width))
        for y in range(height)
    )


def parse(text: str, test: bool = False) -> Bathroom:
    width, height = _TEST_SIZE if test else _REAL_SIZE
    robots = []
    for line in split_lines(text):
        numbers = [int(n) for n in _NUMBER.findall(line)]
        if len(numbers) < 4:
            raise ValueError(f"expected four numbers in line: {line!r}")
        sx, sy, vx, vy = numbers[:4]
        robots.append(Robot(Vertex(sx, sy), Vertex(vx, vy)))
    return Bathroom(width=width, height=height, robots=tuple(robots))


def part1(puzzle: Bathroom) -> str:
    centre = Vertex(-(puzzle.width // 2), -(puzzle.height // 2))
    quadrants: dict[Vertex, int] = {}
    for robot in puzzle.robots:
        position = robot.position_after(_QUADRANT_SECONDS, puzzle.width, puzzle.height)
        quadrant = (position + centre).sign()
        quadrants[quadrant] = quadrants.get(quadrant, 0) + 1
    product = 1
    for quadrant in _QUADRANTS:
        product *= quadrants.get(quadrant, 0)
    return str(product)


def part2(puzzle: Bathroom) -> str:
    """First second at which no two robots share a tile; the picture is printed."""
    period = lcm(puzzle.width, puzzle.height)
    for seconds in range(1, period + 1):
        positions = {
            robot.position_after(seconds, puzzle.width, puzzle.height)
            for robot in puzzle.robots
        }
        if len(positions) == len(puzzle.robots):
            print(render(positions, puzzle.width, puzzle.height))
            return str(seconds)
    raise ValueError("the robots never all stand on distinct tiles")