"""Warehouse Woes: a robot pushing boxes around a warehouse."""

from __future__ import annotations

from dataclasses import dataclass, field

from .grid import Vertex
from .inputs import split_lines

_DIRECTIONS = {
    "^": Vertex(0, -1),
    "v": Vertex(0, 1),
    "<": Vertex(-1, 0),
    ">": Vertex(1, 0),
}
_RIGHT = Vertex(1, 0)


def parse_direction(char: str) -> Vertex | None:
    """The move an arrow character stands for, or ``None`` for other characters."""
    return _DIRECTIONS.get(char)


@dataclass(frozen=True)
class WarehouseInput:
    """The warehouse map and the robot's planned moves.

    ``width`` is the width of the widened warehouse; ``height`` counts map rows.
    """

    width: int
    height: int
    walls: frozenset[Vertex] = field(default_factory=frozenset)
    boxes: frozenset[Vertex] = field(default_factory=frozenset)
    robot: Vertex = Vertex(0, 0)
    moves: tuple[Vertex, ...] = ()


def parse(text: str, test: bool = False) -> WarehouseInput:
    width = 0
    height = 0
    walls: set[Vertex] = set()
    boxes: set[Vertex] = set()
    robot = Vertex(0, 0)
    moves: list[Vertex] = []
    for y, line in enumerate(split_lines(text)):
        if width == 0:
            width = len(line) * 2
        map_row = False
        for x, char in enumerate(line):
            if char == "#":
                map_row = True
                walls.add(Vertex(x, y))
            elif char == "O":
                boxes.add(Vertex(x, y))
            elif char == "@":
                robot = Vertex(x, y)
            elif (move := parse_direction(char)) is not None:
                moves.append(move)
        if map_row:
            height += 1
    return WarehouseInput(
        width=width,
        height=height,
        walls=frozenset(walls),
        boxes=frozenset(boxes),
        robot=robot,
        moves=tuple(moves),
    )


def _gps(position: Vertex) -> int:
    return position.y * 100 + position.x


def part1(puzzle: WarehouseInput) -> str:
    boxes = set(puzzle.boxes)
    robot = puzzle.robot
    for move in puzzle.moves:
        ahead = robot + move
        free = ahead
        while free not in puzzle.walls and free in boxes:
            free = free + move
        if free in puzzle.walls:
            continue
        if free != ahead:
            boxes.discard(ahead)
            boxes.add(free)
        robot = ahead
    return str(sum(_gps(box) for box in boxes))


def _affected_horizontal(
    walls: set[Vertex], boxes: dict[Vertex, Vertex], robot: Vertex, move: Vertex
) -> set[Vertex] | None:
    affected: set[Vertex] = set()
    position = robot
    while True:
        position = position + move
        if position in walls:
            return None
        if position not in boxes:
            return affected
        affected.add(boxes[position])


def _affected_vertical(
    walls: set[Vertex], boxes: dict[Vertex, Vertex], robot: Vertex, move: Vertex
) -> set[Vertex] | None:
    affected: set[Vertex] = set()
    frontier = {robot}
    while frontier:
        following: set[Vertex] = set()
        for position in frontier:
            ahead = position + move
            if ahead in walls:
                return None
            if ahead not in boxes:
                continue
            box = boxes[ahead]
            affected.add(box)
            following.update((box, box + _RIGHT))
        frontier = following
    return affected


def _push_wide(
    walls: set[Vertex], boxes: dict[Vertex, Vertex], robot: Vertex, move: Vertex
) -> bool:
    find = _affected_vertical if move.y != 0 else _affected_horizontal
    affected = find(walls, boxes, robot, move)
    if affected is None:
        return False
    for box in affected:
        boxes.pop(box, None)
        boxes.pop(box + _RIGHT, None)
    for box in affected:
        moved = box + move
        boxes[moved] = moved
        boxes[moved + _RIGHT] = moved
    return True


def part2(puzzle: WarehouseInput) -> str:
    walls = {Vertex(wall.x * 2 + dx, wall.y) for wall in puzzle.walls for dx in (0, 1)}
    boxes: dict[Vertex, Vertex] = {}
    for box in puzzle.boxes:
        left = Vertex(box.x * 2, box.y)
        boxes[left] = left
        boxes[left + _RIGHT] = left
    robot = Vertex(puzzle.robot.x * 2, puzzle.robot.y)
    for move in puzzle.moves:
        if _push_wide(walls, boxes, robot, move):
            robot = robot + move
    return str(sum(_gps(box) for box in set(boxes.values())))