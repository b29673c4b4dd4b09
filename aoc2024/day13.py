"""Claw Contraption: fewest tokens needed to win each prize."""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

from .grid import Vertex
from .inputs import split_lines

_NUMBER = re.compile(r"\d+")
_FAR_OFFSET = 10_000_000_000_000
_PRESS_LIMIT = 100


@dataclass(frozen=True)
class Machine:
    button_a: Vertex
    button_b: Vertex
    prize: Vertex

    def tokens_to_win(self, far: bool) -> int:
        """Tokens for the unique winning press counts, or 0 if there are none.

        With ``far`` the prize lies ten trillion units further on each axis
        and the hundred-press limit is lifted.
        """
        prize = self.prize + Vertex(_FAR_OFFSET, _FAR_OFFSET) if far else self.prize
        a, b = self.button_a, self.button_b
        determinant = a.x * b.y - b.x * a.y
        if determinant == 0:
            return 0
        a_presses, a_rest = divmod(prize.x * b.y - b.x * prize.y, determinant)
        b_presses, b_rest = divmod(a.x * prize.y - prize.x * a.y, determinant)
        if a_rest or b_rest:
            return 0
        if not far and (a_presses > _PRESS_LIMIT or b_presses > _PRESS_LIMIT):
            return 0
        return 3 * a_presses + b_presses

    def __str__(self) -> str:
        return (
            f"A=({self.button_a.x}, {self.button_a.y}), "
            f"B=({self.button_b.x}, {self.button_b.y}), "
            f"Win=({self.prize.x}, {self.prize.y})"
        )


def _pair(line: str) -> Vertex:
    numbers = _NUMBER.findall(line)
    if len(numbers) < 2:
        raise ValueError(f"expected two numbers in line: {line!r}")
    return Vertex(int(numbers[0]), int(numbers[1]))


def parse(text: str, test: bool = False) -> tuple[Machine, ...]:
    lines = split_lines(text)
    machines: list[Machine] = []
    for start in range(0, len(lines), 4):
        group = lines[start : start + 3]
        if len(group) < 3:
            raise ValueError("incomplete machine description")
        machines.append(Machine(*(_pair(line) for line in group)))
    return tuple(machines)


def _total(machines: Iterable[Machine], far: bool) -> str:
    return str(sum(machine.tokens_to_win(far) for machine in machines))


def part1(puzzle: Iterable[Machine]) -> str:
    return _total(puzzle, False)


def part2(puzzle: Iterable[Machine]) -> str:
    return _total(puzzle, True)