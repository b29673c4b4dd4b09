"""Mull It Over: summing multiplications found in corrupted memory."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from .inputs import split_lines


@dataclass(frozen=True)
class Mul:
    x: int
    y: int


@dataclass(frozen=True)
class Do:
    pass


@dataclass(frozen=True)
class Dont:
    pass


Command = Union[Mul, Do, Dont]

_COMMAND = re.compile(r"mul\((\d+),(\d+)\)|do\(\)|don't\(\)")


@dataclass
class MulSystem:
    """Accumulates products; when ``gated`` it honours do() and don't()."""

    gated: bool = False
    active: bool = True
    result: int = 0

    def execute(self, command: Command) -> None:
        match command:
            case Do():
                self.active = True
            case Dont():
                self.active = False
            case Mul(x=x, y=y):
                if self.active or not self.gated:
                    self.result += x * y
            case _:
                raise TypeError(f"unknown command: {command!r}")


def parse(text: str, test: bool = False) -> list[Command]:
    commands: list[Command] = []
    for line in split_lines(text):
        for match in _COMMAND.finditer(line):
            token = match.group(0)
            if token == "do()":
                commands.append(Do())
            elif token == "don't()":
                commands.append(Dont())
            else:
                commands.append(Mul(int(match.group(1)), int(match.group(2))))
    return commands


def _run(commands: list[Command], gated: bool) -> str:
    system = MulSystem(gated=gated)
    for command in commands:
        system.execute(command)
    return str(system.result)


def part1(puzzle: list[Command]) -> str:
    return _run(puzzle, gated=False)


def part2(puzzle: list[Command]) -> str:
    return _run(puzzle, gated=True)