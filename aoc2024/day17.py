"""Chronospatial Computer: the three-bit program and its quine register."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .inputs import split_lines

_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class Computer:
    register_a: int
    register_b: int
    register_c: int
    program: tuple[int, ...] = ()


def step(register_a: int) -> tuple[int, int]:
    """One pass of the program loop: the printed value and the next register A."""
    partial = 1 ^ (register_a % 8)
    b = (5 ^ partial) ^ (register_a >> partial)
    return b % 8, register_a >> 3


def run(register_a: int) -> list[int]:
    """Everything the program prints when started with ``register_a``."""
    output = []
    while register_a != 0:
        value, register_a = step(register_a)
        output.append(value)
    return output


def parse(text: str, test: bool = False) -> Computer:
    registers = [0, 0, 0]
    program: list[int] = []
    for index, line in enumerate(split_lines(text)):
        numbers = [int(n) for n in _NUMBER.findall(line)]
        if not numbers:
            continue
        if index < 3:
            registers[index] = numbers[-1]
        elif index == 4:
            program.extend(numbers)
    return Computer(registers[0], registers[1], registers[2], tuple(program))


def part1(puzzle: Computer) -> str:
    output = run(puzzle.register_a)
    if not output:
        raise ValueError("the program printed nothing")
    return ",".join(str(value) for value in output)


def part2(puzzle: Computer) -> str:
    """The lowest register A that makes the program print itself."""
    candidates = {0}
    for target in reversed(puzzle.program):
        candidates = {
            (a << 3) + low
            for a in candidates
            for low in range(8)
            if step((a << 3) + low)[0] == target
        }
    if not candidates:
        raise ValueError("no register value reproduces the program")
    return str(min(candidates))