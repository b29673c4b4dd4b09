import pytest

from aoc2024.day03 import Do, Dont, Mul, MulSystem, parse, part1, part2

EXAMPLE = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))\n"


def test_parse_example():
    assert parse(EXAMPLE, True) == [
        Mul(2, 4),
        Dont(),
        Mul(5, 5),
        Mul(11, 8),
        Do(),
        Mul(8, 5),
    ]


def test_part1_example():
    assert part1(parse(EXAMPLE, True)) == "161"


def test_part2_example():
    assert part2(parse(EXAMPLE, True)) == "48"


def test_ungated_system_ignores_dont():
    commands = [Dont(), Mul(2, 3)]
    system = MulSystem(gated=False)
    for command in commands:
        system.execute(command)
    assert system.result == 6


def test_gated_system_skips_after_dont():
    system = MulSystem(gated=True)
    for command in [Dont(), Mul(2, 3)]:
        system.execute(command)
    assert system.result == 0
    assert system.active is False


def test_execute_rejects_unknown_command():
    with pytest.raises(TypeError):
        MulSystem().execute("mul(1,2)")  # type: ignore[arg-type]


def test_parse_only_terminated_lines():
    assert parse("mul(1,2)\nmul(3,4)", False) == [Mul(1, 2)]