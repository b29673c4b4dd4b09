import pytest

from aoc2024.day11 import count_after_blinks, next_stones, parse, part1, part2

EXAMPLE = "125 17\n"


def test_example_part1():
    assert part1(parse(EXAMPLE, True)) == "55312"


def test_example_part2():
    assert part2(parse(EXAMPLE, True)) == "65601038650482"


def test_parse():
    assert parse(EXAMPLE) == (125, 17)


def test_zero_becomes_one():
    assert next_stones(0) == [1]


def test_odd_digits_multiply():
    assert next_stones(1) == [2024]


def test_even_digits_split_drops_leading_zeros():
    assert next_stones(1000) == [10, 0]


@pytest.mark.parametrize("number", [17, 1234, 99, 253000, 12345678])
def test_split_halves_rebuild_number(number):
    left, right = next_stones(number)
    width = len(str(number)) // 2
    assert f"{left}{right:0{width}d}" == str(number)


def test_no_blinks_keeps_count():
    assert count_after_blinks([125, 17, 0], 0) == 3


@pytest.mark.parametrize("numbers", [[125, 17], [0, 1, 10, 99, 999]])
def test_one_blink_matches_next_stones(numbers):
    assert count_after_blinks(numbers, 1) == sum(len(next_stones(n)) for n in numbers)


def test_count_is_additive():
    assert count_after_blinks([125, 17], 10) == (
        count_after_blinks([125], 10) + count_after_blinks([17], 10)
    )