import pytest

from aoc2024.day22 import next_secret, nth_secret, parse, part1, part2

EXAMPLE = "1\n2\n3\n2024\n"


def test_example_part1():
    assert part1(parse(EXAMPLE, True)) == "37990510"


def test_example_part2():
    assert part2(parse(EXAMPLE, True)) == "23"


def test_parse_reads_first_number_of_each_line():
    assert parse(EXAMPLE) == (1, 2, 3, 2024)


def test_parse_rejects_line_without_number():
    with pytest.raises(ValueError):
        parse("abc\n")


def test_next_secret_worked_example():
    assert next_secret(123) == 15887950


def test_nth_secret_zero_steps_is_identity():
    assert nth_secret(98765, 0) == 98765


@pytest.mark.parametrize("secret", [1, 123, 2024, 16777215])
def test_nth_secret_composes(secret):
    assert nth_secret(secret, 25) == nth_secret(nth_secret(secret, 10), 15)


@pytest.mark.parametrize("secret", [0, 1, 123, 10**12])
def test_secrets_stay_within_24_bits(secret):
    value = secret
    for _ in range(50):
        value = next_secret(value)
        assert 0 <= value < 1 << 24


def test_part2_never_exceeds_nine_per_buyer():
    secrets = parse(EXAMPLE)
    assert 0 <= int(part2(secrets)) <= 9 * len(secrets)


def test_part2_single_buyer_at_most_nine():
    assert 0 <= int(part2((123,))) <= 9


def test_part1_is_sum_over_buyers():
    assert int(part1((1, 2))) == int(part1((1,))) + int(part1((2,)))