import pytest

from aoc2024.day09 import DiskBlock, parse, part1, part2

EXAMPLE = "2333133121414131402\n"


def test_parse_pairs_and_trailing_file():
    assert parse("12345\n") == (
        DiskBlock(0, 1, 2),
        DiskBlock(1, 3, 4),
        DiskBlock(2, 5, 0),
    )


def test_parse_even_length_line():
    assert parse("1203\n") == (DiskBlock(0, 1, 2), DiskBlock(1, 0, 3))


def test_parse_drops_trailing_empty_file():
    assert parse("120\n") == (DiskBlock(0, 1, 2),)


def test_parse_rejects_non_digits():
    with pytest.raises(ValueError):
        parse("12a4\n")


def test_part1_example():
    assert part1(parse(EXAMPLE)) == "1928"


def test_part2_example():
    assert part2(parse(EXAMPLE)) == "2858"


def test_single_file_has_zero_checksum():
    puzzle = parse("9\n")
    assert part1(puzzle) == "0"
    assert part2(puzzle) == "0"


def test_already_compact_disk_is_unchanged_by_either_part():
    puzzle = (DiskBlock(0, 2, 0), DiskBlock(1, 3, 0), DiskBlock(2, 1, 0))
    assert part1(puzzle) == part2(puzzle)


def test_parts_do_not_mutate_input():
    puzzle = parse(EXAMPLE)
    snapshot = tuple(puzzle)
    part1(puzzle)
    part2(puzzle)
    assert puzzle == snapshot