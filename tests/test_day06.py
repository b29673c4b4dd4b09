import pytest

from aoc2024.day06 import Lab, parse, part1, part2
from aoc2024.grid import Vertex

EXAMPLE = (
    "....#.....\n"
    ".........#\n"
    "..........\n"
    "..#.......\n"
    ".......#..\n"
    "..........\n"
    ".#..^.....\n"
    "........#.\n"
    "#.........\n"
    "......#...\n"
)


def test_parse_example():
    lab = parse(EXAMPLE)
    assert lab.width == 10
    assert lab.height == 10
    assert lab.start == Vertex(4, 6)
    assert Vertex(4, 0) in lab.obstacles
    assert Vertex(0, 8) in lab.obstacles


def test_part1_example():
    assert part1(parse(EXAMPLE)) == "41"


def test_part2_example():
    assert part2(parse(EXAMPLE)) == "6"


def test_guard_walking_straight_out_visits_only_start():
    assert part1(parse(".^.\n")) == "1"


def test_visited_count_matches_open_column():
    lab = Lab(width=3, height=4, start=Vertex(1, 3))
    assert part1(lab) == str(lab.height)


def test_open_lab_has_no_loop_positions():
    lab = Lab(width=5, height=5, start=Vertex(2, 4))
    assert part2(lab) == "0"


def test_trapped_guard_is_an_error():
    lab = parse("###\n#^#\n###\n")
    with pytest.raises(ValueError):
        part1(lab)
    with pytest.raises(ValueError):
        part2(lab)


def test_contains():
    lab = parse(EXAMPLE)
    assert lab.contains(Vertex(0, 0))
    assert lab.contains(Vertex(9, 9))
    assert not lab.contains(Vertex(10, 0))
    assert not lab.contains(Vertex(0, -1))