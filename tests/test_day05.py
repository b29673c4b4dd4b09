import pytest

from aoc2024.day05 import correct_update, parse, part1, part2

EXAMPLE = (
    "47|53\n97|13\n97|61\n97|47\n75|29\n61|13\n75|53\n29|13\n97|29\n53|29\n"
    "61|53\n97|53\n61|29\n47|13\n75|47\n97|75\n47|61\n75|61\n47|29\n75|13\n"
    "53|13\n"
    "\n"
    "75,47,61,53,29\n"
    "97,61,53,29,13\n"
    "75,29,13\n"
    "75,97,47,61,53\n"
    "61,13,29\n"
    "97,13,75,29,47\n"
)


def _respects(pages, rules):
    position = {page: i for i, page in enumerate(pages)}
    return all(
        position[before] < position[after]
        for before, after in rules
        if before in position and after in position
    )


def test_example_part1():
    assert part1(parse(EXAMPLE, True)) == "143"


def test_example_part2():
    assert part2(parse(EXAMPLE, True)) == "123"


def test_parse_counts():
    queue = parse(EXAMPLE)
    assert len(queue.rules) == 21
    assert queue.rules[0] == (47, 53)
    assert len(queue.updates) == 6
    assert queue.updates[2] == (75, 29, 13)


def test_correct_update_leaves_ordered_pages():
    queue = parse(EXAMPLE)
    pages, corrected = correct_update(queue.updates[0], queue.rules)
    assert pages == list(queue.updates[0])
    assert corrected is False


def test_correct_update_example():
    queue = parse(EXAMPLE)
    pages, corrected = correct_update((75, 97, 47, 61, 53), queue.rules)
    assert pages == [97, 75, 47, 61, 53]
    assert corrected is True


@pytest.mark.parametrize("index", [3, 4, 5])
def test_corrected_updates_respect_rules(index):
    queue = parse(EXAMPLE)
    original = queue.updates[index]
    pages, corrected = correct_update(original, queue.rules)
    assert corrected is True
    assert sorted(pages) == sorted(original)
    assert _respects(pages, queue.rules)


def test_self_rule_is_rejected():
    with pytest.raises(ValueError):
        correct_update((1, 2), [(1, 1)])