"""Print Queue: checking and repairing page orderings."""

from __future__ import annotations

import re
from collections import defaultdict
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass

from .inputs import split_lines

_RULE = re.compile(r"\d+\|\d+")
_NUMBER = re.compile(r"\d+")


@dataclass(frozen=True)
class PrintQueue:
    """Ordering rules ``(before, after)`` and the updates to print."""

    rules: tuple[tuple[int, int], ...]
    updates: tuple[tuple[int, ...], ...]


def _rule_map(rules: Iterable[tuple[int, int]]) -> dict[int, set[int]]:
    following: dict[int, set[int]] = defaultdict(set)
    for before, after in rules:
        following[before].add(after)
    return dict(following)


def _is_ordered(pages: Sequence[int], rule_map: Mapping[int, set[int]]) -> bool:
    seen: set[int] = set()
    for page in pages:
        seen.add(page)
        if not rule_map.get(page, set()).isdisjoint(seen):
            return False
    return True


def _first_violation(
    pages: Sequence[int], rule_map: Mapping[int, set[int]]
) -> tuple[int, int] | None:
    seen: dict[int, int] = {}
    for index, page in enumerate(pages):
        seen[page] = index
        targets = [seen[after] for after in rule_map.get(page, ()) if after in seen]
        if targets:
            return index, min(targets)
    return None


def correct_update(
    pages: Sequence[int], rules: Iterable[tuple[int, int]]
) -> tuple[list[int], bool]:
    """Reorder pages until no rule is broken.

    Returns the pages and whether anything had to be moved.
    """
    rule_map = _rule_map(rules)
    current = list(pages)
    corrected = False
    while (move := _first_violation(current, rule_map)) is not None:
        source, target = move
        if source == target:
            raise ValueError(f"rule orders page {current[source]} before itself")
        current.insert(target, current.pop(source))
        corrected = True
    return current, corrected


def parse(text: str, test: bool = False) -> PrintQueue:
    rules: list[tuple[int, int]] = []
    updates: list[tuple[int, ...]] = []
    for line in split_lines(text):
        if _RULE.search(line):
            before, after = _NUMBER.findall(line)[:2]
            rules.append((int(before), int(after)))
        elif line:
            updates.append(tuple(int(n) for n in _NUMBER.findall(line)))
    return PrintQueue(tuple(rules), tuple(updates))


def part1(puzzle: PrintQueue) -> str:
    rule_map = _rule_map(puzzle.rules)
    return str(
        sum(
            pages[len(pages) // 2]
            for pages in puzzle.updates
            if _is_ordered(pages, rule_map)
        )
    )


def part2(puzzle: PrintQueue) -> str:
    total = 0
    for pages in puzzle.updates:
        corrected_pages, corrected = correct_update(pages, puzzle.rules)
        if corrected:
            total += corrected_pages[len(corrected_pages) // 2]
    return str(total)