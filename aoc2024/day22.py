"""Monkey Market: pseudo-random secrets and banana prices."""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from itertools import pairwise

from .inputs import split_lines

_NUMBER = re.compile(r"\d+")
_MASK = (1 << 24) - 1
_ROUNDS = 2000


def next_secret(secret: int) -> int:
    """The secret number that follows ``secret``."""
    secret = ((secret << 6) ^ secret) & _MASK
    secret = ((secret >> 5) ^ secret) & _MASK
    return ((secret << 11) ^ secret) & _MASK


def nth_secret(secret: int, n: int) -> int:
    """The secret reached after ``n`` steps."""
    for _ in range(n):
        secret = next_secret(secret)
    return secret


def _first_prices(secret: int, rounds: int) -> dict[tuple[int, ...], int]:
    prices = [secret % 10]
    for _ in range(rounds):
        secret = next_secret(secret)
        prices.append(secret % 10)
    changes = [b - a for a, b in pairwise(prices)]
    sequences = zip(changes, changes[1:], changes[2:], changes[3:])
    first: dict[tuple[int, ...], int] = {}
    for sequence, price in zip(sequences, prices[4:]):
        first.setdefault(sequence, price)
    return first


def parse(text: str, test: bool = False) -> tuple[int, ...]:
    secrets = []
    for line in split_lines(text):
        match = _NUMBER.search(line)
        if match is None:
            raise ValueError(f"no number in line: {line!r}")
        secrets.append(int(match.group(0)))
    return tuple(secrets)


def part1(puzzle: Iterable[int]) -> str:
    return str(sum(nth_secret(secret, _ROUNDS) for secret in puzzle))


def part2(puzzle: Iterable[int]) -> str:
    totals: Counter[tuple[int, ...]] = Counter()
    for secret in puzzle:
        totals.update(_first_prices(secret, _ROUNDS))
    return str(max(totals.values(), default=0))