"""Timing a solver call."""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class BenchmarkResult(Generic[T]):
    """The value a call returned and how long it took, in milliseconds."""

    result: T
    time_ms: int


def benchmark(func: Callable[[], T]) -> BenchmarkResult[T]:
    """Call ``func`` and time it; exceptions from ``func`` propagate."""
    start = time.monotonic_ns() // 1_000_000
    result = func()
    end = time.monotonic_ns() // 1_000_000
    return BenchmarkResult(result=result, time_ms=end - start)