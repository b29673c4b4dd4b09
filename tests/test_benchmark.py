from unittest import mock

import pytest

from aoc2024.benchmark import BenchmarkResult, benchmark


def test_benchmark_returns_result():
    outcome = benchmark(lambda: "answer")
    assert outcome.result == "answer"
    assert outcome.time_ms >= 0


def test_benchmark_measures_milliseconds():
    with mock.patch(
        "aoc2024.benchmark.time.monotonic_ns",
        side_effect=[1_000_000, 5_000_000],
    ):
        outcome = benchmark(lambda: 7)
    assert outcome == BenchmarkResult(result=7, time_ms=4)


def test_benchmark_propagates_errors():
    def failing():
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError, match="boom"):
        benchmark(failing)