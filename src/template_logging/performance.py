"""
Timing helpers for formatter benchmarks
"""

import time
from dataclasses import dataclass
from typing import Callable

from .formatter.base import Formatter
from .record import LogRecord


@dataclass
class BenchmarkResult:
    """Per-call timings in milliseconds over several samples"""

    mean_ms: float
    min_ms: float
    max_ms: float

    @property
    def throughput_per_sec(self) -> float:
        return 1000 / self.mean_ms if self.mean_ms > 0 else float("inf")


def measure_function_performance(
    func: Callable[[], object], iterations: int = 1000, samples: int = 5
) -> BenchmarkResult:
    """
    Time ``func`` over ``samples`` runs of ``iterations`` calls each

    Args:
        func: Zero-argument callable to measure
        iterations: Calls per sample
        samples: Number of samples

    Returns:
        BenchmarkResult with per-call timings
    """
    times = []
    for _ in range(samples):
        start = time.perf_counter()
        for _ in range(iterations):
            func()
        times.append((time.perf_counter() - start) / iterations * 1000)

    return BenchmarkResult(
        mean_ms=sum(times) / len(times),
        min_ms=min(times),
        max_ms=max(times),
    )


def measure_formatter(
    formatter: Formatter, record: LogRecord, iterations: int = 1000
) -> BenchmarkResult:
    """Time repeated rendering of one record"""
    return measure_function_performance(lambda: formatter.format(record), iterations)
