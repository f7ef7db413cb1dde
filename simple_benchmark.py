#!/usr/bin/env python3
"""
Simple performance comparison: template rendering vs logging.Formatter
"""

import logging
import statistics
import time
from datetime import datetime

from template_logging import GlogFormatter, LogRecord, Severity, StdFormatter


def time_function(func, iterations=10000):
    """Time a function over multiple iterations"""
    times = []
    for _ in range(5):  # Run 5 times for average
        start = time.perf_counter()
        for _ in range(iterations):
            func()
        end = time.perf_counter()
        times.append((end - start) / iterations * 1_000_000)  # us per iteration

    return {
        "mean": statistics.mean(times),
        "stdev": statistics.stdev(times) if len(times) > 1 else 0,
    }


def main():
    print("Template Logging Performance Analysis")
    print("=" * 50)

    record = LogRecord(
        time=datetime.now(),
        severity=Severity.PANIC,
        file="/path/to/testing.py",
        line=391,
        function="pkg.func",
        package="pkg",
        message="hello there!",
        pid=1234,
    )
    std_record = logging.LogRecord(
        name="bench",
        level=logging.CRITICAL,
        pathname="/path/to/testing.py",
        lineno=391,
        msg="hello there!",
        args=(),
        exc_info=None,
    )

    candidates = {
        "short grammar": StdFormatter("[%D %t] [%L:%f:%s] %M").format,
        "named grammar": StdFormatter("[%{Date} %{Time}] [%{SEVERITY}:%{File}:%{Line}] %{Message}").format,
        "glog": GlogFormatter().format,
    }
    baseline = logging.Formatter(
        "[%(asctime)s] [%(levelname)s:%(filename)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    for name, func in candidates.items():
        stats = time_function(lambda: func(record))
        print(f"{name:>15}: {stats['mean']:.2f}us (+/- {stats['stdev']:.2f})")

    stats = time_function(lambda: baseline.format(std_record))
    print(f"{'logging stdlib':>15}: {stats['mean']:.2f}us (+/- {stats['stdev']:.2f})")


if __name__ == "__main__":
    main()
