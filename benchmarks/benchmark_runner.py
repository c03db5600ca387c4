"""
iterthing Benchmark Runner
==========================

Times each combinator against its builtin / itertools counterpart and checks
that both produce the same values.

Usage:
    python -m benchmarks.benchmark_runner
"""

import sys
import itertools
import functools
import operator
import statistics
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, List, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import iterthing as it
from iterthing.utils.helpers import format_ns, format_ratio, time_calls


ITERATIONS = 50      # Benchmark iterations
WARMUP = 10          # Warmup iterations
SIZE = 10_000        # Elements per source


@dataclass
class BenchmarkResult:
    name: str
    baseline_times_ns: List[int] = field(default_factory=list)
    measured_times_ns: List[int] = field(default_factory=list)
    correct: bool = True
    error: Optional[str] = None

    @property
    def baseline_median(self) -> float:
        return statistics.median(self.baseline_times_ns) if self.baseline_times_ns else 0.0

    @property
    def measured_median(self) -> float:
        return statistics.median(self.measured_times_ns) if self.measured_times_ns else 0.0


def run_benchmark_pair(
    name: str,
    baseline: Callable[[], Any],
    measured: Callable[[], Any],
    iterations: int = ITERATIONS,
    warmup: int = WARMUP,
) -> BenchmarkResult:
    """Run baseline and iterthing versions of the same pipeline."""
    result = BenchmarkResult(name=name)
    try:
        result.correct = baseline() == measured()
        result.baseline_times_ns = time_calls(baseline, iterations, warmup)
        result.measured_times_ns = time_calls(measured, iterations, warmup)
    except Exception as e:
        result.error = str(e)
        result.correct = False
    return result


def get_benchmarks():
    data = list(range(SIZE))
    words = [str(i) for i in range(SIZE // 2)]
    add = operator.add

    return [
        ("map", lambda: list(map(lambda x: x * 2, data)),
                lambda: it.collect(it.map(data, lambda x: x * 2))),
        ("filter", lambda: list(filter(lambda x: x % 3 == 0, data)),
                   lambda: it.collect(it.filter(data, lambda x: x % 3 == 0))),
        ("chain", lambda: list(itertools.chain(data, data)),
                  lambda: it.collect(it.chain(data, data))),
        ("zip", lambda: list(itertools.zip_longest(data, words)),
                lambda: it.collect(it.zip(data, words))),
        ("pairs", lambda: list(itertools.pairwise(data)),
                  lambda: it.collect(it.pairs(data))),
        ("steps", lambda: list(itertools.accumulate(data, add)),
                  lambda: it.collect(it.steps(data, add, 0))),
        ("reduce", lambda: functools.reduce(add, data, 0),
                   lambda: it.reduce(data, add, 0)),
        ("repeat", lambda: list(itertools.repeat(42, SIZE)),
                   lambda: it.collect(it.repeat(42, SIZE))),
        ("last", lambda: data[-1],
                 lambda: it.last(iter(data))),
        ("lazy_chain", lambda: [x * x + 1 for x in data if x % 2 == 0][:100],
                       lambda: it.lazy(data).filter(lambda x: x % 2 == 0)
                                            .map(lambda x: x * x)
                                            .map(lambda x: x + 1)
                                            .take(100)
                                            .collect()),
    ]


def run_benchmarks() -> List[BenchmarkResult]:
    """Run the complete benchmark suite and print a summary table."""
    results = []
    print(f"{'Benchmark':<14} {'Baseline':>12} {'iterthing':>12}  {'Ratio':<16} OK")
    print("-" * 62)
    for name, baseline, measured in get_benchmarks():
        result = run_benchmark_pair(name, baseline, measured)
        results.append(result)
        if result.error:
            print(f"{name:<14} ERROR: {result.error}")
            continue
        print(
            f"{name:<14} {format_ns(result.baseline_median):>12} "
            f"{format_ns(result.measured_median):>12}  "
            f"{format_ratio(result.baseline_median, result.measured_median):<16} "
            f"{'yes' if result.correct else 'NO'}"
        )
    return results


if __name__ == '__main__':
    run_benchmarks()
