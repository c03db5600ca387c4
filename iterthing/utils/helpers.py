"""Timing and formatting helpers for the benchmark runner."""

import gc
import time
from typing import Any, Callable, List


class Timer:
    """
    Context manager that measures one block in nanoseconds.

    Garbage collection is paused inside the block unless ``pause_gc`` is
    False, so a collection cycle does not land on a single sample.
    """

    def __init__(self, pause_gc: bool = True):
        self.pause_gc = pause_gc
        self.start_ns = 0
        self.end_ns = 0
        self._gc_was_enabled = False

    def __enter__(self) -> 'Timer':
        self._gc_was_enabled = gc.isenabled()
        if self.pause_gc:
            gc.disable()
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc) -> None:
        self.end_ns = time.perf_counter_ns()
        if self.pause_gc and self._gc_was_enabled:
            gc.enable()

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns


def time_calls(func: Callable[[], Any], iterations: int, warmup: int = 0) -> List[int]:
    """
    Call ``func`` ``warmup`` times untimed, then ``iterations`` times under a
    ``Timer``. Returns the per-call samples in call order.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be >= 1, got {iterations}")
    if warmup < 0:
        raise ValueError(f"warmup must be >= 0, got {warmup}")

    for _ in range(warmup):
        func()

    samples = []
    for _ in range(iterations):
        with Timer() as t:
            func()
        samples.append(t.elapsed_ns)
    return samples


_UNITS = ((1_000_000_000, "s", 3), (1_000_000, "ms", 2), (1_000, "µs", 1))


def format_ns(ns: float) -> str:
    """Render a nanosecond count with the largest unit it reaches."""
    for scale, unit, digits in _UNITS:
        if ns >= scale:
            return f"{ns / scale:.{digits}f} {unit}"
    return f"{ns:.0f} ns"


def format_ratio(baseline_ns: float, measured_ns: float) -> str:
    """Describe ``measured_ns`` relative to ``baseline_ns``."""
    if measured_ns <= 0:
        return "∞x"
    if baseline_ns >= measured_ns:
        return f"{baseline_ns / measured_ns:.2f}x faster"
    return f"{measured_ns / baseline_ns:.2f}x slower"
