"""
Benchmark Harness

Times a zero-argument callable in batches and summarizes per-call latency.
"""
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any, Callable

from errorcost.benchmark.stats import (
    calculate_mean,
    calculate_percentile,
    calculate_std,
)
from errorcost.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class BenchmarkConfig:
    """Configuration for benchmark runs.

    Attributes:
        warmup_iters: Number of untimed warmup samples.
        timed_iters: Number of timed samples.
        inner_iters: Calls of the measured function per sample. A single
            dictionary probe is below timer resolution, so each sample
            times a batch and reports the per-call average.
    """

    warmup_iters: int = 10
    timed_iters: int = 30
    inner_iters: int = 1000

    def validate(self) -> None:
        """Check iteration counts.

        Raises:
            ConfigurationError: If any count is out of range.
        """
        if self.warmup_iters < 0:
            raise ConfigurationError(
                "warmup_iters must be >= 0",
                key="warmup_iters",
                value=self.warmup_iters,
            )
        if self.timed_iters < 1:
            raise ConfigurationError(
                "timed_iters must be >= 1",
                key="timed_iters",
                value=self.timed_iters,
            )
        if self.inner_iters < 1:
            raise ConfigurationError(
                "inner_iters must be >= 1",
                key="inner_iters",
                value=self.inner_iters,
            )


@dataclass
class BenchmarkResult:
    """Result of a benchmark run.

    All values are per call, in nanoseconds.

    Attributes:
        latencies_ns: Per-call latency of each timed sample.
        median_ns: Median latency.
        p95_ns: 95th percentile latency.
        p99_ns: 99th percentile latency.
        mean_ns: Mean latency.
        std_ns: Standard deviation of latency.
        min_ns: Minimum latency.
        max_ns: Maximum latency.
    """

    latencies_ns: list[float]
    median_ns: float
    p95_ns: float
    p99_ns: float
    mean_ns: float
    std_ns: float
    min_ns: float
    max_ns: float

    @classmethod
    def from_latencies(cls, latencies_ns: list[float]) -> "BenchmarkResult":
        """Summarize raw per-call latencies.

        Args:
            latencies_ns: Per-call latency samples.

        Returns:
            BenchmarkResult with summary statistics.

        Raises:
            ValueError: If latencies_ns is empty.
        """
        return cls(
            latencies_ns=list(latencies_ns),
            median_ns=calculate_percentile(latencies_ns, 50),
            p95_ns=calculate_percentile(latencies_ns, 95),
            p99_ns=calculate_percentile(latencies_ns, 99),
            mean_ns=calculate_mean(latencies_ns),
            std_ns=calculate_std(latencies_ns),
            min_ns=min(latencies_ns),
            max_ns=max(latencies_ns),
        )


class BenchmarkHarness:
    """Harness for running micro-benchmarks.

    Provides warmup samples, batched timing, and summary statistics.

    Example:
        ```python
        config = BenchmarkConfig(warmup_iters=10, timed_iters=30)
        harness = BenchmarkHarness(config)

        result = harness.run(lambda: service.get_user_or_default(""))
        print(f"Median: {result.median_ns:.1f} ns")
        ```
    """

    def __init__(self, config: BenchmarkConfig | None = None) -> None:
        """Initialize benchmark harness.

        Args:
            config: Benchmark configuration (defaults if None).

        Raises:
            ConfigurationError: If the configuration is invalid.
        """
        self.config = config if config is not None else BenchmarkConfig()
        self.config.validate()

    def run(self, fn: Callable[[], Any]) -> BenchmarkResult:
        """Run benchmark on a function.

        Args:
            fn: Function to benchmark (should take no arguments).

        Returns:
            BenchmarkResult with timing statistics.
        """
        self.warmup(fn)
        latencies_ns = self.time_iterations(fn)
        result = BenchmarkResult.from_latencies(latencies_ns)

        logger.debug(
            "Benchmarked %s: median=%.1fns mean=%.1fns std=%.1fns",
            getattr(fn, "__qualname__", repr(fn)),
            result.median_ns,
            result.mean_ns,
            result.std_ns,
        )
        return result

    def warmup(self, fn: Callable[[], Any]) -> None:
        """Run warmup samples.

        Args:
            fn: Function to run for warmup.
        """
        inner = range(self.config.inner_iters)
        for _ in range(self.config.warmup_iters):
            for _ in inner:
                fn()

    def time_iterations(self, fn: Callable[[], Any]) -> list[float]:
        """Time samples and return per-call latencies.

        Args:
            fn: Function to time.

        Returns:
            List of per-call latencies in nanoseconds, one per sample.
        """
        inner = range(self.config.inner_iters)
        calls = self.config.inner_iters
        latencies: list[float] = []

        for _ in range(self.config.timed_iters):
            start = time.perf_counter_ns()
            for _ in inner:
                fn()
            end = time.perf_counter_ns()
            latencies.append((end - start) / calls)

        return latencies


def benchmark(
    fn: Callable[[], Any],
    warmup_iters: int = 10,
    timed_iters: int = 30,
    inner_iters: int = 1000,
) -> BenchmarkResult:
    """Convenience function for running a single benchmark.

    Args:
        fn: Function to benchmark.
        warmup_iters: Number of warmup samples.
        timed_iters: Number of timed samples.
        inner_iters: Calls per sample.

    Returns:
        BenchmarkResult with timing statistics.
    """
    config = BenchmarkConfig(
        warmup_iters=warmup_iters,
        timed_iters=timed_iters,
        inner_iters=inner_iters,
    )
    harness = BenchmarkHarness(config)
    return harness.run(fn)
