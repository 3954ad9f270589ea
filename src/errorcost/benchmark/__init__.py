"""
errorcost Benchmark Module

Micro-benchmark harness and the error signaling benchmark cases.
"""
from errorcost.benchmark.harness import (
    BenchmarkConfig,
    BenchmarkResult,
    BenchmarkHarness,
    benchmark,
)
from errorcost.benchmark.cases import (
    BenchmarkCase,
    ErrorSignalingBenchmark,
)
from errorcost.benchmark.comparison import (
    CaseResult,
    SuiteResult,
    run_suite,
)

__all__ = [
    # Harness
    "BenchmarkConfig",
    "BenchmarkResult",
    "BenchmarkHarness",
    "benchmark",
    # Cases
    "BenchmarkCase",
    "ErrorSignalingBenchmark",
    # Comparison
    "CaseResult",
    "SuiteResult",
    "run_suite",
]
