"""
Suite Comparison

Runs a set of benchmark cases and reports each one relative to the
declared baseline, fastest first.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from errorcost.benchmark.cases import BenchmarkCase
from errorcost.benchmark.harness import BenchmarkConfig, BenchmarkHarness, BenchmarkResult
from errorcost.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


@dataclass
class CaseResult:
    """Benchmark result for one case.

    Attributes:
        name: Case name.
        description: Case description.
        result: Timing statistics.
        ratio: Median relative to the baseline median (> 1 is slower).
        baseline: Whether this case is the baseline.
    """

    name: str
    description: str
    result: BenchmarkResult
    ratio: float
    baseline: bool = False


@dataclass
class SuiteResult:
    """Results for a whole suite.

    Attributes:
        rows: Case results ordered fastest to slowest by median.
    """

    rows: list[CaseResult]

    @property
    def baseline(self) -> CaseResult:
        """The baseline row.

        Raises:
            ConfigurationError: If no row is marked as baseline.
        """
        for row in self.rows:
            if row.baseline:
                return row
        raise ConfigurationError("Suite has no baseline case", key="baseline")

    @property
    def fastest(self) -> CaseResult:
        if not self.rows:
            raise ConfigurationError("Suite has no cases")
        return self.rows[0]

    def get(self, name: str) -> CaseResult:
        """Look up a case result by name.

        Raises:
            KeyError: If no case has that name.
        """
        for row in self.rows:
            if row.name == name:
                return row
        raise KeyError(name)

    def summary(self) -> str:
        """Generate summary string.

        Returns:
            Human-readable summary, one line per case (empty for
            a suite with no cases).
        """
        if not self.rows:
            return ""

        width = max(len(row.name) for row in self.rows)
        lines = []
        for row in self.rows:
            marker = "  (baseline)" if row.baseline else ""
            lines.append(
                f"{row.name:<{width}}  {row.result.median_ns:10.1f} ns  "
                f"{row.ratio:6.2f}x{marker}"
            )
        return "\n".join(lines)


def _ratio(median_ns: float, baseline_ns: float) -> float:
    if baseline_ns > 0:
        return median_ns / baseline_ns
    return 1.0 if median_ns == 0 else float("inf")


def run_suite(
    cases: Sequence[BenchmarkCase],
    config: BenchmarkConfig | None = None,
) -> SuiteResult:
    """Benchmark every case and compare against the baseline.

    Args:
        cases: Cases to run; exactly one must be the baseline.
        config: Benchmark configuration (uses defaults if None).

    Returns:
        SuiteResult ordered fastest to slowest.

    Raises:
        ConfigurationError: If cases is empty, has duplicate names, or
            does not declare exactly one baseline.
    """
    if not cases:
        raise ConfigurationError("No benchmark cases given")

    names = [case.name for case in cases]
    if len(set(names)) != len(names):
        raise ConfigurationError("Benchmark case names must be unique", key="name", value=names)

    baselines = [case.name for case in cases if case.baseline]
    if len(baselines) != 1:
        raise ConfigurationError(
            f"Expected exactly one baseline case, got {len(baselines)}",
            key="baseline",
            value=baselines,
        )

    harness = BenchmarkHarness(config)
    results: dict[str, BenchmarkResult] = {}

    for case in cases:
        results[case.name] = harness.run(case.fn)
        logger.debug("Finished case %s", case.name)

    baseline_ns = results[baselines[0]].median_ns

    rows = [
        CaseResult(
            name=case.name,
            description=case.description,
            result=results[case.name],
            ratio=_ratio(results[case.name].median_ns, baseline_ns),
            baseline=case.baseline,
        )
        for case in cases
    ]
    rows.sort(key=lambda row: row.result.median_ns)

    return SuiteResult(rows=rows)
