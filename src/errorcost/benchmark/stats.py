"""Latency summary helpers."""
from __future__ import annotations

import statistics
from typing import Sequence


def calculate_percentile(values: Sequence[float], percentile: float) -> float:
    """Percentile of ``values`` with linear interpolation between ranks.

    ``percentile`` is on a 0-100 scale; 0 gives the minimum and 100
    the maximum.

    Raises:
        ValueError: If values is empty or percentile is outside 0-100.
    """
    if not values:
        raise ValueError("no values to take a percentile of")
    if percentile < 0 or percentile > 100:
        raise ValueError(f"percentile {percentile} is outside 0-100")

    ordered = sorted(values)
    rank = (len(ordered) - 1) * percentile / 100
    below = int(rank)
    if below == len(ordered) - 1:
        return float(ordered[below])

    start = ordered[below]
    return start + (ordered[below + 1] - start) * (rank - below)


# statistics.StatisticsError subclasses ValueError, so empty input
# surfaces as ValueError from all three.

def calculate_mean(values: Sequence[float]) -> float:
    return statistics.fmean(values)


def calculate_variance(values: Sequence[float]) -> float:
    """Population variance."""
    return statistics.pvariance(values)


def calculate_std(values: Sequence[float]) -> float:
    """Population standard deviation."""
    return statistics.pstdev(values)
