"""Bernoulli estimate, variance and normal-approximation interval."""

from __future__ import annotations

import math
from dataclasses import dataclass

Z_95 = 1.96


@dataclass(frozen=True)
class Statistics:
    success_count: int
    trial_count: int
    mean: float
    variance: float
    ci95: tuple[float, float]


def compute_stats(success_count: int, trial_count: int) -> Statistics:
    """Summarise ``success_count`` successes out of ``trial_count`` trials.

    Each trial is a Bernoulli variable, so the sum of squares equals the sum
    and the unbiased sample variance reduces to
    ``success_count * (1 - mean) / (trial_count - 1)``.
    """
    if trial_count <= 1:
        raise ValueError("trial_count must be > 1 to estimate a variance")
    if not 0 <= success_count <= trial_count:
        raise ValueError("success_count must lie in [0, trial_count]")
    mean = success_count / trial_count
    variance = success_count * (1 - mean) / (trial_count - 1)
    half_width = Z_95 * math.sqrt(variance / trial_count)
    return Statistics(
        success_count=success_count,
        trial_count=trial_count,
        mean=mean,
        variance=variance,
        ci95=(mean - half_width, mean + half_width),
    )


def format_report(stats: Statistics, label: str) -> str:
    low, high = stats.ci95
    return (
        f"\nStatistics of {label}:\n"
        f"Number of simulations: {stats.trial_count}\n"
        f"Parameter Estimate = {stats.mean:f}\n"
        f"Variance is {stats.variance:f}\n"
        f"95% CI: {{{low:f}, {high:f}}}"
    )


def exact_success_probability(n: int = 100, cycle_bound: int = 50) -> float:
    """Closed form ``1 - (H_n - H_bound)`` for ``2 * cycle_bound >= n``.

    A permutation of ``n`` has at most one cycle longer than ``n / 2``, and it
    has a cycle of length exactly ``k`` with probability ``1 / k``.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    if cycle_bound >= n:
        return 1.0
    if cycle_bound < 0 or 2 * cycle_bound < n:
        raise ValueError("closed form requires n / 2 <= cycle_bound")
    return 1.0 - math.fsum(1.0 / k for k in range(cycle_bound + 1, n + 1))
