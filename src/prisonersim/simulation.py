from __future__ import annotations

from enum import Enum
from typing import Protocol

import numpy as np

from .union_find import DisjointSet

DEFAULT_NUM_PRISONERS = 100
DEFAULT_CYCLE_BOUND = 50


class Outcome(Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"


class IntegerSource(Protocol):
    def integers(self, low: int, high: int) -> int: ...


def run_trial(
    n: int = DEFAULT_NUM_PRISONERS,
    cycle_bound: int = DEFAULT_CYCLE_BOUND,
    rng: IntegerSource | None = None,
) -> Outcome:
    """Simulate one room of ``n`` prisoners following the cycle strategy.

    The permutation of boxes is never built: index ``current`` is paired with
    a uniform ``partner`` in ``[0, current]`` as in a Fisher-Yates shuffle, and
    the disjoint set accumulates the resulting cycles.  The trial fails as
    soon as one cycle grows past ``cycle_bound``.
    """
    if n < 1:
        raise ValueError("n must be >= 1")
    if rng is None:
        rng = np.random.default_rng()
    sets = DisjointSet(n)
    current = n - 1
    while current > 0:
        partner = int(rng.integers(0, current + 1))
        sets.union(current, partner)
        if sets.component_size(current) > cycle_bound:
            return Outcome.NOT_FOUND
        current -= 1
    return Outcome.FOUND


def run_trials(
    n: int,
    cycle_bound: int,
    trial_count: int,
    rng: IntegerSource,
) -> int:
    """Return how many of ``trial_count`` independent trials succeed.

    ``rng`` is shared by every trial and must not be reseeded between them.
    """
    if trial_count < 0:
        raise ValueError("trial_count must be non-negative")
    successes = 0
    for _ in range(trial_count):
        if run_trial(n, cycle_bound, rng) is Outcome.FOUND:
            successes += 1
    return successes
