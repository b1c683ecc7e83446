"""Monte Carlo estimate of the 100 prisoners problem."""

from __future__ import annotations

from importlib import import_module
from typing import Any

_EXPORTS = {
    "DisjointSet": "prisonersim.union_find",
    "Outcome": "prisonersim.simulation",
    "run_trial": "prisonersim.simulation",
    "run_trials": "prisonersim.simulation",
    "Statistics": "prisonersim.stats",
    "compute_stats": "prisonersim.stats",
    "exact_success_probability": "prisonersim.stats",
    "SimulationResult": "prisonersim.parallel",
    "simulate": "prisonersim.parallel",
    "split_trials": "prisonersim.parallel",
}

__all__ = sorted(_EXPORTS)


def __getattr__(name: str) -> Any:  # pragma: no cover - simple lazy import shim
    if name in _EXPORTS:
        module = import_module(_EXPORTS[name])
        return getattr(module, name)
    raise AttributeError(f"module 'prisonersim' has no attribute {name!r}")


def __dir__() -> list[str]:  # pragma: no cover - cosmetic helper
    return sorted(__all__)
