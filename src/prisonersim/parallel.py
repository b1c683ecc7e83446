from __future__ import annotations

import os
from dataclasses import dataclass

import numpy as np
from joblib import Parallel, delayed

from .simulation import DEFAULT_CYCLE_BOUND, DEFAULT_NUM_PRISONERS, run_trials
from .stats import compute_stats, format_report

N_CPU = max(1, os.cpu_count() or 1)

SEQUENTIAL_LABEL = "Sequence (Single Thread / Process)"
THREADS_LABEL = "All threads"
PROCESSES_LABEL = "All processes"


@dataclass(frozen=True)
class SimulationResult:
    label: str
    success_count: int
    trial_count: int
    worker_counts: tuple[int, ...]
    worker_trials: tuple[int, ...]


def split_trials(total: int, workers: int, distribute_remainder: bool = False) -> list[int]:
    """Share ``total`` trials between ``workers``.

    By default each worker runs ``total // workers`` trials and the remainder
    is dropped, so 10 trials on 3 workers run 9.  With
    ``distribute_remainder`` the first ``total % workers`` workers run one
    extra trial each.
    """
    if workers < 1:
        raise ValueError("workers must be >= 1")
    if total < 0:
        raise ValueError("total must be non-negative")
    per_worker, remainder = divmod(total, workers)
    shares = [per_worker] * workers
    if distribute_remainder:
        for i in range(remainder):
            shares[i] += 1
    return shares


def spawn_generators(count: int, seed: int | None = None) -> list[np.random.Generator]:
    """One independent generator per worker.

    With ``seed=None`` the root sequence reads OS entropy once; an entropy
    failure propagates.
    """
    root = np.random.SeedSequence(seed)
    return [np.random.default_rng(child) for child in root.spawn(count)]


def _worker(num_simulations: int, n: int, cycle_bound: int, rng: np.random.Generator) -> int:
    return run_trials(n, cycle_bound, num_simulations, rng)


def _print_worker_stats(task_name: str, result: SimulationResult) -> None:
    for i, (successes, trials) in enumerate(zip(result.worker_counts, result.worker_trials)):
        if trials > 1:
            print(format_report(compute_stats(successes, trials), f"{task_name} {i + 1}"))
        else:
            print(f"\n{task_name} {i + 1}: {successes} successes in {trials} simulations")


def _simulate_split(
    total: int,
    workers: int,
    task_name: str,
    label: str,
    prefer: str,
    *,
    n: int,
    cycle_bound: int,
    seed: int | None,
    distribute_remainder: bool,
    verbose: bool,
) -> SimulationResult:
    shares = split_trials(total, workers, distribute_remainder=distribute_remainder)
    generators = spawn_generators(workers, seed)
    for i, share in enumerate(shares):
        print(f"{task_name} {i + 1}, number of simulations to perform: {share}")
    counts = Parallel(n_jobs=workers, prefer=prefer)(
        delayed(_worker)(share, n, cycle_bound, rng) for share, rng in zip(shares, generators)
    )
    result = SimulationResult(
        label=label,
        success_count=int(sum(counts)),
        trial_count=int(sum(shares)),
        worker_counts=tuple(int(c) for c in counts),
        worker_trials=tuple(shares),
    )
    if verbose:
        _print_worker_stats(task_name, result)
    return result


def simulate_sequential(
    total: int,
    *,
    n: int = DEFAULT_NUM_PRISONERS,
    cycle_bound: int = DEFAULT_CYCLE_BOUND,
    seed: int | None = None,
    verbose: bool = False,
) -> SimulationResult:
    if total < 0:
        raise ValueError("total must be non-negative")
    (rng,) = spawn_generators(1, seed)
    successes = run_trials(n, cycle_bound, total, rng)
    if verbose:
        print(f"Sequential run: {successes} successes in {total} simulations")
    return SimulationResult(
        label=SEQUENTIAL_LABEL,
        success_count=successes,
        trial_count=total,
        worker_counts=(successes,),
        worker_trials=(total,),
    )


def simulate_with_threads(
    total: int,
    num_threads: int,
    *,
    n: int = DEFAULT_NUM_PRISONERS,
    cycle_bound: int = DEFAULT_CYCLE_BOUND,
    seed: int | None = None,
    distribute_remainder: bool = False,
    verbose: bool = False,
) -> SimulationResult:
    return _simulate_split(
        total,
        num_threads,
        "Thread",
        THREADS_LABEL,
        "threads",
        n=n,
        cycle_bound=cycle_bound,
        seed=seed,
        distribute_remainder=distribute_remainder,
        verbose=verbose,
    )


def simulate_with_processes(
    total: int,
    num_processes: int,
    *,
    n: int = DEFAULT_NUM_PRISONERS,
    cycle_bound: int = DEFAULT_CYCLE_BOUND,
    seed: int | None = None,
    distribute_remainder: bool = False,
    verbose: bool = False,
) -> SimulationResult:
    return _simulate_split(
        total,
        num_processes,
        "Process",
        PROCESSES_LABEL,
        "processes",
        n=n,
        cycle_bound=cycle_bound,
        seed=seed,
        distribute_remainder=distribute_remainder,
        verbose=verbose,
    )


def simulate(
    total: int,
    mode: str = "s",
    workers: int | None = None,
    *,
    n: int = DEFAULT_NUM_PRISONERS,
    cycle_bound: int = DEFAULT_CYCLE_BOUND,
    seed: int | None = None,
    distribute_remainder: bool = False,
    verbose: bool = False,
) -> SimulationResult:
    """Run ``total`` trials sequentially (``"s"``), on threads (``"t"``) or on processes (``"p"``)."""
    if mode == "s":
        return simulate_sequential(total, n=n, cycle_bound=cycle_bound, seed=seed, verbose=verbose)
    if mode not in {"t", "p"}:
        raise ValueError(f"unknown mode {mode!r}; expected 's', 't' or 'p'")
    if workers is None:
        workers = N_CPU
    runner = simulate_with_threads if mode == "t" else simulate_with_processes
    return runner(
        total,
        workers,
        n=n,
        cycle_bound=cycle_bound,
        seed=seed,
        distribute_remainder=distribute_remainder,
        verbose=verbose,
    )
