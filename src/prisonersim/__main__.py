"""Command line entry point for the prisoners simulation."""

from __future__ import annotations

import argparse
import sys

from .parallel import simulate
from .simulation import DEFAULT_NUM_PRISONERS
from .stats import compute_stats, exact_success_probability, format_report

EXAMPLES = """\
examples:
  simulate 1000 with 2 threads:     prisonersim 1000 t 2
  simulate 1234 with 3 processes:   prisonersim 1234 p 3
  simulate 1234 sequentially:       prisonersim 1234 s
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="prisonersim",
        description="Estimate the success probability of the 100 prisoners problem.",
        epilog=EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("num_simulations", type=int, help="Number of simulated rooms")
    parser.add_argument(
        "mode",
        choices=["s", "t", "p"],
        help="s: sequential, t: threads, p: processes",
    )
    parser.add_argument("workers", type=int, nargs="?", help="Number of threads or processes (t and p only)")
    parser.add_argument(
        "--prisoners",
        type=int,
        default=DEFAULT_NUM_PRISONERS,
        help=f"Number of prisoners and boxes (default: {DEFAULT_NUM_PRISONERS})",
    )
    parser.add_argument(
        "--cycle-bound",
        type=int,
        default=None,
        help="Boxes each prisoner may open (default: half the prisoners)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for reproducible runs (default: OS entropy)")
    parser.add_argument(
        "--distribute-remainder",
        action="store_true",
        help="Hand leftover trials to the first workers instead of dropping them",
    )
    parser.add_argument("--verbose", action="store_true", help="Print per-worker statistics and the exact value")
    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.mode == "s" and args.workers is not None:
        parser.error("sequential mode takes no worker count")
    if args.mode in {"t", "p"} and args.workers is None:
        parser.error(f"mode {args.mode!r} requires a worker count")
    if args.workers is not None and args.workers < 1:
        parser.error("worker count must be >= 1")
    if args.num_simulations < 0:
        parser.error("number of simulations must be non-negative")
    if args.prisoners < 1:
        parser.error("number of prisoners must be >= 1")
    if args.cycle_bound is None:
        args.cycle_bound = args.prisoners // 2
    return args


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])

    result = simulate(
        args.num_simulations,
        args.mode,
        args.workers,
        n=args.prisoners,
        cycle_bound=args.cycle_bound,
        seed=args.seed,
        distribute_remainder=args.distribute_remainder,
        verbose=args.verbose,
    )
    try:
        stats = compute_stats(result.success_count, result.trial_count)
    except ValueError as exc:
        print(f"ERROR: {exc} (ran {result.trial_count} simulations)")
        return 1
    print(format_report(stats, result.label))
    if args.verbose and 2 * args.cycle_bound >= args.prisoners:
        exact = exact_success_probability(args.prisoners, args.cycle_bound)
        print(f"Exact value = {exact:f}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
