"""Small demonstration of the prisoners simulation converging on the exact value."""

from __future__ import annotations

from prisonersim.parallel import simulate
from prisonersim.stats import compute_stats, exact_success_probability, format_report


def main() -> None:
    exact = exact_success_probability(100, 50)
    for total in (1_000, 10_000, 50_000):
        result = simulate(total, "p", 4, seed=total)
        stats = compute_stats(result.success_count, result.trial_count)
        print(format_report(stats, result.label))
        low, high = stats.ci95
        print(f"Exact value {exact:f} inside CI: {low <= exact <= high}")


if __name__ == "__main__":
    main()
