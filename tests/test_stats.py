import pathlib
import sys

sys.path.insert(0, str(pathlib.Path(__file__).resolve().parents[1] / "src"))

import pytest

from prisonersim.stats import compute_stats, exact_success_probability, format_report


def test_stats_scenario():
    stats = compute_stats(31, 100)
    assert stats.mean == pytest.approx(0.31)
    assert stats.variance == pytest.approx(31 * 0.69 / 99)
    assert stats.variance == pytest.approx(0.2161, abs=1e-4)
    low, high = stats.ci95
    assert low == pytest.approx(0.2188, abs=2e-4)
    assert high == pytest.approx(0.4012, abs=2e-4)


def test_stats_bernoulli_variance_matches_sample_variance():
    successes, trials = 7, 20
    samples = [1.0] * successes + [0.0] * (trials - successes)
    mean = sum(samples) / trials
    sample_var = sum((x - mean) ** 2 for x in samples) / (trials - 1)
    assert compute_stats(successes, trials).variance == pytest.approx(sample_var)


def test_stats_all_success_has_zero_width():
    stats = compute_stats(10, 10)
    assert stats.mean == 1.0
    assert stats.variance == 0.0
    assert stats.ci95 == (1.0, 1.0)


@pytest.mark.parametrize("trials", [-1, 0, 1])
def test_stats_rejects_too_few_trials(trials):
    with pytest.raises(ValueError):
        compute_stats(0, trials)


def test_stats_rejects_impossible_counts():
    with pytest.raises(ValueError):
        compute_stats(11, 10)
    with pytest.raises(ValueError):
        compute_stats(-1, 10)


def test_format_report():
    report = format_report(compute_stats(31, 100), "All threads")
    assert report.splitlines() == [
        "",
        "Statistics of All threads:",
        "Number of simulations: 100",
        "Parameter Estimate = 0.310000",
        "Variance is 0.216061",
        "95% CI: {0.218895, 0.401105}",
    ]


def test_exact_value_for_hundred_prisoners():
    assert exact_success_probability() == pytest.approx(0.31182782, abs=1e-8)


def test_exact_value_edge_cases():
    assert exact_success_probability(5, 5) == 1.0
    assert exact_success_probability(2, 1) == pytest.approx(0.5)
    with pytest.raises(ValueError):
        exact_success_probability(10, 4)
    with pytest.raises(ValueError):
        exact_success_probability(0, 0)
