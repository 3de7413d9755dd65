"""Unit tests for sample statistics and summaries."""

import math

import numpy as np
import pytest

from dp_numerics.errors import InvalidArgumentError
from dp_numerics.stats import (
    SampleSummary,
    mean,
    order_statistic,
    standard_deviation,
    summarize,
    variance,
    vector_filter,
    vector_to_string,
)


@pytest.fixture
def samples() -> list[float]:
    """Provides the reference sample used across the statistics tests."""
    return [1, 5, 7, 9, 13]


def test_vector_statistics(samples: list[float]) -> None:
    """Moments use the population definitions."""
    assert mean(samples) == 7
    assert variance(samples) == 16
    assert standard_deviation(samples) == 4


@pytest.mark.parametrize("percentile,expected", [
    (0.0, 1),
    (1.0, 13),
    (0.6, 8),
    (0.5, 7),
    (0.25, 5),
    (-0.5, 1),
    (1.5, 13),
])
def test_order_statistic(samples: list[float], percentile, expected) -> None:
    """Ranks map onto the sorted sample; the extremes clamp."""
    assert order_statistic(percentile, samples) == expected


def test_order_statistic_does_not_mutate_input() -> None:
    """Sorting happens on a copy."""
    values = [13.0, 1.0, 9.0, 5.0, 7.0]
    arr = np.array(values)
    order_statistic(0.3, values)
    order_statistic(0.3, arr)
    assert values == [13.0, 1.0, 9.0, 5.0, 7.0]
    assert arr.tolist() == values


def test_order_statistic_rejects_nan_percentile(samples: list[float]) -> None:
    """A NaN rank has no meaning."""
    with pytest.raises(InvalidArgumentError):
        order_statistic(math.nan, samples)


@pytest.mark.parametrize("func", [mean, variance, standard_deviation])
def test_empty_samples_rejected(func) -> None:
    """Statistics of an empty sample are undefined."""
    with pytest.raises(InvalidArgumentError):
        func([])


def test_multidimensional_samples_rejected() -> None:
    """Samples are a flat sequence."""
    with pytest.raises(InvalidArgumentError):
        mean([[1.0, 2.0], [3.0, 4.0]])


def test_vector_filter() -> None:
    """Selected elements are kept in their original order."""
    assert vector_filter([1, 2, 2, 3], [False, True, True, False]) == [2, 2]
    assert vector_filter([], []) == []


def test_vector_filter_length_mismatch() -> None:
    """The mask must line up with the values."""
    with pytest.raises(InvalidArgumentError):
        vector_filter([1, 2, 3], [True, False])


@pytest.mark.parametrize("values,expected", [
    ([1, 2, 2, 3], "[1, 2, 2, 3]"),
    ([1.0, 2.0, 2.0, 3.0], "[1, 2, 2, 3]"),
    ([0.5, -1.25], "[0.5, -1.25]"),
    (np.array([1.0, 2.5]), "[1, 2.5]"),
    ([], "[]"),
])
def test_vector_to_string(values, expected) -> None:
    """Sequences render as a bracketed, comma-space separated list."""
    assert vector_to_string(values) == expected


def test_summarize(samples: list[float]) -> None:
    """A summary bundles moments, extremes and order statistics."""
    summary = summarize(samples, percentiles=(0.0, 0.6, 1.0))
    assert isinstance(summary, SampleSummary)
    assert summary.count == 5
    assert summary.mean == 7
    assert summary.variance == 16
    assert summary.standard_deviation == 4
    assert (summary.minimum, summary.maximum) == (1, 13)
    assert summary.percentiles == {0.0: 1, 0.6: 8, 1.0: 13}
    assert summary.to_dict()["mean"] == 7


def test_summarize_default_percentiles(samples: list[float]) -> None:
    """Without explicit ranks the configured defaults are used."""
    summary = summarize(samples)
    assert list(summary.percentiles) == [0.05, 0.25, 0.5, 0.75, 0.95]


def test_summarize_rejects_invalid_percentiles(samples: list[float]) -> None:
    """Ranks outside [0, 1] are rejected."""
    with pytest.raises(ValueError):
        summarize(samples, percentiles=(0.5, 1.5))


def test_summarize_gaussian_noise() -> None:
    """Summaries recover the parameters of a large Gaussian sample."""
    rng = np.random.default_rng(7)
    draws = rng.normal(loc=0.0, scale=2.0, size=50_000)
    summary = summarize(draws, percentiles=(0.5,))
    assert summary.mean == pytest.approx(0.0, abs=0.05)
    assert summary.standard_deviation == pytest.approx(2.0, rel=0.02)
    assert summary.percentiles[0.5] == pytest.approx(0.0, abs=0.05)
