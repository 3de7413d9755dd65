"""Sample summaries for validating noise distributions in test harnesses."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any

from dp_numerics.config import StatisticsConfig

from .sample_stats import _as_samples, order_statistic

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import ArrayLike


@dataclass(frozen=True)
class SampleSummary:
    """Moments and order statistics of one sample.

    Attributes
    ----------
        count: int
            Number of samples.
        mean, variance, standard_deviation: float
            Population moments.
        minimum, maximum: float
            Extremes of the sample.
        percentiles: dict[float, float]
            Order statistic at each requested rank.
    """

    count: int
    mean: float
    variance: float
    standard_deviation: float
    minimum: float
    maximum: float
    percentiles: dict[float, float] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain dict (for logging, serialization)."""
        return asdict(self)


def summarize(
    values: ArrayLike,
    percentiles: Sequence[float] | None = None,
) -> SampleSummary:
    """Summarize a non-empty sample.

    Args
    ------
        values (ArrayLike): Samples, e.g. draws from a noise mechanism.
        percentiles (Sequence[float] | None): Ranks in ``[0, 1]``. Defaults
            to ``StatisticsConfig().summary_percentiles``.

    Returns
    -------
        SampleSummary: Moments, extremes and order statistics.

    Raises
    ------
        InvalidArgumentError: If ``values`` is empty.
        ValueError: If a percentile lies outside ``[0, 1]``.
    """
    samples = _as_samples(values)
    if percentiles is None:
        ranks = StatisticsConfig().summary_percentiles
    else:
        # Reuse the config validation for caller-supplied ranks.
        ranks = StatisticsConfig(summary_percentiles=tuple(percentiles)).summary_percentiles

    var = float(samples.var())
    return SampleSummary(
        count=int(samples.size),
        mean=float(samples.mean()),
        variance=var,
        standard_deviation=math.sqrt(var),
        minimum=float(samples.min()),
        maximum=float(samples.max()),
        percentiles={p: order_statistic(p, samples) for p in ranks},
    )
