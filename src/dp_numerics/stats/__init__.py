"""Summary statistics used by calibration and distribution-testing harnesses."""

from .sample_stats import (
    mean,
    order_statistic,
    standard_deviation,
    variance,
    vector_filter,
    vector_to_string,
)
from .summary import SampleSummary, summarize

__all__ = [
    "SampleSummary",
    "mean",
    "order_statistic",
    "standard_deviation",
    "summarize",
    "variance",
    "vector_filter",
    "vector_to_string",
]
