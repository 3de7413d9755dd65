"""Summary statistics over sample sequences.

Inputs are read, never mutated; sorting happens on a copy.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

import numpy as np

from dp_numerics.errors import InvalidArgumentError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from numpy.typing import ArrayLike, NDArray


def _as_samples(values: ArrayLike) -> NDArray[np.float64]:
    samples = np.asarray(values, dtype=np.float64)
    if samples.ndim != 1:
        msg = f"samples must be one-dimensional, got shape {samples.shape}"
        raise InvalidArgumentError(msg)
    if samples.size == 0:
        msg = "samples must not be empty"
        raise InvalidArgumentError(msg)
    return samples


def mean(values: ArrayLike) -> float:
    """Arithmetic mean of a non-empty sequence."""
    return float(np.mean(_as_samples(values)))


def variance(values: ArrayLike) -> float:
    """Population variance (denominator ``n``, not ``n - 1``)."""
    return float(np.var(_as_samples(values)))


def standard_deviation(values: ArrayLike) -> float:
    """Square root of the population variance."""
    return math.sqrt(variance(values))


def order_statistic(percentile: float, values: ArrayLike) -> float:
    """Value at fractional rank ``percentile * (n - 1)`` of the sorted sample.

    When the rank falls between two order statistics the two neighbours are
    averaged, e.g. ``order_statistic(0.6, [1, 5, 7, 9, 13]) == 8``.

    Args
    ------
        percentile (float): Rank in ``[0, 1]``; ``<= 0`` gives the minimum
            and ``>= 1`` the maximum.
        values (ArrayLike): Non-empty samples.

    Returns
    -------
        float: The order statistic.

    Raises
    ------
        InvalidArgumentError: If ``values`` is empty or ``percentile`` is NaN.
    """
    samples = _as_samples(values)
    if math.isnan(percentile):
        msg = "percentile must not be NaN"
        raise InvalidArgumentError(msg)
    if percentile <= 0:
        return float(samples.min())
    if percentile >= 1:
        return float(samples.max())

    ordered = np.sort(samples)
    rank = percentile * (samples.size - 1)
    below = ordered[math.floor(rank)]
    above = ordered[math.ceil(rank)]
    return float((below + above) / 2)


def vector_filter(values: Sequence[Any], mask: Sequence[bool]) -> list[Any]:
    """Return the elements of ``values`` whose ``mask`` entry is true, in order.

    Raises
    ------
        InvalidArgumentError: If ``values`` and ``mask`` differ in length.
    """
    if len(values) != len(mask):
        msg = f"values and mask must have equal length, got {len(values)} and {len(mask)}"
        raise InvalidArgumentError(msg)
    return [v for v, keep in zip(values, mask) if keep]


def _format_element(value: Any) -> str:
    # Integers print without a decimal point, floats in %g style.
    if isinstance(value, (int, np.integer)):
        return str(int(value))
    if isinstance(value, (float, np.floating)):
        return f"{float(value):g}"
    return str(value)


def vector_to_string(values: Sequence[Any]) -> str:
    """Render a sequence as ``[1, 2, 2, 3]``."""
    return "[" + ", ".join(_format_element(v) for v in values) + "]"
