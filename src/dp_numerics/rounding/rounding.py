"""Power-of-two rounding for snapping noisy values to a granularity.

Rounding to a power-of-two granularity must be bit-exact: values are split
into mantissa and exponent and only the exponent is shifted, so no floating
rounding error enters through ``x / g`` or ``k * g``.
"""

from __future__ import annotations

import math

from dp_numerics.utils.validation import validate_is_positive

# Doubles carry 53 significant bits (52 stored + the implicit one).
_MANTISSA_BITS = 53


def is_power_of_two(x: float) -> bool:
    """Return True when ``x`` is an exact positive power of two."""
    if not (math.isfinite(x) and x > 0):
        return False
    mantissa, _ = math.frexp(x)
    return mantissa == 0.5


def get_next_power_of_two(x: float) -> float:
    """Return the smallest power of two greater than or equal to ``x``.

    An exact power of two is returned unchanged. The result is built from
    the binary exponent of ``x`` rather than ``log2``/``pow``.

    Args
    ------
        x (float): Strictly positive, finite value.

    Returns
    -------
        float: ``2**k`` with ``2**(k-1) < x <= 2**k``; ``inf`` if that power
        exceeds the double range.

    Raises
    ------
        InvalidArgumentError: If ``x`` is not finite and positive.
    """
    validate_is_positive(x, "x")
    x = float(x)
    mantissa, exponent = math.frexp(x)
    if mantissa == 0.5:
        return x
    try:
        return math.ldexp(1.0, exponent)
    except OverflowError:
        return math.inf


def _round_to_power_of_two(x: float, granularity: float) -> float:
    _, g_exponent = math.frexp(granularity)
    shift = g_exponent - 1  # granularity == 2**shift

    # Already a multiple when the spacing of doubles at x reaches the granularity.
    _, x_exponent = math.frexp(x)
    if x_exponent - _MANTISSA_BITS >= shift:
        return x

    quotient = math.ldexp(x, -shift)
    steps = math.floor(quotient)
    if quotient - steps >= 0.5:
        steps += 1
    try:
        return math.ldexp(float(steps), shift)
    except OverflowError:
        return math.copysign(math.inf, x)


def _round_by_remainder(x: float, granularity: float) -> float:
    remainder = math.fmod(x, granularity)
    half = granularity / 2
    if abs(remainder) > half:
        return x - remainder + math.copysign(granularity, remainder)
    if abs(remainder) == half and remainder > 0:
        return x - remainder + granularity
    return x - remainder


def round_to_nearest_multiple(x: float, granularity: float) -> float:
    """Round ``x`` to the nearest multiple of ``granularity``.

    Halfway cases round toward positive infinity, so ``5.0`` snaps to
    ``6.0`` and ``-5.0`` to ``-4.0`` for a granularity of ``2.0``. For a
    power-of-two granularity the result is exact.

    Args
    ------
        x (float): Value to round. NaN and infinities are returned as is.
        granularity (float): Step size. A non-positive granularity leaves
            ``x`` unchanged.

    Returns
    -------
        float: The nearest multiple, saturating to signed infinity if it
        lies beyond the double range.
    """
    x = float(x)
    granularity = float(granularity)
    if not granularity > 0 or not math.isfinite(x) or x == 0:
        return x
    if is_power_of_two(granularity):
        return _round_to_power_of_two(x, granularity)
    return _round_by_remainder(x, granularity)


def clamp(lower: float, upper: float, value: float) -> float:
    """Return ``lower`` if ``value < lower``, ``upper`` if ``value > upper``,
    else ``value``.

    The bounds are not checked against each other.
    """
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value
