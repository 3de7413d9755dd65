r"""Inverse error function and normal quantiles for noise calibration.

These routines choose noise scales for the Gaussian mechanism; they are
approximations, not exactness-critical, and are called once per
calibration rather than per query.

The inverse error function uses the closed-form single-precision
approximation of M. Giles, "Approximating the erfinv function" (2010):
with :math:`w = -\log((1-y)(1+y))`,

.. math::
    \operatorname{erf}^{-1}(y) \approx y \cdot P(w)

where :math:`P` is a degree-8 polynomial in :math:`w - 2.5` for
:math:`w < 5` and in :math:`\sqrt{w} - 3` otherwise.
"""

from __future__ import annotations

import math

from dp_numerics.utils.validation import (
    validate_is_finite,
    validate_is_in_interval,
    validate_is_positive,
)

_SQRT2 = math.sqrt(2.0)

# Highest-order coefficient first, for Horner evaluation.
_CENTRAL_COEFFICIENTS = (
    2.81022636e-08,
    3.43273939e-07,
    -3.5233877e-06,
    -4.39150654e-06,
    0.00021858087,
    -0.00125372503,
    -0.00417768164,
    0.246640727,
    1.50140941,
)
_TAIL_COEFFICIENTS = (
    -0.000200214257,
    0.000100950558,
    0.00134934322,
    -0.00367342844,
    0.00573950773,
    -0.0076224613,
    0.00943887047,
    1.00167406,
    2.83297682,
)
_TAIL_SWITCH = 5.0


def _horner(coefficients: tuple[float, ...], w: float) -> float:
    acc = 0.0
    for c in coefficients:
        acc = acc * w + c
    return acc


def inverse_error_function(y: float) -> float:
    """Return ``x`` such that ``erf(x)`` approximates ``y``.

    Args
    ------
        y (float): Value in ``[-1, 1]``.

    Returns
    -------
        float: ``-inf`` at ``-1``, ``inf`` at ``1``, ``0`` at ``0``; NaN for
        NaN or for ``|y| > 1``. Elsewhere ``|erf(x) - y| <= 1e-3``.
    """
    y = float(y)
    if math.isnan(y) or abs(y) > 1.0:
        return math.nan
    if y == 1.0:
        return math.inf
    if y == -1.0:
        return -math.inf
    if y == 0.0:
        return 0.0

    w = -math.log((1.0 - y) * (1.0 + y))
    if w < _TAIL_SWITCH:
        p = _horner(_CENTRAL_COEFFICIENTS, w - 2.5)
    else:
        p = _horner(_TAIL_COEFFICIENTS, math.sqrt(w) - 3.0)
    return p * y


def qnorm(p: float, mu: float = 0.0, sigma: float = 1.0) -> float:
    r"""Quantile of the normal distribution :math:`N(\mu, \sigma^2)` at ``p``.

    Computed as :math:`\mu + \sigma \sqrt{2}\,\operatorname{erf}^{-1}(2p - 1)`.
    For the standard normal the absolute error is at most 4.5e-4 over
    ``p`` in ``[1e-7, 1 - 1e-7]``.

    Args
    ------
        p (float): Probability in the open interval ``(0, 1)``.
        mu (float): Mean. Default is 0.0.
        sigma (float): Standard deviation, strictly positive. Default is 1.0.

    Returns
    -------
        float: The ``p``-quantile.

    Raises
    ------
        InvalidArgumentError: If ``p`` is outside ``(0, 1)`` or NaN, ``mu``
            is not finite, or ``sigma`` is not positive. The error's
            ``code`` is ``StatusCode.INVALID_ARGUMENT``.
    """
    validate_is_in_interval(p, "p", 0.0, 1.0, include_lower=False, include_upper=False)
    validate_is_finite(mu, "mu")
    validate_is_positive(sigma, "sigma")

    z = _SQRT2 * inverse_error_function(2.0 * p - 1.0)
    return mu + sigma * z
