"""Argument validation shared by the numeric primitives.

Each helper raises :class:`InvalidArgumentError` naming the offending
parameter, and returns ``None`` otherwise.
"""

from __future__ import annotations

import logging
import math

from dp_numerics.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


def _reject(msg: str) -> None:
    logger.debug("rejected argument: %s", msg)
    raise InvalidArgumentError(msg)


def validate_is_finite(value: float, name: str) -> None:
    """Ensure ``value`` is neither NaN nor infinite."""
    if not math.isfinite(value):
        _reject(f"{name} must be finite, got {value}")


def validate_is_positive(value: float, name: str) -> None:
    """Ensure ``value`` is finite and strictly greater than zero."""
    validate_is_finite(value, name)
    if value <= 0:
        _reject(f"{name} must be > 0, got {value}")


def validate_is_in_interval(
    value: float,
    name: str,
    lower: float,
    upper: float,
    *,
    include_lower: bool = True,
    include_upper: bool = True,
) -> None:
    """Ensure ``value`` lies in the interval bounded by ``lower`` and ``upper``.

    Args
    ------
        value (float): Value to check. NaN is always rejected.
        name (str): Parameter name used in the error message.
        lower, upper (float, float): Interval bounds.
        include_lower, include_upper (bool, bool): Whether each bound is
            part of the interval.

    Raises
    ------
        InvalidArgumentError: If ``value`` is NaN or outside the interval.
    """
    lower_ok = value >= lower if include_lower else value > lower
    upper_ok = value <= upper if include_upper else value < upper
    if not (lower_ok and upper_ok):
        left = "[" if include_lower else "("
        right = "]" if include_upper else ")"
        _reject(f"{name} must be in {left}{lower}, {upper}{right}, got {value}")
