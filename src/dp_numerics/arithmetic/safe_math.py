"""Overflow-checked add, subtract, multiply and square.

Integral kinds detect overflow *before* computing, by comparing the operands
against the kind's range, and report the saturating bound on failure.
Floating kinds always succeed: IEEE arithmetic in the kind's own width
saturates to +/-infinity and that value is reported as the result.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from .kinds import CheckedResult, NumericKind, numeric_kind

if TYPE_CHECKING:
    from collections.abc import Callable

    from numpy.typing import DTypeLike

logger = logging.getLogger(__name__)


def _overflow(bound: int, kind: NumericKind, op: str) -> CheckedResult:
    logger.debug("%s overflow in %s; saturating to %d", kind.name, op, bound)
    return CheckedResult(False, kind.box(bound))


def _float_op(op: Callable[[Any, Any], Any], a: Any, b: Any, kind: NumericKind) -> CheckedResult:
    with np.errstate(over="ignore", invalid="ignore"):
        value = op(kind.box(a), kind.box(b))
    return CheckedResult(True, kind.box(value))


def _checked_add(x: int, y: int, kind: NumericKind, op: str = "add") -> CheckedResult:
    if y > 0 and x > kind.max - y:
        return _overflow(kind.max, kind, op)
    if y < 0 and x < kind.min - y:
        return _overflow(kind.min, kind, op)
    return CheckedResult(True, kind.box(x + y))


def safe_add(a: Any, b: Any, dtype: DTypeLike | NumericKind = np.int64) -> CheckedResult:
    """Add ``a`` and ``b`` in ``dtype``, reporting overflow.

    Args
    ------
        a, b: Operands. Integral kinds require values representable in
            ``dtype``.
        dtype: One of the supported numeric kinds. Default is ``int64``.

    Returns
    -------
        CheckedResult: ``(True, a + b)`` on success. For integral kinds an
        overflow gives ``(False, max)`` or ``(False, min)``.

    Raises
    ------
        InvalidArgumentError: If an operand does not fit the integral kind.
        UnsupportedTypeError: If ``dtype`` is not supported.
    """
    kind = numeric_kind(dtype)
    if not kind.is_integer:
        return _float_op(np.add, a, b, kind)
    return _checked_add(kind.coerce(a, "a"), kind.coerce(b, "b"), kind)


def safe_subtract(a: Any, b: Any, dtype: DTypeLike | NumericKind = np.int64) -> CheckedResult:
    """Subtract ``b`` from ``a`` in ``dtype``, reporting overflow.

    Signed subtraction is addition of ``-b``. Since ``-min`` has no
    representation, subtracting ``min`` from a non-negative value fails and
    reports ``min``. Unsigned subtraction fails with ``0`` whenever
    ``b > a``.
    """
    kind = numeric_kind(dtype)
    if not kind.is_integer:
        return _float_op(np.subtract, a, b, kind)

    x = kind.coerce(a, "a")
    y = kind.coerce(b, "b")
    if not kind.is_signed:
        if y > x:
            return _overflow(kind.min, kind, "subtract")
        return CheckedResult(True, kind.box(x - y))

    if y == kind.min:
        if x >= 0:
            return _overflow(kind.min, kind, "subtract")
        return CheckedResult(True, kind.box(x - y))
    return _checked_add(x, -y, kind, "subtract")


def safe_multiply(a: Any, b: Any, dtype: DTypeLike | NumericKind = np.int64) -> CheckedResult:
    """Multiply ``a`` and ``b`` in ``dtype``, reporting overflow.

    The integral check compares magnitudes before multiplying: a product of
    like signs fits iff ``|a| <= max // |b|``, of unlike signs iff
    ``|a| <= |min| // |b|``. A zero operand always yields ``(True, 0)``.
    """
    kind = numeric_kind(dtype)
    if not kind.is_integer:
        return _float_op(np.multiply, a, b, kind)

    x = kind.coerce(a, "a")
    y = kind.coerce(b, "b")
    if x == 0 or y == 0:
        return CheckedResult(True, kind.box(0))

    negative = (x < 0) != (y < 0)
    limit = -kind.min if negative else kind.max
    if abs(x) > limit // abs(y):
        return _overflow(kind.min if negative else kind.max, kind, "multiply")
    return CheckedResult(True, kind.box(x * y))


def safe_square(a: Any, dtype: DTypeLike | NumericKind = np.int64) -> CheckedResult:
    """Square ``a`` in ``dtype``; same contract as :func:`safe_multiply`."""
    return safe_multiply(a, a, dtype)
