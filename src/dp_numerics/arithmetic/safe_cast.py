"""Lossy-aware conversion from double precision to narrower kinds."""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING, Any

import numpy as np

from .kinds import CheckedResult, NumericKind, numeric_kind

if TYPE_CHECKING:
    from numpy.typing import DTypeLike

logger = logging.getLogger(__name__)


def safe_cast_from_double(
    value: float,
    dtype: DTypeLike | NumericKind,
    current: Any = None,
) -> CheckedResult:
    """Convert a double to ``dtype``, clamping out-of-range values.

    Unlike the checked arithmetic, an out-of-range conversion still
    *succeeds*: integral targets saturate to their bounds and narrower
    floating targets become signed infinity.

    Args
    ------
        value (float): Double to convert.
        dtype: Target numeric kind.
        current: The caller's existing value for the target. It is returned
            untouched when no conversion can take place.

    Returns
    -------
        CheckedResult:
            - ``(False, current)`` for NaN into an integral kind.
            - ``(True, nan)`` for NaN into a floating kind.
            - ``(True, max/min)`` beyond an integral range (including inf).
            - ``(True, converted)`` otherwise; integral conversion truncates
              toward zero.
    """
    kind = numeric_kind(dtype)
    x = float(value)

    if not kind.is_integer:
        with np.errstate(over="ignore"):
            return CheckedResult(True, kind.dtype.type(x))

    if math.isnan(x):
        logger.debug("refusing to cast NaN to %s", kind.name)
        return CheckedResult(False, current)
    if x >= kind.max:
        return CheckedResult(True, kind.box(kind.max))
    if x <= kind.min:
        return CheckedResult(True, kind.box(kind.min))
    return CheckedResult(True, kind.box(int(x)))
