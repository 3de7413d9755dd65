"""Numeric-safety primitives for differential-privacy mechanisms.

Every function here is pure and thread-safe: checked arithmetic, safe
casting, exact power-of-two snapping, normal-quantile calibration, summary
statistics and byte-string mixing.
"""

import logging

from .arithmetic import (
    CheckedResult,
    NumericKind,
    numeric_kind,
    safe_add,
    safe_cast_from_double,
    safe_multiply,
    safe_square,
    safe_subtract,
)
from .config import Config, configure_logging, default_epsilon
from .errors import InvalidArgumentError, NumericsError, StatusCode, UnsupportedTypeError
from .probability import inverse_error_function, qnorm
from .rounding import clamp, get_next_power_of_two, is_power_of_two, round_to_nearest_multiple
from .stats import (
    SampleSummary,
    mean,
    order_statistic,
    standard_deviation,
    summarize,
    variance,
    vector_filter,
    vector_to_string,
)
from .utils import xor_strings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "InvalidArgumentError",
    "NumericsError",
    "StatusCode",
    "UnsupportedTypeError",

    # Configuration
    "Config",
    "configure_logging",
    "default_epsilon",

    # Checked arithmetic and casting
    "CheckedResult",
    "NumericKind",
    "numeric_kind",
    "safe_add",
    "safe_subtract",
    "safe_multiply",
    "safe_square",
    "safe_cast_from_double",

    # Snapping
    "clamp",
    "get_next_power_of_two",
    "is_power_of_two",
    "round_to_nearest_multiple",

    # Calibration
    "inverse_error_function",
    "qnorm",

    # Statistics
    "SampleSummary",
    "mean",
    "order_statistic",
    "standard_deviation",
    "summarize",
    "variance",
    "vector_filter",
    "vector_to_string",

    # Mixing
    "xor_strings",
]
