"""Overflow-checked arithmetic and safe casting over a closed set of kinds.

Includes:
- Numeric kinds: the supported numpy dtypes and their range constants.
- Checked add/subtract/multiply/square reporting overflow via a flag.
- Safe conversion from double to integral or narrower floating kinds.
"""

from .kinds import SUPPORTED_DTYPES, CheckedResult, NumericKind, numeric_kind
from .safe_cast import safe_cast_from_double
from .safe_math import safe_add, safe_multiply, safe_square, safe_subtract

__all__ = [
    "SUPPORTED_DTYPES",
    "CheckedResult",
    "NumericKind",
    "numeric_kind",

    # Checked arithmetic
    "safe_add",
    "safe_subtract",
    "safe_multiply",
    "safe_square",

    # Conversion
    "safe_cast_from_double",
]
