"""Error taxonomy for the numeric-safety primitives.

Arithmetic overflow is *not* an exception: it is reported through
``CheckedResult.ok``. Exceptions are reserved for inputs a caller must never
pass, so that "bad input" and "overflow" stay distinguishable.
"""

from __future__ import annotations

from enum import Enum


class StatusCode(Enum):
    """Classification carried by every :class:`NumericsError`."""

    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    UNIMPLEMENTED = "unimplemented"


class NumericsError(Exception):
    """Base class for all errors raised by ``dp_numerics``."""

    code: StatusCode = StatusCode.INVALID_ARGUMENT

    def __init__(self, message: str, code: StatusCode | None = None) -> None:
        if code is not None:
            self.code = code
        super().__init__(message)


class InvalidArgumentError(NumericsError, ValueError):
    """Raised when an argument lies outside the documented domain."""

    code = StatusCode.INVALID_ARGUMENT


class UnsupportedTypeError(NumericsError, TypeError):
    """Raised when a numeric kind outside the supported set is requested."""

    code = StatusCode.UNIMPLEMENTED
