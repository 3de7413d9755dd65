"""Closed set of numeric kinds supported by the checked-arithmetic layer.

Each kind is backed by a numpy dtype and supplies its own range constants.
Integral and floating kinds follow different overflow rules, so dispatch is
on the ``is_integer`` flag rather than on arbitrary Python types.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, NamedTuple

import numpy as np

from dp_numerics.errors import InvalidArgumentError, UnsupportedTypeError

if TYPE_CHECKING:
    from numpy.typing import DTypeLike


class CheckedResult(NamedTuple):
    """Outcome of a checked operation: a success flag and the output value.

    When ``ok`` is false the value is the saturating bound of the result
    type, or the caller's untouched value for a failed cast. Truthiness
    follows ``ok`` so ``if safe_add(a, b): ...`` reads naturally.
    """

    ok: bool
    value: Any

    def __bool__(self) -> bool:
        return bool(self.ok)


@dataclass(frozen=True)
class NumericKind:
    """Range constants and flags for one supported dtype.

    Attributes
    ----------
        dtype: np.dtype
            Backing numpy dtype.
        min: int | float
            Lowest representable value (``lowest()`` for floats).
        max: int | float
            Highest representable finite value.
        is_integer: bool
            True for the fixed-width integer kinds.
        is_signed: bool
            True for signed integers and for floats.
    """

    dtype: np.dtype
    min: int | float
    max: int | float
    is_integer: bool
    is_signed: bool

    @property
    def name(self) -> str:
        return self.dtype.name

    def box(self, value: Any) -> Any:
        """Wrap ``value`` in the kind's numpy scalar type."""
        with np.errstate(over="ignore", invalid="ignore"):
            return self.dtype.type(value)

    def coerce(self, value: Any, name: str) -> int:
        """Return ``value`` as an exact Python int within this kind's range.

        Raises
        ------
            InvalidArgumentError: If ``value`` is not integral or does not
                fit in the kind.
        """
        if isinstance(value, (int, np.integer)):
            exact = int(value)
        elif isinstance(value, (float, np.floating)) and float(value).is_integer():
            exact = int(value)
        else:
            msg = f"{name} must be an integral value for {self.name}, got {value!r}"
            raise InvalidArgumentError(msg)

        if not self.min <= exact <= self.max:
            msg = f"{name}={exact} is not representable as {self.name}"
            raise InvalidArgumentError(msg)
        return exact


def _build_kind(dtype: np.dtype) -> NumericKind:
    if np.issubdtype(dtype, np.integer):
        info = np.iinfo(dtype)
        return NumericKind(
            dtype=dtype,
            min=int(info.min),
            max=int(info.max),
            is_integer=True,
            is_signed=bool(np.issubdtype(dtype, np.signedinteger)),
        )
    finfo = np.finfo(dtype)
    return NumericKind(
        dtype=dtype,
        min=float(finfo.min),
        max=float(finfo.max),
        is_integer=False,
        is_signed=True,
    )


SUPPORTED_DTYPES: tuple[str, ...] = (
    "int8",
    "int16",
    "int32",
    "int64",
    "uint8",
    "uint16",
    "uint32",
    "uint64",
    "float32",
    "float64",
)

_KINDS: dict[str, NumericKind] = {
    name: _build_kind(np.dtype(name)) for name in SUPPORTED_DTYPES
}


def numeric_kind(dtype: DTypeLike | NumericKind) -> NumericKind:
    """Resolve a dtype-like (``np.int64``, ``"uint8"``, ``float``) to its kind.

    Raises
    ------
        UnsupportedTypeError: If the dtype is outside the supported set.
    """
    if isinstance(dtype, NumericKind):
        return dtype
    try:
        resolved = np.dtype(dtype)
    except TypeError as exc:
        msg = f"Unsupported numeric type: {dtype!r}"
        raise UnsupportedTypeError(msg) from exc

    kind = _KINDS.get(resolved.name)
    if kind is None:
        msg = f"Unsupported numeric type: {resolved.name}; expected one of {SUPPORTED_DTYPES}"
        raise UnsupportedTypeError(msg)
    return kind
