"""Shared helpers: byte-string mixing and argument validation."""

from .mixing import xor_strings
from .validation import (
    validate_is_finite,
    validate_is_in_interval,
    validate_is_positive,
)

__all__ = [
    "validate_is_finite",
    "validate_is_in_interval",
    "validate_is_positive",
    "xor_strings",
]
