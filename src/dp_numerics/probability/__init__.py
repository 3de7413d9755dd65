"""Calibration routines: inverse error function and normal quantiles."""

from .probability import inverse_error_function, qnorm

__all__ = [
    "inverse_error_function",
    "qnorm",
]
