"""Power-of-two snapping and bounding helpers."""

from .rounding import (
    clamp,
    get_next_power_of_two,
    is_power_of_two,
    round_to_nearest_multiple,
)

__all__ = [
    "clamp",
    "get_next_power_of_two",
    "is_power_of_two",
    "round_to_nearest_multiple",
]
