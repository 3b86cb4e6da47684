"""
arrays/
-------
Input data layer.  Public API:

    from arrays import generate_random_array, clamp_size
"""

from arrays.generator import (
    generate_random_array,
    clamp_size,
    DEFAULT_ARRAY_SIZE,
    MIN_ARRAY_SIZE,
    MAX_ARRAY_SIZE,
    MIN_VALUE,
    MAX_VALUE,
)

__all__ = [
    "generate_random_array", "clamp_size",
    "DEFAULT_ARRAY_SIZE", "MIN_ARRAY_SIZE", "MAX_ARRAY_SIZE",
    "MIN_VALUE", "MAX_VALUE",
]
