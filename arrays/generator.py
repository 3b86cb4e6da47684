"""
generator.py — Random Input Arrays
===================================
Produces the integer arrays the visualizer sorts.  Values are bar heights,
so the default range keeps every bar visible: [10, 310).

Pass `seed` (or your own `random.Random`) for reproducible arrays in
tests and in the replay command.
"""

import random
from typing import List, Optional


DEFAULT_ARRAY_SIZE = 50
MIN_ARRAY_SIZE     = 10
MAX_ARRAY_SIZE     = 100

MIN_VALUE = 10     # inclusive
MAX_VALUE = 310    # exclusive


def clamp_size(size: int) -> int:
    return max(MIN_ARRAY_SIZE, min(MAX_ARRAY_SIZE, int(size)))


def generate_random_array(
    size: int = DEFAULT_ARRAY_SIZE,
    min_value: int = MIN_VALUE,
    max_value: int = MAX_VALUE,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[int]:
    """
    Uniform random integers in [min_value, max_value).

    Args:
        size      : Number of elements, clamped to [MIN_ARRAY_SIZE, MAX_ARRAY_SIZE].
        min_value : Smallest possible value.
        max_value : One past the largest possible value.
        seed      : Seed for a private Random (ignored when `rng` is given).
        rng       : Random instance to draw from.
    """
    if max_value <= min_value:
        raise ValueError(f"Empty value range [{min_value}, {max_value})")
    rng = rng or random.Random(seed)
    return [rng.randrange(min_value, max_value) for _ in range(clamp_size(size))]
