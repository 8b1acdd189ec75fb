from __future__ import annotations

import math
import random


def get_random_int(max_value: int, min_value: int = 0) -> int:
    """Uniform random integer in ``[min_value, max_value)``; returns ``min_value`` when the range is empty."""
    return min_value + math.floor(random.random() * (max_value - min_value))
