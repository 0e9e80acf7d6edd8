"""Small general-purpose helpers."""

from __future__ import annotations

import random


def random_between(low, high):
    """Random number between the bounds, in either order.

    Integer bounds give an integer in the closed range; otherwise a float.
    """
    if low > high:
        low, high = high, low
    if isinstance(low, int) and isinstance(high, int):
        return random.SystemRandom().randint(low, high)
    return random.SystemRandom().uniform(low, high)