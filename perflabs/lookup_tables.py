"""Histogram of values in ``[0, 100)`` over seven uneven buckets."""

from __future__ import annotations

import bisect
import random
from collections.abc import Iterable

NUM_BUCKETS = 7
NUM_VALUES = 1024 * 1024

# Exclusive upper bound of each bucket.
_UPPER_BOUNDS = (13, 29, 41, 53, 71, 83, 100)


def map_to_bucket(value: int) -> int:
    """Return the bucket index of ``value``; values outside ``[0, 100)`` are rejected."""
    if not 0 <= value < _UPPER_BOUNDS[-1]:
        raise ValueError(f"value {value} is outside the range [0, 100)")
    return bisect.bisect_right(_UPPER_BOUNDS, value)


def histogram(values: Iterable[int]) -> list[int]:
    """Count how many values fall into each bucket."""
    counts = [0] * NUM_BUCKETS
    for value in values:
        counts[map_to_bucket(value)] += 1
    return counts


def init(rng: random.Random) -> list[int]:
    """Return ``NUM_VALUES`` random integers in the closed range ``[0, 99]``."""
    return rng.choices(range(100), k=NUM_VALUES)