"""Box smoothing of a one-dimensional byte signal."""

from __future__ import annotations

import random
from collections.abc import Sequence
from itertools import accumulate

RADIUS = 13
SIZE = 40000


def init(rng: random.Random) -> bytes:
    """Return ``SIZE`` random bytes."""
    return rng.randbytes(SIZE)


def image_smoothing(values: Sequence[int], radius: int = RADIUS) -> list[int]:
    """Return, for each position, the sum of the values within ``radius`` of it.

    The window is clipped at both ends of the input, and each sum is stored
    as an unsigned 16-bit value.
    """
    if not 0 <= radius <= 255:
        raise ValueError(f"radius must fit in an unsigned byte, got {radius}")
    if any(not 0 <= value <= 255 for value in values):
        raise ValueError("input values must be unsigned bytes")

    prefix = [0, *accumulate(values)]
    size = len(prefix) - 1
    return [
        (prefix[min(size, pos + radius + 1)] - prefix[max(0, pos - radius)]) & 0xFFFF
        for pos in range(size)
    ]