"""Sixteen-bit checksum with end-around carry."""

from __future__ import annotations

import random
from collections.abc import Iterable

N = 64 * 1024
_MASK = 0xFFFF


def init(rng: random.Random) -> list[int]:
    """Return ``N`` random unsigned 16-bit values."""
    return [rng.getrandbits(16) for _ in range(N)]


def checksum(blob: Iterable[int]) -> int:
    """Sum 16-bit words, folding every carry back into the low bits."""
    acc = 0
    for value in blob:
        if not 0 <= value <= _MASK:
            raise ValueError(f"value {value} is not an unsigned 16-bit word")
        acc = (acc + value) & _MASK
        if acc < value:
            acc += 1
    return acc