"""Selecting records whose metric lies inside an inclusive range."""

from __future__ import annotations

import random
from collections.abc import Iterable

N = 64 * 1024
UINT32_MAX = 0xFFFF_FFFF

# The range used by the lab: roughly the middle half of the 32-bit space.
LOWER = UINT32_MAX // 4 + 1
UPPER = UINT32_MAX // 2 + LOWER

Item = tuple[int, int]


def _check_uint32(name: str, value: int) -> None:
    if not 0 <= value <= UINT32_MAX:
        raise ValueError(f"{name} must be an unsigned 32-bit value, got {value}")


def init(rng: random.Random) -> list[Item]:
    """Return ``N`` random ``(metric, data)`` pairs of unsigned 32-bit values."""
    bits = rng.getrandbits
    return [(bits(32), bits(32)) for _ in range(N)]


def select(items: Iterable[Item], lower: int, upper: int) -> list[Item]:
    """Return, in input order, the items whose metric is in ``[lower, upper]``."""
    _check_uint32("lower", lower)
    _check_uint32("upper", upper)
    return [item for item in items if lower <= item[0] <= upper]