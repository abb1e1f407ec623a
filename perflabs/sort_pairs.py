"""Sorting records by two keys."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

N = 10000
KEY_MAX = 9000


@dataclass(frozen=True, order=True)
class Pair:
    """A record ordered by ``key1`` and then by ``key2``."""

    key1: int
    key2: int


def init(rng: random.Random) -> list[Pair]:
    """Return ``N`` pairs with random keys in ``[0, 9000]``."""
    return [Pair(rng.randint(0, KEY_MAX), rng.randint(0, KEY_MAX)) for _ in range(N)]


def solution(items: Iterable[Pair]) -> list[Pair]:
    """Return the pairs in ascending order."""
    return sorted(items)