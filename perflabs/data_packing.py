"""Building, shuffling and sorting small mixed-type records."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass

N = 10000
MIN_RANDOM = 0
MAX_RANDOM = 100


def _wrap(value: int, bits: int) -> int:
    half = 1 << (bits - 1)
    return ((value + half) & ((1 << bits) - 1)) - half


@dataclass
class Entry:
    """A record ordered by its ``i`` field alone."""

    i: int
    l: int  # noqa: E741
    s: int
    d: float
    b: bool

    def __lt__(self, other: Entry) -> bool:
        return self.i < other.i


def create_entry(first_value: int, second_value: int) -> Entry:
    """Build an entry from two integers."""
    return Entry(
        i=_wrap(first_value, 32),
        l=_wrap(first_value * second_value, 32),
        s=_wrap(second_value, 16),
        d=first_value / MAX_RANDOM,
        b=first_value < second_value,
    )


def init(rng: random.Random) -> list[Entry]:
    """Return ``N`` entries built from random values in ``[0, 100)``."""
    return [
        create_entry(
            rng.randint(MIN_RANDOM, MAX_RANDOM - 1),
            rng.randint(MIN_RANDOM, MAX_RANDOM - 1),
        )
        for _ in range(N)
    ]


def solution(entries: Iterable[Entry], rng: random.Random) -> list[Entry]:
    """Shuffle the entries with ``rng``, then return them sorted by ``i``."""
    shuffled = list(entries)
    rng.shuffle(shuffled)
    shuffled.sort()
    return shuffled