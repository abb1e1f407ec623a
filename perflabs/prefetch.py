"""Lookups in a direct-mapped integer hash table."""

from __future__ import annotations

import random
from collections.abc import Iterable

INT_MAX = 2**31 - 1
HASH_MAP_SIZE = 32 * 1024 * 1024 - 5
NUMBER_OF_LOOKUPS = 1024 * 1024


class HashMap:
    """A fixed number of buckets, each holding at most one value.

    A value goes to bucket ``value % size``; a value whose bucket is
    already taken is dropped. ``INT_MAX`` marks an empty bucket.
    """

    UNUSED = INT_MAX

    def __init__(self, size: int = HASH_MAP_SIZE) -> None:
        if size < 1:
            raise ValueError(f"size must be positive, got {size}")
        self.size = size
        self._buckets: dict[int, int] = {}

    def __len__(self) -> int:
        return len(self._buckets)

    def _bucket(self, value: int) -> int:
        if not 0 <= value <= INT_MAX:
            raise ValueError(f"value {value} is outside [0, {INT_MAX}]")
        return value % self.size

    def insert(self, value: int) -> bool:
        """Store ``value`` if its bucket is empty; report whether it was."""
        bucket = self._bucket(value)
        if bucket in self._buckets:
            return False
        if value != self.UNUSED:
            self._buckets[bucket] = value
        return True

    def find(self, value: int) -> bool:
        """Report whether the bucket ``value`` maps to is occupied."""
        return self._bucket(value) in self._buckets


def sum_of_digits(n: int) -> int:
    """Return the digit sum of ``n``; negative numbers give a negative sum."""
    total = sum(map(int, str(abs(n))))
    return -total if n < 0 else total


def init(
    rng: random.Random,
    size: int = HASH_MAP_SIZE,
    lookups_count: int = NUMBER_OF_LOOKUPS,
) -> tuple[HashMap, list[int]]:
    """Fill a map of ``size`` buckets with ``size`` random values and draw lookups."""
    hash_map = HashMap(size)
    for _ in range(size):
        hash_map.insert(rng.randint(0, INT_MAX))
    lookups = [rng.randint(0, INT_MAX) for _ in range(lookups_count)]
    return hash_map, lookups


def solution(hash_map: HashMap, lookups: Iterable[int]) -> int:
    """Sum the digit sums of the lookups that the map reports as found."""
    return sum(sum_of_digits(value) for value in lookups if hash_map.find(value))