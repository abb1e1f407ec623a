"""Looking up the values of one linked list in another."""

from __future__ import annotations

import random
from collections.abc import Iterator
from dataclasses import dataclass

N = 10000
RANDOM_MAX = 0xFFFF
_UINT32_MASK = 0xFFFF_FFFF


@dataclass(eq=False)
class Node:
    """A singly linked list node."""

    value: int
    next: Node | None = None


class Arena:
    """A one-shot pool that hands out at most ``capacity`` nodes."""

    def __init__(self, capacity: int = N) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._used = 0

    def __len__(self) -> int:
        return self._used

    def allocate(self, value: int) -> Node:
        """Return a fresh unlinked node holding ``value``."""
        if self._used >= self.capacity:
            raise MemoryError("arena is exhausted")
        self._used += 1
        return Node(value)


def sum_of_digits(n: int) -> int:
    """Return the sum of the decimal digits of a non-negative integer."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return sum(map(int, str(n)))


def random_values(rng: random.Random) -> list[int]:
    """Return distinct random values in ``[0, 65535]`` in random order.

    ``N`` values are drawn; duplicates are dropped before shuffling.
    """
    values = sorted({rng.randint(0, RANDOM_MAX) for _ in range(N)})
    rng.shuffle(values)
    return values


def random_list(arena: Arena, rng: random.Random) -> Node:
    """Build a list whose head holds 0 followed by :func:`random_values`."""
    head = arena.allocate(0)
    tail = head
    for value in random_values(rng):
        tail.next = arena.allocate(value)
        tail = tail.next
    return head


def iter_values(node: Node | None) -> Iterator[int]:
    """Yield the values of a list from ``node`` onwards."""
    while node is not None:
        yield node.value
        node = node.next


def format_list(node: Node | None) -> str:
    """Return the list's values separated by spaces."""
    return " ".join(map(str, iter_values(node)))


def solution(l1: Node | None, l2: Node | None) -> int:
    """Sum the digit sums of every value of ``l1`` that also occurs in ``l2``.

    Each lookup walks ``l2`` from its head; the total wraps at 32 bits.
    """
    total = 0
    for value in iter_values(l1):
        if any(candidate == value for candidate in iter_values(l2)):
            total += sum_of_digits(value)
    return total & _UINT32_MASK