"""Summing a per-item transform over data split between worker threads."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

_MASK = 0xFFFF_FFFF


def transform(item: int) -> int:
    """Return the 32-bit value that one input item is turned into."""
    if not 0 <= item <= _MASK:
        raise ValueError(f"item {item} is not an unsigned 32-bit value")
    item = (item + 1000) & _MASK
    item ^= 0xADEDAE
    item |= item >> 24
    return item


def _accumulate(chunk: Sequence[int]) -> int:
    # Each worker owns a 32-bit accumulator, which wraps on overflow.
    return sum(transform(item) % 13 for item in chunk) & _MASK


def solution(data: Sequence[int], thread_count: int) -> int:
    """Sum ``transform(item) % 13`` over ``data`` using ``thread_count`` workers.

    The data is split into contiguous chunks, one per worker; each worker's
    partial sum wraps at 32 bits before the partial sums are added together.
    """
    if thread_count < 1:
        raise ValueError(f"thread_count must be at least 1, got {thread_count}")
    items = list(data)
    if not items:
        return 0
    chunk_size = -(-len(items) // thread_count)
    chunks = [items[start:start + chunk_size] for start in range(0, len(items), chunk_size)]
    with ThreadPoolExecutor(max_workers=thread_count) as pool:
        return sum(pool.map(_accumulate, chunks))