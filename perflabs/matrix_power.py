"""Integer powers of square single-precision matrices."""

from __future__ import annotations

import math
import random

import numpy as np

N = 400
_UINT32_MAX = 0xFFFF_FFFF


def _square(matrix, name: str) -> np.ndarray:
    array = np.asarray(matrix, dtype=np.float32)
    if array.ndim != 2 or array.shape[0] != array.shape[1]:
        raise ValueError(f"{name} must be a square matrix, got shape {array.shape}")
    return array


def zero(n: int = N) -> np.ndarray:
    """Return an ``n`` by ``n`` zero matrix."""
    return np.zeros((n, n), dtype=np.float32)


def identity(n: int = N) -> np.ndarray:
    """Return the ``n`` by ``n`` identity matrix."""
    return np.eye(n, dtype=np.float32)


def multiply(a, b) -> np.ndarray:
    """Return the product of two square matrices of the same size."""
    left = _square(a, "a")
    right = _square(b, "b")
    if left.shape != right.shape:
        raise ValueError(f"matrix sizes differ: {left.shape} and {right.shape}")
    return (left @ right).astype(np.float32)


def power(matrix, k: int) -> np.ndarray:
    """Return ``matrix`` raised to the non-negative integer power ``k``."""
    element = _square(matrix, "matrix").copy()
    if not 0 <= k <= _UINT32_MAX:
        raise ValueError(f"k must be an unsigned 32-bit value, got {k}")
    product = identity(element.shape[0])
    while k:
        if k & 1:
            product = multiply(product, element)
            if k == 1:
                break
        element = multiply(element, element)
        k >>= 1
    return product


def init(rng: random.Random, n: int = N) -> np.ndarray:
    """Return a random matrix in ``[-0.95, 0.95]`` with rows scaled to unit length."""
    matrix = np.array(
        [[rng.uniform(-0.95, 0.95) for _ in range(n)] for _ in range(n)],
        dtype=np.float32,
    ).reshape(n, n)
    for row in matrix:
        total = float(np.sum(row * row, dtype=np.float32))
        if total >= np.finfo(np.float32).tiny:
            row *= np.float32(1.0 / math.sqrt(total))
    return matrix