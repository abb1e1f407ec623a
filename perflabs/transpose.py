"""Transposing a square matrix of doubles."""

from __future__ import annotations

from collections.abc import Sequence

Matrix = list[list[float]]


def init_matrix(size: int) -> Matrix:
    """Return a ``size`` by ``size`` matrix with entries ``(i + j) % 1024``."""
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return [[float((i + j) % 1024) for j in range(size)] for i in range(size)]


def transpose(matrix: Sequence[Sequence[float]]) -> Matrix:
    """Return the transpose of a square matrix."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix must be square")
    return [list(column) for column in zip(*matrix)]


def solution(matrix: Sequence[Sequence[float]]) -> tuple[Matrix, bool]:
    """Transpose ``matrix``; also report whether the top-right entry of the result is non-zero."""
    if not matrix:
        raise ValueError("matrix must not be empty")
    result = transpose(matrix)
    return result, bool(result[0][-1])