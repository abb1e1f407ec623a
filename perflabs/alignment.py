"""Global alignment score of sequence pairs with affine gap penalties."""

from __future__ import annotations

import random
from collections.abc import Sequence

SEQUENCE_SIZE = 200
SEQUENCE_COUNT = 16

GAP_OPEN = -11
GAP_EXTENSION = -1
MATCH = 6
MISMATCH = -4


def _i16(value: int) -> int:
    return ((value + 0x8000) & 0xFFFF) - 0x8000


def init(rng: random.Random) -> tuple[list[bytes], list[bytes]]:
    """Return two collections of random sequences over the symbols 0 to 4."""

    def generate() -> list[bytes]:
        return [bytes(rng.choices(range(5), k=SEQUENCE_SIZE)) for _ in range(SEQUENCE_COUNT)]

    return generate(), generate()


def align_score(sequence1: Sequence[int], sequence2: Sequence[int]) -> int:
    """Return the best global alignment score of two sequences.

    Scores are kept as signed 16-bit values, and only one column of the
    score matrix is held at a time.
    """
    rows = len(sequence1)
    score = [0] * (rows + 1)
    horizontal = [0] * (rows + 1)

    horizontal[0] = GAP_OPEN
    vertical = GAP_OPEN
    for i in range(1, rows + 1):
        score[i] = vertical
        horizontal[i] = _i16(vertical + GAP_OPEN)
        vertical = _i16(vertical + GAP_EXTENSION)

    for symbol2 in sequence2:
        diagonal = score[0]
        score[0] = horizontal[0]
        vertical = _i16(horizontal[0] + GAP_OPEN)
        horizontal[0] = _i16(horizontal[0] + GAP_EXTENSION)

        for row, symbol1 in enumerate(sequence1, start=1):
            best = _i16(diagonal + (MATCH if symbol1 == symbol2 else MISMATCH))
            best = max(best, vertical, horizontal[row])
            diagonal = score[row]
            score[row] = best

            best = _i16(best + GAP_OPEN)
            vertical = max(_i16(vertical + GAP_EXTENSION), best)
            horizontal[row] = max(_i16(horizontal[row] + GAP_EXTENSION), best)

    return score[-1]


def compute_alignment(
    sequences1: Sequence[Sequence[int]], sequences2: Sequence[Sequence[int]]
) -> list[int]:
    """Return the alignment score of each pair of corresponding sequences."""
    if len(sequences1) != len(sequences2):
        raise ValueError(
            f"collections differ in size: {len(sequences1)} and {len(sequences2)}"
        )
    return [align_score(a, b) for a, b in zip(sequences1, sequences2)]