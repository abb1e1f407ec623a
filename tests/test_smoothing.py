import random

import pytest

from perflabs.smoothing import RADIUS, SIZE, image_smoothing, init


def test_radius_zero_is_identity():
    data = bytes([3, 1, 4, 1, 5, 9, 2, 6])
    assert image_smoothing(data, 0) == list(data)


def test_empty_input():
    assert image_smoothing(b"", RADIUS) == []


def test_constant_input_clipped_window():
    assert image_smoothing([1] * 10, 2) == [3, 4, 5, 5, 5, 5, 5, 5, 4, 3]


def test_window_wider_than_input_gives_total_everywhere():
    data = [10, 20, 30, 40, 50]
    assert image_smoothing(data, 3) == [sum(data)] * len(data)
    assert image_smoothing(data, 200) == [sum(data)] * len(data)


def test_output_is_symmetric_for_reversed_input():
    data = init(random.Random(2))[:500]
    forward = image_smoothing(data, 5)
    backward = image_smoothing(data[::-1], 5)
    assert forward == backward[::-1]


def test_sliding_difference_invariant_on_lab_data():
    data = init(random.Random(0))
    out = image_smoothing(data, RADIUS)
    assert len(out) == SIZE
    for pos in range(RADIUS + 1, SIZE - RADIUS):
        assert out[pos] - out[pos - 1] == data[pos + RADIUS] - data[pos - RADIUS - 1]
    assert max(out) <= 255 * (2 * RADIUS + 1)


def test_init_is_deterministic_and_sized():
    first = init(random.Random(9))
    assert len(first) == SIZE
    assert first == init(random.Random(9))


@pytest.mark.parametrize("radius", [-1, 256])
def test_rejects_bad_radius(radius):
    with pytest.raises(ValueError):
        image_smoothing([1, 2, 3], radius)


def test_rejects_non_byte_values():
    with pytest.raises(ValueError):
        image_smoothing([1, 300, 2], 1)