import math

import pytest

from waveviewer.domain.geometry import (
    LEFT_RIGHT_PADDING,
    MAX_VALUE,
    TOP_BOTTOM_PADDING,
    calculate_points,
)


def test_stride_one_emits_one_point_per_sample():
    waveform = list(range(10))
    points = calculate_points(waveform, 1000, 400, 1)
    assert len(points) == 10


@pytest.mark.parametrize(("length", "stride"), [(10, 3), (2000, 2000), (2001, 2000), (7, 10)])
def test_stride_emits_ceil_of_length_over_stride(length, stride):
    points = calculate_points([0] * length, 800, 300, stride)
    assert len(points) == math.ceil(length / stride)


def test_first_point_starts_at_left_inset_and_last_at_right_inset():
    points = calculate_points([0] * 11, 1090, 400, 1)
    assert points[0].x == LEFT_RIGHT_PADDING
    assert points[-1].x == pytest.approx(1090 - LEFT_RIGHT_PADDING)
    assert points[1].x - points[0].x == pytest.approx(100.0)


def test_spacing_uses_raw_sample_index():
    dense = calculate_points([0] * 101, 1090, 400, 1)
    sparse = calculate_points([0] * 101, 1090, 400, 10)
    assert sparse[1].x == pytest.approx(dense[10].x)


def test_amplitude_is_scaled_and_inverted_around_center():
    height = 400
    points = calculate_points([0, 32767, -32768], 1000, height, 1)
    max_amplitude = height / 2 - TOP_BOTTOM_PADDING
    scale = 2.0 / MAX_VALUE * max_amplitude

    assert points[0].y == height / 2
    assert points[1].y == pytest.approx(height / 2 - 32767 * scale)
    assert points[1].y < height / 2 < points[2].y
    assert points[1].y == pytest.approx(TOP_BOTTOM_PADDING, abs=0.01)


def test_empty_and_single_sample_sequences():
    assert calculate_points([], 1000, 400, 1) == []
    single = calculate_points([100], 1000, 400, 5)
    assert len(single) == 1
    assert single[0].x == LEFT_RIGHT_PADDING


def test_non_positive_stride_is_rejected():
    with pytest.raises(ValueError):
        calculate_points([1, 2, 3], 100, 100, 0)
