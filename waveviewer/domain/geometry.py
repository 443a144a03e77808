"""Mapping of amplitude sequences to canvas coordinates."""

from __future__ import annotations

from typing import NamedTuple, Sequence

import numpy as np

LEFT_RIGHT_PADDING = 45.0
TOP_BOTTOM_PADDING = 50.0
MAX_VALUE = 2.0**16 - 1
INV_MAX_VALUE = 2.0 / MAX_VALUE


class Point(NamedTuple):
    x: float
    y: float


def calculate_points(
    waveform: Sequence[int] | np.ndarray,
    width: int,
    height: int,
    step_count: int,
    *,
    horizontal_padding: float = LEFT_RIGHT_PADDING,
    vertical_padding: float = TOP_BOTTOM_PADDING,
) -> list[Point]:
    """Calculate one point every ``step_count`` samples.

    Horizontal spacing is derived from the raw sample index, so the stride
    changes point density without changing the horizontal scale. Positive
    amplitudes are drawn above the vertical centre.
    """
    if int(step_count) <= 0:
        raise ValueError("step_count must be positive")
    samples = np.asarray(waveform, dtype=np.float64).ravel()
    total = samples.size
    if total == 0:
        return []
    sample_distance = 0.0
    if total > 1:
        sample_distance = (float(width) - horizontal_padding * 2.0) / float(total - 1)
    center_y = float(height) / 2.0
    max_amplitude = center_y - vertical_padding
    amplitude_scale_factor = INV_MAX_VALUE * max_amplitude

    indices = np.arange(0, total, int(step_count))
    xs = horizontal_padding + indices * sample_distance
    ys = center_y - samples[indices] * amplitude_scale_factor
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
