"""Progressive reveal of the waveform curve."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np

from ..constants import DEFAULT_STEP_COUNT
from ..domain.geometry import Point, calculate_points
from .easing import PhaseAnimator
from .path import WaveformPath


def path_chunk(points: Sequence[Point], start_index: int, end_index: int) -> WaveformPath:
    """Convert ``points[start_index..end_index]`` into a smoothed path.

    Each segment is a quadratic curve with the midpoint of the previous and
    current point as control point. Out of range or too short requests
    produce an empty path.
    """
    if (
        end_index - start_index <= 1
        or len(points) == 0
        or start_index < 0
        or end_index >= len(points)
    ):
        return WaveformPath()
    result = WaveformPath()
    prev_x, prev_y = points[start_index]
    result.move_to(prev_x, prev_y)
    for index in range(start_index + 1, end_index + 1):
        x, y = points[index]
        result.quad_to((prev_x + x) / 2.0, (prev_y + y) / 2.0, x, y)
        prev_x, prev_y = x, y
    return result


class ProgressivePathRenderer:
    """Owns the revealed waveform curve and the index of the last drawn point."""

    def __init__(
        self,
        surface=None,
        *,
        step_count: int = DEFAULT_STEP_COUNT,
        animator: PhaseAnimator | None = None,
        logger=None,
    ) -> None:
        self.surface = surface
        self.step_count = max(1, int(step_count))
        self.animator = animator or PhaseAnimator()
        self.logger = logger
        self.width = 0
        self.height = 0
        self.waveform = np.zeros(0, dtype=np.int32)
        self.points: list[Point] = []
        self.path = WaveformPath()
        self.index_of_drawn_points = 0

    def attach(self, surface) -> None:
        self.surface = surface

    def set_data(self, waveform) -> None:
        """Replace the waveform and restart the reveal from the first point."""
        self.waveform = np.asarray(waveform, dtype=np.int32).ravel()
        self.render()

    def resize(self, width: int, height: int) -> None:
        if int(width) == self.width and int(height) == self.height:
            return
        self.width = int(width)
        self.height = int(height)
        self.render()

    def render(self) -> None:
        self.animator.cancel()
        self.index_of_drawn_points = 0
        if self.width <= 0 or self.height <= 0:
            self.points = []
            self.path = WaveformPath()
            return
        center_y = self.height / 2.0
        self.path = WaveformPath()
        self.path.move_to(0.0, center_y)
        self.path.line_to(float(self.width), center_y)
        self.points = calculate_points(self.waveform, self.width, self.height, self.step_count)
        if self.logger is not None:
            self.logger.debug(
                "Rendering %s waveform points for %s samples at %sx%s",
                len(self.points),
                self.waveform.size,
                self.width,
                self.height,
            )
        self.animator.start()
        self._request_redraw()

    @property
    def animating(self) -> bool:
        return self.animator.running

    def tick(self) -> bool:
        """Advance using the animator clock. Returns True while still animating."""
        self.on_phase(self.animator.phase())
        return self.animator.running

    def on_phase(self, phase: float) -> None:
        count = len(self.points)
        next_index = int(math.floor(count * float(phase))) - 1
        if next_index <= self.index_of_drawn_points:
            return
        chunk = path_chunk(self.points, self.index_of_drawn_points, next_index)
        if chunk.is_empty():
            if next_index == count - 1 and phase >= 1.0:
                # Close the tail that is too short for a smoothed chunk.
                first = self.points[self.index_of_drawn_points]
                last = self.points[next_index]
                self.path.move_to(first.x, first.y)
                self.path.line_to(last.x, last.y)
                self.index_of_drawn_points = next_index
                self._request_redraw()
            return
        self.path.add_path(chunk)
        self.index_of_drawn_points = next_index
        self._request_redraw()

    def _request_redraw(self) -> None:
        if self.surface is not None:
            self.surface.request_redraw()
