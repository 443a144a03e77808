"""Timing curves for the waveform reveal animation."""

from __future__ import annotations

import math
import time
from typing import Callable

from ..constants import ANIMATION_DURATION_MS


def accelerate_decelerate(t: float) -> float:
    """Ease-in/ease-out curve: slow start, fast middle, slow end."""
    t = max(0.0, min(1.0, float(t)))
    return math.cos((t + 1.0) * math.pi) / 2.0 + 0.5


class PhaseAnimator:
    """Produces eased phase values from 0.0 to 1.0 over a fixed duration."""

    def __init__(
        self,
        duration_ms: int = ANIMATION_DURATION_MS,
        interpolator: Callable[[float], float] = accelerate_decelerate,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.duration_ms = max(0, int(duration_ms))
        self.interpolator = interpolator
        self.clock = clock
        self._started_at: float | None = None

    @property
    def running(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        self._started_at = self.clock()

    def cancel(self) -> None:
        self._started_at = None

    def phase(self) -> float:
        """Current eased phase; reaching 1.0 ends the animation."""
        if self._started_at is None:
            return 1.0
        if self.duration_ms == 0:
            self._started_at = None
            return 1.0
        elapsed_ms = (self.clock() - self._started_at) * 1000.0
        fraction = elapsed_ms / float(self.duration_ms)
        if fraction >= 1.0:
            self._started_at = None
            return 1.0
        return self.interpolator(fraction)
