"""Cooperative position polling while media is playing."""

from __future__ import annotations

from typing import Any, Callable

from ..constants import REFRESH_RATE_MS
from .ports import Scheduler


class PositionPoller:
    """Refreshes playback position every ``interval_ms`` while ``is_active`` holds.

    The loop runs on the scheduler thread. A tick that observes playback has
    stopped performs one final refresh and ends the loop.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        refresh: Callable[[], None],
        is_active: Callable[[], bool],
        *,
        interval_ms: int = REFRESH_RATE_MS,
        logger=None,
    ) -> None:
        self.scheduler = scheduler
        self.refresh = refresh
        self.is_active = is_active
        self.interval_ms = max(1, int(interval_ms))
        self.logger = logger
        self._running = False
        self._job: Any = None

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> bool:
        if self._running:
            return False
        self._running = True
        self._tick()
        return True

    def cancel(self) -> None:
        job = self._job
        self._job = None
        self._running = False
        if job is None:
            return
        try:
            self.scheduler.after_cancel(job)
        except Exception:
            if self.logger is not None:
                self.logger.exception("Failed to cancel position poll")

    def _tick(self) -> None:
        self._job = None
        if not self._running:
            return
        if not self.is_active():
            self._running = False
            self.refresh()
            if self.logger is not None:
                self.logger.info("Stopped updating timestamp and waveform index")
            return
        self.refresh()
        self._job = self.scheduler.after(self.interval_ms, self._tick)
