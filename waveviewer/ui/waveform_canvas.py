"""Tk canvas surface that paints the progressively revealed waveform."""

from __future__ import annotations

from typing import Any

from ..constants import ANIMATION_FRAME_MS
from ..domain.geometry import LEFT_RIGHT_PADDING
from ..rendering.progressive import ProgressivePathRenderer

WAVEFORM_TAG = "waveform"
PLAYHEAD_TAG = "playhead"


class WaveformCanvasView:
    """Draw surface over a Tk canvas.

    Animation frames and repaints are scheduled with ``scheduler.after`` so
    the revealed curve is only mutated on the UI thread.
    """

    def __init__(
        self,
        canvas,
        scheduler,
        renderer: ProgressivePathRenderer,
        *,
        logger=None,
        frame_ms: int = ANIMATION_FRAME_MS,
        line_color: str = "#00ff41",
        playhead_color: str = "#e6e8ef",
        curve_steps: int = 4,
    ) -> None:
        self.canvas = canvas
        self.scheduler = scheduler
        self.renderer = renderer
        self.logger = logger
        self.frame_ms = max(1, int(frame_ms))
        self.line_color = line_color
        self.playhead_color = playhead_color
        self.curve_steps = curve_steps
        self.playhead_index = -1
        self._frame_job: Any = None
        self._paint_job: Any = None
        renderer.attach(self)

    def width(self) -> int:
        return max(0, int(self.canvas.winfo_width()))

    def height(self) -> int:
        return max(0, int(self.canvas.winfo_height()))

    def request_redraw(self) -> None:
        if self._paint_job is not None:
            return
        self._paint_job = self.scheduler.after(0, self._paint)

    def on_configure(self, event) -> None:
        self.renderer.resize(int(event.width), int(event.height))
        self._schedule_frame()

    def set_waveform(self, waveform) -> None:
        self.playhead_index = -1
        self.renderer.resize(self.width(), self.height())
        self.renderer.set_data(waveform)
        self._schedule_frame()

    def set_playhead(self, index: int) -> None:
        self.playhead_index = int(index)
        self.request_redraw()

    def _schedule_frame(self) -> None:
        if self._frame_job is not None or not self.renderer.animating:
            return
        self._frame_job = self.scheduler.after(self.frame_ms, self._on_frame)

    def _on_frame(self) -> None:
        self._frame_job = None
        if self.renderer.tick():
            self._schedule_frame()

    def playhead_x(self) -> float | None:
        total = int(self.renderer.waveform.size)
        if self.playhead_index < 0 or total <= 1:
            return None
        width = self.width()
        distance = (float(width) - LEFT_RIGHT_PADDING * 2.0) / float(total - 1)
        return LEFT_RIGHT_PADDING + min(self.playhead_index, total - 1) * distance

    def _paint(self) -> None:
        self._paint_job = None
        self.canvas.delete(WAVEFORM_TAG)
        for polyline in self.renderer.path.flatten(self.curve_steps):
            self.canvas.create_line(
                *polyline,
                fill=self.line_color,
                width=1,
                capstyle="round",
                tags=WAVEFORM_TAG,
            )
        self.canvas.delete(PLAYHEAD_TAG)
        x = self.playhead_x()
        if x is not None:
            self.canvas.create_line(
                x, 0, x, self.height(), fill=self.playhead_color, width=1, tags=PLAYHEAD_TAG
            )
