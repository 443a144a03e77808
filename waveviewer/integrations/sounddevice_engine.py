"""sounddevice playback engine used when libVLC is unavailable."""

from __future__ import annotations

import os
import time
from typing import Callable

import numpy as np

from ..domain.media import AssetHandle

try:
    import sounddevice as _sd
except Exception:  # pragma: no cover - dependency optional at import time
    _sd = None

try:
    import soundfile as _sf
except Exception:  # pragma: no cover - dependency optional at import time
    _sf = None


class SoundDevicePlaybackEngine:
    """Plays decoded PCM through sounddevice and tracks position with a monotonic clock."""

    def __init__(
        self,
        *,
        sd_module=None,
        sf_module=None,
        volume: float = 1.0,
        clock: Callable[[], float] = time.monotonic,
        logger=None,
    ) -> None:
        self._sd = sd_module if sd_module is not None else _sd
        self._sf = sf_module if sf_module is not None else _sf
        if self._sd is None or self._sf is None:
            raise RuntimeError("sounddevice and soundfile are required for sounddevice playback")
        self.volume = max(0.0, min(1.5, float(volume)))
        self.clock = clock
        self.logger = logger
        self.path: str | None = None
        self.pcm_data: np.ndarray | None = None
        self.sample_rate = 0
        self.total_frames = 0
        self.current_frame = 0
        self._started_at = 0.0
        self._start_frame = 0
        self._playing = False

    def set_source(self, handle: AssetHandle) -> None:
        if not os.path.isfile(handle.path):
            raise FileNotFoundError(handle.path)
        self.reset()
        self.path = handle.path

    def prepare(self) -> None:
        if self.path is None:
            raise RuntimeError("No media source set.")
        audio, sample_rate = self._sf.read(self.path, dtype="float32", always_2d=False)
        self.pcm_data = np.asarray(audio, dtype=np.float32)
        self.sample_rate = int(sample_rate)
        self.total_frames = int(self.pcm_data.shape[0])
        self.current_frame = 0

    def play(self) -> None:
        if self.pcm_data is None or self.sample_rate <= 0:
            raise RuntimeError("Media is not prepared.")
        frame = self.current_frame if self.current_frame < self.total_frames else 0
        chunk = self.pcm_data[frame:]
        if chunk.size == 0:
            raise RuntimeError("Nothing to play.")
        if abs(self.volume - 1.0) > 1e-6:
            chunk = np.clip(chunk * float(self.volume), -1.0, 1.0)
        self._sd.play(chunk, samplerate=self.sample_rate, blocking=False)
        self._start_frame = frame
        self._started_at = self.clock()
        self.current_frame = frame
        self._playing = True

    def pause(self) -> None:
        self.current_frame = self._frame_now()
        self._playing = False
        self._sd.stop()

    def seek(self, milliseconds: int) -> None:
        target_ms = max(0, min(self.duration_ms(), int(milliseconds)))
        frame = min(self.total_frames, int(target_ms * self.sample_rate / 1000))
        was_playing = self.is_playing()
        if was_playing:
            self._sd.stop()
            self._playing = False
        self.current_frame = frame
        if was_playing and frame < self.total_frames:
            self.play()

    def is_playing(self) -> bool:
        if self._playing and self._frame_now() >= self.total_frames:
            self.current_frame = self.total_frames
            self._playing = False
        return self._playing

    def current_position_ms(self) -> int:
        if self.sample_rate <= 0:
            return 0
        return int(self._frame_now() * 1000 / self.sample_rate)

    def duration_ms(self) -> int:
        if self.sample_rate <= 0:
            return 0
        return int(self.total_frames * 1000 / self.sample_rate)

    def reset(self) -> None:
        if self._playing:
            self._sd.stop()
        self._playing = False
        self.path = None
        self.pcm_data = None
        self.sample_rate = 0
        self.total_frames = 0
        self.current_frame = 0

    def release(self) -> None:
        try:
            self.reset()
        except Exception:
            if self.logger is not None:
                self.logger.exception("Failed to stop sounddevice playback")

    def _frame_now(self) -> int:
        if not self._playing or self.sample_rate <= 0:
            return self.current_frame
        elapsed = max(0.0, self.clock() - self._started_at)
        frame = self._start_frame + int(elapsed * float(self.sample_rate))
        return min(self.total_frames, frame)
