"""soundfile-backed demuxer that yields raw little-endian 16-bit samples."""

from __future__ import annotations

import os

import numpy as np

from ..domain.media import AssetHandle
from ..constants import BYTES_PER_SAMPLE, EXTRACT_CHUNK_FRAMES
from ..domain.errors import SourceUnavailableError
from ..domain.formats import TrackFormat

try:
    import soundfile as _sf
except Exception:  # pragma: no cover - dependency optional at import time
    _sf = None

END_OF_STREAM = -1
RAW_PCM_CONTAINERS = ("WAV", "WAVEX")


def _encoding_name(container: str | None, subtype: str | None) -> str | None:
    """Subtype for WAV containers, ``CONTAINER/SUBTYPE`` for anything else.

    libsndfile reports the decoded subtype of compressed containers, so a FLAC
    file says ``PCM_16`` too.
    """
    if not subtype:
        return None
    if container in RAW_PCM_CONTAINERS:
        return subtype
    return f"{container}/{subtype}"


class SoundFileExtractor:
    """Reports the track format of a sound file and reads its frames as PCM bytes.

    libsndfile exposes a single track per file; files it cannot parse report
    zero tracks.
    """

    def __init__(self, *, sf_module=None, chunk_frames: int = EXTRACT_CHUNK_FRAMES, logger=None) -> None:
        self._sf = sf_module if sf_module is not None else _sf
        if self._sf is None:
            raise RuntimeError("soundfile is not available")
        self.chunk_frames = max(1, int(chunk_frames))
        self.logger = logger
        self._file = None
        self._selected: int | None = None

    def set_source(self, handle: AssetHandle) -> None:
        self.release()
        if not os.path.isfile(handle.path):
            raise SourceUnavailableError(f"Media file not found: {handle.path}")
        try:
            self._file = self._sf.SoundFile(handle.path, mode="r")
        except Exception as exc:
            if self.logger is not None:
                self.logger.warning("No readable audio track in %s: %s", handle.path, exc)
            self._file = None

    def track_count(self) -> int:
        return 0 if self._file is None else 1

    def track_format(self, index: int) -> TrackFormat:
        self._check_index(index)
        return TrackFormat(
            encoding=_encoding_name(self._file.format, self._file.subtype),
            channel_count=int(self._file.channels),
            sample_rate=int(self._file.samplerate),
        )

    def select_track(self, index: int) -> None:
        self._check_index(index)
        self._selected = index

    def read_next_chunk(self, buffer: bytearray, offset: int) -> int:
        if self._file is None or self._selected is None:
            return END_OF_STREAM
        frame_bytes = BYTES_PER_SAMPLE * max(1, int(self._file.channels))
        frames = min(self.chunk_frames, (len(buffer) - int(offset)) // frame_bytes)
        if frames <= 0:
            return END_OF_STREAM
        data = self._file.read(frames, dtype="int16", always_2d=False)
        if data.size == 0:
            return END_OF_STREAM
        raw = np.ascontiguousarray(data, dtype="<i2").tobytes()
        buffer[offset : offset + len(raw)] = raw
        return len(raw)

    def advance(self) -> None:
        # soundfile moves its read position on every read.
        return None

    def release(self) -> None:
        self._selected = None
        if self._file is not None:
            try:
                self._file.close()
            except Exception:
                if self.logger is not None:
                    self.logger.exception("Failed to close sound file")
            self._file = None

    def _check_index(self, index: int) -> None:
        if self._file is None or int(index) != 0:
            raise IndexError(f"track index out of range: {index}")
