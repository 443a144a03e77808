"""Conversions between playback time, seek progress and waveform indices."""

from __future__ import annotations

import math

from ..constants import MAX_PROGRESS_VALUE


def progress_to_milliseconds(
    duration_ms: int, progress: int, max_progress: int = MAX_PROGRESS_VALUE
) -> int:
    """Convert a seek bar progress value to a timestamp within ``duration_ms``."""
    if max_progress <= 0:
        return 0
    progress = max(0, min(int(max_progress), int(progress)))
    return int(duration_ms) * progress // int(max_progress)


def milliseconds_to_progress(
    current_ms: int, duration_ms: int, max_progress: int = MAX_PROGRESS_VALUE
) -> int:
    """Convert a timestamp to a seek bar progress value."""
    if duration_ms <= 0:
        return 0
    current_ms = max(0, min(int(duration_ms), int(current_ms)))
    return current_ms * int(max_progress) // int(duration_ms)


def current_waveform_index(length: int, timestamp_ms: int, duration_ms: int) -> int:
    """Index of the sample nearest to ``timestamp_ms``; negative means none."""
    if length <= 0 or duration_ms <= 0:
        return -1
    ratio = float(timestamp_ms) / float(duration_ms)
    return int(math.floor(float(length) * ratio)) - 1


def format_timestamp(milliseconds: int) -> str:
    total = max(0, int(milliseconds)) // 1000
    minutes, seconds = divmod(total, 60)
    return f"{minutes:02d}:{seconds:02d}"
