"""Domain logic for PCM decoding, format checks and waveform geometry."""

from .errors import (
    EngineFailureError,
    EngineNotReadyError,
    SourceUnavailableError,
    UnsupportedFormatError,
    WaveViewerError,
)
from .formats import (
    FormatMismatch,
    FormatVerdict,
    TrackFormat,
    ensure_supported,
    validate_track_format,
    validate_tracks,
)
from .geometry import Point, calculate_points
from .media import UNKNOWN_LENGTH, AssetHandle
from .samples import decode_pcm16, encode_pcm16, sample_count_for_bytes
from .timecode import (
    current_waveform_index,
    format_timestamp,
    milliseconds_to_progress,
    progress_to_milliseconds,
)

__all__ = [
    "UNKNOWN_LENGTH",
    "AssetHandle",
    "EngineFailureError",
    "EngineNotReadyError",
    "FormatMismatch",
    "FormatVerdict",
    "Point",
    "SourceUnavailableError",
    "TrackFormat",
    "UnsupportedFormatError",
    "WaveViewerError",
    "calculate_points",
    "current_waveform_index",
    "decode_pcm16",
    "encode_pcm16",
    "ensure_supported",
    "format_timestamp",
    "milliseconds_to_progress",
    "progress_to_milliseconds",
    "sample_count_for_bytes",
    "validate_track_format",
    "validate_tracks",
]
