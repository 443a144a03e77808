"""Track format validation for raw PCM sources."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Sequence

from ..constants import (
    EXPECTED_AUDIO_ENCODING,
    EXPECTED_NUM_CHANNELS,
    EXPECTED_SAMPLE_RATE,
)
from .errors import UnsupportedFormatError

NO_TRACKS_MESSAGE = "No media tracks found"


@dataclass(frozen=True)
class TrackFormat:
    """Metadata reported by the extractor. ``None`` means the field is not reported."""

    encoding: str | None = None
    channel_count: int | None = None
    sample_rate: int | None = None


@dataclass(frozen=True)
class FormatMismatch:
    field: str
    expected: Any
    actual: Any

    def describe(self) -> str:
        return f"Expected {self.field} {self.expected}, got {self.actual}"


@dataclass(frozen=True)
class FormatVerdict:
    ok: bool
    mismatches: tuple[FormatMismatch, ...] = field(default_factory=tuple)
    reason: str = ""


_REQUIREMENTS = (
    ("encoding", EXPECTED_AUDIO_ENCODING),
    ("channel_count", EXPECTED_NUM_CHANNELS),
    ("sample_rate", EXPECTED_SAMPLE_RATE),
)


def validate_track_format(fmt: TrackFormat) -> FormatVerdict:
    """Compare every reported field against the supported PCM format."""
    mismatches = []
    for name, expected in _REQUIREMENTS:
        actual = getattr(fmt, name)
        if actual is None:
            continue
        if actual != expected:
            mismatches.append(FormatMismatch(name, expected, actual))
    if not mismatches:
        return FormatVerdict(ok=True)
    reason = "; ".join(mismatch.describe() for mismatch in mismatches)
    return FormatVerdict(ok=False, mismatches=tuple(mismatches), reason=reason)


def validate_tracks(formats: Sequence[TrackFormat]) -> FormatVerdict:
    """Validate the first track of a source. A source without tracks fails."""
    if not formats:
        return FormatVerdict(ok=False, reason=NO_TRACKS_MESSAGE)
    return validate_track_format(formats[0])


def ensure_supported(formats: Sequence[TrackFormat]) -> FormatVerdict:
    verdict = validate_tracks(formats)
    if not verdict.ok:
        raise UnsupportedFormatError(f"File type not supported: {verdict.reason}", verdict)
    return verdict
