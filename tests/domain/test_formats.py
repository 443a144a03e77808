import pytest

from waveviewer.domain.errors import UnsupportedFormatError
from waveviewer.domain.formats import (
    TrackFormat,
    ensure_supported,
    validate_track_format,
    validate_tracks,
)


def test_matching_format_is_accepted():
    verdict = validate_track_format(TrackFormat("PCM_16", 1, 44100))
    assert verdict.ok is True
    assert verdict.mismatches == ()


def test_absent_fields_are_unconstrained():
    assert validate_track_format(TrackFormat()).ok is True
    assert validate_track_format(TrackFormat(channel_count=1)).ok is True


@pytest.mark.parametrize(
    ("fmt", "field", "expected", "actual"),
    [
        (TrackFormat("PCM_24", 1, 44100), "encoding", "PCM_16", "PCM_24"),
        (TrackFormat("PCM_16", 2, 44100), "channel_count", 1, 2),
        (TrackFormat(None, None, 48000), "sample_rate", 44100, 48000),
    ],
)
def test_reported_mismatch_fails_with_description(fmt, field, expected, actual):
    verdict = validate_track_format(fmt)

    assert verdict.ok is False
    assert len(verdict.mismatches) == 1
    mismatch = verdict.mismatches[0]
    assert (mismatch.field, mismatch.expected, mismatch.actual) == (field, expected, actual)
    assert verdict.reason == f"Expected {field} {expected}, got {actual}"


def test_every_mismatch_is_reported():
    verdict = validate_track_format(TrackFormat("FLOAT", 2, 22050))
    assert [mismatch.field for mismatch in verdict.mismatches] == [
        "encoding",
        "channel_count",
        "sample_rate",
    ]


def test_zero_tracks_fail():
    verdict = validate_tracks([])
    assert verdict.ok is False
    assert verdict.reason == "No media tracks found"


def test_only_first_track_is_inspected():
    verdict = validate_tracks([TrackFormat("PCM_16", 1, 44100), TrackFormat("FLOAT", 2, 8000)])
    assert verdict.ok is True


def test_ensure_supported_raises_with_verdict():
    with pytest.raises(UnsupportedFormatError) as excinfo:
        ensure_supported([TrackFormat("MPEG_LAYER_III", 1, 44100)])

    assert str(excinfo.value).startswith("File type not supported")
    assert excinfo.value.verdict.mismatches[0].field == "encoding"
